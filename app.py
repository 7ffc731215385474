import json
import os
from datetime import datetime

from flask import Flask, abort, render_template, request, jsonify

import config
from discord_embed import (
    StatusOptions,
    create_activity_link,
    create_status,
    is_discord_bot,
    text_to_html,
)

app = Flask(__name__)


@app.template_filter("friendly_time")
def friendly_time(iso_timestamp):
    """Convert ISO timestamp to 'Feb 14, 2026 15:43' format."""
    try:
        dt = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))
        return dt.strftime("%b %-d, %Y %H:%M")
    except (ValueError, TypeError, AttributeError):
        return iso_timestamp[:16].replace("T", " ") if iso_timestamp else ""


def _posts_file():
    return app.config.get("POSTS_FILE", config.POSTS_FILE)


def _base_url():
    return app.config.get("BASE_URL", config.BASE_URL).rstrip("/")


def _read_posts():
    path = _posts_file()
    if not os.path.exists(path):
        return []
    with open(path, "r") as f:
        return json.load(f)


def _find_post(post_id):
    for entry in _read_posts():
        if str(entry.get("id")) == post_id:
            return entry
    return None


def _status_options(entry):
    """Fill host-level defaults into a stored post and build StatusOptions.

    Stored posts may omit ``author`` (the site author from config is used),
    ``url`` (the post page on this host) and ``content`` (when a plain
    ``text`` field is given instead).
    """
    data = dict(entry)
    if not data.get("author") and config.author_configured():
        data["author"] = config.site_author()
    if not data.get("content") and data.get("text"):
        data["content"] = text_to_html(data["text"])
    if not data.get("url"):
        data["url"] = f"{_base_url()}/posts/{data.get('id')}"
    if config.APPLICATION_NAME and not data.get("applicationName"):
        data["applicationName"] = config.APPLICATION_NAME
    return StatusOptions.from_dict(data)


def _load_options(post_id):
    """Return (options, error_response); exactly one is None."""
    entry = _find_post(post_id)
    if entry is None:
        return None, (jsonify({"error": "Post not found"}), 404)
    try:
        return _status_options(entry), None
    except ValueError as e:
        app.logger.error("Malformed post %s: %s", post_id, e)
        return None, (jsonify({"error": str(e)}), 500)


@app.route("/posts/<path:post_id>")
def post_page(post_id):
    entry = _find_post(post_id)
    if entry is None:
        abort(404)
    try:
        options = _status_options(entry)
    except ValueError as e:
        app.logger.error("Malformed post %s: %s", post_id, e)
        abort(500)

    activity_link = None
    if is_discord_bot(request.headers.get("User-Agent")):
        app.logger.info("Discord crawler fetched post %s", post_id)
        activity_link = create_activity_link({
            "baseUrl": _base_url(),
            "authorHandle": options.author.username,
            "statusId": options.id,
        })
    return render_template(
        "post.html",
        post=options,
        title=entry.get("title", ""),
        activity_link=activity_link,
    )


@app.route("/users/<path:handle>/statuses/<path:post_id>")
def activity_status(handle, post_id):
    options, error = _load_options(post_id)
    if error:
        return error
    if options.author.username != handle:
        return jsonify({"error": "Post not found"}), 404
    resp = jsonify(create_status(options))
    resp.mimetype = "application/activity+json"
    return resp


@app.route("/api/v1/statuses/<path:post_id>")
def api_status(post_id):
    options, error = _load_options(post_id)
    if error:
        return error
    return jsonify(create_status(options))


if __name__ == "__main__":
    os.makedirs(os.path.dirname(config.POSTS_FILE), exist_ok=True)
    app.run(host="127.0.0.1", port=5555, debug=True)
