"""Mastodon API v1 Status objects shaped for Discord's embed renderer.

Discord fetches the status JSON when it finds the activity ``<link>`` tag on
a page, then renders the HTML ``content`` field with rich formatting. Every
field it parses must be present, so the fields this library does not model
are filled with fixed values.
"""

from collections.abc import Mapping
from datetime import datetime, timezone

from discord_embed.base import StatusOptions

DEFAULT_LANGUAGE = "en"
DEFAULT_VISIBILITY = "public"
DEFAULT_APPLICATION_NAME = "Web"

_MEDIA_TYPES = {
    "gif": "gifv",
    "video": "video",
}


def _now_iso():
    """Current UTC time as ``2026-01-15T09:30:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_status(options):
    """Build a Status dict from StatusOptions (or an equivalent mapping).

    Serve the result from ``/api/v1/statuses/<id>`` and from
    ``/users/<handle>/statuses/<id>``.
    """
    if isinstance(options, Mapping):
        options = StatusOptions.from_dict(options)
    return {
        "id": options.id,
        "url": options.url,
        "uri": options.url,
        "created_at": options.created_at or _now_iso(),
        "edited_at": None,
        "reblog": None,
        "in_reply_to_id": options.reply_to_id or None,
        "in_reply_to_account_id": None,
        "language": options.language or DEFAULT_LANGUAGE,
        "content": options.content,
        "spoiler_text": options.spoiler_text or "",
        "visibility": options.visibility or DEFAULT_VISIBILITY,
        "application": {
            "name": options.application_name or DEFAULT_APPLICATION_NAME,
            "website": None,
        },
        "media_attachments": build_media_attachments(options.media or []),
        "account": build_account(options.author),
        "mentions": [],
        "tags": [],
        "emojis": [],
        "card": None,
        "poll": None,
    }


def build_account(author):
    # acct and username coincide: accounts never live on another instance.
    return {
        "id": author.id,
        "display_name": author.display_name,
        "username": author.username,
        "acct": author.username,
        "url": author.url or "",
        "uri": author.url or "",
        "created_at": author.joined_at or _now_iso(),
        "locked": author.protected or False,
        "bot": False,
        "discoverable": True,
        "indexable": False,
        "group": False,
        "avatar": author.avatar_url or "",
        "avatar_static": author.avatar_url or "",
        "header": author.banner_url or "",
        "header_static": author.banner_url or "",
        "followers_count": author.followers_count or 0,
        "following_count": author.following_count or 0,
        "statuses_count": author.statuses_count or 0,
        "hide_collections": False,
        "noindex": False,
        "emojis": [],
        "roles": [],
        "fields": [],
    }


def build_media_attachments(media):
    """Map media inputs to attachments, one for one and in order."""
    return [_build_attachment(m, i) for i, m in enumerate(media)]


def _aspect(width, height):
    # Falls back to 1 when either side is missing or zero
    if not (width and height):
        return 1
    aspect = width / height
    # Whole ratios serialize as integers, e.g. 1 rather than 1.0
    return int(aspect) if aspect.is_integer() else aspect


def _build_attachment(media, index):
    width = media.width or 0
    height = media.height or 0
    if media.thumbnail_url:
        preview_url = media.thumbnail_url
    elif media.type == "image":
        preview_url = media.url
    else:
        preview_url = None
    return {
        "id": media.id or f"{media.type}_{index}",
        "type": _MEDIA_TYPES.get(media.type, "image"),
        "url": media.url,
        "preview_url": preview_url,
        "remote_url": None,
        "preview_remote_url": None,
        "text_url": None,
        "description": media.alt_text or None,
        "meta": {
            "original": {
                "width": width,
                "height": height,
                "size": f"{width}x{height}",
                "aspect": _aspect(media.width, media.height),
            },
        },
    }
