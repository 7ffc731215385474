from collections.abc import Mapping
from urllib.parse import quote

from discord_embed.base import ActivityLinkOptions

# Same literal set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _encode_component(value):
    return quote(value, safe=_URI_COMPONENT_SAFE)


def activity_path(author_handle, status_id):
    """Return ``/users/{handle}/statuses/{id}`` with both parts encoded."""
    return (f"/users/{_encode_component(author_handle)}"
            f"/statuses/{_encode_component(status_id)}")


def create_activity_link(options):
    """Build the ``<link>`` tag that triggers Discord's Mastodon embed.

    Put it in the ``<head>`` of the page Discord's crawler fetches, and only
    when ``is_discord_bot()`` says the request comes from the crawler.
    *options* is an ActivityLinkOptions or a mapping with the same keys.
    The base URL is used verbatim.
    """
    if isinstance(options, Mapping):
        options = ActivityLinkOptions.from_dict(options)
    href = options.base_url + activity_path(options.author_handle, options.status_id)
    return f'<link href="{href}" rel="alternate" type="application/activity+json"/>'
