from discord_embed.base import (
    ActivityLinkOptions,
    StatusAuthor,
    StatusMedia,
    StatusOptions,
)
from discord_embed.detect import is_discord_bot
from discord_embed.link import activity_path, create_activity_link
from discord_embed.status import create_status
from discord_embed.text import escape_html, text_to_html

is_bot = is_discord_bot

__all__ = [
    "ActivityLinkOptions",
    "StatusAuthor",
    "StatusMedia",
    "StatusOptions",
    "activity_path",
    "create_activity_link",
    "create_status",
    "escape_html",
    "is_bot",
    "is_discord_bot",
    "text_to_html",
]
