import re

_DISCORD_BOT_RE = re.compile(r"discordbot", re.IGNORECASE)


def is_discord_bot(user_agent):
    """Return True if the User-Agent belongs to Discord's embed crawler."""
    return bool(_DISCORD_BOT_RE.search(user_agent or ""))
