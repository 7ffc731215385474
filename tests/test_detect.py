from discord_embed import is_bot, is_discord_bot


DISCORD_UA = "Mozilla/5.0 (compatible; Discordbot/2.0; +https://discordapp.com)"


def test_discord_user_agent():
    assert is_discord_bot(DISCORD_UA)


def test_case_insensitive():
    assert is_discord_bot("DISCORDBOT")
    assert is_discord_bot("discordbot")
    assert is_discord_bot("xxDiScOrDbOtxx")


def test_browser_user_agent():
    ua = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/605.1.15 Safari/605.1.15"
    assert not is_discord_bot(ua)


def test_near_miss():
    assert not is_discord_bot("Discord bot")
    assert not is_discord_bot("Twitterbot/1.0")


def test_absent_user_agent():
    assert is_discord_bot(None) is False
    assert is_discord_bot("") is False


def test_is_bot_alias():
    assert is_bot(DISCORD_UA)
    assert not is_bot(None)
