import os
from dotenv import load_dotenv

load_dotenv()

BASE_URL = os.getenv("EMBED_BASE_URL", "http://127.0.0.1:5555").rstrip("/")
POSTS_FILE = os.getenv(
    "EMBED_POSTS_FILE",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "posts", "posts.json"),
)

AUTHOR_ID = os.getenv("EMBED_AUTHOR_ID", "")
AUTHOR_USERNAME = os.getenv("EMBED_AUTHOR_USERNAME", "")
AUTHOR_DISPLAY_NAME = os.getenv("EMBED_AUTHOR_DISPLAY_NAME", "")
AUTHOR_URL = os.getenv("EMBED_AUTHOR_URL", "")
AUTHOR_AVATAR_URL = os.getenv("EMBED_AUTHOR_AVATAR_URL", "")
AUTHOR_BANNER_URL = os.getenv("EMBED_AUTHOR_BANNER_URL", "")

APPLICATION_NAME = os.getenv("EMBED_APPLICATION_NAME", "")


def author_configured():
    return bool(AUTHOR_ID and AUTHOR_USERNAME)


def site_author():
    """Author record used for posts that do not name their own."""
    return {
        "id": AUTHOR_ID,
        "displayName": AUTHOR_DISPLAY_NAME or AUTHOR_USERNAME,
        "username": AUTHOR_USERNAME,
        "url": AUTHOR_URL,
        "avatarUrl": AUTHOR_AVATAR_URL,
        "bannerUrl": AUTHOR_BANNER_URL,
    }
