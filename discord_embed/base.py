from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional


def _object(data, name):
    if not isinstance(data, Mapping):
        raise ValueError(f"{name} must be an object, got {type(data).__name__}")
    return data


def _pick(data, *keys):
    """Return the first non-None value among *keys* in *data*."""
    _object(data, "record")
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _require(data, *keys):
    value = _pick(data, *keys)
    if value is None:
        raise ValueError(f"Missing required field: {keys[0]}")
    return value


@dataclass
class StatusAuthor:
    id: str
    display_name: str
    username: str
    url: str = ""
    avatar_url: str = ""
    banner_url: str = ""
    followers_count: int = 0
    following_count: int = 0
    statuses_count: int = 0
    protected: bool = False
    joined_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        """Build an author from a camelCase or snake_case mapping."""
        return cls(
            id=str(_require(data, "id")),
            display_name=_require(data, "displayName", "display_name"),
            username=_require(data, "username"),
            url=_pick(data, "url") or "",
            avatar_url=_pick(data, "avatarUrl", "avatar_url") or "",
            banner_url=_pick(data, "bannerUrl", "banner_url") or "",
            followers_count=_pick(data, "followersCount", "followers_count") or 0,
            following_count=_pick(data, "followingCount", "following_count") or 0,
            statuses_count=_pick(data, "statusesCount", "statuses_count") or 0,
            protected=bool(_pick(data, "protected")),
            joined_at=_pick(data, "joinedAt", "joined_at"),
        )


@dataclass
class StatusMedia:
    type: str
    url: str
    id: Optional[str] = None
    thumbnail_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    alt_text: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            type=_require(data, "type"),
            url=_require(data, "url"),
            id=_pick(data, "id"),
            thumbnail_url=_pick(data, "thumbnailUrl", "thumbnail_url"),
            width=_pick(data, "width"),
            height=_pick(data, "height"),
            alt_text=_pick(data, "altText", "alt_text"),
        )


@dataclass
class StatusOptions:
    """One post, as described by the host.

    ``content`` is HTML in the small dialect Discord renders: ``<b>``,
    ``<strong>``, ``<i>``, ``<em>``, ``<br>``, ``<blockquote>``,
    ``<a href>``, ``<code>`` and ``<pre>``. Use ``text_to_html()`` to turn
    plain text into safe content.
    """
    id: str
    url: str
    content: str
    author: StatusAuthor
    created_at: Optional[str] = None
    language: Optional[str] = None
    media: list = field(default_factory=list)
    reply_to_id: Optional[str] = None
    application_name: Optional[str] = None
    spoiler_text: Optional[str] = None
    visibility: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        """Build status options from a JSON-style mapping.

        Keys may be camelCase (``createdAt``) or snake_case (``created_at``).
        Raises ValueError when a required key is missing or a nested
        author or media entry is not a mapping.
        """
        author = _require(data, "author")
        if not isinstance(author, StatusAuthor):
            author = StatusAuthor.from_dict(_object(author, "author"))
        items = _pick(data, "media") or []
        if not isinstance(items, (list, tuple)):
            raise ValueError(f"media must be a list, got {type(items).__name__}")
        media = [
            m if isinstance(m, StatusMedia) else StatusMedia.from_dict(_object(m, f"media[{i}]"))
            for i, m in enumerate(items)
        ]
        return cls(
            id=str(_require(data, "id")),
            url=_require(data, "url"),
            content=_require(data, "content"),
            author=author,
            created_at=_pick(data, "createdAt", "created_at"),
            language=_pick(data, "language"),
            media=media,
            reply_to_id=_pick(data, "replyToId", "reply_to_id"),
            application_name=_pick(data, "applicationName", "application_name"),
            spoiler_text=_pick(data, "spoilerText", "spoiler_text"),
            visibility=_pick(data, "visibility"),
        )


@dataclass
class ActivityLinkOptions:
    base_url: str
    author_handle: str
    status_id: str

    @classmethod
    def from_dict(cls, data):
        return cls(
            base_url=_require(data, "baseUrl", "base_url"),
            author_handle=_require(data, "authorHandle", "author_handle"),
            status_id=str(_require(data, "statusId", "status_id")),
        )
