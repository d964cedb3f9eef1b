"""
Output-time XSS sanitisation.

Records are stored exactly as submitted and cleaned only on the way out.
Tags outside ``ALLOWED_TAGS`` are escaped rather than removed, so a
``<script>`` block is returned as inert text; disallowed attributes such as
``onerror`` are dropped from otherwise harmless tags.
"""
import bleach

ALLOWED_TAGS: frozenset[str] = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "del", "div", "em",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "ins", "li",
    "ol", "p", "pre", "s", "small", "span", "strong", "sub", "sup",
    "table", "tbody", "td", "th", "thead", "tr", "u", "ul",
})

ALLOWED_ATTRIBUTES: dict[str, list[str]] = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
    "td": ["colspan", "rowspan", "align"],
    "th": ["colspan", "rowspan", "align"],
}

ARTICLE_TEXT_FIELDS = ("title", "content")
USER_TEXT_FIELDS = ("fullname", "username", "nickname")
COMMENT_TEXT_FIELDS = ("text",)


def clean(value: str | None) -> str | None:
    """Neutralise markup in a single text value; ``None`` passes through."""
    if value is None:
        return None
    return bleach.clean(
        value,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        strip=False,
    )


def sanitize_fields(record: dict, fields) -> dict:
    """Return a copy of *record* with each of *fields* passed through clean()."""
    sanitized = dict(record)
    for field in fields:
        if field in sanitized:
            sanitized[field] = clean(sanitized[field])
    return sanitized


def sanitize_article(article: dict) -> dict:
    return sanitize_fields(article, ARTICLE_TEXT_FIELDS)


def sanitize_user(user: dict) -> dict:
    return sanitize_fields(user, USER_TEXT_FIELDS)


def sanitize_comment(comment: dict) -> dict:
    return sanitize_fields(comment, COMMENT_TEXT_FIELDS)
