"""Page/limit handling for list endpoints backed by Protean querysets."""

from protean.exceptions import ValidationError


def calculate_pagination(page=None, limit=None):
    """Translate 1-based ``page``/``limit`` into ``(offset, limit)``.

    Returns ``None`` when either value is missing, meaning "no pagination".
    """
    if page is None or limit is None:
        return None

    page, limit = int(page), int(limit)
    if page < 1 or limit < 1:
        raise ValidationError({"pagination": ["Page and limit must be greater than 0"]})

    return (page - 1) * limit, limit


def fetch_all(query):
    """Return every record matching ``query``, ignoring the default page size."""
    results = query.all()
    if results.total > len(results.items):
        results = query.limit(results.total).all()
    return results.items


def paginate(query, page=None, limit=None):
    """Apply pagination to ``query`` and return ``(items, meta)``."""
    window = calculate_pagination(page, limit)
    if window is None:
        items = fetch_all(query)
        return items, {"total": len(items)}

    offset, size = window
    results = query.offset(offset).limit(size).all()
    return results.items, {"page": int(page), "limit": size, "total": results.total}


def paginate_list(items, page=None, limit=None):
    """Like ``paginate`` for records already loaded into a list."""
    window = calculate_pagination(page, limit)
    if window is None:
        return list(items), {"total": len(items)}

    offset, size = window
    return list(items[offset : offset + size]), {"page": int(page), "limit": size, "total": len(items)}
