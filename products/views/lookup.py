# products/views/lookup.py

import uuid

from django.http import Http404


def get_by_id_or_slug(queryset, value):
    """Resolve a detail route segment that may be a UUID or a slug."""
    raw = str(value or "").strip()
    try:
        obj = queryset.filter(pk=uuid.UUID(raw)).first()
    except ValueError:
        obj = None
    if obj is None:
        obj = queryset.filter(slug=raw.lower()).first()
    if obj is None:
        raise Http404
    return obj
