# pages/services/home_content.py

import copy

from django.db import transaction

from pages.models import HomeContent
from pages.services.defaults import DEFAULT_HOME_CONTENT


def get_home_content() -> HomeContent:
    content = HomeContent.objects.order_by("created_at").first()
    if content is None:
        content = HomeContent.objects.create(**copy.deepcopy(DEFAULT_HOME_CONTENT))
    return content


@transaction.atomic
def update_home_content(payload: dict) -> HomeContent:
    """Only keys present in payload are replaced."""
    content = get_home_content()

    changed = [key for key in HomeContent.EDITABLE_KEYS if key in payload]
    for key in changed:
        setattr(content, key, payload[key])

    if changed:
        content.save(update_fields=changed + ["updated_at"])
    return content
