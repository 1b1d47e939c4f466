"""Module: i18n."""

from vaxtrack.core.config import settings


def pick_text(mapping: dict[str, str] | None, language: str | None = None) -> str | None:
    """
    Resolve a language->text mapping with a single fallback rule.

    Order: requested language, then the configured default language, then any
    non-empty value (catalog rows are occasionally seeded in one language only).
    """
    if not mapping:
        return None

    if language and mapping.get(language):
        return mapping[language]

    if mapping.get(settings.default_language):
        return mapping[settings.default_language]

    for value in mapping.values():
        if value:
            return value
    return None

