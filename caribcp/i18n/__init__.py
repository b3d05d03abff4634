"""
CaribCP Internationalization Module.

Provides:
- Multi-language support (EN, ES, FR)
- Localized field names and example bundles
- Template-based narrative text
"""

from caribcp.i18n.translations import (
    SupportedLanguage,
    TranslationManager,
    get_translator,
    translate,
)

__all__ = [
    "TranslationManager",
    "get_translator",
    "translate",
    "SupportedLanguage",
]
