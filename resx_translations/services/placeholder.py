"""
Placeholder Generator - Tagged stand-in texts for untranslated locales

Not a translation service: the primary text is copied with a locale marker
so translators can spot entries still waiting for a real translation.
"""

from typing import Optional

from resx_translations.models.locale import Locale, PRIMARY_LOCALE, SECONDARY_LOCALES
from resx_translations.models.translation_record import TranslationRecord

DEFAULT_PLACEHOLDER_TEMPLATE = "[{locale}] {text}"


class PlaceholderGenerator:
    """
    Example:
        generator = PlaceholderGenerator()
        generator.placeholder("Enregistrer", Locale.EN)  # "[EN] Enregistrer"
    """

    def __init__(self, template: Optional[str] = None):
        self.template = template or DEFAULT_PLACEHOLDER_TEMPLATE

    def placeholder(self, source_text: str, locale: Locale) -> str:
        return self.template.format(locale=Locale(locale).value.upper(), text=source_text)

    def generate(self, key: str, source_text: str, group: str) -> TranslationRecord:
        """Record with the source text as primary and placeholders elsewhere"""
        texts = {PRIMARY_LOCALE: source_text}
        for locale in SECONDARY_LOCALES:
            texts[locale] = self.placeholder(source_text, locale)
        return TranslationRecord(key=key, group=group, text_by_locale=texts)

    def fill_missing(self, record: TranslationRecord) -> TranslationRecord:
        """Copy of the record with blank secondary texts replaced by placeholders"""
        source_text = record.primary_text
        texts = dict(record.text_by_locale)
        for locale in SECONDARY_LOCALES:
            if not record.text(locale).strip():
                texts[locale] = self.placeholder(source_text, locale)
        return record.model_copy(update={"text_by_locale": texts})
