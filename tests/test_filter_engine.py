from __future__ import annotations

import pytest

from resx_translations.models.filters import FieldFilter, SearchType, TranslationFilter
from resx_translations.models.translation_record import TranslationRecord
from resx_translations.services.filter_engine import FilterEngine, field_matches

RECORD = TranslationRecord.build(
    key="Menu_Save",
    group="Menu",
    fr="Enregistrer",
    en="Save file",
    pt="",
)


def test_filter_with_blank_values_is_empty() -> None:
    assert TranslationFilter().is_empty()
    assert TranslationFilter.simple(key="", fr=None, en="   ").is_empty()
    assert not TranslationFilter.simple(pt="x").is_empty()


def test_empty_filter_matches_everything() -> None:
    assert FilterEngine().matches(RECORD, TranslationFilter())


@pytest.mark.parametrize(
    "search_type, value, expected",
    [
        (SearchType.CONTAINS, "save", True),
        (SearchType.CONTAINS, "menu_s", True),
        (SearchType.CONTAINS, "load", False),
        (SearchType.BEGINS_WITH, "menu", True),
        (SearchType.BEGINS_WITH, "save", False),
        (SearchType.ENDS_WITH, "_SAVE", True),
        (SearchType.ENDS_WITH, "menu", False),
        (SearchType.EQUALS, "menu_save", True),
        (SearchType.EQUALS, "menu_sav", False),
    ],
)
def test_search_types_case_insensitive(search_type: SearchType, value: str, expected: bool) -> None:
    assert field_matches("Menu_Save", FieldFilter(value=value, search_type=search_type)) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Menu_Save", True),
        ("menu_save", False),
        ("Menu_Save ", False),
        ("Menu_Sav", False),
    ],
)
def test_equals_case_sensitive_is_exact(value: str, expected: bool) -> None:
    field_filter = FieldFilter(value=value, search_type=SearchType.EQUALS, case_sensitive=True)
    assert field_matches("Menu_Save", field_filter) is expected


def test_case_insensitive_comparison_uses_casefold() -> None:
    field_filter = FieldFilter(value="STRASSE", search_type=SearchType.EQUALS)
    assert field_matches("Straße", field_filter)


def test_every_active_field_must_match() -> None:
    engine = FilterEngine()

    assert engine.matches(RECORD, TranslationFilter.simple(key="save", en="file"))
    assert not engine.matches(RECORD, TranslationFilter.simple(key="save", en="folder"))


def test_group_field_is_filterable() -> None:
    engine = FilterEngine()

    assert engine.matches(RECORD, TranslationFilter.simple(group="men"))
    assert not engine.matches(RECORD, TranslationFilter.simple(group="Errors"))


def test_filter_on_untranslated_locale_never_matches_text() -> None:
    assert not FilterEngine().matches(RECORD, TranslationFilter.simple(pt="a"))


def test_global_case_sensitive_applies_to_every_field() -> None:
    translation_filter = TranslationFilter(key=FieldFilter(value="menu"), global_case_sensitive=True)

    assert translation_filter.resolved().key.case_sensitive
    assert not FilterEngine().matches(RECORD, translation_filter)


def test_global_search_type_only_replaces_default_search_types() -> None:
    translation_filter = TranslationFilter(
        key=FieldFilter(value="Menu", search_type=SearchType.BEGINS_WITH),
        en=FieldFilter(value="save file"),
        global_search_type=SearchType.EQUALS,
    )

    resolved = translation_filter.resolved()

    assert resolved.key.search_type == SearchType.BEGINS_WITH
    assert resolved.en.search_type == SearchType.EQUALS
    assert FilterEngine().matches(RECORD, translation_filter)


def test_default_globals_leave_fields_untouched() -> None:
    translation_filter = TranslationFilter(en=FieldFilter(value="Save", search_type=SearchType.ENDS_WITH))

    assert translation_filter.resolved() == translation_filter


def test_apply_keeps_input_order() -> None:
    records = [
        TranslationRecord.build("B_Save", "Menu", fr="b"),
        TranslationRecord.build("A_Load", "Menu", fr="a"),
        TranslationRecord.build("A_Save", "Menu", fr="c"),
    ]

    matched = FilterEngine().apply(records, TranslationFilter.simple(key="save"))

    assert [r.key for r in matched] == ["B_Save", "A_Save"]
