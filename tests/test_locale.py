from __future__ import annotations

import pytest

from resx_translations.models.locale import (
    Locale,
    PRIMARY_LOCALE,
    SECONDARY_LOCALES,
    parse_resource_file_name,
    resource_file_name,
    validate_group_name,
)


def test_primary_locale_is_french() -> None:
    assert PRIMARY_LOCALE is Locale.FR
    assert Locale.FR.is_primary
    assert not Locale.EN.is_primary
    assert SECONDARY_LOCALES == [Locale.EN, Locale.PT]


def test_resource_file_name_uses_dot_separator() -> None:
    assert resource_file_name("Menu", Locale.FR) == "Menu.fr.resx"
    assert resource_file_name("Shared.Labels", Locale.PT) == "Shared.Labels.pt.resx"


@pytest.mark.parametrize("locale", list(Locale))
def test_parse_inverts_resource_file_name(locale: Locale) -> None:
    assert parse_resource_file_name(resource_file_name("Shared.Labels", locale)) == ("Shared.Labels", locale)


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("Menu.FR.resx", ("Menu", Locale.FR)),
        ("Menu.En.RESX", ("Menu", Locale.EN)),
        ("Menu.resx", None),
        ("Menufr.resx", None),
        ("Menu.de.resx", None),
        (".fr.resx", None),
        ("Menu.fr.txt", None),
    ],
)
def test_parse_resource_file_name(file_name: str, expected) -> None:
    assert parse_resource_file_name(file_name) == expected


@pytest.mark.parametrize("group", ["", "   ", "../Menu", "sub/Menu", "sub\\Menu", ".", ".."])
def test_validate_group_name_rejects_unsafe_names(group: str) -> None:
    with pytest.raises(ValueError):
        validate_group_name(group)


def test_validate_group_name_accepts_dotted_names() -> None:
    assert validate_group_name("Shared.Labels") == "Shared.Labels"
