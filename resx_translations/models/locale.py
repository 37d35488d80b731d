"""
Locale - Supported resource locales and the canonical resource file naming

Both the directory scanner and the writers go through the helpers here, so a
file created by the repository is always found again by discovery.
"""

from enum import Enum
from typing import List, Optional, Tuple


RESX_EXTENSION = ".resx"
LOCALE_SEPARATOR = "."


class Locale(str, Enum):
    """Supported resource locales"""

    FR = "fr"   # Primary locale, drives record iteration
    EN = "en"
    PT = "pt"

    @property
    def is_primary(self) -> bool:
        return self is PRIMARY_LOCALE


PRIMARY_LOCALE = Locale.FR
SECONDARY_LOCALES: List[Locale] = [loc for loc in Locale if loc is not PRIMARY_LOCALE]

# Longest suffix first so a longer code is never shadowed by a shorter one
_SUFFIXES_LONGEST_FIRST = sorted(Locale, key=lambda loc: len(loc.value), reverse=True)


def resource_file_name(group: str, locale: Locale) -> str:
    """
    Build the canonical file name of a group's locale file.

    Example:
        resource_file_name("Menu", Locale.EN)  # "Menu.en.resx"
    """
    return f"{group}{LOCALE_SEPARATOR}{Locale(locale).value}{RESX_EXTENSION}"


def parse_resource_file_name(file_name: str) -> Optional[Tuple[str, Locale]]:
    """
    Split a resource file name into (group, locale).

    Returns None when the name is not a `<group>.<locale>.resx` file, e.g. a
    neutral `Menu.resx` or a concatenated `Menufr.resx`.
    """
    if not file_name.lower().endswith(RESX_EXTENSION):
        return None
    stem = file_name[: -len(RESX_EXTENSION)]

    for locale in _SUFFIXES_LONGEST_FIRST:
        suffix = LOCALE_SEPARATOR + locale.value
        if stem.lower().endswith(suffix):
            group = stem[: -len(suffix)]
            if group:
                return group, locale
            return None
    return None


def validate_group_name(group: str) -> str:
    """
    Check that a group name can be used as a file name prefix.

    Raises:
        ValueError: blank names, path separators, or `.`/`..`
    """
    if group is None or not group.strip():
        raise ValueError("Group name must not be blank")
    if "/" in group or "\\" in group or group in (".", ".."):
        raise ValueError(f"Invalid group name: {group!r}")
    return group
