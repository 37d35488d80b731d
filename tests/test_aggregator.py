from __future__ import annotations

from pathlib import Path

from resx_translations.models.locale import Locale
from resx_translations.models.resource_group import ResourceGroup
from resx_translations.resx.scanner import ResourceDirectoryScanner
from resx_translations.services.aggregator import TranslationAggregator


def _only_group(base: Path) -> ResourceGroup:
    groups = ResourceDirectoryScanner().discover_groups(base)
    assert len(groups) == 1
    return groups[0]


def test_merge_fills_missing_locales_with_empty_text(resource_dir: Path, make_resx) -> None:
    fr = make_resx(resource_dir / "g.fr.resx", {"k": "a"})
    make_resx(resource_dir / "g.en.resx", {"k": "b"})
    make_resx(resource_dir / "g.pt.resx", {})

    records = TranslationAggregator().merge(_only_group(resource_dir))

    assert len(records) == 1
    record = records[0]
    assert (record.key, record.group) == ("k", "g")
    assert (record.fr, record.en, record.pt) == ("a", "b", "")
    assert record.text_by_locale == {Locale.FR: "a", Locale.EN: "b", Locale.PT: ""}
    assert record.source_path == str(fr)
    assert record.untranslated_locales() == [Locale.PT]


def test_merge_without_secondary_files(resource_dir: Path, make_resx) -> None:
    make_resx(resource_dir / "g.fr.resx", {"k": "a"})

    records = TranslationAggregator().merge(_only_group(resource_dir))

    assert [(r.fr, r.en, r.pt) for r in records] == [("a", "", "")]


def test_keys_missing_from_primary_are_not_surfaced(resource_dir: Path, make_resx) -> None:
    make_resx(resource_dir / "g.fr.resx", {"k": "a"})
    make_resx(resource_dir / "g.en.resx", {"k": "b", "only_en": "x"})

    records = TranslationAggregator().merge(_only_group(resource_dir))

    assert [r.key for r in records] == ["k"]


def test_group_without_primary_has_no_records(resource_dir: Path, make_resx) -> None:
    make_resx(resource_dir / "g.en.resx", {"k": "b"})

    assert TranslationAggregator().merge(_only_group(resource_dir)) == []


def test_malformed_secondary_file_does_not_hide_records(resource_dir: Path, make_resx) -> None:
    make_resx(resource_dir / "g.fr.resx", {"k": "a"})
    (resource_dir / "g.en.resx").write_text("<root><data", encoding="utf-8")
    make_resx(resource_dir / "g.pt.resx", {"k": "c"})

    records = TranslationAggregator().merge(_only_group(resource_dir))

    assert [(r.fr, r.en, r.pt) for r in records] == [("a", "", "c")]


def test_merge_all_orders_by_group_then_key(menu_errors_dir: Path) -> None:
    groups = ResourceDirectoryScanner().discover_groups(menu_errors_dir)

    records = TranslationAggregator().merge_all(reversed(groups))

    assert [(r.group, r.key) for r in records] == [
        ("Errors", "E1"),
        ("Menu", "Cancel"),
        ("Menu", "OK"),
    ]


def test_orphaned_entries_reports_secondary_only_keys(resource_dir: Path, make_resx) -> None:
    make_resx(resource_dir / "g.fr.resx", {"k": "a"})
    make_resx(resource_dir / "g.en.resx", {"k": "b", "z_old": "old", "a_old": "older"})
    make_resx(resource_dir / "g.pt.resx", {"z_old": "velho"})

    orphans = TranslationAggregator().orphaned_entries(_only_group(resource_dir))

    assert [(e.key, e.locale, e.value) for e in orphans] == [
        ("a_old", Locale.EN, "older"),
        ("z_old", Locale.EN, "old"),
        ("z_old", Locale.PT, "velho"),
    ]
