from __future__ import annotations

from pathlib import Path

import pytest

from resx_translations.models.locale import Locale
from resx_translations.models.write_results import LocaleWriteResult, WriteOutcome
from resx_translations.utils.file_locks import PathLockRegistry
from resx_translations.utils.observability import set_span_attribute, trace_operation
from resx_translations.utils.result_formatter import format_write_outcome


def test_equivalent_paths_share_one_lock(tmp_path: Path) -> None:
    locks = PathLockRegistry()

    first = locks.lock_for(tmp_path / "Menu.fr.resx")
    second = locks.lock_for(tmp_path / "sub" / ".." / "Menu.fr.resx")

    assert first is second
    assert len(locks) == 1
    assert locks.lock_for(tmp_path / "Menu.en.resx") is not first


def test_hold_releases_lock(tmp_path: Path) -> None:
    locks = PathLockRegistry()
    path = tmp_path / "Menu.fr.resx"

    with locks.hold(path):
        assert locks.lock_for(path).locked()

    assert not locks.lock_for(path).locked()


def test_trace_operation_reraises() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with trace_operation("test", {"resx.group": "Menu"}) as span:
            set_span_attribute(span, "resx.key", None)
            raise RuntimeError("boom")


def test_write_outcome_summary() -> None:
    outcome = WriteOutcome(operation="update", key="OK", group="Menu")
    assert outcome.succeeded

    outcome.results.append(LocaleWriteResult(locale=Locale.FR, path="Menu.fr.resx", success=True, changed=True))
    outcome.results.append(
        LocaleWriteResult(
            locale=Locale.EN,
            path="Menu.en.resx",
            success=False,
            error_type="MalformedFileError",
            error="bad xml",
        )
    )

    assert not outcome
    assert outcome.changed_locales == [Locale.FR]
    formatted = format_write_outcome(outcome)
    assert formatted["failed_locales"] == ["en"]
    assert formatted["locales"][1]["error_type"] == "MalformedFileError"
