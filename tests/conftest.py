from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict
from xml.sax.saxutils import escape, quoteattr

import pytest

from resx_translations.services.repository import TranslationRepository
from resx_translations.utils.config import ENV_BASE_PATH, ENV_FALLBACK_PATH, RepositoryConfig


def render_resx(entries: Dict[str, str]) -> str:
    items = "".join(
        f"  <data name={quoteattr(key)} xml:space=\"preserve\">\n"
        f"    <value>{escape(value)}</value>\n"
        f"  </data>\n"
        for key, value in entries.items()
    )
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<root>\n"
        '  <resheader name="resmimetype">\n'
        "    <value>text/microsoft-resx</value>\n"
        "  </resheader>\n"
        f"{items}"
        "</root>\n"
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_BASE_PATH, raising=False)
    monkeypatch.delenv(ENV_FALLBACK_PATH, raising=False)


@pytest.fixture
def make_resx() -> Callable[[Path, Dict[str, str]], Path]:
    def _make(path: Path, entries: Dict[str, str]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_resx(entries), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    path = tmp_path / "Resources"
    path.mkdir()
    return path


@pytest.fixture
def repo_config(tmp_path: Path, resource_dir: Path) -> RepositoryConfig:
    return RepositoryConfig(
        base_path=str(resource_dir),
        fallback_path=str(tmp_path / "no-such-fallback"),
    )


@pytest.fixture
def repo(repo_config: RepositoryConfig) -> TranslationRepository:
    return TranslationRepository(repo_config)


@pytest.fixture
def menu_errors_dir(resource_dir: Path, make_resx) -> Path:
    """Groups Menu (OK, Cancel) and Errors (E1) in fr/en/pt"""
    make_resx(resource_dir / "Menu.fr.resx", {"OK": "D'accord", "Cancel": "Annuler"})
    make_resx(resource_dir / "Menu.en.resx", {"OK": "OK", "Cancel": "Cancel"})
    make_resx(resource_dir / "Menu.pt.resx", {"OK": "Certo", "Cancel": "Cancelar"})
    make_resx(resource_dir / "errors" / "Errors.fr.resx", {"E1": "Erreur inconnue"})
    make_resx(resource_dir / "errors" / "Errors.en.resx", {"E1": "Unknown error"})
    make_resx(resource_dir / "errors" / "Errors.pt.resx", {"E1": "Erro desconhecido"})
    return resource_dir
