"""
Command-line front end for the translation repository

Usage:
    resx-translations groups
    resx-translations search --key Menu_ --search-type begins_with
    resx-translations search --en save --case-sensitive
    resx-translations create --group Menu --key Menu_Save --fr Enregistrer --en Save
    resx-translations create --group Menu --key Menu_Quit --fr Quitter --auto-generate
    resx-translations update --group Menu --key Menu_Save --pt Salvar
    resx-translations delete --group Menu --key Menu_Save
    resx-translations placeholder --group Menu --key Menu_Help --text Aide
    resx-translations orphans

Global options:
    --base-path DIR     Resource directory (overrides config and environment)
    --config-dir DIR    Directory holding repository.yaml
    -v, --verbose       Debug logging
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from resx_translations.models.filters import FieldFilter, SearchType, TranslationFilter
from resx_translations.models.translation_record import TranslationRecord
from resx_translations.services.repository import TranslationRepository
from resx_translations.utils.config import load_repository_config
from resx_translations.utils.result_formatter import (
    format_entries,
    format_record,
    format_records,
    format_write_outcome,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


# =============================================================================
# Output helpers
# =============================================================================

def print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # Suppress noisy loggers
    logging.getLogger("opentelemetry").setLevel(logging.WARNING)


# =============================================================================
# Commands
# =============================================================================

def cmd_groups(repo: TranslationRepository, args: argparse.Namespace) -> int:
    print_json(repo.list_available_groups())
    return EXIT_OK


def cmd_list(repo: TranslationRepository, args: argparse.Namespace) -> int:
    print_json(format_records(repo.list_all_translations()))
    return EXIT_OK


def cmd_search(repo: TranslationRepository, args: argparse.Namespace) -> int:
    translation_filter = TranslationFilter(
        key=FieldFilter(value=args.key),
        group=FieldFilter(value=args.group),
        fr=FieldFilter(value=args.fr),
        en=FieldFilter(value=args.en),
        pt=FieldFilter(value=args.pt),
        global_case_sensitive=args.case_sensitive,
        global_search_type=SearchType(args.search_type),
    )
    if translation_filter.is_empty():
        logger.warning("No search criteria given, nothing to search")
    print_json(format_records(repo.search_translations(translation_filter)))
    return EXIT_OK


def _record_from_args(args: argparse.Namespace) -> TranslationRecord:
    return TranslationRecord.build(
        key=args.key,
        group=args.group,
        fr=args.fr or "",
        en=args.en or "",
        pt=args.pt or "",
    )


def cmd_create(repo: TranslationRepository, args: argparse.Namespace) -> int:
    outcome = repo.create_translation(_record_from_args(args), auto_generate=args.auto_generate)
    print_json(format_write_outcome(outcome))
    return EXIT_OK if outcome.succeeded else EXIT_FAILED


def cmd_update(repo: TranslationRepository, args: argparse.Namespace) -> int:
    outcome = repo.update_translation(_record_from_args(args))
    print_json(format_write_outcome(outcome))
    return EXIT_OK if outcome.succeeded else EXIT_FAILED


def cmd_delete(repo: TranslationRepository, args: argparse.Namespace) -> int:
    outcome = repo.delete_translation(args.key, args.group)
    print_json(format_write_outcome(outcome))
    return EXIT_OK if outcome.succeeded else EXIT_FAILED


def cmd_placeholder(repo: TranslationRepository, args: argparse.Namespace) -> int:
    record = repo.generate_placeholder_translation(args.key, args.text, args.group)
    print_json(format_record(record))
    return EXIT_OK


def cmd_orphans(repo: TranslationRepository, args: argparse.Namespace) -> int:
    print_json(format_entries(repo.list_orphaned_entries()))
    return EXIT_OK


# =============================================================================
# Argument parsing
# =============================================================================

def _add_text_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--fr", help="French text")
    parser.add_argument("--en", help="English text")
    parser.add_argument("--pt", help="Portuguese text")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resx-translations",
        description="Search and edit multilingual .resx translation files",
    )
    parser.add_argument("--base-path", help="Resource directory")
    parser.add_argument("--config-dir", help="Directory holding repository.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("groups", help="List resource groups")
    p.set_defaults(func=cmd_groups)

    p = sub.add_parser("list", help="List every translation")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("search", help="Search translations")
    p.add_argument("--key", help="Key filter")
    p.add_argument("--group", help="Group filter")
    _add_text_options(p)
    p.add_argument(
        "--search-type",
        choices=[t.value for t in SearchType],
        default=SearchType.CONTAINS.value,
        help="Comparison applied to every field (default: contains)",
    )
    p.add_argument("--case-sensitive", action="store_true", help="Case-sensitive comparison")
    p.set_defaults(func=cmd_search)

    for name, func, help_text in (
        ("create", cmd_create, "Create a translation key"),
        ("update", cmd_update, "Update the texts of a translation key"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--key", required=True, help="Resource key")
        p.add_argument("--group", required=True, help="Resource group")
        _add_text_options(p)
        if name == "create":
            p.add_argument(
                "--auto-generate",
                action="store_true",
                help="Fill missing en/pt texts with placeholders",
            )
        p.set_defaults(func=func)

    p = sub.add_parser("delete", help="Delete a translation key from every locale")
    p.add_argument("--key", required=True, help="Resource key")
    p.add_argument("--group", required=True, help="Resource group")
    p.set_defaults(func=cmd_delete)

    p = sub.add_parser("placeholder", help="Preview placeholder translations (not saved)")
    p.add_argument("--key", required=True, help="Resource key")
    p.add_argument("--group", required=True, help="Resource group")
    p.add_argument("--text", required=True, help="French source text")
    p.set_defaults(func=cmd_placeholder)

    p = sub.add_parser("orphans", help="List en/pt keys missing from the French file")
    p.set_defaults(func=cmd_orphans)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    config = load_repository_config(config_dir=args.config_dir, base_path=args.base_path)
    repo = TranslationRepository(config)

    try:
        return args.func(repo, args)
    except ValueError as e:
        logger.error(str(e))
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
