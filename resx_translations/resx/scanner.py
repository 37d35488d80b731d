"""
Resource Directory Scanner - Discover .resx files and group them by locale

Groups are not registered anywhere: a group exists because files named
`<group>.<locale>.resx` exist somewhere under the base directory.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

from resx_translations.models.locale import RESX_EXTENSION, parse_resource_file_name
from resx_translations.models.resource_group import ResourceGroup

logger = logging.getLogger(__name__)


class ResourceDirectoryScanner:
    """
    Walks a directory tree and groups locale files.

    Example:
        scanner = ResourceDirectoryScanner()
        for group in scanner.discover_groups("Resources"):
            print(group.name, sorted(group.files_by_locale))
    """

    def list_resource_files(self, base_path: Union[str, Path]) -> List[Path]:
        """All .resx files under base_path, sorted; empty if it does not exist"""
        base = Path(base_path)
        if not base.is_dir():
            logger.warning(f"Resource directory not found: {base}")
            return []

        try:
            files = [
                p for p in base.rglob("*")
                if p.suffix.lower() == RESX_EXTENSION and p.is_file()
            ]
        except OSError as e:
            logger.error(f"Failed to scan resource directory {base}: {e}")
            return []

        return sorted(files)

    def discover_groups(self, base_path: Union[str, Path]) -> List[ResourceGroup]:
        """
        Discover resource groups under a directory.

        Args:
            base_path: Directory scanned recursively

        Returns:
            Groups sorted by name. Groups without a primary locale file are
            included; files without a recognized locale suffix are skipped.
        """
        groups: Dict[str, ResourceGroup] = {}

        for path in self.list_resource_files(base_path):
            parsed = parse_resource_file_name(path.name)
            if parsed is None:
                logger.debug(f"Skipping resource file without locale suffix: {path}")
                continue

            name, locale = parsed
            group = groups.setdefault(name, ResourceGroup(name=name))
            if locale in group.files_by_locale:
                logger.warning(
                    f"Duplicate '{locale.value}' file for group '{name}': "
                    f"{path} ignored, using {group.files_by_locale[locale]}"
                )
                continue
            group.files_by_locale[locale] = path

        return [groups[name] for name in sorted(groups)]
