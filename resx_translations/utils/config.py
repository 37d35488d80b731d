"""
Configuration Loader - Load YAML configuration files
"""

import os
import logging
import yaml
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Any, Optional
from functools import lru_cache

logger = logging.getLogger(__name__)

REPOSITORY_CONFIG_NAME = "repository"

# Environment overrides for deployments without a config file
ENV_BASE_PATH = "RESX_TRANSLATIONS_BASE_PATH"
ENV_FALLBACK_PATH = "RESX_TRANSLATIONS_FALLBACK_PATH"


@dataclass
class RepositoryConfig:
    """Settings of a translation repository"""
    base_path: Optional[str] = None             # Directory holding the .resx files
    fallback_path: str = "Resources"            # Used when base_path does not exist
    placeholder_template: str = "[{locale}] {text}"
    encoding: str = "utf-8"

    def resolve_base_path(self) -> Path:
        """
        Directory to scan and write into.

        The configured base path when it exists, otherwise the fallback
        directory. The returned directory may not exist; reads then yield
        nothing and writes create it.
        """
        if self.base_path:
            configured = Path(self.base_path).expanduser()
            if configured.is_dir():
                return configured
            logger.warning(
                f"Configured resource directory not found: {configured}, "
                f"falling back to {self.fallback_path}"
            )
        return Path(self.fallback_path).expanduser()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RepositoryConfig":
        """Build from a mapping, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in (data or {}).items() if k in known and v is not None}
        unknown = set(data or {}) - known
        if unknown:
            logger.warning(f"Unknown repository settings ignored: {sorted(unknown)}")
        return cls(**values)


class ConfigLoader:
    """
    Loader for YAML configuration files.

    Usage:
        config = ConfigLoader()
        repository = config.load("repository")
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the config loader.

        Args:
            config_dir: Path to config directory.
                        Defaults to config/ at project root.
        """
        if config_dir is None:
            base_dir = Path(__file__).parent.parent.parent
            self.config_dir = base_dir / "config"
        else:
            self.config_dir = Path(config_dir)

    @lru_cache(maxsize=32)
    def load(self, name: str) -> Dict[str, Any]:
        """
        Load a configuration file by name.

        Args:
            name: Config file name (without .yaml extension)

        Returns:
            Parsed configuration dict

        Raises:
            FileNotFoundError: If config file not found
        """
        candidates = [
            self.config_dir / f"{name}.yaml",
            self.config_dir / f"{name}.yml",
            self.config_dir / name,
        ]

        for path in candidates:
            if path.is_file():
                with open(path, "r", encoding="utf-8") as f:
                    return yaml.safe_load(f) or {}

        raise FileNotFoundError(
            f"Config file '{name}' not found in {self.config_dir}"
        )

    def get_repository_config(self) -> RepositoryConfig:
        """Repository settings, with defaults when no config file exists"""
        try:
            raw = self.load(REPOSITORY_CONFIG_NAME)
        except FileNotFoundError:
            logger.warning(f"Config file not found in {self.config_dir}, using defaults")
            raw = {}

        section = raw.get("repository", raw) if isinstance(raw, dict) else {}
        return RepositoryConfig.from_dict(section)

    def clear_cache(self):
        """Clear the config cache"""
        self.load.cache_clear()


def load_repository_config(
    config_dir: Optional[str] = None,
    base_path: Optional[str] = None
) -> RepositoryConfig:
    """
    Load repository settings from YAML, then apply overrides.

    Precedence: explicit base_path argument, environment variables, config
    file, defaults.

    Args:
        config_dir: Config directory (defaults to config/ at project root)
        base_path: Explicit resource directory, e.g. from a CLI flag

    Returns:
        RepositoryConfig
    """
    config = ConfigLoader(config_dir).get_repository_config()

    env_base = os.getenv(ENV_BASE_PATH)
    if env_base:
        config.base_path = env_base
    env_fallback = os.getenv(ENV_FALLBACK_PATH)
    if env_fallback:
        config.fallback_path = env_fallback

    if base_path:
        config.base_path = base_path

    return config
