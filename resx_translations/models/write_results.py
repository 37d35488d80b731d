"""
Write Results - Per-locale outcome of create/update/delete operations

A multi-locale mutation is not atomic, so each locale reports its own result
and callers can see which files were written before a failure.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .locale import Locale


@dataclass
class LocaleWriteResult:
    """Outcome of one locale file mutation"""
    locale: Locale
    path: str
    success: bool
    changed: bool = False                 # File content was modified
    error_type: Optional[str] = None      # Exception class name on failure
    error: Optional[str] = None           # Error message on failure


@dataclass
class WriteOutcome:
    """Outcome of a repository mutation across locales"""
    operation: str                        # "create", "update" or "delete"
    key: str
    group: str
    results: List[LocaleWriteResult] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """Every attempted locale write succeeded"""
        return all(r.success for r in self.results)

    @property
    def failed_locales(self) -> List[Locale]:
        return [r.locale for r in self.results if not r.success]

    @property
    def changed_locales(self) -> List[Locale]:
        return [r.locale for r in self.results if r.changed]

    def __bool__(self) -> bool:
        return self.succeeded
