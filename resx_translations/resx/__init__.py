"""
Resource file access: the .resx codec and the directory scanner
"""

from resx_translations.resx.codec import ResxCodec, EMPTY_RESX_DOCUMENT
from resx_translations.resx.scanner import ResourceDirectoryScanner

__all__ = [
    "ResxCodec",
    "EMPTY_RESX_DOCUMENT",
    "ResourceDirectoryScanner",
]
