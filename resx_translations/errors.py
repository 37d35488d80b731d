"""
Errors raised by the resource codec and repository
"""

from pathlib import Path
from typing import Optional, Union


class ResxError(Exception):
    """Base class for resource file errors"""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class MalformedFileError(ResxError):
    """The file exists but is not a parseable resource document"""


class DuplicateKeyError(ResxError):
    """Insert attempted on a key that already exists in the file"""

    def __init__(self, key: str, path: Union[str, Path]):
        super().__init__(f"Key '{key}' already exists in {path}", path)
        self.key = key


class ResourceIOError(ResxError):
    """Reading or writing the file failed at the OS level"""
