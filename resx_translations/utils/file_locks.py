"""
File locks - Serialize in-process writers of the same resource file

Only guards threads of one process. Separate processes editing the same file
still race (last write wins).
"""

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Union


class PathLockRegistry:
    """
    One lock per resolved file path.

    Example:
        locks = PathLockRegistry()
        with locks.hold(path):
            ...  # load, mutate, save
    """

    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def lock_for(self, path: Union[str, Path]) -> threading.Lock:
        key = str(Path(path).resolve())
        with self._registry_lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, path: Union[str, Path]):
        lock = self.lock_for(path)
        with lock:
            yield

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._locks)
