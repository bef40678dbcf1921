import os
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Set

from .. import config


def normalize_extensions(exts: Iterable[str]) -> Set[str]:
    """'MKV', 'mkv' and '.mkv' all become '.mkv'."""
    normalized = set()
    for ext in exts:
        ext = ext.strip().lower()
        if not ext:
            continue
        normalized.add(ext if ext.startswith('.') else f".{ext}")
    return normalized


class PathScanner:
    def __init__(self, extensions: Optional[Iterable[str]] = None):
        self.extensions = normalize_extensions(extensions if extensions is not None else config.VIDEO_EXTS)

    def is_video(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions

    def iter_files(self, root: Path) -> Iterator[Path]:
        """
        Yields absolute paths of video files under root, recursively.

        Every call starts a fresh walk. A missing root yields nothing, and
        directories that cannot be listed are skipped with a warning.
        """
        root = Path(root).absolute()
        if not root.is_dir():
            return

        for path in self._iter_files(root):
            if self.is_video(path):
                yield path

    def _iter_files(self, root: Path) -> Iterator[Path]:
        """Depth-first walker using os.scandir for speed."""
        stack = [root]
        while stack:
            current = stack.pop()

            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                logging.warning(f"Cannot read directory {current}: {e}")
                continue

            # Sort for stable traversal order
            entries.sort(key=lambda e: e.name.lower())

            dirs = []
            files = []
            for e in entries:
                try:
                    if e.is_dir(follow_symlinks=False):
                        dirs.append(Path(e.path))
                    elif e.is_file():
                        files.append(Path(e.path))
                except OSError as err:
                    logging.warning(f"Skipping unreadable entry {e.path}: {err}")

            # Push dirs to stack (reversed so we process A before Z)
            for d in reversed(dirs):
                stack.append(d)

            for f in files:
                yield f
