import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from . import config
from .exceptions import ScanCancelledError, ScanRootError
from .metadata.classify import format_file_size_gb, get_aspect_ratio, get_video_quality
from .metadata.naming import get_decade, parse_folder_name
from .metadata.probe import MetadataProbe
from .models import Catalog, VideoRecord
from .scanning.filesystem import PathScanner


class CatalogBuilder:
    def __init__(self,
                 scanner: Optional[PathScanner] = None,
                 probe: Optional[MetadataProbe] = None,
                 max_workers: int = config.DEFAULT_MAX_WORKERS):
        self.scanner = scanner or PathScanner()
        self.probe = probe or MetadataProbe()
        self.max_workers = max(1, max_workers)

    def build(self,
              root: Path,
              cancel_event: Optional[threading.Event] = None,
              progress: bool = True) -> Catalog:
        """
        Executes one scan pass and returns a new Catalog.
        1. Discover video files (scan order)
        2. Extract & classify each file (fanned out over a thread pool)
        3. Fold facet values from the finished records

        Args:
            cancel_event: When set, the scan stops and ScanCancelledError is raised.
                          Records built so far are discarded.
            progress: Show a tqdm progress bar.
        """
        root = Path(root).absolute()
        if not root.exists():
            raise ScanRootError(f"Scan root {root} does not exist.")
        if not root.is_dir():
            raise ScanRootError(f"Scan root {root} is not a directory.")
        try:
            with os.scandir(root):
                pass
        except OSError as e:
            raise ScanRootError(f"Scan root {root} cannot be read: {e}") from e

        logging.info(f"Scanning {root}...")
        paths = list(self.scanner.iter_files(root))
        logging.info(f"Found {len(paths)} video files.")

        records = self._extract_all(paths, cancel_event, progress)
        catalog = self._assemble(root, records)

        logging.info(
            f"Catalog complete: {len(catalog)} records, "
            f"{len(catalog.decades)} decades, {len(catalog.aspect_ratios)} aspect ratios, "
            f"{len(catalog.qualities)} qualities."
        )
        return catalog

    def build_record(self, path: Path) -> VideoRecord:
        """Runs naming, classification and the three probe queries for one file."""
        title, year = parse_folder_name(path.parent.name)
        meta = self.probe.probe(path)

        return VideoRecord(
            path=path,
            title=title,
            year=year,
            decade=get_decade(year),
            resolution=meta.resolution,
            aspect_ratio=get_aspect_ratio(meta.resolution),
            quality=get_video_quality(path),
            file_size_gb=self._file_size_gb(path),
            duration=meta.duration,
            audio_language=meta.audio_language,
        )

    def _extract_all(self,
                     paths: List[Path],
                     cancel_event: Optional[threading.Event],
                     progress: bool) -> List[VideoRecord]:
        def process_path(path: Path) -> VideoRecord:
            if cancel_event is not None and cancel_event.is_set():
                raise ScanCancelledError("Scan cancelled.")
            return self.build_record(path)

        records: List[VideoRecord] = []
        bar = tqdm(total=len(paths), desc="Probing videos", unit="file", disable=not progress)
        try:
            if self.max_workers <= 1:
                for path in paths:
                    records.append(process_path(path))
                    bar.update(1)
            else:
                with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                    try:
                        # map() yields in submission order, so scan order survives
                        for rec in pool.map(process_path, paths):
                            records.append(rec)
                            bar.update(1)
                    except BaseException:
                        pool.shutdown(wait=True, cancel_futures=True)
                        raise
        except ScanCancelledError:
            logging.warning(f"Scan cancelled after {len(records)} of {len(paths)} files; discarding results.")
            raise
        finally:
            bar.close()

        return records

    def _assemble(self, root: Path, records: List[VideoRecord]) -> Catalog:
        """Single-writer fold of the facet values once every record is built."""
        decades = set()
        aspect_ratios = set()
        qualities = set()
        for rec in records:
            if rec.decade != config.UNKNOWN:
                decades.add(rec.decade)
            if rec.aspect_ratio != config.UNKNOWN:
                aspect_ratios.add(rec.aspect_ratio)
            if rec.quality != config.UNKNOWN:
                qualities.add(rec.quality)

        return Catalog(
            root=root,
            records=tuple(records),
            decades=frozenset(decades),
            aspect_ratios=frozenset(aspect_ratios),
            qualities=frozenset(qualities),
        )

    def _file_size_gb(self, path: Path) -> str:
        try:
            size = path.stat().st_size
        except OSError as e:
            logging.error(f"Failed to stat {path}: {e}")
            size = 0
        return format_file_size_gb(size)
