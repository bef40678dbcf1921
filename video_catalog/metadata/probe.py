import logging
import math
import subprocess
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .. import config
from ..exceptions import ProbeError
from .classify import format_duration

# ffprobe arguments for each query, the file path is appended last
RESOLUTION_ARGS = ["-v", "error", "-select_streams", "v:0",
                   "-show_entries", "stream=width,height", "-of", "csv=p=0"]
DURATION_ARGS = ["-v", "error", "-show_entries", "format=duration",
                 "-of", "default=noprint_wrappers=1:nokey=1"]
AUDIO_LANGUAGE_ARGS = ["-v", "error", "-select_streams", "a:0",
                       "-show_entries", "stream_tags=language",
                       "-of", "default=noprint_wrappers=1:nokey=1"]


@dataclass
class ProbeResult:
    resolution: str = config.UNKNOWN
    duration: str = config.UNKNOWN
    audio_language: str = config.UNKNOWN


class MetadataProbe:
    """
    Wraps the 'ffprobe' command line utility.
    Must be installed and on the system PATH (or passed as ffprobe_bin).

    Each query is a separate ffprobe run bounded by `timeout` seconds. Any
    failure (missing tool, crash, timeout, junk output) turns that one field
    into "Unknown" and is logged; nothing is raised to the caller.
    """

    def __init__(self, ffprobe_bin: str = config.FFPROBE_BIN, timeout: float = config.PROBE_TIMEOUT_SEC):
        self.ffprobe_bin = ffprobe_bin
        self.timeout = timeout
        self._missing_reported = False
        self._lock = threading.Lock()

    def probe(self, path: Path) -> ProbeResult:
        return ProbeResult(
            resolution=self.get_resolution(path),
            duration=self.get_duration(path),
            audio_language=self.get_audio_language(path),
        )

    def get_resolution(self, path: Path) -> str:
        out = self._query(RESOLUTION_ARGS, path)
        if not out:
            return config.UNKNOWN
        # csv=p=0 prints "1920,1080" (sometimes with a trailing comma)
        parts = [p.strip() for p in out.splitlines()[0].split(',') if p.strip()]
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            logging.debug(f"Unparseable resolution for {path}: {out!r}")
            return config.UNKNOWN
        return f"{parts[0]}x{parts[1]}"

    def get_duration(self, path: Path) -> str:
        out = self._query(DURATION_ARGS, path)
        if not out:
            return config.UNKNOWN
        try:
            seconds = float(out.splitlines()[0])
        except ValueError:
            logging.debug(f"Unparseable duration for {path}: {out!r}")
            return config.UNKNOWN
        if not math.isfinite(seconds):
            return config.UNKNOWN
        return format_duration(seconds)

    def get_audio_language(self, path: Path) -> str:
        out = self._query(AUDIO_LANGUAGE_ARGS, path)
        if not out:
            return config.UNKNOWN
        return out.splitlines()[0].strip() or config.UNKNOWN

    # --- Internal Helpers ---

    def _query(self, args: List[str], path: Path) -> Optional[str]:
        try:
            return self._run(args, path)
        except ProbeError as e:
            logging.warning(f"ffprobe failed for {path}: {e}")
            return None
        except FileNotFoundError:
            # Only warn once, the tool will still be missing for the next file
            with self._lock:
                first = not self._missing_reported
                self._missing_reported = True
            if first:
                logging.warning(f"ffprobe not found ({self.ffprobe_bin}); metadata will be Unknown")
            else:
                logging.debug(f"ffprobe not found, skipping {path}")
            return None

    def _run(self, args: List[str], path: Path) -> str:
        """Runs ffprobe and returns stripped stdout. Raises ProbeError on failure."""
        cmd = [self.ffprobe_bin, *args, str(path)]
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise ProbeError(f"timed out after {self.timeout}s") from e
        except FileNotFoundError:
            raise
        except OSError as e:
            raise ProbeError(f"exec error: {e}") from e

        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            raise ProbeError(stderr or f"exited {proc.returncode}")

        return (proc.stdout or "").strip()
