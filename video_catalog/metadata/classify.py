"""
Derives the classification facets that do not come from the folder name:
aspect ratio (from the probed resolution) and quality tier (from the file name).
"""
from pathlib import Path
from typing import Optional, Tuple, Union

from .. import config


def parse_resolution(resolution: str) -> Optional[Tuple[int, int]]:
    """'1920x1080' -> (1920, 1080). None for anything else."""
    if not resolution or resolution == config.UNKNOWN:
        return None
    parts = resolution.split('x')
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def get_aspect_ratio(resolution: str) -> str:
    dims = parse_resolution(resolution)
    if dims is None:
        return config.UNKNOWN
    width, height = dims
    if height == 0:
        return config.UNKNOWN
    return f"{width / height:.2f}"


def parse_ratio(value: str) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def get_video_quality(path: Union[str, Path]) -> str:
    """
    Quality tier from release naming ("...2160p...", "...1080p...").

    Only the file name is inspected, never the folders above it or the
    probed resolution (a 1920x800 scope encode is still a 1080p release).
    """
    name = Path(path).name.lower()
    for hints, tier in config.QUALITY_RULES:
        if any(h in name for h in hints):
            return tier
    return config.UNKNOWN


def format_file_size_gb(size_bytes: int) -> str:
    return f"{size_bytes / config.BYTES_PER_GB:.2f}"


def format_duration(seconds: float) -> str:
    """Whole seconds (truncated) as HH:MM:SS."""
    total = int(seconds)
    if total < 0:
        return config.UNKNOWN
    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
