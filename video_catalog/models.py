from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Sequence, Tuple

from . import config


@dataclass(frozen=True)
class ToleranceBand:
    """
    A numeric range shown as a single facet value (e.g. "UltraWide").
    Bounds are inclusive.
    """
    label: str = config.ULTRAWIDE_LABEL
    low: float = config.ULTRAWIDE_MIN
    high: float = config.ULTRAWIDE_MAX

    def contains(self, value: Optional[float]) -> bool:
        if value is None:
            return False
        return self.low <= value <= self.high


DEFAULT_BAND = ToleranceBand()


@dataclass(frozen=True)
class VideoRecord:
    """
    Represents a video file found during a scan.
    """
    path: Path
    title: str
    year: str
    decade: str
    resolution: str
    aspect_ratio: str       # "1.78" or Unknown
    quality: str            # 4K/1080p/720p/Unknown
    file_size_gb: str       # "1.46"
    duration: str           # HH:MM:SS or Unknown
    audio_language: str

    @property
    def folder(self) -> Path:
        return self.path.parent

    def as_row(self, columns: Sequence[str] = tuple(config.EXPORT_COLUMNS)) -> List[str]:
        """Display values for the given table columns."""
        values = {
            "Title": self.title,
            "Year": self.year,
            "Decade": self.decade,
            "Resolution": self.resolution,
            "Aspect Ratio": self.aspect_ratio,
            "Quality": self.quality,
            "Path": str(self.path),
            "Size": f"{self.file_size_gb} GB",
            "Duration": self.duration,
            "Language": self.audio_language,
        }
        return [values[c] for c in columns]


@dataclass(frozen=True)
class FacetSelection:
    decade: str = config.ALL
    aspect_ratio: str = config.ALL
    quality: str = config.ALL


@dataclass(frozen=True)
class Catalog:
    """
    Result of one scan pass. Never updated in place; a new scan builds a new Catalog.
    """
    root: Path
    records: Tuple[VideoRecord, ...] = ()
    decades: FrozenSet[str] = field(default_factory=frozenset)
    aspect_ratios: FrozenSet[str] = field(default_factory=frozenset)
    qualities: FrozenSet[str] = field(default_factory=frozenset)

    def __len__(self) -> int:
        return len(self.records)

    def facet_options(self, band: ToleranceBand = DEFAULT_BAND) -> Tuple[List[str], List[str], List[str]]:
        """Ordered choices for the decade, aspect ratio and quality filters."""
        from .facets import order_facet_values

        return (
            order_facet_values(self.decades),
            order_facet_values(self.aspect_ratios, band),
            order_facet_values(self.qualities),
        )
