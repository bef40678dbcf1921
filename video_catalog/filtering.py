from typing import Iterable, List, Union

from . import config
from .metadata.classify import parse_ratio
from .models import DEFAULT_BAND, Catalog, FacetSelection, ToleranceBand, VideoRecord


def _matches_value(selected: str, value: str) -> bool:
    return selected == config.ALL or selected == value


def _matches_aspect_ratio(selected: str, value: str, band: ToleranceBand) -> bool:
    if _matches_value(selected, value):
        return True
    return selected == band.label and band.contains(parse_ratio(value))


def matches(record: VideoRecord, selection: FacetSelection, band: ToleranceBand = DEFAULT_BAND) -> bool:
    """True when the record passes all three facet selections."""
    return (
        _matches_value(selection.decade, record.decade)
        and _matches_aspect_ratio(selection.aspect_ratio, record.aspect_ratio, band)
        and _matches_value(selection.quality, record.quality)
    )


def filter_records(source: Union[Catalog, Iterable[VideoRecord]],
                   selection: FacetSelection,
                   band: ToleranceBand = DEFAULT_BAND) -> List[VideoRecord]:
    """
    Returns the visible records in catalog order. The catalog itself is untouched.
    """
    records = source.records if isinstance(source, Catalog) else source
    return [rec for rec in records if matches(rec, selection, band)]
