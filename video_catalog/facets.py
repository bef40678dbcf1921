"""
Orders facet values for the filter drop-downs.

Numeric values covered by a tolerance band are removed from the list, not
re-sorted; the band label stands in for all of them.
"""
from typing import Iterable, List, Optional

from . import config
from .models import ToleranceBand


def _as_number(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


def order_facet_values(values: Iterable[str], band: Optional[ToleranceBand] = None) -> List[str]:
    """
    Returns ["All", <numerics ascending>, <text sorted>, <band label>].

    Numeric values inside `band` are dropped in favour of the band label,
    which is appended only when a band is given. "Unknown" never appears.
    """
    numerics: List[float] = []
    others: List[str] = []

    for value in set(values):
        if value in (config.UNKNOWN, config.ALL):
            continue
        number = _as_number(value)
        if number is None:
            others.append(value)
            continue
        if band is not None and band.contains(number):
            continue
        numerics.append(number)

    ordered = [config.ALL]
    ordered.extend(f"{n:.2f}" for n in sorted(numerics))
    ordered.extend(sorted(others))

    if band is not None and band.label not in ordered:
        ordered.append(band.label)

    return ordered
