from pathlib import Path
from video_catalog.facets import order_facet_values
from video_catalog.models import Catalog, ToleranceBand, DEFAULT_BAND


def test_ultrawide_values_absorbed_into_band():
    values = {"1.33", "1.78", "2.35", "2.40", "1.85"}
    assert order_facet_values(values, DEFAULT_BAND) == ["All", "1.33", "1.78", "1.85", "UltraWide"]


def test_band_edges_are_inclusive():
    values = {"2.20", "2.50", "2.19", "2.51"}
    assert order_facet_values(values, DEFAULT_BAND) == ["All", "2.19", "2.51", "UltraWide"]


def test_numeric_sort_is_by_value_not_text():
    assert order_facet_values({"10.00", "9.50", "1.00"}) == ["All", "1.00", "9.50", "10.00"]


def test_mixed_numeric_and_text():
    values = {"1990s", "1970s", "2020s", "Unknown"}
    assert order_facet_values(values) == ["All", "1970s", "1990s", "2020s"]

    qualities = {"720p", "4K", "1080p"}
    assert order_facet_values(qualities) == ["All", "1080p", "4K", "720p"]


def test_no_band_means_no_label():
    assert order_facet_values({"2.35", "1.78"}) == ["All", "1.78", "2.35"]


def test_band_label_not_duplicated():
    assert order_facet_values({"UltraWide", "1.78"}, DEFAULT_BAND) == ["All", "1.78", "UltraWide"]


def test_empty_values():
    assert order_facet_values([]) == ["All"]
    assert order_facet_values([], DEFAULT_BAND) == ["All", "UltraWide"]


def test_custom_band():
    band = ToleranceBand(label="Scope", low=2.3, high=2.4)
    assert order_facet_values({"2.20", "2.35", "2.39"}, band) == ["All", "2.20", "Scope"]


def test_catalog_facet_options():
    catalog = Catalog(
        root=Path("/movies"),
        decades=frozenset({"1990s", "1980s"}),
        aspect_ratios=frozenset({"2.39", "1.78"}),
        qualities=frozenset({"4K"}),
    )
    decades, ratios, qualities = catalog.facet_options()

    assert decades == ["All", "1980s", "1990s"]
    assert ratios == ["All", "1.78", "UltraWide"]
    assert qualities == ["All", "4K"]
