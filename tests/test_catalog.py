"""Tests for the width marker catalog."""

import pytest
from hypothesis import given, strategies as st

import bitlayout
from bitlayout.catalog import widths
from bitlayout.catalog.widths import (
    CATALOG, MARKER_NAMES, MAX_WIDTH, MIN_WIDTH, WidthMarker,
    is_width_marker, lookup_width, marker_for,
)
from bitlayout.errors import UnknownFieldWidth


class TestCatalogContents:
    def test_catalog_has_65_entries(self):
        """Catalog covers widths 0..64 inclusive."""
        assert len(CATALOG) == 65
        assert sorted(CATALOG) == list(range(0, 65))
        assert (MIN_WIDTH, MAX_WIDTH) == (0, 64)

    def test_markers_are_distinct(self):
        """Every width has its own marker type."""
        assert len(set(CATALOG.values())) == 65
        assert len(set(MARKER_NAMES)) == 65

    def test_marker_bits_match_key(self):
        for width, marker in CATALOG.items():
            assert marker.BITS == width
            assert marker.__name__ == f"B{width}"

    def test_markers_exported_by_name(self):
        """B0..B64 are importable from the catalog module and the package."""
        for width in range(65):
            assert getattr(widths, f"B{width}") is CATALOG[width]
            assert getattr(bitlayout, f"B{width}") is CATALOG[width]

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            CATALOG[65] = object()  # type: ignore[index]

    def test_markers_cannot_be_instantiated(self):
        with pytest.raises(TypeError, match="cannot be instantiated"):
            bitlayout.B8()

    def test_catalog_is_closed(self):
        """No new width marker can be defined after the catalog is built."""
        with pytest.raises(TypeError, match="catalog is closed"):
            class B65(WidthMarker):
                BITS = 65

    def test_marker_repr_is_its_name(self):
        assert repr(bitlayout.B12) == "B12"


class TestLookupWidth:
    @given(width=st.integers(min_value=0, max_value=64))
    def test_lookup_returns_bits(self, width):
        assert lookup_width(CATALOG[width]) == width

    def test_plain_type_is_rejected(self):
        with pytest.raises(UnknownFieldWidth, match="does not declare a bit-width"):
            lookup_width(int)

    def test_lookalike_with_bits_is_rejected(self):
        """A class that merely carries BITS is not a catalog marker."""
        class Wide:
            BITS = 65

        class FakeEight:
            BITS = 8

        with pytest.raises(UnknownFieldWidth):
            lookup_width(Wide)
        with pytest.raises(UnknownFieldWidth):
            lookup_width(FakeEight)

    def test_non_type_values_are_rejected(self):
        for value in (None, 8, "B8", 8.0):
            with pytest.raises(UnknownFieldWidth):
                lookup_width(value)

    def test_is_width_marker(self):
        assert is_width_marker(bitlayout.B0)
        assert is_width_marker(bitlayout.B64)
        assert not is_width_marker(WidthMarker)
        assert not is_width_marker(bool)


class TestMarkerFor:
    @given(width=st.integers(min_value=0, max_value=64))
    def test_in_range_widths_map_to_markers(self, width):
        assert marker_for(width) is CATALOG[width]

    @given(width=st.integers(min_value=65, max_value=10_000))
    def test_widths_above_64_are_unknown(self, width):
        with pytest.raises(UnknownFieldWidth):
            marker_for(width)

    @given(width=st.integers(max_value=-1))
    def test_negative_widths_are_unknown(self, width):
        with pytest.raises(UnknownFieldWidth):
            marker_for(width)

    def test_width_65_message(self):
        with pytest.raises(UnknownFieldWidth) as exc_info:
            marker_for(65)
        assert "B65" in str(exc_info.value)
        assert "0..64" in str(exc_info.value)

    def test_non_integer_widths_are_unknown(self):
        for value in (True, 8.0, "8", None):
            with pytest.raises(UnknownFieldWidth):
                marker_for(value)
