"""Tests for residue classification."""

import pytest
from hypothesis import given, strategies as st

from bitlayout.layout.remainder import Residue, classify


class TestResidue:
    def test_exactly_eight_residues(self):
        assert len(Residue) == 8
        assert sorted(r.value for r in Residue) == list(range(8))

    def test_marker_names(self):
        assert Residue.ZERO_MOD_8.marker_name == "ZeroMod8"
        assert Residue.THREE_MOD_8.marker_name == "ThreeMod8"
        assert Residue.SEVEN_MOD_8.marker_name == "SevenMod8"
        assert len({r.marker_name for r in Residue}) == 8


class TestClassify:
    @pytest.mark.parametrize("total,expected", [
        (0, Residue.ZERO_MOD_8),
        (3, Residue.THREE_MOD_8),
        (8, Residue.ZERO_MOD_8),
        (24, Residue.ZERO_MOD_8),
        (65, Residue.ONE_MOD_8),
        (4160, Residue.ZERO_MOD_8),
        (4159, Residue.SEVEN_MOD_8),
    ])
    def test_known_totals(self, total, expected):
        assert classify(total) is expected

    @given(total=st.integers(min_value=0, max_value=1_000_000))
    def test_total_function(self, total):
        """Every non-negative total maps to exactly one residue."""
        residue = classify(total)
        assert isinstance(residue, Residue)
        assert residue.value == total % 8

    @given(total=st.integers(min_value=0, max_value=1_000_000))
    def test_periodic_in_eight(self, total):
        assert classify(total) is classify(total + 8)

    def test_negative_total_rejected(self):
        with pytest.raises(ValueError):
            classify(-1)
