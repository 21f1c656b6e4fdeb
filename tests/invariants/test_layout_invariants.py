"""
Layout Structural Invariants Test Suite

Any failure here means the validator can produce a false accept or a false
reject, and blocks a release.
"""

import pytest

from .layout_invariants import (
    verify_all_invariants,
    verify_backend_agreement,
    verify_catalog_invariants,
    verify_residue_invariants,
)


class TestLayoutInvariants:
    @pytest.mark.parametrize("verifier", [
        verify_catalog_invariants,
        verify_residue_invariants,
        verify_backend_agreement,
    ])
    def test_invariant_group_passes(self, verifier):
        results = verifier()
        failed = [check for check in results["checks"] if not check["passed"]]
        assert results["passed"], f"Invariant violations: {failed}"
        assert results["checks"], "Verifier ran no checks"

    def test_backend_agreement_covers_every_backend(self):
        results = verify_backend_agreement(range(0, 64))
        names = {check["name"] for check in results["checks"]}
        assert names == {
            "gate_no_false_accepts", "gate_no_false_rejects",
            "index_no_false_accepts", "index_no_false_rejects",
        }

    def test_residue_summary(self):
        results = verify_residue_invariants(range(0, 16))
        assert results["summary"]["totals_checked"] == 16
        assert results["summary"]["capability_holders"] == ["ZeroMod8"]

    def test_all_invariants(self):
        assert verify_all_invariants()["passed"]
