"""
Tests for fundamental sequences and diagonal witnesses.
"""

import pytest

from sro_psi.terms import ZERO, ONE, OMEGA, LOMEGA, MAHLO, IOTA, add, eq, psi, collapse, from_nat, sum_of
from sro_psi.fundamental import fund, fund_and_witness, leading_psi, WitnessSlot, FundamentalResult
from sro_psi.parser import parse
from sro_psi.errors import InternalInconsistency


def fw(a: str, b: str) -> FundamentalResult:
    return fund_and_witness(parse(a), parse(b))


class TestIdentityBranches:
    """Tests for terms whose fundamental sequence returns the index."""

    @pytest.mark.parametrize("b", ["0", "1", "5", "ω", "Ω", "M(0)", "ψ(I,ω)+1"])
    def test_collapse_zero_is_identity(self, b):
        """Test M(0)[b] = b for any b."""
        result = fund_and_witness(parse("M(0)"), parse(b))
        assert eq(result.fund, parse(b))
        assert eq(result.witness, ZERO)

    @pytest.mark.parametrize("b", ["0", "3", "ω", "I"])
    def test_big_omega_is_identity(self, b):
        """Test Ω[b] = b."""
        result = fund_and_witness(LOMEGA, parse(b))
        assert eq(result.fund, parse(b))
        assert eq(result.witness, ZERO)

    def test_zero(self):
        """Test 0[b] = 0."""
        assert eq(fund(ZERO, OMEGA), ZERO)

    def test_one(self):
        """Test 1[b] = b."""
        assert eq(fund(ONE, ZERO), ZERO)
        assert eq(fund(ONE, OMEGA), OMEGA)


class TestOmegaBranches:
    """Tests for cofinality-ω steps."""

    @pytest.mark.parametrize("n", [1, 2, 3, 7])
    def test_omega_at_naturals(self, n):
        """Test ω[n] = n with witness 1."""
        result = fund_and_witness(OMEGA, from_nat(n))
        assert eq(result.fund, from_nat(n))
        assert eq(result.witness, ONE)

    def test_omega_at_limits(self):
        """Test ω[0] = ω[ω] = 0."""
        assert eq(fund(OMEGA, ZERO), ZERO)
        assert eq(fund(OMEGA, OMEGA), ZERO)

    def test_psi_successor_argument(self):
        """Test ψ(a,b+1)[1] = ψ(a,b) with witness ψ(a,b)."""
        result = fw("ψ(1,1)", "1")
        assert eq(result.fund, LOMEGA)
        assert eq(result.witness, LOMEGA)
        assert eq(fw("ψ(0,2)", "1").fund, OMEGA)

    def test_psi_successor_argument_at_limit(self):
        """Test that a limit index gives 0 on a successor argument."""
        result = fw("ψ(1,1)", "ω")
        assert eq(result.fund, ZERO)
        assert eq(result.witness, LOMEGA)

    def test_collapse_successor_inner(self):
        """Test M(1)[1] = M(0) with witness M(0)."""
        result = fw("M(1)", "1")
        assert eq(result.fund, MAHLO)
        assert eq(result.witness, MAHLO)
        assert eq(fw("M(1)", "0").fund, ZERO)
        assert eq(fw("M(1)", "ω").fund, ZERO)


class TestSums:
    """Tests for fundamental sequences of sums."""

    def test_sum_evaluates_last_addend(self):
        """Test (ω+ω)[3] = ω+3."""
        result = fw("ω+ω", "3")
        assert eq(result.fund, parse("ω+3"))
        assert eq(result.witness, ONE)

    def test_sum_predecessor(self):
        """Test (ω+1)[0] = ω."""
        assert eq(fund(add(OMEGA, ONE), ZERO), OMEGA)
        assert eq(fund(from_nat(3), ZERO), from_nat(2))

    def test_sum_with_collapse(self):
        """Test (M(0)+ω)[2] = M(0)+2."""
        result = fw("M(0)+ω", "2")
        assert eq(result.fund, add(MAHLO, from_nat(2)))


class TestPushedIndex:
    """Tests for indices pushed into the subterm carrying the cofinality."""

    def test_collapse_limit_inner(self):
        """Test M(ω)[3] = M(3), with the witness from ω[3]."""
        result = fw("M(ω)", "3")
        assert eq(result.fund, collapse(from_nat(3)))
        assert eq(result.witness, ONE)

    def test_collapse_uncountable_inner(self):
        """Test M(Ω)[ω] = M(ω)."""
        result = fw("M(Ω)", "ω")
        assert eq(result.fund, collapse(OMEGA))
        assert eq(result.witness, ZERO)

    @pytest.mark.parametrize("b", ["0", "2", "ω", "Ω"])
    def test_iota(self, b):
        """Test I[b] = ψ(b,0)."""
        result = fund_and_witness(IOTA, parse(b))
        assert eq(result.fund, psi(parse(b), ZERO))
        assert eq(result.witness, ZERO)

    def test_argument_below_term(self):
        """Test ψ(0,ω)[2] = ψ(0,2)."""
        result = fw("ψ(0,ω)", "2")
        assert eq(result.fund, psi(ZERO, from_nat(2)))
        assert eq(result.witness, ONE)

    def test_subscript_below_term(self):
        """Test ψ(Ω,0)[ω] = ψ(ω,0)."""
        result = fw("ψ(Ω,0)", "ω")
        assert eq(result.fund, psi(OMEGA, ZERO))


class TestDiagonalRefinement:
    """Tests for the diagonalizing branches."""

    def test_psi_zero_big_omega(self):
        """Test ψ(0,Ω)[n]: 1, ω, ψ(0,ω), ψ(0,ψ(0,ω))."""
        s = parse("ψ(0,Ω)")
        expected = ["1", "ω", "ψ(0,ω)", "ψ(0,ψ(0,ω))"]
        for n, text in enumerate(expected):
            result = fund_and_witness(s, from_nat(n))
            assert eq(result.fund, parse(text)), f"ψ(0,Ω)[{n}]"
            assert eq(result.witness, ONE)

    def test_psi_zero_big_omega_at_limit(self):
        """Test ψ(0,Ω)[ω] = 1."""
        assert eq(fw("ψ(0,Ω)", "ω").fund, ONE)

    def test_psi_zero_iota(self):
        """Test ψ(0,I)[n]: ω, ψ(0,Ω), ψ(0,ψ(Ω,0))."""
        s = parse("ψ(0,I)")
        expected = ["ω", "ψ(0,Ω)", "ψ(0,ψ(Ω,0))"]
        for n, text in enumerate(expected):
            result = fund_and_witness(s, from_nat(n))
            assert eq(result.fund, parse(text)), f"ψ(0,I)[{n}]"
            assert eq(result.witness, ONE)

    def test_psi_iota_zero(self):
        """Test ψ(I,0)[n]: Ω, ψ(Ω,0), ψ(ψ(Ω,0),0)."""
        s = parse("ψ(I,0)")
        expected = ["Ω", "ψ(Ω,0)", "ψ(ψ(Ω,0),0)"]
        for n, text in enumerate(expected):
            result = fund_and_witness(s, from_nat(n))
            assert eq(result.fund, parse(text)), f"ψ(I,0)[{n}]"
            assert eq(result.witness, ONE)

    def test_successor_subscript_diagonal(self):
        """Test ψ(ψ(M(0)+1,0),0)[0] = 1 with witness I."""
        result = fw("ψ(ψ(M(0)+1,0),0)", "0")
        assert eq(result.fund, ONE)
        assert eq(result.witness, IOTA)


class TestInconsistency:
    """Tests for terms outside the well-formed fragment."""

    @pytest.mark.parametrize("b", ["0", "1", "ω"])
    def test_collapse_in_psi_argument(self, b):
        """Test that an M term directly in a ψ argument is reported."""
        with pytest.raises(InternalInconsistency):
            fw("ψ(0,M(0))", b)

    def test_non_psi_diagonal(self):
        """Test that a diagonal without a ψ-led part is reported."""
        with pytest.raises(InternalInconsistency) as excinfo:
            fw("ψ(ψ(M(0)+1,0),0)", "1")
        assert eq(excinfo.value.term, ZERO)

    @pytest.mark.parametrize("a", ["ω", "ψ(0,Ω)", "ψ(I,0)", "ψ(0,I)", "M(ω)", "I+Ω"])
    def test_well_formed_terms_never_raise(self, a):
        """Test that landmark terms evaluate at small indices without error."""
        for n in range(4):
            fund_and_witness(parse(a), from_nat(n))


class TestLeadingPsi:
    """Tests for the leading ψ helper."""

    def test_leading_psi(self):
        """Test stripping of leading M wrappers and addends."""
        assert eq(leading_psi(ZERO), ZERO)
        assert eq(leading_psi(OMEGA), OMEGA)
        assert eq(leading_psi(collapse(ONE)), ONE)
        assert eq(leading_psi(add(MAHLO, ONE)), ONE)
        assert eq(leading_psi(collapse(MAHLO)), ZERO)
        assert eq(leading_psi(sum_of([MAHLO, MAHLO, OMEGA])), OMEGA)

    def test_psi_led_sum_returned_whole(self):
        """Test that a sum led by a ψ term is returned unchanged."""
        s = add(ONE, MAHLO)
        assert eq(leading_psi(s), s)


class TestWitnessSlot:
    """Tests for the witness slot."""

    def test_empty_slot(self):
        """Test a fresh slot holds 0."""
        slot = WitnessSlot()
        assert slot.empty
        assert eq(slot.term, ZERO)

    def test_slot_is_per_call(self):
        """Test that witnesses do not leak between calls."""
        assert eq(fund_and_witness(OMEGA, ONE).witness, ONE)
        assert eq(fund_and_witness(MAHLO, ONE).witness, ZERO)

    def test_shared_slot(self):
        """Test that an explicit slot records the first witness."""
        slot = WitnessSlot()
        fund(parse("M(1)"), ONE, slot)
        fund(OMEGA, ONE, slot)
        assert eq(slot.term, MAHLO)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
