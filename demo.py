#!/usr/bin/env python3
"""
SROψ Calculator Demo

Walks through the features of the calculator:
1. Landmark ordinals and parsing
2. Ordinal comparison
3. Cofinality classification (dom)
4. Fundamental sequences with diagonal witnesses
5. Display options
6. Order audit over random terms
"""

from sro_psi import (
    parse, render, lt, dom, classify, fund_and_witness, from_nat,
    DisplayOptions, LANDMARKS, InternalInconsistency,
)
from sro_psi.sampling import TermGenerator, check_total_order

SHORT = DisplayOptions.all_abbreviations()


def section(title: str) -> None:
    print("\n" + "═" * 80)
    print(f"  {title}")
    print("═" * 80)


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 1: LANDMARK ORDINALS
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 1: LANDMARK ORDINALS")

print("""
Terms are built from 0, sums, ψ(a,b) and the Mahlo operator M(a):
  1 = ψ(0,0)   ω = ψ(0,1)   Ω = ψ(1,0)   I = ψ(M(0),0)
""")

print("  Landmarks:")
print("  " + "-" * 50)
for name, term in LANDMARKS.items():
    print(f"  {name:12} = {render(term):15} short: {render(term, SHORT)}")

print("\n  Parsing (ASCII stand-ins p, m, w, W, i):")
print("  " + "-" * 50)
for text in ["p(0,w)+3", "ψ_{W}(W)", "m(i)", "ψ_I(0)"]:
    print(f"  {text:12} -> {render(parse(text))}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 2: COMPARISON
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 2: COMPARISON")

comparisons = [("1000", "ω"), ("ω+1", "ω"), ("ψ(0,Ω)", "Ω"), ("I", "M(0)"), ("M(0)", "ψ(M(0),0)")]
for a, b in comparisons:
    result = "✓" if lt(parse(a), parse(b)) else "✗"
    print(f"  {result} {a} < {b}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 3: COFINALITY
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 3: COFINALITY (dom)")

for text in ["0", "5", "ω", "ψ(0,Ω)", "Ω", "ψ(I,0)", "M(1)", "M(0)"]:
    term = parse(text)
    print(f"  dom({text:8}) = {render(dom(term), SHORT):10} ({classify(term).name})")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 4: FUNDAMENTAL SEQUENCES
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 4: FUNDAMENTAL SEQUENCES")

for text in ["ω", "ψ(0,Ω)", "ψ(I,0)", "ψ(0,I)", "M(ω)"]:
    term = parse(text)
    print(f"\n  {text}:")
    for n in range(4):
        result = fund_and_witness(term, from_nat(n))
        print(f"    [{n}] = {render(result.fund, SHORT):24} witness {render(result.witness, SHORT)}")

print("\n  Terms outside the well-formed fragment are reported, not coerced:")
try:
    fund_and_witness(parse("ψ(0,M(0))"), from_nat(1))
except InternalInconsistency as exc:
    print(f"    ψ(0,M(0))[1]: {exc}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 5: DISPLAY OPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 5: DISPLAY OPTIONS")

term = parse("ψ(ω,Ω+1)+I")
variants = [
    ("plain", DisplayOptions()),
    ("ω Ω I", DisplayOptions(omega=True, big_omega=True, iota=True)),
    ("subscript", DisplayOptions(subscript=True)),
    ("braces", DisplayOptions(subscript=True, braces=True)),
    ("all", SHORT),
    ("TeX", DisplayOptions(omega=True, big_omega=True, iota=True, tex=True)),
]
for name, options in variants:
    print(f"  {name:10} {render(term, options)}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 6: ORDER AUDIT
# ═══════════════════════════════════════════════════════════════════════════════

section("SECTION 6: ORDER AUDIT")

terms = TermGenerator(seed=42).sample(80)
report = check_total_order(terms)
print(f"  Sampled terms:            {report.n_terms}")
print(f"  Trichotomy violations:    {report.trichotomy_violations}")
print(f"  Transitivity violations:  {report.transitivity_violations}")

print("\n" + "═" * 80)
print("  DEMO COMPLETE")
print("═" * 80 + "\n")
