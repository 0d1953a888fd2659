"""Detection of analysis frequencies that hit a component of the composite signal.

The composite ``cos(t) + sin(2t) + cos(3t + pi/4)`` has a cosine component at
w = 1 and 3 and a sine component at w = 2 and 3. When the slider lands on one of
these, the corresponding coefficient chart is flagged and one more term of the
formula is revealed.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

DISCOVERY_TOLERANCE = 0.05

COSINE_FREQUENCIES: Tuple[float, ...] = (1.0, 3.0)
SINE_FREQUENCIES: Tuple[float, ...] = (2.0, 3.0)

# (threshold, terms revealed once w >= threshold)
_REVEAL_STEPS: Tuple[Tuple[float, Tuple[str, ...]], ...] = (
    (1.0, ("cos(t)",)),
    (2.0, ("cos(t)", "sin(2t)")),
    (3.0, ("cos(t)", "sin(2t)", "0.707cos(3t)", "-0.707sin(3t)")),
)


def find_discoveries(omega: float, tolerance: float = DISCOVERY_TOLERANCE) -> FrozenSet[str]:
    """Return the bases (``"cosine"``, ``"sine"``) with a matching component at ``omega``."""
    found = set()
    if any(abs(omega - f) < tolerance for f in COSINE_FREQUENCIES):
        found.add("cosine")
    if any(abs(omega - f) < tolerance for f in SINE_FREQUENCIES):
        found.add("sine")
    return frozenset(found)


def revealed_terms(omega: float) -> Tuple[str, ...]:
    terms: Tuple[str, ...] = ()
    for threshold, step_terms in _REVEAL_STEPS:
        if omega >= threshold:
            terms = step_terms
    return terms


def is_fully_revealed(omega: float) -> bool:
    return len(revealed_terms(omega)) == len(_REVEAL_STEPS[-1][1])


def formula_text(omega: float) -> str:
    """Plain-text formula with the terms discovered so far, e.g. ``f(t) = cos(t) + ⋯``."""
    terms = revealed_terms(omega)
    out = ""
    for i, term in enumerate(terms):
        if i == 0:
            out = term
        elif term.startswith("-"):
            out += f" - {term[1:]}"
        else:
            out += f" + {term}"
    if not is_fully_revealed(omega):
        out = f"{out} + ⋯" if out else "⋯"
    return f"f(t) = {out}"
