"""Tests for discovery detection, formula reveal and pi labels."""

from __future__ import annotations

import math

import pytest

from fourier_explorer.analysis.discovery import find_discoveries, formula_text, revealed_terms
from fourier_explorer.analysis.labels import format_phase_shift, format_pi_labels, format_pi_tick

PI = math.pi


# -----------------------------------------------------------------------
# Discoveries
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "omega, expected",
    [
        (1.0, {"cosine"}),
        (1.04, {"cosine"}),
        (2.0, {"sine"}),
        (3.0, {"cosine", "sine"}),
        (1.5, set()),
        (0.5, set()),
        (1.06, set()),
    ],
)
def test_find_discoveries(omega: float, expected: set) -> None:
    assert find_discoveries(omega) == frozenset(expected)


def test_find_discoveries_custom_tolerance() -> None:
    assert find_discoveries(1.2, tolerance=0.25) == frozenset({"cosine"})


def test_revealed_terms_by_range() -> None:
    assert revealed_terms(0.5) == ()
    assert revealed_terms(1.0) == ("cos(t)",)
    assert revealed_terms(1.9) == ("cos(t)",)
    assert revealed_terms(2.0) == ("cos(t)", "sin(2t)")
    assert revealed_terms(3.0) == ("cos(t)", "sin(2t)", "0.707cos(3t)", "-0.707sin(3t)")


def test_formula_text() -> None:
    assert formula_text(0.5) == "f(t) = ⋯"
    assert formula_text(1.0) == "f(t) = cos(t) + ⋯"
    assert formula_text(2.5) == "f(t) = cos(t) + sin(2t) + ⋯"
    assert formula_text(3.0) == "f(t) = cos(t) + sin(2t) + 0.707cos(3t) - 0.707sin(3t)"


# -----------------------------------------------------------------------
# Labels
# -----------------------------------------------------------------------


def test_format_pi_labels() -> None:
    assert format_pi_labels([0.0, PI, -PI, PI / 2]) == ["0", "π", "-π", "0.50π"]


def test_format_phase_shift() -> None:
    assert format_phase_shift(PI / 4) == "0.250π"
    assert format_phase_shift(0.0) == "0.000π"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0"),
        (0.005, "0"),
        (PI / 2, "π/2"),
        (-3 * PI / 4, "-3π/4"),
        (PI, "π"),
        (-2 * PI, "-2π"),
        (3 * PI, "3π"),
        (-5 * PI, "-5π"),
        (PI / 3, "π/3"),
        (0.4 * PI, "2π/5"),
        (0.43 * PI, "3π/7"),
        (0.06 * PI, "0.06π"),
    ],
)
def test_format_pi_tick(value: float, expected: str) -> None:
    assert format_pi_tick(value) == expected
