"""Tests for Flow expression translation."""

import pytest

from flowc.compiler.expressions import PHI_LITERAL, is_float_literal, translate_expr
from flowc.compiler.includes import IncludeSet


def translate(expr: str) -> tuple[str, IncludeSet]:
    includes = IncludeSet()
    return translate_expr(expr, includes), includes


class TestLiterals:
    def test_phi(self):
        out, inc = translate("phi")
        assert out == "1.6180339887498948"
        assert out == PHI_LITERAL
        assert inc == IncludeSet()

    def test_phi_is_trimmed(self):
        assert translate("  phi ")[0] == PHI_LITERAL

    def test_string(self):
        out, inc = translate('"hello world"')
        assert out == 'std::string("hello world")'
        assert inc.string
        assert not inc.iostream and not inc.cmath

    def test_lone_quote_counts_as_string(self):
        out, inc = translate('"')
        assert out == 'std::string(")'
        assert inc.string

    def test_booleans(self):
        assert translate("true")[0] == "true"
        assert translate("false")[0] == "false"

    @pytest.mark.parametrize("num", ["42", "-3.5", "+7", "1e10", "2.5E-3", ".5", "5.", "inf", "NaN"])
    def test_numbers_pass_through(self, num):
        out, inc = translate(num)
        assert out == num
        assert inc == IncludeSet()


class TestFloatLiteral:
    @pytest.mark.parametrize("text", ["0", "3.14", "-0.0", "1e5", "Infinity", "-inf"])
    def test_accepts(self, text):
        assert is_float_literal(text)

    @pytest.mark.parametrize("text", ["", ".", "e5", "1_000", "0x10", "1.2.3", "x1", "١٢"])
    def test_rejects(self, text):
        assert not is_float_literal(text)


class TestPower:
    def test_simple(self):
        out, inc = translate("2 ^ 3")
        assert out == "std::pow(2, 3)"
        assert inc.cmath
        assert not inc.string

    def test_splits_on_first_occurrence(self):
        assert translate("2 ^ 3 ^ 2")[0] == "std::pow(2, std::pow(3, 2))"

    def test_halves_are_translated(self):
        assert translate("phi ^ 2")[0] == f"std::pow({PHI_LITERAL}, 2)"

    def test_right_half_gets_keyword_operators(self):
        assert translate("x ^ y and z")[0] == "std::pow(x, y && z)"

    def test_caret_without_spaces_passes_through(self):
        out, inc = translate("2^3")
        assert out == "2^3"
        assert not inc.cmath


class TestKeywordOperators:
    def test_and_or(self):
        assert translate("a and b or c")[0] == "a && b || c"

    def test_not(self):
        assert translate("not done")[0] == "!done"

    def test_combined(self):
        assert translate("not done and ready or waiting")[0] == "!done && ready || waiting"

    def test_unrecognised_passes_through(self):
        out, inc = translate("foo(1, 2) + bar")
        assert out == "foo(1, 2) + bar"
        assert inc == IncludeSet()
