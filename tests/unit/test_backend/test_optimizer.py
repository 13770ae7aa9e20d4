"""
Unit tests for constant folding.

This module tests the ConstantFolder class defined in exprc.backend.optimizer.
"""

import math

import pytest
from exprc.backend import ConstantFolder, fold_constants, parse_number
from exprc.ir import Assign, ConstAssign


class TestParseNumber:
    """Tests for operand parsing."""

    def test_numerals(self):
        """Test integer and decimal numerals."""
        assert parse_number("42") == 42.0
        assert parse_number("2.5") == 2.5

    def test_non_numbers(self):
        """Test identifiers, temporaries and absent operands."""
        assert parse_number("x") is None
        assert parse_number("t0") is None
        assert parse_number(None) is None

    def test_non_finite(self):
        """Test that names that parse to non-finite values do not resolve."""
        assert parse_number("inf") is None
        assert parse_number("Infinity") is None
        assert parse_number("nan") is None
        assert parse_number("1e999") is None

    def test_exponent_numerals(self):
        """Test numerals with an exponent part."""
        assert parse_number("1e3") == 1000.0
        assert parse_number("2.5E-1") == 0.25

    @pytest.mark.parametrize("text", ["1_000", "٣", "７", " 3", "3 ", "", "+3", "-3", ".5", "5."])
    def test_non_ascii_numerals(self, text):
        """Test that only plain ASCII numerals resolve."""
        assert parse_number(text) is None

    def test_underscored_operand_not_folded(self, folder):
        """Test that an operand float() would accept is left alone."""
        ir = [Assign("t0", "1_000", "+", "1")]
        assert folder.fold(ir) == ir


class TestFolding:
    """Tests for basic folding."""

    def test_empty(self, folder):
        """Test that an empty list folds to an empty list."""
        assert folder.fold([]) == []

    def test_literal_operands(self, folder):
        """Test folding one instruction with two numerals."""
        assert folder.fold([Assign("t0", "4", "*", "2")]) == [ConstAssign("t0", 8.0)]

    def test_through_temporaries(self, folder):
        """Test that folded temporaries feed later instructions."""
        ir = [Assign("t0", "4", "*", "2"), Assign("t1", "3", "+", "t0")]
        assert [str(i) for i in folder.fold(ir)] == ["t0 = 8", "t1 = 11"]

    @pytest.mark.parametrize("op,expected", [
        ("+", 9.0),
        ("-", 3.0),
        ("*", 18.0),
        ("/", 2.0),
    ])
    def test_each_operator(self, folder, op, expected):
        """Test the arithmetic for every operator."""
        assert folder.fold([Assign("t0", "6", op, "3")]) == [ConstAssign("t0", expected)]

    def test_fractional_result(self, folder):
        """Test a non-integral quotient."""
        assert str(folder.fold([Assign("t0", "7", "/", "2")])[0]) == "t0 = 3.5"


class TestDivisionByZero:
    """Tests for division by zero."""

    def test_positive_dividend(self, folder):
        """Test that x / 0 folds to Infinity."""
        assert str(folder.fold([Assign("t0", "5", "/", "0")])[0]) == "t0 = Infinity"

    def test_zero_dividend(self, folder):
        """Test that 0 / 0 also folds to Infinity."""
        result = folder.fold([Assign("t0", "0", "/", "0.0")])
        assert result == [ConstAssign("t0", math.inf)]

    def test_infinity_propagates(self, folder):
        """Test that infinite temporaries keep folding."""
        ir = [
            Assign("t0", "1", "/", "0"),
            Assign("t1", "1", "/", "0"),
            Assign("t2", "t0", "-", "t1"),
            Assign("t3", "0", "-", "t0"),
        ]
        assert [str(i) for i in folder.fold(ir)] == [
            "t0 = Infinity",
            "t1 = Infinity",
            "t2 = NaN",
            "t3 = -Infinity",
        ]


class TestNonFolding:
    """Tests for instructions that must stay as they are."""

    def test_identifier_operand(self, folder):
        """Test that an identifier blocks folding."""
        ir = [Assign("t0", "1", "+", "2"), Assign("t1", "t0", "*", "x")]
        assert [str(i) for i in folder.fold(ir)] == ["t0 = 3", "t1 = t0 * x"]

    def test_transitive_dependency(self, folder):
        """Test that a temporary derived from an identifier never folds."""
        ir = [Assign("t0", "x", "+", "1"), Assign("t1", "t0", "+", "2")]
        assert folder.fold(ir) == ir

    def test_unknown_temporary(self, folder):
        """Test that a temporary never defined does not resolve."""
        ir = [Assign("t1", "t0", "+", "1")]
        assert folder.fold(ir) == ir

    def test_missing_operand(self, folder):
        """Test that an absent operand does not resolve."""
        ir = [Assign("t0", None, "+", "3")]
        assert folder.fold(ir) == ir

    def test_already_folded_passes_through(self, folder):
        """Test that ConstAssign input is copied and not used for folding."""
        ir = [ConstAssign("t0", 8.0), Assign("t1", "t0", "+", "1")]
        assert folder.fold(ir) == ir

    def test_unknown_operator_passes_through(self, folder):
        """Test that an instruction with a foreign operator is copied."""
        ir = [Assign("t0", "1", "%", "2")]
        assert folder.fold(ir) == ir


class TestFolderPurity:
    """Tests for length preservation and repeatability."""

    def test_length_preserved(self, folder):
        """Test that output length always equals input length."""
        ir = [
            Assign("t0", "1", "+", "2"),
            Assign("t1", "t0", "*", "y"),
            Assign("t2", "t1", "-", "4"),
        ]
        assert len(folder.fold(ir)) == len(ir)

    def test_input_not_mutated(self, folder):
        """Test that folding leaves the input list untouched."""
        ir = [Assign("t0", "4", "*", "2"), Assign("t1", "3", "+", "t0")]
        snapshot = list(ir)
        folder.fold(ir)
        assert ir == snapshot

    def test_repeatable(self, folder):
        """Test that folding the same list twice gives equal results."""
        ir = [Assign("t0", "4", "*", "2"), Assign("t1", "t0", "/", "z")]
        assert folder.fold(ir) == folder.fold(ir)

    def test_fold_constants_function(self):
        """Test the convenience function."""
        assert fold_constants([Assign("t0", "2", "+", "2")]) == [ConstAssign("t0", 4.0)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
