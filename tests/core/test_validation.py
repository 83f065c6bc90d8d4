"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/complex rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_2d: dimensionality checks
    - check_dimensions / check_nonempty / check_square: shape checks
    - check_same_shape / check_same_rows / check_product_compatible
"""

import numpy as np
import pytest

from pydense.core.exceptions import DimensionError, ValidationError
from pydense.core.validation import (
    check_2d,
    check_array,
    check_dimensions,
    check_finite,
    check_ndim,
    check_nonempty,
    check_product_compatible,
    check_same_rows,
    check_same_shape,
    check_square,
)
from pydense.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "A")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2], dtype=np.int32), "A")
        assert np.issubdtype(result.dtype, np.floating)

    def test_float32_preserved(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "A")
        assert result.dtype == np.float32

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "A")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([["a", "b"], ["c", "d"]], "A")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3], "A")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_ndim
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "A")

    def test_nan_and_inf_counted(self):
        arr = np.array([np.nan, np.inf, 1.0, np.nan])
        with pytest.raises(ValidationError, match=r"2 NaN, 1 Inf"):
            check_finite(arr, "A")


class TestCheckNdim:

    def test_correct_ndim_passes(self):
        check_ndim(np.zeros((2, 2, 2)), 3, "A")

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks on Matrix
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_negative_dimensions_rejected(self):
        with pytest.raises(DimensionError, match="non-negative"):
            check_dimensions(-1, 2, "M")

    def test_zero_dimensions_allowed(self):
        check_dimensions(0, 0, "M")

    def test_nonempty(self):
        check_nonempty(Matrix(1, 1), "M")
        with pytest.raises(DimensionError, match="non-empty"):
            check_nonempty(Matrix(0, 3), "M")

    def test_square(self):
        check_square(Matrix(3, 3), "M")
        with pytest.raises(DimensionError, match="square"):
            check_square(Matrix(2, 3), "M")

    def test_same_shape(self):
        check_same_shape(Matrix(2, 3), Matrix(2, 3), ("a", "b"))
        with pytest.raises(DimensionError, match="a=2x3, b=3x2"):
            check_same_shape(Matrix(2, 3), Matrix(3, 2), ("a", "b"))

    def test_same_rows(self):
        check_same_rows(Matrix(4, 1), Matrix(4, 7), ("a", "b"))
        with pytest.raises(DimensionError):
            check_same_rows(Matrix(4, 1), Matrix(3, 1), ("a", "b"))

    def test_product_compatible(self):
        check_product_compatible(Matrix(2, 3), Matrix(3, 5), ("a", "b"))
        with pytest.raises(DimensionError, match="inner dimensions"):
            check_product_compatible(Matrix(2, 3), Matrix(2, 3), ("a", "b"))
