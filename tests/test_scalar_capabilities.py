"""
Tests for scalar_capabilities

Checks:
1. Scalar type inference and literal conversion
2. Capability gating of division and elementary functions
3. IEEE behaviour of division by zero
"""

import logging
import math
from fractions import Fraction

import numpy as np
import pytest

from scalar_capabilities import (
    HypercomplexError,
    OperandTypeError,
    ScalarCapabilityError,
    convert,
    infer_scalar_type,
    is_floating,
    require_floating,
    sign_of,
    square_root,
    true_divide,
)


class TestInferScalarType:
    """Tests for infer_scalar_type"""

    def test_int_literals_give_int(self) -> None:
        assert infer_scalar_type((1, 2)) == (int, (1, 2))

    def test_any_float_literal_gives_float(self) -> None:
        dtype, values = infer_scalar_type((1, 2.5))
        assert dtype is float
        assert values == (1.0, 2.5)
        assert all(type(v) is float for v in values)

    def test_literals_follow_numpy_component(self) -> None:
        dtype, values = infer_scalar_type((np.float32(1.5), 2, 0.5))
        assert dtype is np.float32
        assert all(type(v) is np.float32 for v in values)

    def test_explicit_dtype(self) -> None:
        dtype, values = infer_scalar_type((0, 0), np.float32)
        assert dtype is np.float32
        assert values == (np.float32(0), np.float32(0))

    def test_fraction_accepts_int_literals(self) -> None:
        dtype, values = infer_scalar_type((Fraction(1, 2), 3))
        assert dtype is Fraction
        assert values == (Fraction(1, 2), Fraction(3))

    def test_mixed_numpy_types_rejected(self) -> None:
        with pytest.raises(OperandTypeError):
            infer_scalar_type((np.float32(1), np.float64(1)))

    def test_float_literal_not_truncated_into_fraction(self) -> None:
        with pytest.raises(OperandTypeError):
            infer_scalar_type((Fraction(1, 2), 0.5))

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(OperandTypeError):
            infer_scalar_type((1, "2"))


class TestConvert:
    """Tests for convert"""

    def test_same_type_passes_through(self) -> None:
        value = np.float64(2.0)
        assert convert(value, np.float64) is value

    def test_float_literal_into_int_rejected(self) -> None:
        with pytest.raises(OperandTypeError):
            convert(2.5, int)

    def test_numpy_scalar_into_python_float_rejected(self) -> None:
        with pytest.raises(OperandTypeError):
            convert(np.float32(1.0), float)


class TestCapabilities:
    """Tests for is_floating and require_floating"""

    @pytest.mark.parametrize("scalar_type", [float, np.float16, np.float32, np.float64])
    def test_floating_types(self, scalar_type) -> None:
        assert is_floating(scalar_type)
        require_floating(scalar_type, "division")

    @pytest.mark.parametrize("scalar_type", [int, np.int64, Fraction, bool])
    def test_non_floating_types(self, scalar_type) -> None:
        assert not is_floating(scalar_type)
        with pytest.raises(ScalarCapabilityError, match="division"):
            require_floating(scalar_type, "division")

    def test_capability_error_hierarchy(self) -> None:
        assert issubclass(ScalarCapabilityError, HypercomplexError)
        assert issubclass(ScalarCapabilityError, TypeError)
        assert issubclass(OperandTypeError, TypeError)


class TestElementaryFunctions:
    """Tests for true_divide, square_root and sign_of"""

    def test_division_by_zero_is_infinite(self) -> None:
        assert true_divide(1.0, 0.0, float) == math.inf
        assert true_divide(-1.0, 0.0, float) == -math.inf

    def test_zero_by_zero_is_nan(self) -> None:
        assert math.isnan(true_divide(0.0, 0.0, float))

    def test_result_keeps_scalar_type(self) -> None:
        assert type(true_divide(1.0, 4.0, float)) is float
        assert type(true_divide(np.float32(1), np.float32(4), np.float32)) is np.float32

    def test_division_by_zero_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="scalar_capabilities"):
            true_divide(1.0, 0.0, float)
        assert "by zero" in caplog.text

    def test_square_root_of_negative_is_nan(self) -> None:
        assert math.isnan(square_root(-1.0, float))
        assert square_root(9.0, float) == 3.0

    def test_sign_of_negative_zero(self) -> None:
        assert sign_of(-0.0) == -1
        assert sign_of(0.0) == 1
        assert sign_of(-2.5) == -1
        assert sign_of(np.float32(3)) == 1
