'''Scalar types that the hypercomplex number classes are built over.

Every number keeps its components in one scalar type T. Addition,
subtraction and multiplication work for any numeric T; division, norms and
square roots need a floating T (python float or a numpy floating type).
'''

import logging
import numbers
from typing import Final

import numpy as np

logger = logging.getLogger(__name__)

# same defaults as np.allclose
DEFAULT_RTOL: Final[float] = 1e-05
DEFAULT_ATOL: Final[float] = 1e-08

# python literals adapt to the scalar type of the value they meet
_WEAK_TYPES = (int, float)


class HypercomplexError(Exception):
    pass


class ScalarCapabilityError(HypercomplexError, TypeError):
    '''The scalar type cannot do true division or elementary functions.'''


class OperandTypeError(HypercomplexError, TypeError):
    '''Scalar types or algebra types were mixed.'''


def is_floating(scalar_type):
    return issubclass(scalar_type, (float, np.floating))


def require_floating(scalar_type, operation):
    if not is_floating(scalar_type):
        raise ScalarCapabilityError(
            "%s needs a floating scalar type, got %s" % (operation, scalar_type.__name__))


def _is_weak(value):
    return type(value) in _WEAK_TYPES


def _check_numeric(value):
    if not isinstance(value, numbers.Number):
        raise OperandTypeError("%r is not a number" % (value,))


def convert(value, scalar_type):
    '''Bring a component or scalar operand to ``scalar_type``.

    Values already of ``scalar_type`` pass through. Python ints convert to
    any scalar type, python floats only to floating ones. Anything else is
    a mix of scalar types and is rejected.
    '''
    _check_numeric(value)
    if type(value) is scalar_type:
        return value
    if type(value) is int or (type(value) is float and is_floating(scalar_type)):
        return scalar_type(value)
    raise OperandTypeError(
        "cannot mix scalar types %s and %s" % (type(value).__name__, scalar_type.__name__))


def infer_scalar_type(components, dtype=None):
    '''Pick the scalar type for ``components`` and return it with the
    converted components as a tuple.'''
    for value in components:
        _check_numeric(value)

    if dtype is None:
        strong = {type(value) for value in components if not _is_weak(value)}
        if len(strong) > 1:
            names = ", ".join(sorted(t.__name__ for t in strong))
            raise OperandTypeError("components mix scalar types: %s" % names)
        if strong:
            dtype = strong.pop()
        elif any(type(value) is float for value in components):
            dtype = float
        else:
            dtype = int

    return dtype, tuple(convert(value, dtype) for value in components)


def cast(values, scalar_type):
    # numpy can widen mixed-width results; pin them back to T
    return tuple(scalar_type(value) for value in values)


def true_divide(numerator, denominator, scalar_type):
    # IEEE semantics: x/0 gives inf or nan instead of raising
    if denominator == 0:
        logger.debug("dividing %r by zero gives a non-finite result", numerator)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return scalar_type(np.true_divide(numerator, denominator))


def square_root(value, scalar_type):
    with np.errstate(invalid="ignore"):
        return scalar_type(np.sqrt(value))


def sign_of(value):
    '''-1 when value is negative, including negative zero, else +1.'''
    return -1 if np.signbit(value) else 1
