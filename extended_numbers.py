'''classes for quaternions and two component octonions over an arbitrary scalar type'''

import numbers

import numpy as np

from scalar_capabilities import (
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    OperandTypeError,
    cast,
    convert,
    infer_scalar_type,
    require_floating,
    sign_of,
    square_root,
    true_divide,
)


class QuaternionNumber:
    '''a + b i + c j + d k with i^2 = j^2 = k^2 = ijk = -1.

    Multiplication does not commute, so division is right division:
    p / q is p * q.reciprocal(). Left division, q.reciprocal() * p, is
    left to the caller.
    '''

    __array_ufunc__ = None

    def __init__(self, real=0, i=0, j=0, k=0, dtype=None):
        self.dtype, self.data = infer_scalar_type((real, i, j, k), dtype)

    @classmethod
    def from_components(cls, components, **kwargs):
        return cls(*components, **kwargs)

    def _new(self, *components):
        result = object.__new__(type(self))
        result.dtype = self.dtype
        result.data = cast(components, self.dtype)
        return result

    def _operand(self, other):
        if isinstance(other, QuaternionNumber):
            if other.dtype != self.dtype:
                raise OperandTypeError("cannot mix QuaternionNumber[%s] and QuaternionNumber[%s]"
                                       % (self.dtype.__name__, other.dtype.__name__))
            return other
        if isinstance(other, numbers.Number):
            return convert(other, self.dtype)
        raise OperandTypeError("Can only combine quaternions with other quaternions "
                               "or with scalars, got %s" % type(other).__name__)

    def _promote(self, other):
        if isinstance(other, QuaternionNumber):
            return other
        return self._new(other, 0, 0, 0)

    @property
    def re(self):
        return self.data[0]

    @property
    def im1(self):
        return self.data[1]

    @property
    def im2(self):
        return self.data[2]

    @property
    def im3(self):
        return self.data[3]

    def __repr__(self):
        return "QuaternionNumber(%r, %r, %r, %r)" % self.data

    def equals(self, other):
        other = self._promote(self._operand(other))
        return all(bool(a == b) for a, b in zip(self.data, other.data))

    def __eq__(self, other):
        if not isinstance(other, (QuaternionNumber, numbers.Number)):
            return NotImplemented
        try:
            return self.equals(other)
        except OperandTypeError:
            # different scalar types are never equal
            return NotImplemented

    def __hash__(self):
        # equal to a real scalar, so hash like one
        if not any(self.data[1:]):
            return hash(self.data[0])
        return hash((QuaternionNumber, self.data))

    def isclose(self, other, rtol=DEFAULT_RTOL, atol=DEFAULT_ATOL):
        other = self._promote(self._operand(other))
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))

    def to_array(self):
        return np.array(self.data)

    # conjugate of a quaternion
    def conjugate(self):
        a, b, c, d = self.data
        return self._new(a, -b, -c, -d)

    def __neg__(self):
        return self._new(*(-x for x in self.data))

    def __pos__(self):
        return self._new(*self.data)

    def add(self, other):
        other = self._operand(other)
        a, b, c, d = self.data
        if isinstance(other, QuaternionNumber):
            return self._new(*(x + y for x, y in zip(self.data, other.data)))
        return self._new(a + other, b, c, d)

    def subtract(self, other):
        other = self._operand(other)
        a, b, c, d = self.data
        if isinstance(other, QuaternionNumber):
            return self._new(*(x - y for x, y in zip(self.data, other.data)))
        return self._new(a - other, b, c, d)

    def multiply(self, other):
        '''Hamilton product self * other; other * self is generally different.'''
        other = self._operand(other)
        a, b, c, d = self.data
        if not isinstance(other, QuaternionNumber):
            return self._new(a * other, b * other, c * other, d * other)
        a2, b2, c2, d2 = other.data
        return self._new(a * a2 - b * b2 - c * c2 - d * d2,
                         a * b2 + b * a2 + c * d2 - d * c2,
                         a * c2 + c * a2 + d * b2 - b * d2,
                         a * d2 + d * a2 + b * c2 - c * b2)

    def norm_squared(self):
        a, b, c, d = self.data
        return a * a + b * b + c * c + d * d

    def norm(self):
        require_floating(self.dtype, "norm")
        return square_root(self.norm_squared(), self.dtype)

    __abs__ = norm

    def reciprocal(self):
        '''conjugate / norm^2; a zero quaternion gives nan components.'''
        require_floating(self.dtype, "reciprocal")
        divisor = self.norm_squared()
        return self._new(*(true_divide(x, divisor, self.dtype) for x in self.conjugate().data))

    def divide(self, other):
        require_floating(self.dtype, "division")
        other = self._operand(other)
        if isinstance(other, QuaternionNumber):
            return self.multiply(other.reciprocal())
        return self._new(*(true_divide(x, other, self.dtype) for x in self.data))

    __add__ = add
    __radd__ = add
    __sub__ = subtract
    __mul__ = multiply
    # a scalar commutes with every quaternion
    __rmul__ = multiply
    __truediv__ = divide

    def __rsub__(self, other):
        other = self._operand(other)
        a, b, c, d = self.data
        return self._new(other - a, -b, -c, -d)

    def __rtruediv__(self, other):
        require_floating(self.dtype, "division")
        return self.reciprocal().multiply(self._operand(other))


class OctonionNumber:
    '''Two component "octonion": a + b e with e^2 = -1.

    This is the same algebra as ComplexNumber without the display options,
    not the eight dimensional Cayley-Dickson octonion.
    '''

    __array_ufunc__ = None

    def __init__(self, real=0, imaginary=0, dtype=None):
        self.dtype, self.data = infer_scalar_type((real, imaginary), dtype)

    @classmethod
    def from_components(cls, components, **kwargs):
        return cls(*components, **kwargs)

    def _new(self, *components):
        result = object.__new__(type(self))
        result.dtype = self.dtype
        result.data = cast(components, self.dtype)
        return result

    def _operand(self, other):
        if isinstance(other, OctonionNumber):
            if other.dtype != self.dtype:
                raise OperandTypeError("cannot mix OctonionNumber[%s] and OctonionNumber[%s]"
                                       % (self.dtype.__name__, other.dtype.__name__))
            return other
        if isinstance(other, numbers.Number):
            return convert(other, self.dtype)
        raise OperandTypeError("Can only combine octonions with other octonions "
                               "or with scalars, got %s" % type(other).__name__)

    def _promote(self, other):
        if isinstance(other, OctonionNumber):
            return other
        return self._new(other, 0)

    @property
    def re(self):
        return self.data[0]

    @property
    def im(self):
        return self.data[1]

    def __repr__(self):
        return "OctonionNumber(%r, %r)" % self.data

    def equals(self, other):
        other = self._promote(self._operand(other))
        return bool(self.data[0] == other.data[0]) and bool(self.data[1] == other.data[1])

    def __eq__(self, other):
        if not isinstance(other, (OctonionNumber, numbers.Number)):
            return NotImplemented
        try:
            return self.equals(other)
        except OperandTypeError:
            # different scalar types are never equal
            return NotImplemented

    def __hash__(self):
        # equal to a real scalar, so hash like one
        if not any(self.data[1:]):
            return hash(self.data[0])
        return hash((OctonionNumber, self.data))

    def isclose(self, other, rtol=DEFAULT_RTOL, atol=DEFAULT_ATOL):
        other = self._promote(self._operand(other))
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))

    def to_array(self):
        return np.array(self.data)

    def conjugate(self):
        return self._new(self.data[0], -self.data[1])

    def __neg__(self):
        return self._new(-self.data[0], -self.data[1])

    def __pos__(self):
        return self._new(*self.data)

    def add(self, other):
        other = self._operand(other)
        if isinstance(other, OctonionNumber):
            return self._new(self.data[0] + other.data[0], self.data[1] + other.data[1])
        return self._new(self.data[0] + other, self.data[1])

    def subtract(self, other):
        other = self._operand(other)
        if isinstance(other, OctonionNumber):
            return self._new(self.data[0] - other.data[0], self.data[1] - other.data[1])
        return self._new(self.data[0] - other, self.data[1])

    def multiply(self, other):
        other = self._operand(other)
        a, b = self.data
        if isinstance(other, OctonionNumber):
            c, d = other.data
            return self._new(a * c - b * d, a * d + b * c)
        return self._new(a * other, b * other)

    def divide(self, other):
        require_floating(self.dtype, "division")
        other = self._operand(other)
        a, b = self.data
        if not isinstance(other, OctonionNumber):
            return self._new(true_divide(a, other, self.dtype), true_divide(b, other, self.dtype))
        c, d = other.data
        divisor = c * c + d * d
        return self._new(true_divide(a * c + b * d, divisor, self.dtype),
                         true_divide(b * c - a * d, divisor, self.dtype))

    __add__ = add
    __radd__ = add
    __sub__ = subtract
    __mul__ = multiply
    __rmul__ = multiply
    __truediv__ = divide

    def __rsub__(self, other):
        other = self._operand(other)
        return self._new(other - self.data[0], -self.data[1])

    def __rtruediv__(self, other):
        require_floating(self.dtype, "division")
        return self._promote(self._operand(other)).divide(self)

    def norm_squared(self):
        a, b = self.data
        return a * a + b * b

    def norm(self):
        require_floating(self.dtype, "norm")
        return self.dtype(np.hypot(*self.data))

    __abs__ = norm

    # principal square root
    def sqrt(self):
        require_floating(self.dtype, "sqrt")
        a, b = self.data
        common = self.norm()
        gamma = square_root((a + common) / 2, self.dtype)
        delta = sign_of(b) * square_root((common - a) / 2, self.dtype)
        return self._new(gamma, delta)
