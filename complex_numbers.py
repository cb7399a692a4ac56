'''class for complex numbers over an arbitrary scalar type'''

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


class ComplexNumber:
    '''a + b i, with every component of one scalar type ``dtype``.

    ``use_j`` only changes how the number is printed (a + b j, as in
    electrical engineering); it never takes part in arithmetic, equality or
    hashing.

    Integer literals infer an ``int`` dtype, which has no division, norm or
    sqrt; pass float literals or ``dtype=float`` for those, e.g.
    ``ComplexNumber(3, 4, dtype=float).norm() == 5.0``.
    '''

    # numpy scalars on the left hand side defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, real=0, imaginary=0, use_j=False, dtype=None):
        self.dtype, self.data = infer_scalar_type((real, imaginary), dtype)
        self.use_j = use_j

    @classmethod
    def from_components(cls, components, **kwargs):
        return cls(*components, **kwargs)

    def _new(self, *components):
        result = object.__new__(type(self))
        result.dtype = self.dtype
        result.data = cast(components, self.dtype)
        result.use_j = self.use_j
        return result

    def _operand(self, other):
        '''Return other as a ComplexNumber or a scalar of our dtype.'''
        if isinstance(other, ComplexNumber):
            if other.dtype != self.dtype:
                raise OperandTypeError("cannot mix ComplexNumber[%s] and ComplexNumber[%s]"
                                       % (self.dtype.__name__, other.dtype.__name__))
            return other
        if isinstance(other, numbers.Number):
            return convert(other, self.dtype)
        raise OperandTypeError("Can only combine complex numbers with other complex numbers "
                               "or with scalars, got %s" % type(other).__name__)

    @property
    def re(self):
        return self.data[0]

    @property
    def im(self):
        return self.data[1]

    def set_display_symbol(self, use_j=True):
        self.use_j = use_j

    def __repr__(self):
        return "ComplexNumber(%r, %r)" % self.data

    def __str__(self):
        real, imaginary = self.data
        sign = "+" if imaginary >= 0 else "-"
        return "%s%s%s%s" % (real, sign, abs(imaginary), "j" if self.use_j else "i")

    # there is no ordering on complex numbers, only equality
    def equals(self, other):
        other = self._operand(other)
        if not isinstance(other, ComplexNumber):
            other = self._new(other, 0)
        return all(bool(a == b) for a, b in zip(self.data, other.data))

    def __eq__(self, other):
        if not isinstance(other, (ComplexNumber, numbers.Number)):
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
        return hash((ComplexNumber, self.data))

    def isclose(self, other, rtol=DEFAULT_RTOL, atol=DEFAULT_ATOL):
        '''Componentwise comparison within np.allclose tolerances.'''
        other = self._operand(other)
        if not isinstance(other, ComplexNumber):
            other = self._new(other, 0)
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rtol, atol=atol))

    def to_array(self):
        return np.array(self.data)

    def conjugate(self):
        real, imaginary = self.data
        return self._new(real, -imaginary)

    def __neg__(self):
        real, imaginary = self.data
        return self._new(-real, -imaginary)

    def __pos__(self):
        return self._new(*self.data)

    def add(self, other):
        other = self._operand(other)
        a, b = self.data
        if isinstance(other, ComplexNumber):
            c, d = other.data
            return self._new(a + c, b + d)
        return self._new(a + other, b)

    def subtract(self, other):
        other = self._operand(other)
        a, b = self.data
        if isinstance(other, ComplexNumber):
            c, d = other.data
            return self._new(a - c, b - d)
        return self._new(a - other, b)

    def multiply(self, other):
        other = self._operand(other)
        a, b = self.data
        if isinstance(other, ComplexNumber):
            c, d = other.data
            return self._new(a * c - b * d, a * d + b * c)
        return self._new(a * other, b * other)

    def divide(self, other):
        '''Divide by a complex number or a scalar.

        (a + bi) / (c + di) is (a + bi)(c - di) / (c^2 + d^2). A zero divisor
        gives inf/nan components, as floating point division does.
        '''
        require_floating(self.dtype, "division")
        other = self._operand(other)
        a, b = self.data
        if isinstance(other, ComplexNumber):
            c, d = other.data
            divisor = c * c + d * d
            return self._new(true_divide(a * c + b * d, divisor, self.dtype),
                             true_divide(b * c - a * d, divisor, self.dtype))
        return self._new(true_divide(a, other, self.dtype),
                         true_divide(b, other, self.dtype))

    __add__ = add
    __radd__ = add
    __sub__ = subtract
    __mul__ = multiply
    __rmul__ = multiply
    __truediv__ = divide

    def __rsub__(self, other):
        other = self._operand(other)
        real, imaginary = self.data
        return self._new(other - real, -imaginary)

    def __rtruediv__(self, other):
        require_floating(self.dtype, "division")
        return self._new(self._operand(other), 0).divide(self)

    def norm_squared(self):
        real, imaginary = self.data
        return real * real + imaginary * imaginary

    def norm(self):
        require_floating(self.dtype, "norm")
        # hypot avoids the underflow of squaring tiny components
        return self.dtype(np.hypot(*self.data))

    __abs__ = norm

    def sqrt(self):
        '''Principal square root, the root with a non-negative real part.'''
        require_floating(self.dtype, "sqrt")
        real, imaginary = self.data
        common = self.norm()
        gamma = square_root((real + common) / 2, self.dtype)
        # negative zero counts as negative so the branch cut follows the sign
        delta = sign_of(imaginary) * square_root((common - real) / 2, self.dtype)
        return self._new(gamma, delta)
