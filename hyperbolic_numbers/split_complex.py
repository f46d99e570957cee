r"""Work with hyperbolic (split-complex) numbers.

A *hyperbolic number* is an expression `a + b*h`, where `a` and `b` are
real numbers and `h` is the *hyperbolic unit*, which satisfies

```
h^2 = 1
```

(as opposed to the imaginary unit, whose square is `-1`). Hyperbolic
numbers form a commutative algebra over the reals, which is closely
tied to the geometry of the 2-dimensional Minkowski plane R^(1,1).

The main class provided by this module is `HyperbolicNumber`:

```python
>>> from hyperbolic_numbers.split_complex import HyperbolicNumber, hy

>>> z = HyperbolicNumber(3.0, 2.0)
>>> w = 2.0 - hy

>>> z * w
HyperbolicNumber(4.0, 1.0)

>>> hy * hy
HyperbolicNumber(1, 0)

>>> abs(z)
5.0
```

Note that `abs` returns the *quadratic norm* `a^2 - b^2` of a
hyperbolic number, which is the Minkowski quadratic form. This can be
negative.

Unlike the complex numbers, hyperbolic numbers have zero divisors:
any nonzero number of the form `a + a*h` or `a - a*h` has quadratic
norm zero, and trying to invert such a number raises an
`InvertibilityError`:

```python
>>> HyperbolicNumber(1.0, 1.0).inv()
Traceback (most recent call last):
  ...
hyperbolic_numbers.base.InvertibilityError: 1.0 + 1.0h is not invertible (zero divisor)
```

The sign of the quadratic norm sorts hyperbolic numbers into
*timelike*, *spacelike* and *lightlike* elements, following the usual
terminology for vectors in Minkowski space. Timelike elements can be
written as `r * (cosh(theta) + h * sinh(theta))`, and
`HyperbolicNumber.hyperbolic_angle` recovers the *rapidity* `theta`.

    """

import numbers

import numpy as np

from hyperbolic_numbers import utils
from hyperbolic_numbers.base import InvertibilityError, DomainError


class HyperbolicNumber(numbers.Number):
    """Model for a hyperbolic number `a + b*h`.

    Hyperbolic numbers are immutable, and compare (and hash) by
    value. The components `a` and `b` always have the same scalar
    type.

    """
    __slots__ = ("_a", "_b")

    # numpy scalars should defer to our reflected operators instead of
    # trying to build an object array
    __array_ufunc__ = None

    def __init__(self, a, b=None):
        """
        Parameters
        ----------
        a : numbers.Real
            the real part of this number.
        b : numbers.Real
            the hyperbolic part of this number. If `None`, use zero
            (in the same representation as `a`).

        Raises
        ------
        TypeError
            Raised if `a` or `b` is not a real scalar.

        """
        if b is None:
            a, _ = utils.promote(a, 0)
            b = utils.zero_like(a)

        self._a, self._b = utils.promote(a, b)

    @classmethod
    def from_real(cls, a):
        return cls(a)

    @classmethod
    def zero(cls):
        """Get the additive identity `0 + 0*h`."""
        return cls(0, 0)

    @classmethod
    def one(cls):
        """Get the multiplicative identity `1 + 0*h`."""
        return cls(1, 0)

    @classmethod
    def unit(cls):
        """Get the hyperbolic unit `0 + 1*h`."""
        return cls(0, 1)

    @classmethod
    def from_rapidity(cls, theta, r=1.0):
        """Build the hyperbolic number `r * (cosh(theta) + h*sinh(theta))`.

        For `r > 0`, this is a timelike number whose hyperbolic angle
        is `theta`.

        """
        return cls(r * np.cosh(theta), r * np.sinh(theta))

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    def real_part(self):
        return self._a

    def hyperbolic_part(self):
        return self._b

    def is_zero(self):
        return self._a == 0 and self._b == 0

    def visualize(self):
        """Get the coordinates `(a, b)` of this number in the Minkowski
        plane, e.g. for plotting.

        """
        return (self._a, self._b)

    def __repr__(self):
        return "{}({!r}, {!r})".format(
            self.__class__.__name__, self._a, self._b
        )

    def __str__(self):
        negative = self._b < 0 or (utils.inexact_type(self._b) and
                                   np.signbit(self._b))
        if negative:
            return "{} - {}h".format(self._a, -self._b)
        return "{} + {}h".format(self._a, self._b)

    def __bool__(self):
        return not self.is_zero()

    def __hash__(self):
        if self._b == 0:
            return hash(self._a)
        return hash((self._a, self._b))

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other

        return self._a == other._a and self._b == other._b

    def isclose(self, other, rtol=utils.numerical.RTOL,
                atol=utils.numerical.ATOL):
        """Determine whether this number agrees with another up to a
        tolerance.

        Equality (`==`) of hyperbolic numbers is always exact. Use
        this instead to compare numbers with floating-point
        components.

        Parameters
        ----------
        other : HyperbolicNumber or numbers.Real
            number to compare to. Real scalars are treated as
            hyperbolic numbers with zero hyperbolic part.
        rtol, atol : float
            relative and absolute tolerance, as in `numpy.allclose`.

        """
        other = _as_hyperbolic(other)
        return utils.numerical.pairs_close(self.visualize(),
                                           other.visualize(),
                                           rtol=rtol, atol=atol)

    # arithmetic

    def __pos__(self):
        return self

    def __neg__(self):
        return HyperbolicNumber(-self._a, -self._b)

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other

        return HyperbolicNumber(self._a + other._a, self._b + other._b)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other

        return HyperbolicNumber(self._a - other._a, self._b - other._b)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other

        return other - self

    def __mul__(self, other):
        if utils.is_real_scalar(other):
            return HyperbolicNumber(self._a * other, self._b * other)

        if not isinstance(other, HyperbolicNumber):
            return NotImplemented

        #expand (a1 + b1*h)(a2 + b2*h) using h^2 = 1
        return HyperbolicNumber(self._a * other._a + self._b * other._b,
                                self._a * other._b + self._b * other._a)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if utils.is_real_scalar(other):
            return HyperbolicNumber(self._a / other, self._b / other)

        if not isinstance(other, HyperbolicNumber):
            return NotImplemented

        return self * other.inv()

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other

        return other * self.inv()

    def __pow__(self, exponent):
        """Raise this number to an integer power.

        Negative powers are computed from the inverse, so they raise
        `InvertibilityError` for zero divisors.

        """
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented

        base = self
        if exponent < 0:
            base = self.inv()
            exponent = -exponent

        result = HyperbolicNumber(utils.one_like(base._a),
                                  utils.zero_like(base._b))
        while exponent:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            if exponent:
                base = base * base

        return result

    def conj(self):
        """Get the hyperbolic conjugate `a - b*h`."""
        return HyperbolicNumber(self._a, -self._b)

    def quadratic_norm(self):
        """Get the quadratic (Minkowski) norm `a^2 - b^2`.

        This is not a metric norm: it can be zero for nonzero numbers,
        and negative.

        For floating point components with large magnitude, `a^2 - b^2`
        can overflow to `inf - inf = nan`. The sign of the norm (used
        by `is_unit`, `inv` and the classification methods) is computed
        from the factors `a - b` and `a + b` instead, so it is reliable
        whenever those are finite.

        """
        return self._a * self._a - self._b * self._b

    def _norm_sign(self):
        #sign of (a - b)(a + b), or None if a factor is nan
        diff = self._a - self._b
        total = self._a + self._b
        if diff == 0 or total == 0:
            return 0
        if (diff > 0 and total > 0) or (diff < 0 and total < 0):
            return 1
        if (diff > 0 and total < 0) or (diff < 0 and total > 0):
            return -1
        return None

    def __abs__(self):
        return self.quadratic_norm()

    def is_unit(self):
        """Determine whether this number is invertible, i.e. has nonzero
        quadratic norm.

        """
        return self._norm_sign() != 0

    def inv(self):
        """Get the multiplicative inverse `conj(z) / abs(z)`.

        Raises
        ------
        InvertibilityError
            Raised if this number is a zero divisor.

        """
        if self._norm_sign() == 0:
            raise InvertibilityError(self)

        #divide by the factors of the norm one at a time to avoid
        #overflow
        diff = self._a - self._b
        total = self._a + self._b
        return HyperbolicNumber(self._a / diff / total,
                                -self._b / diff / total)

    # Minkowski geometry

    def is_timelike(self):
        return self._norm_sign() == 1

    def is_spacelike(self):
        return self._norm_sign() == -1

    def is_lightlike(self):
        """Determine whether this number is a nonzero element of the
        light cone `a = +-b`. The zero element is not lightlike.

        """
        return self._norm_sign() == 0 and not self.is_zero()

    def lorentz_inner(self, other):
        """Compute the Lorentzian inner product `a1*a2 - b1*b2` with
        another hyperbolic number.

        """
        other = _as_hyperbolic(other)
        return self._a * other._a - self._b * other._b

    def hyperbolic_angle(self):
        """Get the hyperbolic angle (rapidity) of a timelike number.

        If this number is `r * (cosh(theta) + h*sinh(theta))`, return
        `theta`.

        Raises
        ------
        DomainError
            Raised if this number is not timelike.
        TypeError
            Raised if the components of this number are not floating
            point numbers.

        """
        if not self.is_timelike() or self._a == 0:
            raise DomainError(
                self,
                "Hyperbolic angle is only defined for timelike elements,"
                " got {}".format(self)
            )

        _check_inexact(self, "hyperbolic_angle")

        return np.arctanh(self._b / self._a)

    # elementary functions

    def exp(self):
        _check_inexact(self, "exp")

        exp_a = np.exp(self._a)
        return HyperbolicNumber(exp_a * np.cosh(self._b),
                                exp_a * np.sinh(self._b))

    def sinh(self):
        _check_inexact(self, "sinh")

        return HyperbolicNumber(np.sinh(self._a) * np.cosh(self._b),
                                np.cosh(self._a) * np.sinh(self._b))

    def cosh(self):
        _check_inexact(self, "cosh")

        return HyperbolicNumber(np.cosh(self._a) * np.cosh(self._b),
                                np.sinh(self._a) * np.sinh(self._b))

def _coerce(value):
    if isinstance(value, HyperbolicNumber):
        return value
    if utils.is_real_scalar(value):
        return HyperbolicNumber.from_real(value)

    return NotImplemented

def _as_hyperbolic(value):
    coerced = _coerce(value)
    if coerced is NotImplemented:
        raise TypeError(
            "Expected a hyperbolic number or a real scalar, got an object"
            " of type {}".format(type(value).__name__)
        )
    return coerced

def _check_inexact(z, function_name):
    #we refuse to guess a floating point type for exact scalars
    if not (utils.inexact_type(z.a) and utils.inexact_type(z.b)):
        raise TypeError(
            "{} requires floating point components, got {}".format(
                function_name, type(z.a).__name__
            ))

#the hyperbolic unit. this is safe to share since hyperbolic numbers
#are immutable.
hy = HyperbolicNumber.unit()

def conj(z):
    return z.conj()

def quadratic_norm(z):
    return z.quadratic_norm()

def inv(z):
    return z.inv()

def is_unit(z):
    return z.is_unit()

def is_timelike(z):
    """Determine if a hyperbolic number has positive quadratic norm."""
    return z.is_timelike()

def is_spacelike(z):
    """Determine if a hyperbolic number has negative quadratic norm."""
    return z.is_spacelike()

def is_lightlike(z):
    """Determine if a nonzero hyperbolic number has vanishing quadratic
    norm."""
    return z.is_lightlike()

def lorentz_inner(z1, z2):
    return _as_hyperbolic(z1).lorentz_inner(z2)

def hyperbolic_angle(z):
    return z.hyperbolic_angle()

def exp(z):
    return _as_hyperbolic(z).exp()

def sinh(z):
    return _as_hyperbolic(z).sinh()

def cosh(z):
    return _as_hyperbolic(z).cosh()

def visualize(z):
    return z.visualize()
