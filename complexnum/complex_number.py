import math
import numbers
import re
from typing import Optional

import numpy as np

# ---------- configuration ----------
FLOAT_ERRORS = "ignore"        # numpy error policy: overflow, 0-division, invalid -> inf / nan

# [[fill]align][sign]rest -- used to force the sign of the imaginary part
_FORMAT_SPEC = re.compile(r"(?P<head>(?:.?[<>=^])?)(?P<sign>[-+ ]?)(?P<tail>.*)", re.DOTALL)


def _ieee():
    """Context in which the math primitives follow plain IEEE-754 rules."""
    return np.errstate(all=FLOAT_ERRORS)


def _shortest(value: float, sign: bool = False) -> str:
    """Shortest round-trip positional digits, no exponent and no trailing ``.0``."""
    if not math.isfinite(value):
        # dragon4 drops the sign of nan
        return format(value, "+" if sign else "")
    return np.format_float_positional(value, trim="-", sign=sign)


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real)


class ComplexNumber:
    """
    A complex number ``real + imaginary·i`` stored in rectangular form.

    Constructors
    ------------
    ComplexNumber(a, b)             -> a + b i
    ComplexNumber.with_real(a)      -> a + 0 i
    ComplexNumber.with_imag(b)      -> 0 + b i
    ComplexNumber.from_polar(r, θ)  -> r·e^{iθ}

    Every operation returns a fresh value, except the in-place operators
    (``+=``, ``-=``, ``*=``, ``/=``) which overwrite the receiver.  Nothing
    raises on bad numeric input: division by zero, overflow and logarithms of
    zero come out as ``inf`` / ``nan`` exactly as with plain doubles.
    """

    __slots__ = ("real", "imaginary")

    REAL_UNIT: "ComplexNumber"
    IMAG_UNIT: "ComplexNumber"

    # ---------- construction ----------
    def __init__(self, real: float = 0.0, imaginary: float = 0.0):
        self.real = float(real)
        self.imaginary = float(imaginary)

    @staticmethod
    def new(real: float, imaginary: float) -> "ComplexNumber":
        return ComplexNumber(real, imaginary)

    @staticmethod
    def with_real(real: float) -> "ComplexNumber":
        return ComplexNumber(real, 0.0)

    @staticmethod
    def with_imag(imaginary: float) -> "ComplexNumber":
        return ComplexNumber(0.0, imaginary)

    @staticmethod
    def from_polar(r: float, theta: float) -> "ComplexNumber":
        """Explicit polar constructor."""
        with _ieee():
            return ComplexNumber(r * np.cos(theta), r * np.sin(theta))

    @staticmethod
    def from_complex(value: complex) -> "ComplexNumber":
        return ComplexNumber(value.real, value.imag)

    def copy(self) -> "ComplexNumber":
        return ComplexNumber(self.real, self.imaginary)

    # ---------- basic properties ----------
    def abs(self) -> float:
        """Magnitude, via hypot so large or tiny parts do not over/underflow."""
        with _ieee():
            return float(np.hypot(self.real, self.imaginary))

    def arg(self) -> float:
        """Principal argument in (-π, π]."""
        with _ieee():
            return float(np.arctan2(self.imaginary, self.real))

    def norm(self) -> float:
        """Squared magnitude."""
        return self.real * self.real + self.imaginary * self.imaginary

    def conj(self) -> "ComplexNumber":
        return ComplexNumber(self.real, -self.imaginary)

    def to_polar(self) -> tuple:
        return self.abs(), self.arg()

    def is_nan(self) -> bool:
        return math.isnan(self.real) or math.isnan(self.imaginary)

    def is_infinite(self) -> bool:
        return math.isinf(self.real) or math.isinf(self.imaginary)

    def is_finite(self) -> bool:
        return math.isfinite(self.real) and math.isfinite(self.imaginary)

    def is_close(self, other, *, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        """Component-wise ``math.isclose``; ``==`` is deliberately left as identity."""
        z = self._coerce(other)
        if z is NotImplemented:
            raise TypeError(f"cannot compare ComplexNumber with {type(other).__name__}")
        return (math.isclose(self.real, z.real, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.imaginary, z.imaginary, rel_tol=rel_tol, abs_tol=abs_tol))

    @staticmethod
    def _coerce(other):
        """Promote ``other`` to a ComplexNumber, or NotImplemented."""
        if isinstance(other, ComplexNumber):
            return other
        if isinstance(other, numbers.Real):
            return ComplexNumber(other, 0.0)
        if isinstance(other, numbers.Complex):
            return ComplexNumber.from_complex(other)
        return NotImplemented

    # ---------- arithmetic helpers ----------
    def add(self, other) -> "ComplexNumber":
        if _is_real(other):
            return ComplexNumber(self.real + other, self.imaginary)
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def sub(self, other) -> "ComplexNumber":
        if _is_real(other):
            return ComplexNumber(self.real - other, self.imaginary)
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ComplexNumber(self.real - other.real, self.imaginary - other.imaginary)

    def mul(self, other) -> "ComplexNumber":
        if _is_real(other):
            return ComplexNumber(self.real * other, self.imaginary * other)
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ComplexNumber(self.real * other.real - self.imaginary * other.imaginary,
                             self.real * other.imaginary + self.imaginary * other.real)

    def div(self, other) -> "ComplexNumber":
        a, b = np.float64(self.real), np.float64(self.imaginary)
        if _is_real(other):
            with _ieee():
                d = np.float64(other)
                return ComplexNumber(a / d, b / d)
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        # (a+bi)(c-di) / (c²+d²)
        c, d = np.float64(other.real), np.float64(other.imaginary)
        with _ieee():
            denom = np.float64(other.norm())
            return ComplexNumber((a * c + b * d) / denom, (b * c - a * d) / denom)

    def _assign(self, result) -> "ComplexNumber":
        if result is NotImplemented:
            return result
        self.real, self.imaginary = result.real, result.imaginary
        return self

    def add_assign(self, other) -> "ComplexNumber":
        return self._assign(self.add(other))

    def sub_assign(self, other) -> "ComplexNumber":
        return self._assign(self.sub(other))

    def mul_assign(self, other) -> "ComplexNumber":
        return self._assign(self.mul(other))

    def div_assign(self, other) -> "ComplexNumber":
        return self._assign(self.div(other))

    def neg(self) -> "ComplexNumber":
        return ComplexNumber(-self.real, -self.imaginary)

    # ---------- exponentials & logarithms ----------
    def exp(self) -> "ComplexNumber":
        with _ieee():
            exp_real = np.exp(self.real)
            return ComplexNumber(exp_real * np.cos(self.imaginary),
                                 exp_real * np.sin(self.imaginary))

    def ln(self) -> "ComplexNumber":
        with _ieee():
            return ComplexNumber(np.log(self.abs()), self.arg())

    def log2(self) -> "ComplexNumber":
        with _ieee():
            return ComplexNumber(np.log2(self.abs()), self.arg())

    def log10(self) -> "ComplexNumber":
        with _ieee():
            return ComplexNumber(np.log10(self.abs()), self.arg())

    def log(self, base: float) -> "ComplexNumber":
        with _ieee():
            return ComplexNumber(np.log(self.abs()) / np.log(np.float64(base)), self.arg())

    def sqrt(self) -> "ComplexNumber":
        with _ieee():
            abs_sqrt = np.sqrt(self.abs())
            arg_half = self.arg() / 2.0
            return ComplexNumber(abs_sqrt * np.cos(arg_half), abs_sqrt * np.sin(arg_half))

    def powi(self, n: int) -> "ComplexNumber":
        with _ieee():
            abs_pow = np.power(np.float64(self.abs()), int(n))
            theta = int(n) * self.arg()
            return ComplexNumber(abs_pow * np.cos(theta), abs_pow * np.sin(theta))

    def powf(self, e: float) -> "ComplexNumber":
        with _ieee():
            abs_pow = np.power(np.float64(self.abs()), np.float64(e))
            theta = e * self.arg()
            return ComplexNumber(abs_pow * np.cos(theta), abs_pow * np.sin(theta))

    def powc(self, e: "ComplexNumber") -> "ComplexNumber":
        """``exp(e · ln(self))``, principal branch of ``ln``."""
        return (self._coerce(e) * self.ln()).exp()

    # ---------- circular & hyperbolic ----------
    def sin(self) -> "ComplexNumber":
        with _ieee():
            return ComplexNumber(np.sin(self.real) * np.cosh(self.imaginary),
                                 np.cos(self.real) * np.sinh(self.imaginary))

    def cos(self) -> "ComplexNumber":
        with _ieee():
            return ComplexNumber(np.cos(self.real) * np.cosh(self.imaginary),
                                 -(np.sin(self.real) * np.sinh(self.imaginary)))

    def tan(self) -> "ComplexNumber":
        return self.sin() / self.cos()

    def sinh(self) -> "ComplexNumber":
        with _ieee():
            return ComplexNumber(np.sinh(self.real) * np.cos(self.imaginary),
                                 np.cosh(self.real) * np.sin(self.imaginary))

    def cosh(self) -> "ComplexNumber":
        with _ieee():
            return ComplexNumber(np.cosh(self.real) * np.cos(self.imaginary),
                                 np.sinh(self.real) * np.sin(self.imaginary))

    def tanh(self) -> "ComplexNumber":
        return self.sinh() / self.cosh()

    # inverse functions: principal values straight from the log identities
    def asin(self) -> "ComplexNumber":
        i = ComplexNumber.IMAG_UNIT
        return -i * (i * self + (ComplexNumber.REAL_UNIT - self * self).sqrt()).ln()

    def acos(self) -> "ComplexNumber":
        i = ComplexNumber.IMAG_UNIT
        return -i * (self + i * (ComplexNumber.REAL_UNIT - self * self).sqrt()).ln()

    def atan(self) -> "ComplexNumber":
        i, one = ComplexNumber.IMAG_UNIT, ComplexNumber.REAL_UNIT
        return i * 0.5 * ((one - i * self) / (one + i * self)).ln()

    def asinh(self) -> "ComplexNumber":
        return (self + (self * self + ComplexNumber.REAL_UNIT).sqrt()).ln()

    def acosh(self) -> "ComplexNumber":
        return (self + (self * self - ComplexNumber.REAL_UNIT).sqrt()).ln()

    def atanh(self) -> "ComplexNumber":
        one = ComplexNumber.REAL_UNIT
        return ((one + self) / (one - self)).ln() * 0.5

    # ---------- rendering ----------
    def to_string(self, precision: Optional[int] = None) -> str:
        """``-1.5+2i`` by default, or with exactly ``precision`` fractional digits."""
        if precision is None:
            return str(self)
        return format(self, f".{int(precision)}f")

    def __str__(self):
        return f"{_shortest(self.real)}{_shortest(self.imaginary, sign=True)}i"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        parts = _FORMAT_SPEC.fullmatch(spec)
        imag_spec = f"{parts['head']}+{parts['tail']}"
        return f"{format(self.real, spec)}{format(self.imaginary, imag_spec)}i"

    def __repr__(self):
        return f"ComplexNumber(real={self.real!r}, imaginary={self.imaginary!r})"

    # ---------- dunder sugar ----------
    def __complex__(self):
        return complex(self.real, self.imaginary)

    def __pos__(self):
        return self.copy()

    def __pow__(self, other, modulo=None):
        if modulo is not None:
            return NotImplemented
        if isinstance(other, numbers.Integral):
            return self.powi(other)
        if isinstance(other, numbers.Real):
            return self.powf(other)
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.powc(other)

    def __rpow__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.powc(self)

    def __radd__(self, other):
        return self.add(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.sub(self)

    def __rmul__(self, other):
        return self.mul(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.div(self)

    __abs__ = abs
    __neg__ = neg
    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __iadd__ = add_assign
    __isub__ = sub_assign
    __imul__ = mul_assign
    __itruediv__ = div_assign


class _ComplexConstant(ComplexNumber):
    """Shared unit value: read-only, so ``+=`` and friends rebind instead of mutating."""

    __slots__ = ()

    def __init__(self, real: float, imaginary: float):
        object.__setattr__(self, "real", float(real))
        object.__setattr__(self, "imaginary", float(imaginary))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self!r} is a constant and cannot be modified")

    # add_assign() and friends hit __setattr__ and raise; the operators fall back to rebinding
    def _rebind(self, other):
        return NotImplemented

    __iadd__ = _rebind
    __isub__ = _rebind
    __imul__ = _rebind
    __itruediv__ = _rebind


ComplexNumber.REAL_UNIT = _ComplexConstant(1.0, 0.0)
ComplexNumber.IMAG_UNIT = _ComplexConstant(0.0, 1.0)

REAL_UNIT = ComplexNumber.REAL_UNIT
IMAG_UNIT = ComplexNumber.IMAG_UNIT


if __name__ == "__main__":
    z1 = ComplexNumber(3, 4)                      # 3 + 4i
    z2 = ComplexNumber.from_polar(2, math.pi / 4)  # 2·e^{iπ/4}
    print(z1.abs())                               # 5.0
    print(z1 + ComplexNumber(1, -2))              # 4+2i
    print(z1 * ComplexNumber(1, -2))              # 11-2i
    print(IMAG_UNIT * IMAG_UNIT)                  # -1+0i
    print(format(z1 / z2, ".3f"))                 # division, 3 decimals
    print(z1.sqrt(), z1.ln().exp())               # principal branch round trip
    print(ComplexNumber(1, 0) / ComplexNumber(0, 0))  # nan+nani, nothing raised
