"""Exact decimal amounts that may also be unset ("nil")."""

from __future__ import annotations

import math
import operator
import re
from decimal import ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_UP, Context, Decimal
from typing import Any, Callable, Iterable, Optional, Tuple

DIVISION_PRECISION = 16
DEFAULT_ROUND_PLACES = 12

_CTX = Context(prec=2000, Emax=999_999_999, Emin=-999_999_999)
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NULL = "null"


class DecScanError(TypeError):
    """Raised when a value of an unsupported type is scanned into a Dec."""

    def __init__(self, message: str = "expected bytes when scanning decimal field") -> None:
        super().__init__(message)


def abs_value(x):
    """Return the absolute value of a number."""
    return -x if x < 0 else x


def _parse(text: str) -> Decimal:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"can't convert {text} to decimal")
    return _CTX.create_decimal(text)


def _from_float(n: float) -> Decimal:
    n = float(n)
    if math.isnan(n) or math.isinf(n):
        raise ValueError(f"cannot create a decimal from {n!r}")
    value = Decimal(repr(n))
    if value == value.to_integral_value():
        value = value.quantize(Decimal(1), context=_CTX)
    if not value:
        value = Decimal(0)
    return value


class Dec:
    """An immutable decimal number that is either set or nil."""

    __slots__ = ("_value", "_isset")

    def __init__(self, value: Optional[Decimal] = None) -> None:
        self._isset = value is not None
        self._value = Decimal(0) if value is None else Decimal(value)

    @classmethod
    def _of(cls, value: Decimal, isset: bool) -> "Dec":
        dec = cls.__new__(cls)
        dec._value = value
        dec._isset = isset
        return dec

    # --- construction from external representations -------------------

    @classmethod
    def scan(cls, value: Any) -> "Dec":
        """Build a Dec from a database value (None, bytes, str, float or int)."""
        if value is None:
            return cls._of(Decimal(0), False)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls._of(_parse(bytes(value).decode()), True)
        if isinstance(value, str):
            return cls._of(_parse(value), True)
        if isinstance(value, float):
            return cls._of(_from_float(value), True)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls._of(Decimal(value), True)
        raise DecScanError()

    @classmethod
    def from_json(cls, data: Any) -> "Dec":
        """Decode a JSON fragment: null, a quoted number or a bare number."""
        if isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data).decode()
        text = str(data)
        if text == _NULL:
            return cls._of(Decimal(0), False)
        if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
            text = text[1:-1]
        return cls._of(_parse(text), True)

    def to_json(self) -> str:
        """Encode as JSON: null when unset, a quoted string otherwise."""
        if not self._isset:
            return _NULL
        return f'"{self._str_value()}"'

    # --- comparison ----------------------------------------------------

    def equal(self, other: "Dec") -> bool:
        if self._isset != other._isset:
            return False
        return self._value == other._value

    def not_equals(self, other: "Dec") -> bool:
        return not self.equal(other)

    def greater_than(self, other: "Dec") -> bool:
        return self._value > other._value

    def greater_than_or_equal(self, other: "Dec") -> bool:
        return self._value >= other._value

    def less_than(self, other: "Dec") -> bool:
        return self._value < other._value

    def less_than_or_equal(self, other: "Dec") -> bool:
        return self._value <= other._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dec):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash((self._isset, self._value))

    def __lt__(self, other: "Dec") -> bool:
        return self.less_than(other)

    def __le__(self, other: "Dec") -> bool:
        return self.less_than_or_equal(other)

    def __gt__(self, other: "Dec") -> bool:
        return self.greater_than(other)

    def __ge__(self, other: "Dec") -> bool:
        return self.greater_than_or_equal(other)

    # --- arithmetic ----------------------------------------------------

    def add(self, other: "Dec") -> "Dec":
        return Dec._of(_CTX.add(self._value, other._value), self._isset)

    def add_or(self, other: "Dec") -> "Dec":
        """Add when set; otherwise return ``other``."""
        return self.add(other) if self._isset else other

    def sub(self, other: "Dec") -> "Dec":
        return Dec._of(_CTX.subtract(self._value, other._value), self._isset)

    def mul(self, other: "Dec") -> "Dec":
        return Dec._of(_CTX.multiply(self._value, other._value), self._isset)

    def mod(self, other: "Dec") -> "Dec":
        if not other._value:
            raise ZeroDivisionError("decimal division by zero")
        return Dec._of(_CTX.remainder(self._value, other._value), self._isset)

    def div(self, other: "Dec") -> "Dec":
        """Divide, rounding half away from zero to 16 decimal places."""
        if not other._value:
            raise ZeroDivisionError("decimal division by zero")
        quotient = _CTX.divide(self._value, other._value)
        quotient = quotient.quantize(
            Decimal(1).scaleb(-DIVISION_PRECISION), rounding=ROUND_HALF_UP, context=_CTX
        )
        return Dec._of(quotient, self._isset)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __mod__ = mod
    __truediv__ = div

    def percent(self) -> "Dec":
        """Treat the value as a percentage and return it as a fraction."""
        return self.div(ONE_HUNDRED)

    def add_percent(self, p: "Dec") -> "Dec":
        return self.add(self.apply_percent(p))

    def sub_percent(self, p: "Dec") -> "Dec":
        return self.sub(self.apply_percent(p))

    def apply_percent(self, p: "Dec") -> "Dec":
        return self.mul(p.percent())

    def inverse(self) -> "Dec":
        return ONE.div(self)

    # --- inspection ----------------------------------------------------

    def exponent(self) -> int:
        return self._value.as_tuple().exponent

    def number_of_decimals(self) -> int:
        f, _ = self.to_float()
        return abs_value(new_dec_from_float(f).exponent())

    def clone(self) -> "Dec":
        return Dec._of(self._value, self._isset)

    def neg(self) -> "Dec":
        return Dec._of(-self._value, self._isset)

    __neg__ = neg

    def must_neg(self) -> "Dec":
        """Return the value made non-positive."""
        if self._value < 0:
            return Dec._of(self._value, self._isset)
        return Dec._of(-self._value, self._isset)

    def must_pos(self) -> "Dec":
        """Return the value made non-negative."""
        if self._value < 0:
            return Dec._of(-self._value, self._isset)
        return Dec._of(self._value, self._isset)

    def is_nil(self) -> bool:
        return not self._isset

    def isset(self) -> bool:
        return self._isset

    def abs(self) -> "Dec":
        return Dec._of(abs(self._value), self._isset)

    __abs__ = abs

    def floor(self) -> "Dec":
        return Dec._of(self._value.to_integral_value(rounding=ROUND_FLOOR), self._isset)

    def to_float(self) -> Tuple[float, bool]:
        """Return the value as a float and whether that float is exact."""
        if not self._isset:
            return 0.0, True
        f = float(self._value)
        return f, Decimal(f) == self._value

    def _str_value(self) -> str:
        if not self._value:
            return "0"
        text = format(self._value, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    def __str__(self) -> str:
        if not self._isset:
            return _NULL
        return self._str_value()

    def __repr__(self) -> str:
        return f"Dec({str(self)!r})"

    def latin_string(self) -> str:
        """Return the text form with a comma as decimal separator."""
        return str(self).replace(".", ",")

    def value(self) -> Optional[str]:
        """Return the value as stored in a database: text, or None when unset."""
        return self._str_value() if self._isset else None

    def to_postgres(self) -> Optional[str]:
        return self.value()

    def is_positive(self) -> bool:
        return self._isset and self._value > 0

    def is_positive_or_zero(self) -> bool:
        return self._isset and not self._value < 0

    def is_negative_or_zero(self) -> bool:
        return self._isset and not self._value > 0

    def int_part(self) -> int:
        return int(self._value) if self._isset else 0

    def is_negative(self) -> bool:
        return self._isset and self._value < 0

    def is_zero(self) -> bool:
        return self._isset and not self._value

    def if_nil_or_zero_then(self, other: "Dec") -> "Dec":
        return self.map(lambda dec: other if not dec.isset() or dec.is_zero() else dec)

    def map(self, fn: Callable[["Dec"], "Dec"]) -> "Dec":
        return fn(self)

    def is_lower_than_zero(self) -> bool:
        return self._isset and self._value < 0

    def is_greater_than_zero(self) -> bool:
        return self._isset and self._value > 0

    def is_lower_than_or_equals_zero(self) -> bool:
        return not self.is_greater_than_zero()

    def truncate(self, precision: int) -> "Dec":
        """Drop digits beyond ``precision`` decimal places without rounding."""
        value = self._value
        if precision >= 0 and -precision > value.as_tuple().exponent:
            value = value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_DOWN, context=_CTX)
        return Dec._of(value, self._isset)

    def or_else(self, other: "Dec") -> "Dec":
        return self if self._isset else other

    def or_zero(self) -> "Dec":
        return self.or_else(ZERO)

    def match(
        self,
        on_nil: Callable[[], "Dec"],
        on_zero: Callable[[], "Dec"],
        on_value: Callable[[], "Dec"],
    ) -> "Dec":
        if not self._isset:
            return on_nil()
        if not self._value:
            return on_zero()
        return on_value()

    def round(self) -> "Dec":
        return self.round_to(DEFAULT_ROUND_PLACES)

    def round_to(self, places: int) -> "Dec":
        """Round half away from zero to ``places`` decimal places."""
        value = self._value.quantize(
            Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP, context=_CTX
        )
        return Dec._of(value, self._isset)


def new_dec_from_string(text: str) -> Dec:
    """Parse a decimal; raise ValueError when the text is not a number."""
    return Dec._of(_parse(text), True)


def must_dec_from_string(text: str) -> Dec:
    """Parse a decimal, raising ValueError on bad input."""
    return new_dec_from_string(text)


def new_dec_from_int(n: int) -> Dec:
    return Dec._of(Decimal(operator.index(n)), True)


def new_dec_from_float(n: float) -> Dec:
    return Dec._of(_from_float(n), True)


def new_dec_nil() -> Dec:
    return Dec._of(Decimal(0), False)


def new_dec_from_any(num: Any) -> Dec:
    """Build a Dec from an int, float or str."""
    if isinstance(num, bool):
        pass
    elif isinstance(num, int):
        return new_dec_from_int(num)
    elif isinstance(num, float):
        return new_dec_from_float(num)
    elif isinstance(num, str):
        return must_dec_from_string(num)
    raise TypeError("invalid type. The valid types are int, int64, float64 and string")


def must_dec_from_any(num: Any) -> Dec:
    try:
        return new_dec_from_any(num)
    except TypeError as exc:
        raise TypeError(f"MustDecFromAny: {exc}") from exc


def dec_sum(decs: Iterable[Dec]) -> Dec:
    """Add up the given decimals starting from zero."""
    total = ZERO.clone()
    for dec in decs:
        total = total.add(dec)
    return total


ZERO = new_dec_from_int(0)
ONE = new_dec_from_int(1)
MINUS_ONE = new_dec_from_int(-1)
NIL = new_dec_nil()
ONE_HUNDRED = new_dec_from_int(100)