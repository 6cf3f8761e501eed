"""A small printf-style formatter for the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass
from typing import Any, Iterator

from .numbers import atoi, digit_count

SPECIFIERS = "cspdiuxX%"

_FLAGS = {"-": "minus", "+": "plus", " ": "space", "#": "hash", "0": "zero"}
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class FormatSpec:
    """One conversion: its flags, width, precision and specifier.

    ``precision`` is -1 when none was given; ``specifier`` is empty when the
    conversion character is not one of :data:`SPECIFIERS`.
    """

    minus: bool = False
    plus: bool = False
    space: bool = False
    hash: bool = False
    zero: bool = False
    width: int = 0
    precision: int = -1
    specifier: str = ""

    @classmethod
    def parse(cls, text: str, pos: int = 0) -> tuple[FormatSpec, int]:
        """Read a conversion starting just after its ``%``.

        Returns the spec and the position of the first character not consumed.
        """
        fields: dict[str, Any] = {}
        while text[pos : pos + 1] in _FLAGS and pos < len(text):
            fields[_FLAGS[text[pos]]] = True
            pos += 1

        rest = text[pos:]
        width = atoi(rest)
        if width or rest[:1] == "0":
            fields["width"] = width
            if width > 0:
                pos += digit_count(width)

        if text[pos : pos + 1] == ".":
            pos += 1
            while text[pos : pos + 1] == "0":
                pos += 1
            precision = atoi(text[pos:])
            fields["precision"] = precision
            if precision > 0:
                pos += digit_count(precision)

        ch = text[pos : pos + 1]
        if ch and ch in SPECIFIERS:
            fields["specifier"] = ch
            pos += 1
        return cls(**fields), pos

    def normalized(self) -> FormatSpec:
        """Drop the flags that conflict with each other or with the specifier."""
        spec = self
        if spec.plus and spec.space:
            spec = dataclasses.replace(spec, space=False)
        if spec.zero and spec.minus:
            spec = dataclasses.replace(spec, zero=False)
        if spec.zero and spec.precision != -1:
            spec = dataclasses.replace(spec, zero=False)
        if spec.specifier in ("d", "i") and spec.hash:
            spec = dataclasses.replace(spec, hash=False)
        if spec.specifier in ("u", "x", "X") and spec.plus:
            spec = dataclasses.replace(spec, plus=False)
        if spec.specifier in ("c", "s") and spec.hash:
            spec = dataclasses.replace(spec, hash=False)
        if spec.specifier in ("c", "s") and spec.zero:
            spec = dataclasses.replace(spec, zero=False)
        return spec


def pad_width(text: str, width: int, left: bool, zero: bool) -> str:
    """Pad ``text`` to ``width`` with spaces, or zeros when ``zero`` and not ``left``."""
    if width == 0 or len(text) > width:
        return text
    fill = (" " if left or not zero else "0") * (width - len(text))
    return text + fill if left else fill + text


def pad_precision(text: str, precision: int, plus: bool, space: bool) -> str:
    """Zero-extend a number to ``precision`` digits and put its sign in front."""
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    signed = negative or plus or space
    if precision != -1 and len(digits) < precision:
        size = precision - len(digits) + int(signed)
    elif precision == -1:
        size = int(signed)
    else:
        size = int(plus or space)
    prefix = "0" * size
    if size:
        sign = "-" if negative else "+" if plus else " " if space else ""
        if sign:
            prefix = sign + prefix[1:]
    return prefix + digits


def _int_arg(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"an integer is required, not {type(value).__name__}")
    return value


def _int32(value: Any) -> int:
    return (_int_arg(value) + 2**31) % 2**32 - 2**31


def _char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError("%c requires an int or a single character")


def _render_c(spec: FormatSpec, value: Any) -> str:
    char = _char(value)
    fill = " " * max(0, spec.width - 1)
    return char + fill if spec.minus else fill + char


def _render_s(spec: FormatSpec, value: Any) -> str:
    if value is None:
        text = "" if spec.precision != -1 and spec.precision < 6 else "(null)"
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError(f"%s requires a str or None, not {type(value).__name__}")
    if spec.precision == 0:
        text = ""
    elif 0 < spec.precision < len(text):
        text = text[: spec.precision]
    return pad_width(text, spec.width, spec.minus, False)


def _render_d(spec: FormatSpec, value: Any) -> str:
    nb = _int32(value)
    negative = nb < 0
    res = "" if nb == 0 and spec.precision == 0 else str(nb)

    def widened(text: str) -> bool:
        return spec.precision != -1 and spec.precision > len(text) - negative

    if widened(res):
        res = pad_precision(res, spec.precision, spec.plus, spec.space)
        res = pad_width(res, spec.width, spec.minus, False)
    if not widened(res):
        res = pad_precision(res, -1, spec.plus, spec.space)
        if spec.zero and negative and spec.width > len(res):
            chars = list(pad_width(res, spec.width, spec.minus, spec.zero))
            chars[0] = "-"
            chars[spec.width - digit_count(nb)] = "0"
            res = "".join(chars)
        else:
            res = pad_width(res, spec.width, spec.minus, spec.zero)
    return res


def _render_u(spec: FormatSpec, value: Any) -> str:
    nb = _int_arg(value) & _UINT_MASK
    res = "" if nb == 0 and spec.precision == 0 else str(nb)
    res = pad_precision(res, spec.precision, False, False)
    if spec.width > len(res):
        res = pad_width(res, spec.width, spec.minus, spec.zero)
    return res


def _render_x(spec: FormatSpec, value: Any, upper: bool) -> str:
    nb = _int_arg(value) & _UINT_MASK
    if not nb and spec.precision == 0:
        res = ""
    else:
        res = format(nb, "X" if upper else "x")
    res = pad_precision(res, spec.precision, False, False)
    if nb and spec.hash:
        res = ("0X" if upper else "0x") + res
    return pad_width(res, spec.width, spec.minus, spec.zero)


def _render_p(spec: FormatSpec, value: Any) -> str:
    if value is None or not _int_arg(value):
        res = "(nil)"
    else:
        res = "0x" + format(value & _POINTER_MASK, "x")
    return pad_width(res, spec.width, spec.minus, False)


def _render(spec: FormatSpec, values: Iterator[Any]) -> str:
    if not spec.specifier:
        return ""
    if spec.specifier == "%":
        return "%"
    try:
        value = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec.specifier == "c":
        return _render_c(spec, value)
    if spec.specifier == "s":
        return _render_s(spec, value)
    if spec.specifier == "p":
        return _render_p(spec, value)
    if spec.specifier in ("d", "i"):
        return _render_d(spec, value)
    if spec.specifier == "u":
        return _render_u(spec, value)
    return _render_x(spec, value, spec.specifier == "X")


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    values = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        spec, pos = FormatSpec.parse(fmt, percent + 1)
        parts.append(_render(spec.normalized(), values))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)