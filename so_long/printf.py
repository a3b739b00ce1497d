"""A small printf-style formatter supporting c, s, d, i, u, p, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _hex(value: int, digits: str) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise TypeError(f"%c requires an int or a single character, got {value!r}")


def _pointer(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value & _UINT64_MASK
    return id(value) & _UINT64_MASK


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        return _char(_next_arg(args))
    if spec == "s":
        value = _next_arg(args)
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_to_int32(int(_next_arg(args))))
    if spec == "u":
        return str(int(_next_arg(args)) & _UINT32_MASK)
    if spec == "p":
        return "0x" + _hex(_pointer(_next_arg(args)), _LOWER_DIGITS)
    if spec == "x":
        return _hex(int(_next_arg(args)) & _UINT32_MASK, _LOWER_DIGITS)
    if spec == "X":
        return _hex(int(_next_arg(args)) & _UINT32_MASK, _UPPER_DIGITS)
    # "%%" and any unknown conversion emit the character itself.
    return spec


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    A lone ``%`` at the very end of the format stops the output there.
    """
    out: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, arg_iter))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)