"""printf-style formatting limited to the conversions the game needs.

Supported conversions: ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``.  An unknown conversion character is emitted
literally, preceded by ``%``, and a trailing ``%`` is kept as is.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_UINT_BITS = 32
_UINT_MASK = (1 << _UINT_BITS) - 1
_PTR_MASK = (1 << 64) - 1

_CONVERSIONS = frozenset("cspdiuxX")


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    if value >= 1 << (_UINT_BITS - 1):
        value -= 1 << _UINT_BITS
    return value


def _as_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c requires a single character")
        return arg
    return chr(int(arg) & 0xFF)


def _as_pointer(arg: Any) -> str:
    value = int(arg) & _PTR_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def _convert(spec: str, arg: Any) -> str:
    if spec == "c":
        return _as_char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        return _as_pointer(arg)
    if spec in "di":
        return str(_signed32(int(arg)))
    if spec == "u":
        return str(int(arg) & _UINT_MASK)
    if spec == "x":
        return format(int(arg) & _UINT_MASK, "x")
    return format(int(arg) & _UINT_MASK, "X")


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def c_format(template: str, *args: Any) -> str:
    """Format ``args`` into ``template`` and return the resulting text."""
    if template is None:
        raise TypeError("template must not be None")
    pieces: list[str] = []
    arg_iter = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
        elif spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_convert(spec, _next_arg(arg_iter)))
        else:
            pieces.append("%" + spec)
    return "".join(pieces)


def c_printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = c_format(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)