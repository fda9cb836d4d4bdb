"""
Where: `util.color`.
What: normalize color notations (hex strings, packed ARGB ints, 0-255 / 0-1 tuples)
      into a single packed 32-bit ARGB integer.
Why: config files, exports and the `swatch.Color` constructors accept the same
     notations and report the same error messages.
"""

from __future__ import annotations

import re
from typing import Sequence

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?")


def _clamp_u8(x: int) -> int:
    return 0 if x < 0 else 255 if x > 255 else int(x)


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four 8-bit channels into a 0xAARRGGBB integer (each channel masked)."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def parse_hex_color_str(s: str) -> int:
    """Return the packed ARGB value of a hex string.

    Accepted forms: "#RRGGBB", "#AARRGGBB", "0xRRGGBB", "0xAARRGGBB", "RRGGBB", "AARRGGBB".
    Case-insensitive. Six-digit input gets an opaque alpha (0xFF).
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or AARRGGBB)")
    if _HEX_DIGITS.fullmatch(t) is None:
        raise ValueError(f"invalid hex color: '{s}'")
    value = int(t, 16)
    if len(t) == 6:
        value |= 0xFF000000
    return value


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    return None


def normalize_color(value: object) -> int:
    """Normalize a color notation into a packed ARGB integer.

    - hex string: see :func:`parse_hex_color_str`
    - int: taken as an already packed 0xAARRGGBB value (must fit in 32 bits)
    - (r, g, b[, a]) tuple/list: 0-1 floats when every element is a float in [0, 1],
      otherwise 0-255 values (rounded and clamped)
    """
    if isinstance(value, bool):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"packed ARGB value out of range: {value!r}")
        return value
    seq = _as_sequence(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fseq) == 3:
        fseq.append(1.0 if all(isinstance(v, float) for v in seq) else 255.0)
    # 0-1 floats only when the caller actually passed floats
    if all(isinstance(v, float) for v in seq) and all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b, a = (int(round(x * 255)) for x in fseq)
    else:
        r, g, b, a = (_clamp_u8(int(round(x))) for x in fseq)
    return pack_argb(a, r, g, b)


def to_hex_str(argb: int, *, with_alpha: bool = False) -> str:
    """Format a packed ARGB value as "#RRGGBB" (or "#AARRGGBB")."""
    if with_alpha:
        return f"#{argb & 0xFFFFFFFF:08X}"
    return f"#{argb & 0xFFFFFF:06X}"


__all__ = [
    "pack_argb",
    "parse_hex_color_str",
    "normalize_color",
    "to_hex_str",
]
