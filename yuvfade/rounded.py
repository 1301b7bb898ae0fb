"""Planar YUV 4:2:0 / RGB conversion and fading with fused multiply-adds.

Every weighted sum is built from fused multiply-adds in single precision, with
one rounding per step. Results are clamped to 0..255 and rounded to the
nearest integer, with ties going to even. They are not truncated.
"""

from __future__ import annotations

import numpy as np

from yuvfade.bt601 import RGB2YUV, YUV2RGB, Entry
from yuvfade.convert import _check_alpha, rgb_planes, yuv420_planes

_F255 = np.float32(255.0)


def _fma(a, b, c) -> np.ndarray:
    """Return ``a * b + c`` for float32 operands, rounded once to float32.

    The product of two float32 values is exact in float64. The sum is formed
    in float64 with round-to-odd, so that the final conversion to float32
    rounds correctly.
    """
    a64, b64, c64 = np.broadcast_arrays(
        np.asarray(a, dtype=np.float32).astype(np.float64),
        np.asarray(b, dtype=np.float32).astype(np.float64),
        np.asarray(c, dtype=np.float32).astype(np.float64),
    )
    product = a64 * b64
    total = product + c64
    back = total - product
    err = (product - (total - back)) + (c64 - back)
    even = (np.ascontiguousarray(total).view(np.uint64) & np.uint64(1)) == 0
    nudge = (err != 0) & even
    if np.any(nudge):
        toward = np.where(err > 0, np.inf, -np.inf)
        total = np.where(nudge, np.nextafter(total, toward), total)
    return total.astype(np.float32)


def _eval(entry: Entry, a, b, c) -> np.ndarray:
    """Evaluate ``offset + a*s1 + b*s2 + c*s3`` as a chain of fused multiply-adds.

    A term whose weight is zero is left out.
    """
    result = np.float32(entry.offset)
    for value, scale in ((a, entry.scale1), (b, entry.scale2), (c, entry.scale3)):
        if scale != 0.0:
            result = _fma(value, np.float32(scale), result)
    return np.asarray(result, dtype=np.float32)


def _to_u8(values: np.ndarray) -> np.ndarray:
    clamped = np.clip(values, np.float32(0.0), _F255)
    return np.rint(clamped).astype(np.uint8)


def _rgb_to_yuv420(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> bytes:
    """Convert float32 RGB planes to a YUV 4:2:0 frame.

    Chroma is taken from the top-left pixel of each 2x2 block.
    """
    y = _to_u8(_eval(RGB2YUV[0], r, g, b))
    rs, gs, bs = r[::2, ::2], g[::2, ::2], b[::2, ::2]
    u = _to_u8(_eval(RGB2YUV[1], rs, gs, bs))
    v = _to_u8(_eval(RGB2YUV[2], rs, gs, bs))
    return np.concatenate([y.ravel(), u.ravel(), v.ravel()]).tobytes()


def _upsample(plane: np.ndarray) -> np.ndarray:
    return plane.repeat(2, axis=0).repeat(2, axis=1)


def yuv420_to_rgb(yuv, width: int, height: int) -> bytes:
    """Convert a YUV 4:2:0 frame to planar RGB, rounding to the nearest value."""
    y, u, v = yuv420_planes(yuv, width, height)
    yf = y.astype(np.float32)
    uf = _upsample(u).astype(np.float32)
    vf = _upsample(v).astype(np.float32)
    r, g, b = (_to_u8(_eval(entry, yf, uf, vf)) for entry in YUV2RGB)
    return np.concatenate([r.ravel(), g.ravel(), b.ravel()]).tobytes()


def fade(rgb, alpha: int, width: int, height: int) -> bytes:
    """Scale an RGB frame by ``alpha / 255`` and convert it to YUV 4:2:0."""
    factor = np.float32(_check_alpha(alpha)) / _F255
    r, g, b = (
        plane.astype(np.float32) * factor for plane in rgb_planes(rgb, width, height)
    )
    return _rgb_to_yuv420(r, g, b)