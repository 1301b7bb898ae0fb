"""Planar YUV 4:2:0 / RGB conversion, fading and blending in 16-bit fixed point.

Every product and sum wraps around to a signed 16-bit value. Every right shift is
arithmetic. Results saturate to 0..255 only when they are packed to bytes. This
matches packed 16-bit integer arithmetic exactly, including where an
intermediate value overflows.
"""

from __future__ import annotations

import numpy as np

from yuvfade.convert import _check_alpha, rgb_planes, yuv420_planes

_YUV2RGB = ((298, 0, 409), (298, -100, -208), (298, 516, 0))
_RGB2YUV = ((66, 129, 25), (-38, -74, 112), (112, -94, -18))
_Y_OFFSET = 16
_UV_OFFSET = 128


def _wrap16(values: np.ndarray) -> np.ndarray:
    """Reduce integers to the signed 16-bit range by wrapping around."""
    return ((values + 0x8000) & 0xFFFF) - 0x8000


def _row(coeffs: tuple[int, int, int], a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Compute ``(a*k0 + b*k1 + c*k2) >> 8`` with 16-bit wrapping at every step."""
    k0, k1, k2 = coeffs
    total = _wrap16(_wrap16(a * k0) + _wrap16(b * k1))
    total = _wrap16(total + _wrap16(c * k2))
    return total >> 8


def _pack(values: np.ndarray) -> np.ndarray:
    """Saturate signed 16-bit values to unsigned bytes."""
    return np.clip(values, 0, 255).astype(np.uint8)


def _upsample(plane: np.ndarray) -> np.ndarray:
    return plane.repeat(2, axis=0).repeat(2, axis=1)


def yuv420_to_rgb(yuv, width: int, height: int) -> bytes:
    """Convert a YUV 4:2:0 frame to planar RGB using integer BT.601 weights."""
    y, u, v = yuv420_planes(yuv, width, height)
    yv = y.astype(np.int32) - _Y_OFFSET
    uv = _upsample(u).astype(np.int32) - _UV_OFFSET
    vv = _upsample(v).astype(np.int32) - _UV_OFFSET
    r, g, b = (_pack(_row(coeffs, yv, uv, vv)) for coeffs in _YUV2RGB)
    return np.concatenate([r.ravel(), g.ravel(), b.ravel()]).tobytes()


def _rgb_to_yuv420(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> bytes:
    y = _pack(_wrap16(_row(_RGB2YUV[0], r, g, b) + _Y_OFFSET))
    rs, gs, bs = r[::2, ::2], g[::2, ::2], b[::2, ::2]
    u = _pack(_wrap16(_row(_RGB2YUV[1], rs, gs, bs) + _UV_OFFSET))
    v = _pack(_wrap16(_row(_RGB2YUV[2], rs, gs, bs) + _UV_OFFSET))
    return np.concatenate([y.ravel(), u.ravel(), v.ravel()]).tobytes()


def fade(rgb, alpha: int, width: int, height: int) -> bytes:
    """Scale an RGB frame by ``(alpha + 1) / 256`` and convert it to YUV 4:2:0."""
    factor = _check_alpha(alpha) + 1
    r, g, b = (
        _wrap16(plane.astype(np.int32) * factor) >> 8
        for plane in rgb_planes(rgb, width, height)
    )
    return _rgb_to_yuv420(r, g, b)


def blend(rgb1, rgb2, alpha1: int, alpha2: int, width: int, height: int) -> bytes:
    """Mix two RGB frames with weights ``(alpha + 1) / 256`` into YUV 4:2:0."""
    factor1 = _check_alpha(alpha1) + 1
    factor2 = _check_alpha(alpha2) + 1
    first = rgb_planes(rgb1, width, height)
    second = rgb_planes(rgb2, width, height)
    r, g, b = (
        _wrap16(
            _wrap16(p1.astype(np.int32) * factor1)
            + _wrap16(p2.astype(np.int32) * factor2)
        )
        >> 8
        for p1, p2 in zip(first, second)
    )
    return _rgb_to_yuv420(r, g, b)