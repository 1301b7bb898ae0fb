"""Planar YUV 4:2:0 / RGB conversion, fading and blending in single precision."""

from __future__ import annotations

import numpy as np

from yuvfade.bt601 import RGB2YUV, YUV2RGB, Entry

_F255 = np.float32(255.0)


def _check_dims(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    if width % 2 or height % 2:
        raise ValueError(f"image size must be even for 4:2:0, got {width}x{height}")


def _check_alpha(alpha: int) -> int:
    alpha = int(alpha)
    if not 0 <= alpha <= 255:
        raise ValueError(f"alpha must be between 0 and 255, got {alpha}")
    return alpha


def _as_array(buffer, expected: int, what: str) -> np.ndarray:
    if isinstance(buffer, np.ndarray):
        data = np.ascontiguousarray(buffer, dtype=np.uint8).ravel()
    else:
        data = np.frombuffer(bytes(buffer), dtype=np.uint8)
    if data.size != expected:
        raise ValueError(f"{what} buffer holds {data.size} bytes, expected {expected}")
    return data


def yuv420_size(width: int, height: int) -> int:
    """Number of bytes in a planar YUV 4:2:0 frame."""
    _check_dims(width, height)
    return width * height * 3 // 2


def rgb_size(width: int, height: int) -> int:
    """Number of bytes in a planar RGB frame."""
    _check_dims(width, height)
    return width * height * 3


def yuv420_planes(buffer, width: int, height: int):
    """Split a YUV 4:2:0 buffer into ``(y, u, v)`` arrays shaped by row and column."""
    data = _as_array(buffer, yuv420_size(width, height), "YUV")
    luma = width * height
    chroma = luma // 4
    y = data[:luma].reshape(height, width)
    u = data[luma:luma + chroma].reshape(height // 2, width // 2)
    v = data[luma + chroma:].reshape(height // 2, width // 2)
    return y, u, v


def rgb_planes(buffer, width: int, height: int):
    """Split a planar RGB buffer into ``(r, g, b)`` arrays shaped by row and column."""
    data = _as_array(buffer, rgb_size(width, height), "RGB")
    plane = width * height
    return tuple(
        data[k * plane:(k + 1) * plane].reshape(height, width) for k in range(3)
    )


def _eval(entry: Entry, a, b, c) -> np.ndarray:
    """Evaluate ``offset + a*s1 + b*s2 + c*s3`` left to right in float32.

    A term given as ``None`` is left out, matching the rows with a zero weight.
    """
    result = np.float32(entry.offset)
    for value, scale in ((a, entry.scale1), (b, entry.scale2), (c, entry.scale3)):
        if value is not None:
            result = result + value * np.float32(scale)
    return result


def _to_u8(values: np.ndarray) -> np.ndarray:
    return np.clip(values, np.float32(0.0), _F255).astype(np.uint8)


def _rgb_to_yuv420(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> bytes:
    y = _to_u8(_eval(RGB2YUV[0], r, g, b))
    rs, gs, bs = r[::2, ::2], g[::2, ::2], b[::2, ::2]
    u = _to_u8(_eval(RGB2YUV[1], rs, gs, bs))
    v = _to_u8(_eval(RGB2YUV[2], rs, gs, bs))
    return np.concatenate([y.ravel(), u.ravel(), v.ravel()]).tobytes()


def yuv420_to_rgb(yuv, width: int, height: int) -> bytes:
    """Convert a YUV 4:2:0 frame to planar RGB; each chroma sample covers 2x2 pixels."""
    y, u, v = yuv420_planes(yuv, width, height)
    yf = y.astype(np.float32)
    uf = u.repeat(2, axis=0).repeat(2, axis=1).astype(np.float32)
    vf = v.repeat(2, axis=0).repeat(2, axis=1).astype(np.float32)
    r = _to_u8(_eval(YUV2RGB[0], yf, None, vf))
    g = _to_u8(_eval(YUV2RGB[1], yf, uf, vf))
    b = _to_u8(_eval(YUV2RGB[2], yf, uf, None))
    return np.concatenate([r.ravel(), g.ravel(), b.ravel()]).tobytes()


def fade(rgb, alpha: int, width: int, height: int) -> bytes:
    """Scale an RGB frame by ``alpha / 255`` and convert it to YUV 4:2:0."""
    alpha = _check_alpha(alpha)
    a = np.float32(alpha)
    r, g, b = ((p.astype(np.float32) * a) / _F255 for p in rgb_planes(rgb, width, height))
    return _rgb_to_yuv420(r, g, b)


def blend(rgb1, rgb2, alpha1: int, alpha2: int, width: int, height: int) -> bytes:
    """Mix two RGB frames with weights ``alpha1 / 255`` and ``alpha2 / 255`` into YUV 4:2:0."""
    f1 = np.float32(_check_alpha(alpha1)) / _F255
    f2 = np.float32(_check_alpha(alpha2)) / _F255
    first = rgb_planes(rgb1, width, height)
    second = rgb_planes(rgb2, width, height)
    r, g, b = (
        p1.astype(np.float32) * f1 + p2.astype(np.float32) * f2
        for p1, p2 in zip(first, second)
    )
    return _rgb_to_yuv420(r, g, b)