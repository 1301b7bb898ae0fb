"""Cross-fading of two planar RGB frames into YUV 4:2:0 with fused multiply-adds.

Each channel is mixed as ``c1 * (alpha1 / 255) + c2 * (alpha2 / 255)``. The
second product is rounded to single precision first. The first product is
then added to it in one fused step. The mixed frame goes through the same
fused BT.601 conversion as :mod:`yuvfade.rounded`. Results are clamped to
0..255 and rounded to the nearest integer, with ties going to even.
"""

from __future__ import annotations

import numpy as np

from yuvfade.convert import _check_alpha, rgb_planes
from yuvfade.rounded import _fma, _rgb_to_yuv420

_F255 = np.float32(255.0)


def blend(rgb1, rgb2, alpha1: int, alpha2: int, width: int, height: int) -> bytes:
    """Mix two RGB frames with weights ``alpha1 / 255`` and ``alpha2 / 255`` into YUV 4:2:0."""
    factor1 = np.float32(_check_alpha(alpha1)) / _F255
    factor2 = np.float32(_check_alpha(alpha2)) / _F255
    first = rgb_planes(rgb1, width, height)
    second = rgb_planes(rgb2, width, height)
    r, g, b = (
        _fma(p1.astype(np.float32), factor1, p2.astype(np.float32) * factor2)
        for p1, p2 in zip(first, second)
    )
    return _rgb_to_yuv420(r, g, b)