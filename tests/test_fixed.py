import numpy as np
import pytest

from yuvfade import convert, fixed

W, H = 8, 4


def _random(size, low, high, seed):
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=size, dtype=np.uint8).tobytes()


def _rgb(seed=0, low=0, high=256):
    return _random(convert.rgb_size(W, H), low, high, seed)


def test_yuv_to_rgb_output_size():
    yuv = _random(convert.yuv420_size(W, H), 0, 256, 1)
    assert len(fixed.yuv420_to_rgb(yuv, W, H)) == convert.rgb_size(W, H)


def test_yuv_to_rgb_black_frame():
    luma = W * H
    yuv = bytes([16] * luma + [128] * (luma // 2))
    assert fixed.yuv420_to_rgb(yuv, W, H) == bytes(3 * luma)


def test_yuv_to_rgb_close_to_float_in_safe_range():
    luma = W * H
    rng = np.random.default_rng(2)
    y = rng.integers(16, 80, size=luma, dtype=np.uint8)
    uv = rng.integers(112, 144, size=luma // 2, dtype=np.uint8)
    yuv = np.concatenate([y, uv]).tobytes()
    got = np.frombuffer(fixed.yuv420_to_rgb(yuv, W, H), dtype=np.uint8).astype(int)
    ref = np.frombuffer(convert.yuv420_to_rgb(yuv, W, H), dtype=np.uint8).astype(int)
    assert np.max(np.abs(got - ref)) <= 4


def test_yuv_to_rgb_accepts_array():
    yuv = _random(convert.yuv420_size(W, H), 0, 256, 3)
    arr = np.frombuffer(yuv, dtype=np.uint8)
    assert fixed.yuv420_to_rgb(arr, W, H) == fixed.yuv420_to_rgb(yuv, W, H)


def test_fade_alpha_zero_is_neutral():
    luma = W * H
    expected = bytes([16] * luma + [128] * (luma // 2))
    assert fixed.fade(_rgb(4), 0, W, H) == expected


def test_fade_output_size():
    assert len(fixed.fade(_rgb(5), 100, W, H)) == convert.yuv420_size(W, H)


def test_fade_close_to_float_in_safe_range():
    rgb = _rgb(6, 0, 100)
    got = np.frombuffer(fixed.fade(rgb, 127, W, H), dtype=np.uint8).astype(int)
    ref = np.frombuffer(convert.fade(rgb, 127, W, H), dtype=np.uint8).astype(int)
    assert np.max(np.abs(got - ref)) <= 4


def test_fade_chroma_ignores_odd_columns():
    base = np.frombuffer(_rgb(7), dtype=np.uint8).reshape(3, H, W).copy()
    changed = base.copy()
    changed[:, :, 1::2] = 255 - changed[:, :, 1::2]
    luma = W * H
    a = fixed.fade(base.tobytes(), 200, W, H)
    b = fixed.fade(changed.tobytes(), 200, W, H)
    assert a[luma:] == b[luma:]


def test_blend_with_black_equals_fade():
    rgb = _rgb(8)
    black = bytes(convert.rgb_size(W, H))
    assert fixed.blend(rgb, black, 90, 30, W, H) == fixed.fade(rgb, 90, W, H)
    assert fixed.blend(black, rgb, 0, 90, W, H) == fixed.fade(rgb, 90, W, H)


def test_blend_is_symmetric():
    a, b = _rgb(9), _rgb(10)
    assert fixed.blend(a, b, 40, 215, W, H) == fixed.blend(b, a, 215, 40, W, H)


def test_blend_zero_weights_neutral():
    luma = W * H
    expected = bytes([16] * luma + [128] * (luma // 2))
    assert fixed.blend(_rgb(11), _rgb(12), 0, 0, W, H) == expected


@pytest.mark.parametrize("alpha", [-1, 256])
def test_fade_rejects_bad_alpha(alpha):
    with pytest.raises(ValueError):
        fixed.fade(_rgb(13), alpha, W, H)


def test_blend_rejects_bad_alpha():
    with pytest.raises(ValueError):
        fixed.blend(_rgb(14), _rgb(15), 10, 300, W, H)


def test_rejects_wrong_buffer_size():
    with pytest.raises(ValueError):
        fixed.yuv420_to_rgb(b"\x00" * 10, W, H)
    with pytest.raises(ValueError):
        fixed.fade(b"\x00" * 10, 1, W, H)


def test_rejects_odd_dimensions():
    with pytest.raises(ValueError):
        fixed.fade(bytes(3 * 3 * 3), 1, 3, 3)