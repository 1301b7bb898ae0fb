import numpy as np
import pytest

from yuvfade import rounded
from yuvfade.convert import rgb_size, yuv420_planes, yuv420_size
from yuvfade.mix import blend

W, H = 16, 8


def _random_rgb(seed: int) -> bytes:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=rgb_size(W, H), dtype=np.uint8).tobytes()


def _constant_rgb(r: int, g: int, b: int) -> bytes:
    plane = W * H
    return bytes([r]) * plane + bytes([g]) * plane + bytes([b]) * plane


def test_output_length():
    out = blend(_random_rgb(1), _random_rgb(2), 100, 155, W, H)
    assert len(out) == yuv420_size(W, H)


def test_black_frames_give_offsets():
    black = bytes(rgb_size(W, H))
    out = blend(black, black, 200, 55, W, H)
    luma = W * H
    assert set(out[:luma]) == {16}
    assert set(out[luma:]) == {128}


def test_full_weight_on_white_frame():
    white = _constant_rgb(255, 255, 255)
    black = bytes(rgb_size(W, H))
    out = blend(black, white, 0, 255, W, H)
    luma = W * H
    assert set(out[:luma]) == {235}
    assert set(out[luma:]) == {128}


@pytest.mark.parametrize("alpha", [1, 100, 254, 255])
def test_zero_first_weight_matches_fade_of_second(alpha):
    first, second = _random_rgb(3), _random_rgb(4)
    assert blend(first, second, 0, alpha, W, H) == rounded.fade(second, alpha, W, H)


@pytest.mark.parametrize("alpha", [1, 77, 255])
def test_zero_second_weight_matches_fade_of_first(alpha):
    first, second = _random_rgb(5), _random_rgb(6)
    assert blend(first, second, alpha, 0, W, H) == rounded.fade(first, alpha, W, H)


def test_constant_frames_give_constant_planes():
    a = _constant_rgb(10, 200, 90)
    b = _constant_rgb(250, 30, 120)
    y, u, v = yuv420_planes(blend(a, b, 128, 127, W, H), W, H)
    assert len(np.unique(y)) == 1
    assert len(np.unique(u)) == 1
    assert len(np.unique(v)) == 1


def test_array_input_matches_bytes_input():
    first, second = _random_rgb(7), _random_rgb(8)
    arr1 = np.frombuffer(first, dtype=np.uint8).copy()
    arr2 = np.frombuffer(second, dtype=np.uint8).copy()
    assert blend(arr1, arr2, 90, 165, W, H) == blend(first, second, 90, 165, W, H)


def test_chroma_uses_top_left_of_each_block():
    rng = np.random.default_rng(9)
    first = rng.integers(0, 256, size=(3, H, W), dtype=np.uint8)
    second = rng.integers(0, 256, size=(3, H, W), dtype=np.uint8)
    base = blend(first.tobytes(), second.tobytes(), 60, 195, W, H)
    changed1, changed2 = first.copy(), second.copy()
    changed1[:, 1::2, :] = 0
    changed1[:, :, 1::2] = 0
    changed2[:, 1::2, :] = 255
    changed2[:, :, 1::2] = 255
    other = blend(changed1.tobytes(), changed2.tobytes(), 60, 195, W, H)
    _, u0, v0 = yuv420_planes(base, W, H)
    _, u1, v1 = yuv420_planes(other, W, H)
    assert np.array_equal(u0, u1)
    assert np.array_equal(v0, v1)


@pytest.mark.parametrize("alpha1, alpha2", [(256, 0), (0, -1), (300, 10)])
def test_alpha_out_of_range(alpha1, alpha2):
    frame = _random_rgb(10)
    with pytest.raises(ValueError):
        blend(frame, frame, alpha1, alpha2, W, H)


def test_wrong_buffer_size():
    frame = _random_rgb(11)
    with pytest.raises(ValueError):
        blend(frame, frame[:-1], 10, 245, W, H)


def test_odd_dimensions_rejected():
    with pytest.raises(ValueError):
        blend(bytes(45), bytes(45), 10, 245, 5, 3)