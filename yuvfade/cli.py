"""Command-line driver: fade one YUV frame in steps, or cross-fade two frames."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from yuvfade import convert, fixed, mix, rounded
from yuvfade.bt601 import Clock

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
ALPHA_STEPS = range(1, 256, 3)

_TO_RGB: dict[str, Callable] = {
    "float": convert.yuv420_to_rgb,
    "fixed": fixed.yuv420_to_rgb,
    "rounded": rounded.yuv420_to_rgb,
}
_FADE: dict[str, Callable] = {
    "float": convert.fade,
    "fixed": fixed.fade,
    "rounded": rounded.fade,
}
_BLEND: dict[str, Callable] = {
    "float": convert.blend,
    "fixed": fixed.blend,
    "rounded": mix.blend,
}
METHODS = tuple(_TO_RGB)


def _check_method(method: str) -> None:
    if method not in _TO_RGB:
        raise ValueError(f"unknown method {method!r}; choose from {', '.join(METHODS)}")


def _read_frame(path, width: int, height: int) -> bytes:
    size = convert.yuv420_size(width, height)
    with open(path, "rb") as stream:
        data = stream.read(size)
    if len(data) < size:
        raise ValueError(f"{path}: holds {len(data)} bytes, a frame needs {size}")
    return data


def _output_dir(output_dir) -> Path:
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def run_fade(path, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
             method: str = "float", output_dir=".") -> tuple[list[Path], float]:
    """Fade the frame in ``path`` for alphas 1, 4, ..., 253.

    Each result is written to ``<alpha>.yuv`` in ``output_dir``. Returns the
    written paths and the time spent converting, in milliseconds.
    """
    _check_method(method)
    frame = _read_frame(path, width, height)
    directory = _output_dir(output_dir)
    clock = Clock()
    with clock:
        rgb = _TO_RGB[method](frame, width, height)
    written = []
    for alpha in ALPHA_STEPS:
        with clock:
            result = _FADE[method](rgb, alpha, width, height)
        target = directory / f"{alpha}.yuv"
        target.write_bytes(result)
        written.append(target)
    return written, clock.elapsed_time


def run_blend(path1, path2, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
              method: str = "float", output_dir=".") -> tuple[list[Path], float]:
    """Cross-fade two frames, weighting them ``255 - alpha`` and ``alpha``.

    Alpha runs 1, 4, ..., 253 and each result goes to ``<alpha>.yuv`` in
    ``output_dir``. Returns the written paths and the conversion time in ms.
    """
    _check_method(method)
    frame1 = _read_frame(path1, width, height)
    frame2 = _read_frame(path2, width, height)
    directory = _output_dir(output_dir)
    clock = Clock()
    with clock:
        rgb1 = _TO_RGB[method](frame1, width, height)
    with clock:
        rgb2 = _TO_RGB[method](frame2, width, height)
    written = []
    for alpha in ALPHA_STEPS:
        with clock:
            result = _BLEND[method](rgb1, rgb2, 255 - alpha, alpha, width, height)
        target = directory / f"{alpha}.yuv"
        target.write_bytes(result)
        written.append(target)
    return written, clock.elapsed_time


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yuvfade", description="Fade or cross-fade planar YUV 4:2:0 frames."
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    common.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    common.add_argument("--method", choices=METHODS, default="float")
    common.add_argument("--output-dir", default=".")
    commands = parser.add_subparsers(dest="command", required=True)
    fade_cmd = commands.add_parser("fade", parents=[common], help="fade one frame")
    fade_cmd.add_argument("input")
    blend_cmd = commands.add_parser("blend", parents=[common], help="cross-fade two frames")
    blend_cmd.add_argument("first", nargs="?", default="dem1.yuv")
    blend_cmd.add_argument("second", nargs="?", default="dem2.yuv")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.command == "fade":
            _, elapsed = run_fade(args.input, args.width, args.height,
                                  args.method, args.output_dir)
        else:
            _, elapsed = run_blend(args.first, args.second, args.width, args.height,
                                   args.method, args.output_dir)
    except (OSError, ValueError) as exc:
        print(f"yuvfade: {exc}", file=sys.stderr)
        return 1
    print(f"Elapsed time: {elapsed:f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())