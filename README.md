# yuvfade

yuvfade converts raw planar YUV 4:2:0 frames to planar RGB using ITU-R
BT.601 weights. It can scale a frame by an alpha factor, which fades it
towards black, or mix two frames with separate weights. Each result is
written back out as a raw YUV 4:2:0 frame.

A YUV frame is raw bytes: a full-size Y plane, then a U plane and a V plane
at quarter size. Each U and V sample covers a 2x2 block of pixels. An RGB
frame is three full-size planes, R then G then B. Width and height must be
positive and even.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
yuvfade fade INPUT [--width W] [--height H] [--method M] [--output-dir DIR]
yuvfade blend [FIRST] [SECOND] [--width W] [--height H] [--method M] [--output-dir DIR]
yuvfade --help
```

- `fade` reads one frame from `INPUT` and converts it to RGB. For alpha
  values 1, 4, 7, ... 253 it writes the faded frame to `<alpha>.yuv`.
- `blend` reads one frame from each of `FIRST` and `SECOND`, which default
  to `dem1.yuv` and `dem2.yuv`. For the same alpha values it writes the
  first frame weighted `255 - alpha`, mixed with the second weighted
  `alpha`, to `<alpha>.yuv`.
- `--width` and `--height` default to 1920 and 1080.
- `--method` is one of `float` (the default), `fixed` or `rounded`. The
  arithmetic variants are described below.
- `--output-dir` defaults to the current directory. The directory is
  created if it is missing. Existing files with the same names are
  overwritten.

An input file must hold at least one whole frame. Any bytes after the first
frame are ignored. When it finishes, the command prints the time spent
converting, as `Elapsed time: <ms> ms`, and exits with status 0. A missing
file, a short file or a bad size is reported on standard error, and the
command exits with status 1.

## Library

Each arithmetic variant has its own module.

| Module | Arithmetic | Functions |
| --- | --- | --- |
| `yuvfade.convert` | single-precision float; results truncated to 8 bits | `yuv420_to_rgb`, `fade`, `blend` |
| `yuvfade.fixed` | 16-bit fixed point with wrap-around; saturated to 0..255 | `yuv420_to_rgb`, `fade`, `blend` |
| `yuvfade.rounded` | fused multiply-add in single precision; rounded to nearest, ties to even | `yuv420_to_rgb`, `fade` |
| `yuvfade.mix` | as `rounded`, for two frames | `blend` |

The `fade` and `blend` functions scale by `alpha / 255`, except in `fixed`,
which scales by `(alpha + 1) / 256`. Alpha must be between 0 and 255. In
every variant, chroma is taken from the top-left pixel of each 2x2 block.
Inputs may be `bytes`-like objects or numpy arrays. Results are `bytes`.

```python
from yuvfade import convert

width, height = 1920, 1080
with open("frame.yuv", "rb") as fh:
    yuv = fh.read(convert.yuv420_size(width, height))

rgb = convert.yuv420_to_rgb(yuv, width, height)
half = convert.fade(rgb, 128, width, height)
mixed = convert.blend(rgb, rgb, 255 - 64, 64, width, height)
```

Helpers in `yuvfade.convert`:

- `yuv420_size(width, height)` and `rgb_size(width, height)` give buffer
  sizes in bytes.
- `yuv420_planes(buffer, width, height)` returns the `(y, u, v)` planes
  and `rgb_planes(buffer, width, height)` returns the `(r, g, b)` planes.
  Each plane is a 2-D numpy array. A buffer of the wrong size raises
  `ValueError`.

`yuvfade.cli` also exposes `run_fade(path, width, height, method,
output_dir)` and `run_blend(path1, path2, width, height, method,
output_dir)`. Each returns the list of written paths and the elapsed
milliseconds.

`yuvfade.bt601` holds the coefficient rows `RGB2YUV` and `YUV2RGB`. Each row
is an `Entry`, whose `apply(a, b, c)` returns `offset + a*scale1 + b*scale2
+ c*scale3`. The module also has `Clock`, which adds up milliseconds over
`start()`/`stop()` pairs or `with` blocks in `elapsed_time`.

### Other modules

- `yuvfade.bits`: `bitmask`, `bits`, `sext`, `roundup` and `rounddown` for
  64-bit fields. `pattern_decode` and `pattern_decode_hex` turn a pattern of
  `0`/`1`/`?` or hex digits into `(key, mask, shift)`, and `pattern_matches`
  tests a value against a binary pattern.
- `yuvfade.isa`: RV64 tables. `Instr` lists the instructions, `InstrType`
  their formats and `Syscall` the system-call numbers. `DecodedInstr` is a
  decoded instruction that checks it carries exactly the operands of its
  format.

## Limitations

yuvfade handles one frame at a time in raw planar 4:2:0 form. It does not
read or write container or compressed video formats, or other chroma
layouts. It does not display frames. The RV64 tables in `yuvfade.isa` only
describe instructions; the package does not decode or execute machine code.