"""BT.601 YUV 4:2:0 and RGB conversion with alpha fading and blending, plus bit and RV64 helpers."""

__version__ = "0.1.0"
__all__ = ["bits", "bt601", "cli", "convert", "fixed", "isa", "mix", "rounded"]