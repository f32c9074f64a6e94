"""Building blocks for a small 2D sprite game engine: math, containers, file I/O, WAV headers, sprites, shader types and input state."""

__version__ = "0.1.0"