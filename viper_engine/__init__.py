"""A small 2D game engine on pygame: math, vectors, timing, input, rendering and a starfield demo."""

__version__ = "0.1.0"