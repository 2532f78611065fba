"""A small 2D game toolkit: vector and matrix math, colours, sprite batching,
keyboard state, logging, frame timing, a game-state stack and a falling-block
puzzle board."""

__version__ = "0.1.0"