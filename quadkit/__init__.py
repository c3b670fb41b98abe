"""Game-loop building blocks: colors, 2D geometry, shader includes, storage, sprite animation, a mouse camera and input state."""

__version__ = "0.1.0"