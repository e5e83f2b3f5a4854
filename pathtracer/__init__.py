"""A small path tracer that renders INI-described scenes to BMP images."""

__version__ = "0.1.0"