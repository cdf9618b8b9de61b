"""Grid editor front-end logic: easing, window and cursor animation, settings, and keyboard and mouse translation."""

__version__ = "0.1.0"