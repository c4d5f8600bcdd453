"""Gopher Talk - English to gopher language translator."""

__version__ = "0.1.0"
