"""Keyboard event helpers."""

from .utils import parse_key

__all__ = ["parse_key"]
