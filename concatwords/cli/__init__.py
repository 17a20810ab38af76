"""Command-line interface for concatwords."""

from .parser import create_parser

__all__ = ["create_parser"]
