"""Testing utilities for TernaryTreeLib consumers."""

from .fixtures import TreeShapeHelper, format_path, parse_path

__all__ = ['TreeShapeHelper', 'format_path', 'parse_path']
