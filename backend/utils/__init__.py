"""Utility modules."""

from .parser import extract_json, extract_json_object

__all__ = ["extract_json", "extract_json_object"]
