"""
Report generators for the roster harvest.

This package provides generators that render the sorted report tree as a
Markdown page and as a JSON document.
"""

from .base import BaseGenerator, GeneratorConfig
from .markdown import MarkdownGenerator
from .structured import JsonGenerator

__all__ = [
    "BaseGenerator",
    "GeneratorConfig",
    "JsonGenerator",
    "MarkdownGenerator",
]
