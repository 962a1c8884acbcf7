"""
Report export for analysis results.
"""

from .json_export import export_json
from .markdown import export_markdown

__all__ = [
    "export_json",
    "export_markdown",
]
