"""
Condition knowledge base access.
"""

from .loader import (
    load_knowledge_base,
    get_knowledge_base,
    set_knowledge_base,
    sanitize_text,
)

__all__ = [
    "load_knowledge_base",
    "get_knowledge_base",
    "set_knowledge_base",
    "sanitize_text",
]
