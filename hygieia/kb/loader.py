"""
Knowledge base loader.

Reads the bundled condition asset once per process and hands out a read-only
KnowledgeBase. Any problem with the asset is fatal: without conditions there
is nothing to match against, so errors surface at startup as
KnowledgeBaseError rather than per query.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from hygieia.config import get_config
from hygieia.errors import KnowledgeBaseError
from hygieia.models import ConditionRecord, KnowledgeBase

logger = logging.getLogger(__name__)

# Characters the source asset is known to carry that break parsing or display
_REPLACEMENTS = {
    "¶": "—",  # pilcrow
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "…": "...",
    "–": "-",
}

# C0/C1 control characters, except tab, newline and carriage return
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_text(text: str) -> str:
    """Replace typographic characters and drop control characters."""
    for bad, good in _REPLACEMENTS.items():
        text = text.replace(bad, good)
    return _CONTROL_CHARS.sub("", text)


def _sanitize(value: Any) -> Any:
    if isinstance(value, str):
        return sanitize_text(value)
    if isinstance(value, dict):
        return {k: _sanitize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_sanitize(v) for v in value]
    return value


def _parse(raw: str, path: Path) -> Any:
    try:
        if path.suffix.lower() == ".json":
            return json.loads(raw)
        return yaml.safe_load(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise KnowledgeBaseError(f"Could not parse knowledge base {path}: {e}") from e


def _iter_raw_records(data: Any, path: Path) -> list[tuple[str, dict]]:
    """Normalize the supported asset layouts to (label, record) pairs."""
    if isinstance(data, dict) and "conditions" in data:
        if not isinstance(data["conditions"], list):
            raise KnowledgeBaseError(
                f"'conditions' in {path} must be a list, "
                f"got {type(data['conditions']).__name__}"
            )
        data = data["conditions"]

    if isinstance(data, list):
        records = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise KnowledgeBaseError(f"Condition #{i} in {path} is not a mapping")
            records.append((f"#{i}", item))
        return records

    if isinstance(data, dict):
        records = []
        for key, item in data.items():
            if str(key).startswith("_"):  # metadata keys
                continue
            if not isinstance(item, dict):
                logger.warning("Skipping non-mapping entry %r in %s", key, path)
                continue
            if not any(k in item for k in ("name", "condition_name", "conditionName")):
                item = {**item, "name": str(key).replace("_", " ").title()}
            records.append((str(key), item))
        return records

    raise KnowledgeBaseError(
        f"Knowledge base {path} must be a list or mapping of conditions, "
        f"got {type(data).__name__}"
    )


def load_knowledge_base(path: Path | str | None = None) -> KnowledgeBase:
    """
    Load and validate the condition asset.

    Args:
        path: YAML or JSON file; defaults to the configured asset

    Returns:
        KnowledgeBase in asset order

    Raises:
        KnowledgeBaseError: if the asset is missing, unparsable or invalid
    """
    path = Path(path) if path else get_config().kb_path
    if not path.exists():
        raise KnowledgeBaseError(f"Knowledge base not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise KnowledgeBaseError(f"Could not read knowledge base {path}: {e}") from e

    data = _parse(_CONTROL_CHARS.sub("", raw), path)

    conditions = []
    for label, item in _iter_raw_records(data, path):
        try:
            conditions.append(ConditionRecord.model_validate(_sanitize(item)))
        except ValidationError as e:
            raise KnowledgeBaseError(f"Invalid condition {label} in {path}: {e}") from e

    if not conditions:
        raise KnowledgeBaseError(f"Knowledge base {path} contains no conditions")

    logger.info("Loaded %d conditions from %s", len(conditions), path)
    return KnowledgeBase(conditions, source=str(path))


# Singleton knowledge base instance
_knowledge_base: KnowledgeBase | None = None


def get_knowledge_base() -> KnowledgeBase:
    """Get the process-wide knowledge base, loading it on first use."""
    global _knowledge_base
    if _knowledge_base is None:
        _knowledge_base = load_knowledge_base()
    return _knowledge_base


def set_knowledge_base(knowledge_base: KnowledgeBase | None) -> None:
    """Replace the process-wide knowledge base (None forces a reload)."""
    global _knowledge_base
    _knowledge_base = knowledge_base
