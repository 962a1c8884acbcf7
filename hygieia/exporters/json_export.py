"""
JSON exporter for analysis results.

Produces the camelCase payload UI callers render.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

from hygieia.models import AnalysisResult, FollowUpQuestion


class DateTimeEncoder(json.JSONEncoder):
    """JSON encoder that handles dates and datetimes."""
    
    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


def export_json(
    results: list[AnalysisResult],
    output_path: Path | None = None,
    query: str | None = None,
    follow_up_questions: list[FollowUpQuestion] | None = None,
    indent: int = 2,
) -> str:
    """
    Export analysis results to JSON.
    
    Args:
        results: Ranked analysis results
        output_path: Optional path to write the JSON file
        query: The symptom text that was analyzed
        follow_up_questions: Questions to include alongside the results
        indent: JSON indentation level
    
    Returns:
        JSON string of the report
    """
    data = {
        "query": query,
        "generatedAt": datetime.now(),
        "results": [r.model_dump(mode="json", by_alias=True) for r in results],
        "followUpQuestions": [
            q.model_dump(mode="json", exclude_none=True) for q in follow_up_questions or []
        ],
    }
    
    json_str = json.dumps(data, indent=indent, cls=DateTimeEncoder)
    
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_str)
    
    return json_str
