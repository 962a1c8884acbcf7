"""
Markdown exporter for analysis results.

Renders a ranked symptom analysis as a human-readable report.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from hygieia.models import AnalysisResult, FollowUpQuestion

DISCLAIMER = (
    "This report is generated by lexical matching against a reference knowledge base. "
    "It is not a diagnosis."
)


def export_markdown(
    results: list[AnalysisResult],
    output_path: Path | None = None,
    query: str | None = None,
    follow_up_questions: list[FollowUpQuestion] | None = None,
    include_details: bool = True,
) -> str:
    """
    Export analysis results to Markdown.

    Args:
        results: Ranked analysis results
        output_path: Optional path to write the Markdown file
        query: The symptom text that was analyzed
        follow_up_questions: Questions to list after the results
        include_details: Whether to include the summary sections per condition

    Returns:
        Markdown string of the report
    """
    lines = []

    # Header
    lines.append("# Symptom Analysis")
    lines.append("")
    lines.append(f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    if query:
        lines.append(f"**Symptoms:** {query}")
    lines.append("")
    lines.append(f"> {DISCLAIMER}")
    lines.append("")

    if not results:
        lines.append("No matching conditions found. Try describing your symptoms differently.")
        lines.append("")

    for rank, result in enumerate(results, start=1):
        lines.append(f"## {rank}. {result.condition_name} ({result.confidence}%)")
        lines.append("")
        lines.append(result.reasoning)
        lines.append("")
        if result.matching_symptoms:
            lines.append(f"- **Matching symptoms:** {', '.join(result.matching_symptoms)}")
            lines.append("")

        if include_details:
            _add_section(lines, "Key Causes", result.causes_summary)
            _add_section(lines, "Risk Factors", result.risk_factors_summary)
            _add_section(lines, "Home Care", result.home_remedies_summary)
            _add_section(lines, "Exercises", result.exercises_summary)

    if results:
        lines.append("## When to See a Doctor")
        lines.append("")
        lines.append(results[0].when_to_see_doctor)
        lines.append("")

    if follow_up_questions:
        lines.append("## Follow-up Questions")
        lines.append("")
        for q in follow_up_questions:
            lines.append(f"- {q.question}")
            for option in q.options or []:
                lines.append(f"  - {option}")
        lines.append("")

    markdown = "\n".join(lines)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown)

    return markdown


def _add_section(lines: list[str], title: str, items: list[str]) -> None:
    if not items:
        return
    lines.append(f"### {title}")
    lines.append("")
    for item in items:
        lines.append(f"- {item}")
    lines.append("")
