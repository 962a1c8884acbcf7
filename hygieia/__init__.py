"""
Hygieia: local symptom-to-condition matching.

Scores free-text symptom phrases against a bundled medical knowledge base,
ranks candidate conditions, and extracts short summaries from their prose.
"""

__version__ = "0.1.0"
