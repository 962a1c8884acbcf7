"""
Shared fixtures for Hygieia tests.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

MIGRAINE_SYMPTOMS = "* **Headache on one side** lasting hours. * **Nausea** and sensitivity to light."

FIXTURE_YAML = """\
_meta:
  version: 1

migraine:
  name: Migraine
  category: neurological
  overview: Recurrent headaches.
  symptoms: "* **Headache on one side** lasting hours. * **Nausea** and sensitivity to light."
  causes_and_risk_factors: |
    * **Stress** triggers attacks.

    Risk Factors
    * **Family history**: strong link.
  treatment: Triptans.
  home_remedies: |
    * **Rest in a dark room**: helps.
  exercises: Gentle yoga. Regular walks.

influenza:
  name: Influenza
  category: respiratory
  symptoms: |
    1. **Sudden fever** and chills.
    - Dry cough
    - Muscle aches
"""


@pytest.fixture
def migraine():
    from hygieia.models import ConditionRecord

    return ConditionRecord(
        name="Migraine",
        symptoms=MIGRAINE_SYMPTOMS,
        causes_and_risk_factors=(
            "* **Stress** triggers attacks.\n\nRisk Factors\n* **Family history**: strong link."
        ),
        treatment="Triptans.",
        home_remedies="* **Rest in a dark room**: helps.",
        exercises="Gentle yoga. Regular walks.",
    )


@pytest.fixture
def influenza():
    from hygieia.models import ConditionRecord

    return ConditionRecord(
        name="Influenza",
        symptoms="Sudden fever, chills, dry cough and muscle aches.",
    )


@pytest.fixture
def knowledge_base(migraine, influenza):
    from hygieia.models import KnowledgeBase

    return KnowledgeBase([migraine, influenza], source="fixture")


@pytest.fixture
def analyzer(knowledge_base):
    from hygieia.engines import SymptomAnalyzer

    return SymptomAnalyzer(knowledge_base, max_results=8, min_confidence=10)


@pytest.fixture
def kb_file(tmp_path):
    path = tmp_path / "conditions.yaml"
    path.write_text(FIXTURE_YAML)
    return path


@pytest.fixture(autouse=True)
def reset_singletons():
    """Each test starts and ends with no process-wide knowledge base."""
    from hygieia.config import get_config
    from hygieia.engines import reset_vocabulary
    from hygieia.kb import set_knowledge_base

    set_knowledge_base(None)
    reset_vocabulary()
    get_config.cache_clear()
    yield
    set_knowledge_base(None)
    reset_vocabulary()
    get_config.cache_clear()
