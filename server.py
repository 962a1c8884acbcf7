"""
Hygieia Web Server

FastAPI-based web server exposing the local symptom analyzer.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Setup paths
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from hygieia.engines import SymptomAnalyzer, extract_symptoms, match_conditions
from hygieia.errors import EmptyInputError
from hygieia.models import AnalysisResult, ConditionRecord, FollowUpQuestion

logger = logging.getLogger(__name__)


# Request/Response models
class AnalyzeRequest(BaseModel):
    """Request model for symptom analysis."""
    symptoms: str = Field(..., description="Comma or semicolon separated symptoms")
    previous_answers: Optional[dict[str, str]] = Field(
        None, description="Answers to follow-up questions, keyed q0, q1, ..."
    )


class AnalyzeResponse(BaseModel):
    """Ranked conditions plus follow-up questions."""
    results: list[AnalysisResult]
    follow_up_questions: list[FollowUpQuestion]
    extracted_symptoms: list[str]


class ConditionSummary(BaseModel):
    """Listing entry for a condition."""
    name: str
    category: Optional[str] = None


def create_app(analyzer: Optional[SymptomAnalyzer] = None) -> FastAPI:
    """
    Build the API around an analyzer.

    The knowledge base is loaded here, so a missing or malformed asset stops
    the server before it accepts requests.
    """
    analyzer = analyzer or SymptomAnalyzer()
    logger.info("Serving %d conditions", len(analyzer.knowledge_base))

    app = FastAPI(
        title="Hygieia",
        description="Hygieia - Local Symptom Checker API",
        version="0.1.0",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_analyzer() -> SymptomAnalyzer:
        return analyzer

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "conditions": len(analyzer.knowledge_base),
            "timestamp": datetime.now().isoformat(),
        }

    @app.post("/api/analyze", response_model=AnalyzeResponse, response_model_by_alias=True)
    async def analyze_symptoms(request: AnalyzeRequest, svc: SymptomAnalyzer = Depends(get_analyzer)):
        """
        Rank conditions against the submitted symptoms.

        An empty result list means nothing cleared the confidence floor.
        """
        try:
            results = svc.analyze(request.symptoms, request.previous_answers)
        except EmptyInputError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return AnalyzeResponse(
            results=results,
            follow_up_questions=svc.generate_follow_up_questions(results),
            extracted_symptoms=extract_symptoms(request.symptoms),
        )

    @app.get("/api/suggest")
    async def suggest_symptoms(
        q: str = Query("", description="Partial symptom text"),
        svc: SymptomAnalyzer = Depends(get_analyzer),
    ):
        """Autocomplete symptom phrases."""
        return svc.suggest(q)

    @app.get("/api/conditions", response_model=list[ConditionSummary])
    async def list_conditions(
        q: Optional[str] = Query(None, description="Filter by partial name"),
        svc: SymptomAnalyzer = Depends(get_analyzer),
    ):
        """List conditions in the knowledge base."""
        if q:
            records = match_conditions(q, svc.knowledge_base)
        else:
            records = list(svc.knowledge_base)
        return [ConditionSummary(name=r.name, category=r.category) for r in records]

    @app.get("/api/conditions/{name}", response_model=ConditionRecord)
    async def get_condition(name: str, svc: SymptomAnalyzer = Depends(get_analyzer)):
        """Full reference entry for one condition."""
        record = svc.lookup_condition(name)
        if record is None:
            raise HTTPException(status_code=404, detail="Condition not found")
        return record

    return app


def run_server(host: str = "0.0.0.0", port: int = 8000):
    """Run the server."""
    import uvicorn
    from hygieia.config import configure_logging

    configure_logging()
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    run_server()
