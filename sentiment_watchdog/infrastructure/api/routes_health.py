"""Health check endpoint."""

from fastapi import APIRouter, Depends

from sentiment_watchdog.adapters.llm.openai_adapter import OpenAIAdapter
from sentiment_watchdog.infrastructure.api.dependencies import get_llm_adapter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(llm: OpenAIAdapter = Depends(get_llm_adapter)):
    """Report API status and which analysis backend serves support messages."""
    return {
        "status": "ok",
        "llm": "openai" if llm.available else "keyword-heuristic",
        "service": "Sentiment Watchdog Pro",
    }
