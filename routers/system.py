from fastapi import APIRouter, Depends

from core.config import settings
from core.openai_client import openai_client
from core.storage import KeyValueStore
from routers.deps import get_isco, get_store
from services.isco_service import IscoBootstrap

router = APIRouter()


@router.get("/")
async def root():
    return {
        "message": "NextStep Guidance API",
        "version": settings.APP_VERSION,
        "features": [
            "Psychometric questionnaire (Big Five, MBTI-style, RIASEC, Work Values)",
            "AI profile narrative, career, stream and skill suggestions",
            "Assessment history and comparison",
            "AI mentor chat",
            "ISCO occupation explorer",
            "Indian education pathway explorer",
            "Goals and resource hub",
        ],
        "endpoints": {
            "/auth/otp/request": "POST - Request a (simulated) OTP",
            "/questionnaire": "GET - Questions and Likert labels",
            "/assessments/submit": "POST - Submit the questionnaire",
            "/assessments/submit/stream": "POST - Submit and stream the narrative",
            "/occupations/navigate": "GET - Drill through ISCO groups",
            "/education/navigate": "GET - Drill through education pathways",
            "/health": "GET - Health check",
        },
    }


@router.get("/health")
async def health_check(store: KeyValueStore = Depends(get_store), isco: IscoBootstrap = Depends(get_isco)):
    store_ok = store.ping()
    return {
        "status": "healthy" if store_ok else "degraded",
        "ai_configured": openai_client.configured,
        "storage": {"backend": type(store).__name__, "reachable": store_ok},
        "isco": isco.status.as_dict(),
    }
