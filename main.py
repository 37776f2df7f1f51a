from contextlib import asynccontextmanager
import asyncio
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import settings
from core.errors import GuidanceError
from routers import assessments, auth, education, goals, occupations, resources, system
from routers.deps import get_isco, get_store

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    bootstrap = None
    if settings.ISCO_BOOTSTRAP_ON_STARTUP:
        # Occupation data loads in the background; everything else is usable meanwhile
        bootstrap = asyncio.create_task(get_isco(get_store()).ensure_loaded())
    yield
    if bootstrap is not None and not bootstrap.done():
        bootstrap.cancel()


app = FastAPI(
    title="NextStep Guidance API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GuidanceError)
async def guidance_error_handler(request: Request, exc: GuidanceError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Something went wrong. Please try again.", "retry": True},
    )


app.include_router(system.router)
app.include_router(auth.router)
app.include_router(assessments.router)
app.include_router(goals.router)
app.include_router(occupations.router)
app.include_router(education.router)
app.include_router(resources.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
