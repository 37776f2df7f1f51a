"""
Shared service singletons for the routers.

Each getter is a FastAPI dependency so tests can swap implementations via
`app.dependency_overrides`.
"""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException

from catalog.education_system import INDIAN_EDUCATION_SYSTEM
from core.errors import GuidanceError
from core.storage import KeyValueStore, build_store
from models.reference import IndianEducationSystem
from models.schemas import User
from services.assessment_service import AssessmentRepository
from services.assessment_workflow import AssessmentWorkflow
from services.auth_service import AuthService
from services.goal_service import GoalRepository
from services.guidance_generator import GuidanceGenerator
from services.hierarchy_navigator import EducationTree
from services.isco_service import IscoBootstrap
from services.mentor_chat import MentorChatService


@lru_cache
def get_store() -> KeyValueStore:
    return build_store()


@lru_cache
def get_generator() -> GuidanceGenerator:
    return GuidanceGenerator()


@lru_cache
def get_education_tree() -> EducationTree:
    return EducationTree(IndianEducationSystem.model_validate(INDIAN_EDUCATION_SYSTEM))


# Services below hold per-process state, so one instance per backing store.
# Each cached service references its owners, which keeps their ids unique.
_services = {}


def _service(kind, factory, *owners):
    key = (kind,) + tuple(id(owner) for owner in owners)
    if key not in _services:
        _services[key] = factory()
    return _services[key]


def get_auth(store: KeyValueStore = Depends(get_store)) -> AuthService:
    return _service("auth", lambda: AuthService(store), store)


def get_goals(store: KeyValueStore = Depends(get_store)) -> GoalRepository:
    return GoalRepository(store)


def get_repository(store: KeyValueStore = Depends(get_store)) -> AssessmentRepository:
    return _service("assessments", lambda: AssessmentRepository(store), store)


def get_workflow(
    repository: AssessmentRepository = Depends(get_repository),
    generator: GuidanceGenerator = Depends(get_generator),
) -> AssessmentWorkflow:
    return _service("workflow", lambda: AssessmentWorkflow(repository, generator), repository.store, generator)


def get_mentor(
    store: KeyValueStore = Depends(get_store),
    generator: GuidanceGenerator = Depends(get_generator),
) -> MentorChatService:
    return MentorChatService(store, generator)


def get_isco(store: KeyValueStore = Depends(get_store)) -> IscoBootstrap:
    return _service("isco", lambda: IscoBootstrap(store), store)


def get_current_user(
    x_session_token: Optional[str] = Header(default=None),
    auth: AuthService = Depends(get_auth),
) -> User:
    try:
        return auth.current_user(x_session_token)
    except GuidanceError as e:
        raise HTTPException(status_code=401, detail=e.message)


def to_http(e: GuidanceError) -> HTTPException:
    """Map a domain error onto the HTTP status it carries."""
    detail = e.message
    missing = getattr(e, "missing", None)
    if missing:
        detail = {"message": e.message, "missing": missing}
    return HTTPException(status_code=e.status_code, detail=detail)
