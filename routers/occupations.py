from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from core.errors import GuidanceError, HierarchyNodeNotFound, ReferenceDataError
from models.reference import ISCOUnitGroup, NavigationView
from routers.deps import get_generator, get_isco, to_http
from services.guidance_generator import GuidanceGenerator
from services.hierarchy_navigator import OccupationIndex, OccupationNavigator
from services.isco_service import IscoBootstrap

router = APIRouter(prefix="/occupations", tags=["occupations"])


def split_path(path: Optional[str]) -> List[str]:
    """`"2,21,214"` -> `["2", "21", "214"]`; blanks are dropped."""
    return [key.strip() for key in (path or "").split(",") if key.strip()]


async def _index(isco: IscoBootstrap) -> OccupationIndex:
    if isco.status.state == "idle":
        await isco.ensure_loaded()
    try:
        return isco.index
    except ReferenceDataError as e:
        raise HTTPException(status_code=503, detail={"message": e.message, "status": isco.status.as_dict()})


@router.get("/status")
async def occupation_status(isco: IscoBootstrap = Depends(get_isco)):
    return isco.status.as_dict()


@router.get("/navigate", response_model=NavigationView)
async def navigate_occupations(path: Optional[str] = Query(default=None), isco: IscoBootstrap = Depends(get_isco)):
    index = await _index(isco)
    try:
        return OccupationNavigator.from_keys(index, split_path(path), "Occupations").view()
    except GuidanceError as e:
        raise to_http(e)


@router.get("/search", response_model=List[ISCOUnitGroup])
async def search_occupations(q: str = Query(default=""), isco: IscoBootstrap = Depends(get_isco)):
    return OccupationNavigator(await _index(isco)).search(q)


@router.get("/{code}", response_model=NavigationView)
async def occupation_detail(code: str, isco: IscoBootstrap = Depends(get_isco)):
    navigator = OccupationNavigator(await _index(isco))
    try:
        navigator.select_search_result(code)
    except GuidanceError as e:
        raise to_http(e)
    return navigator.view()


@router.post("/{code}/deep-dive")
async def occupation_deep_dive(
    code: str,
    isco: IscoBootstrap = Depends(get_isco),
    generator: GuidanceGenerator = Depends(get_generator),
):
    unit = (await _index(isco)).unit(code)
    if unit is None:
        raise to_http(HierarchyNodeNotFound(3, code))
    if not generator.enabled:
        raise HTTPException(status_code=503, detail="AI features disabled: API Key missing.")
    try:
        deep_dive = await generator.occupation_deep_dive(unit.title, unit.code)
    except GuidanceError as e:
        raise to_http(e)
    if deep_dive is None:
        raise HTTPException(status_code=503, detail=f"Could not generate a deep dive for {unit.title}.")
    return {"code": unit.code, "title": unit.title, "deepDive": deep_dive.to_doc()}
