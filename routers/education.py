from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.errors import GuidanceError
from models.reference import NavigationView
from routers.deps import get_education_tree, to_http
from routers.occupations import split_path
from services.hierarchy_navigator import EducationTree, HierarchyNavigator

router = APIRouter(prefix="/education", tags=["education"])


@router.get("/navigate", response_model=NavigationView)
async def navigate_education(path: Optional[str] = Query(default=None), tree: EducationTree = Depends(get_education_tree)):
    try:
        return HierarchyNavigator.from_keys(tree, split_path(path), "Education").view()
    except GuidanceError as e:
        raise to_http(e)
