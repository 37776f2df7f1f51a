from typing import List, Optional

from fastapi import APIRouter, Query

from models.schemas import ResourceItem
from services.resource_hub import all_tags, find_resources

router = APIRouter(prefix="/resources", tags=["resources"])


@router.get("", response_model=List[ResourceItem])
async def list_resources(tag: Optional[str] = Query(default=None), q: Optional[str] = Query(default=None)):
    return find_resources(tag=tag, query=q)


@router.get("/tags")
async def list_tags():
    return {"tags": all_tags()}
