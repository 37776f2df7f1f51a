from typing import List

from fastapi import APIRouter, Depends

from core.errors import GoalNotFound, GuidanceError
from models.schemas import GoalCreateRequest, GoalUpdateRequest, User, UserGoal
from routers.deps import get_current_user, get_goals, to_http
from services.goal_service import GoalRepository

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("", response_model=List[UserGoal])
async def list_goals(user: User = Depends(get_current_user), goals: GoalRepository = Depends(get_goals)):
    return goals.list(user.id)


@router.post("", response_model=UserGoal, status_code=201)
async def add_goal(
    request: GoalCreateRequest,
    user: User = Depends(get_current_user),
    goals: GoalRepository = Depends(get_goals),
):
    try:
        return goals.add(user.id, request.text, request.related_to)
    except GuidanceError as e:
        raise to_http(e)


@router.put("/{goal_id}", response_model=UserGoal)
async def update_goal(
    goal_id: str,
    request: GoalUpdateRequest,
    user: User = Depends(get_current_user),
    goals: GoalRepository = Depends(get_goals),
):
    try:
        return goals.edit(user.id, goal_id, request.text, request.related_to, request.is_completed)
    except GuidanceError as e:
        raise to_http(e)


@router.post("/{goal_id}/toggle", response_model=UserGoal)
async def toggle_goal(goal_id: str, user: User = Depends(get_current_user), goals: GoalRepository = Depends(get_goals)):
    try:
        return goals.toggle(user.id, goal_id)
    except GuidanceError as e:
        raise to_http(e)


@router.delete("/{goal_id}")
async def delete_goal(goal_id: str, user: User = Depends(get_current_user), goals: GoalRepository = Depends(get_goals)):
    if not goals.delete(user.id, goal_id):
        raise to_http(GoalNotFound(goal_id))
    return {"success": True, "message": "Goal deleted"}
