from typing import List, Optional
import logging

from core.errors import GoalNotFound, InvalidGoalText
from core.storage import KeyValueStore, StorageKey
from models.schemas import UserGoal
from core.ids import new_id, now_ms

logger = logging.getLogger(__name__)


class GoalRepository:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def _all(self) -> List[UserGoal]:
        return [UserGoal(**doc) for doc in self.store.get_list(StorageKey.USER_GOALS)]

    def _save_all(self, goals: List[UserGoal]) -> None:
        self.store.set(StorageKey.USER_GOALS, [g.to_doc() for g in goals])

    def list(self, user_id: str) -> List[UserGoal]:
        goals = [g for g in self._all() if g.user_id == user_id]
        return sorted(goals, key=lambda g: g.created_at, reverse=True)

    def get(self, user_id: str, goal_id: str) -> UserGoal:
        for goal in self._all():
            if goal.id == goal_id and goal.user_id == user_id:
                return goal
        raise GoalNotFound(goal_id)

    def add(self, user_id: str, text: str, related_to: Optional[str] = None) -> UserGoal:
        text = (text or "").strip()
        if not text:
            raise InvalidGoalText()
        goal = UserGoal(id=new_id("goal"), user_id=user_id, text=text, related_to=related_to, created_at=now_ms())
        goals = self._all()
        goals.append(goal)
        self._save_all(goals)
        logger.info(f"Added goal {goal.id} for user {user_id}")
        return goal

    def update(self, goal: UserGoal) -> Optional[UserGoal]:
        goals = self._all()
        for i, existing in enumerate(goals):
            if existing.id == goal.id and existing.user_id == goal.user_id:
                goals[i] = goal
                self._save_all(goals)
                return goal
        return None

    def edit(self, user_id: str, goal_id: str, text: Optional[str] = None,
             related_to: Optional[str] = None, is_completed: Optional[bool] = None) -> UserGoal:
        goal = self.get(user_id, goal_id)
        changes = {}
        if text is not None:
            if not text.strip():
                raise InvalidGoalText()
            changes["text"] = text.strip()
        if related_to is not None:
            changes["related_to"] = related_to
        if is_completed is not None:
            changes["is_completed"] = is_completed
        return self.update(goal.model_copy(update=changes))

    def toggle(self, user_id: str, goal_id: str) -> UserGoal:
        goal = self.get(user_id, goal_id)
        return self.update(goal.model_copy(update={"is_completed": not goal.is_completed}))

    def delete(self, user_id: str, goal_id: str) -> bool:
        goals = self._all()
        remaining = [g for g in goals if not (g.id == goal_id and g.user_id == user_id)]
        if len(remaining) == len(goals):
            return False
        self._save_all(remaining)
        return True
