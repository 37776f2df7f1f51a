"""
Domain error taxonomy.

Routers translate these into HTTP responses; services raise them and never
return HTTP concepts themselves.
"""
from typing import Iterable, List, Optional


class GuidanceError(Exception):
    """Base class for every domain error raised by the service layer."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ---------- Input validation ----------
class InputValidationError(GuidanceError):
    status_code = 400


class InvalidMobileNumber(InputValidationError):
    def __init__(self, mobile: str) -> None:
        super().__init__("Please enter a valid 10-digit mobile number.")
        self.mobile = mobile


class InvalidOtp(InputValidationError):
    def __init__(self) -> None:
        super().__init__("Invalid OTP. Please try again.")


class InvalidAnswer(InputValidationError):
    def __init__(self, question_id: str, reason: str) -> None:
        super().__init__(f"Invalid answer for '{question_id}': {reason}")
        self.question_id = question_id


class IncompleteQuestionnaire(InputValidationError):
    def __init__(self, missing: Iterable[str]) -> None:
        super().__init__("Please answer all questions before submitting.")
        self.missing: List[str] = list(missing)


class InvalidGoalText(InputValidationError):
    def __init__(self) -> None:
        super().__init__("Goal text cannot be empty.")


# ---------- Not found ----------
class NotFoundError(GuidanceError):
    status_code = 404


class AssessmentNotFound(NotFoundError):
    def __init__(self, assessment_id: str, message: Optional[str] = None) -> None:
        super().__init__(message or "Could not find the selected assessment.")
        self.assessment_id = assessment_id


class HierarchyNodeNotFound(NotFoundError):
    def __init__(self, level: int, key: str) -> None:
        super().__init__(f"No node '{key}' at level {level}")
        self.level = level
        self.key = key


class GoalNotFound(NotFoundError):
    def __init__(self, goal_id: str) -> None:
        super().__init__(f"Goal '{goal_id}' not found")
        self.goal_id = goal_id


class UserNotFound(NotFoundError):
    def __init__(self) -> None:
        super().__init__("Not logged in. Please log in again.")


# ---------- External collaborators ----------
class CollaboratorError(GuidanceError):
    status_code = 503


class AIServiceError(CollaboratorError):
    pass


class ReferenceDataError(CollaboratorError):
    pass


class StorageError(CollaboratorError):
    pass


# ---------- Flow ----------
class InvalidPhaseTransition(GuidanceError):
    status_code = 409

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot move from '{current}' to '{target}'")
        self.current = current
        self.target = target
