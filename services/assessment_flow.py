from enum import Enum
from typing import Dict, Iterable, List, Optional
import logging

from catalog.questions import LIKERT_MAX, LIKERT_MIN, QUESTIONS
from core.errors import IncompleteQuestionnaire, InvalidAnswer, InvalidPhaseTransition
from models.taxonomy import Question

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    LOGIN = "login"
    DASHBOARD = "dashboard"
    QUESTIONNAIRE = "questionnaire"
    LOADING_RESULTS = "loading_results"
    RESULTS = "results"
    COMPARE_ASSESSMENTS = "compare_assessments"
    OCCUPATIONS_EXPLORER = "occupations_explorer"
    EDUCATION_EXPLORER = "education_explorer"
    RESOURCE_HUB = "resource_hub"


TRANSITIONS: Dict[Phase, frozenset] = {
    Phase.LOGIN: frozenset({Phase.DASHBOARD}),
    Phase.DASHBOARD: frozenset({
        Phase.QUESTIONNAIRE, Phase.LOADING_RESULTS, Phase.COMPARE_ASSESSMENTS,
        Phase.OCCUPATIONS_EXPLORER, Phase.EDUCATION_EXPLORER, Phase.RESOURCE_HUB,
    }),
    Phase.QUESTIONNAIRE: frozenset({Phase.QUESTIONNAIRE, Phase.LOADING_RESULTS, Phase.DASHBOARD}),
    Phase.LOADING_RESULTS: frozenset({Phase.RESULTS, Phase.DASHBOARD}),
    Phase.RESULTS: frozenset({Phase.RESULTS, Phase.DASHBOARD, Phase.OCCUPATIONS_EXPLORER}),
    Phase.COMPARE_ASSESSMENTS: frozenset({Phase.DASHBOARD}),
    Phase.OCCUPATIONS_EXPLORER: frozenset({Phase.DASHBOARD}),
    Phase.EDUCATION_EXPLORER: frozenset({Phase.DASHBOARD}),
    Phase.RESOURCE_HUB: frozenset({Phase.DASHBOARD}),
}


class AssessmentFlow:
    """Per-user screen state: the current phase plus in-progress answers."""

    def __init__(self, questions: Optional[Iterable[Question]] = None, phase: Phase = Phase.LOGIN) -> None:
        self.questions: List[Question] = list(questions if questions is not None else QUESTIONS)
        self._question_ids = {q.id for q in self.questions}
        self.phase = phase
        self.answers: Dict[str, int] = {}
        self.current_record_id: Optional[str] = None
        self.error: Optional[str] = None

    def can_move(self, target: Phase) -> bool:
        return target in TRANSITIONS[self.phase]

    def move(self, target: Phase) -> None:
        if not self.can_move(target):
            raise InvalidPhaseTransition(self.phase.value, target.value)
        logger.debug(f"Flow {self.phase.value} -> {target.value}")
        self.phase = target

    def login(self) -> None:
        self.move(Phase.DASHBOARD)

    def logout(self) -> None:
        self.phase = Phase.LOGIN
        self.answers = {}
        self.current_record_id = None
        self.error = None

    # ---------- Questionnaire ----------
    def start_assessment(self) -> None:
        self.move(Phase.QUESTIONNAIRE)
        self.answers = {}
        self.error = None

    def record_answer(self, question_id: str, value: int) -> None:
        if self.phase != Phase.QUESTIONNAIRE:
            raise InvalidPhaseTransition(self.phase.value, Phase.QUESTIONNAIRE.value)
        if question_id not in self._question_ids:
            raise InvalidAnswer(question_id, "unknown question")
        if isinstance(value, bool) or not isinstance(value, int) or not LIKERT_MIN <= value <= LIKERT_MAX:
            raise InvalidAnswer(question_id, f"value must be an integer from {LIKERT_MIN} to {LIKERT_MAX}")
        self.answers[question_id] = value

    def missing_questions(self) -> List[str]:
        return [q.id for q in self.questions if q.id not in self.answers]

    def begin_submission(self) -> Dict[str, int]:
        """Enter loading_results; an incomplete questionnaire stays put."""
        if self.phase != Phase.QUESTIONNAIRE:
            raise InvalidPhaseTransition(self.phase.value, Phase.LOADING_RESULTS.value)
        missing = self.missing_questions()
        if missing:
            self.error = IncompleteQuestionnaire(missing).message
            raise IncompleteQuestionnaire(missing)
        self.move(Phase.LOADING_RESULTS)
        self.error = None
        return dict(self.answers)

    def finish_submission(self, record_id: str, warning: Optional[str] = None) -> None:
        self.move(Phase.RESULTS)
        self.current_record_id = record_id
        self.error = warning

    def abort_submission(self, message: str) -> None:
        self.move(Phase.DASHBOARD)
        self.error = message

    def cancel_assessment(self) -> None:
        self.move(Phase.DASHBOARD)
        self.answers = {}

    # ---------- Viewing stored results ----------
    def show_record(self, record_id: str) -> None:
        """Dashboard goes through loading_results; results re-enters directly."""
        if self.phase == Phase.DASHBOARD:
            self.move(Phase.LOADING_RESULTS)
        self.move(Phase.RESULTS)
        self.current_record_id = record_id
        self.error = None

    def back_to_dashboard(self, error: Optional[str] = None) -> None:
        if self.phase != Phase.DASHBOARD:
            self.move(Phase.DASHBOARD)
        self.error = error
