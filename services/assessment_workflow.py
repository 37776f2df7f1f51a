from typing import Dict, List, Optional, Tuple
import logging

from core.errors import AssessmentNotFound
from models.schemas import AssessmentComparison, AssessmentRecord, FlowState, StudentProfile
from models.taxonomy import Question
from services.assessment_flow import AssessmentFlow, Phase
from services.assessment_service import AssessmentRepository, compare_records
from services.guidance_generator import GuidanceGenerator
from services.profile_aggregator import compute_profile
from services.submission import ChunkCallback, SubmissionOutcome, run_submission

logger = logging.getLogger(__name__)

SUBMISSION_FAILED = "An unexpected error occurred during assessment processing. Please try again."
COMPARE_LOAD_FAILED = "Could not load one or both assessments for comparison."


class AssessmentWorkflow:
    """Drives each logged-in user's flow through questionnaire, results and comparison."""

    def __init__(self, repository: AssessmentRepository, generator: GuidanceGenerator,
                 questions: Optional[List[Question]] = None) -> None:
        self.repository = repository
        self.generator = generator
        self.questions = questions
        self._flows: Dict[str, AssessmentFlow] = {}

    def flow(self, user_id: str) -> AssessmentFlow:
        if user_id not in self._flows:
            flow = AssessmentFlow(self.questions)
            flow.login()
            self._flows[user_id] = flow
        return self._flows[user_id]

    def logout(self, user_id: str) -> None:
        flow = self._flows.pop(user_id, None)
        if flow is not None:
            flow.logout()

    def state(self, user_id: str) -> FlowState:
        flow = self.flow(user_id)
        return FlowState(
            phase=flow.phase.value,
            answered=sorted(flow.answers),
            missing=flow.missing_questions(),
            current_record_id=flow.current_record_id,
            error=flow.error,
        )

    def go_to(self, user_id: str, target: Phase) -> FlowState:
        flow = self.flow(user_id)
        if target == Phase.QUESTIONNAIRE:
            flow.start_assessment()
        elif target == Phase.DASHBOARD:
            flow.back_to_dashboard()
        else:
            flow.move(target)
        return self.state(user_id)

    # ---------- Questionnaire ----------
    def start(self, user_id: str) -> FlowState:
        self.flow(user_id).start_assessment()
        return self.state(user_id)

    def answer(self, user_id: str, question_id: str, value: int) -> FlowState:
        self.flow(user_id).record_answer(question_id, value)
        return self.state(user_id)

    def cancel(self, user_id: str) -> FlowState:
        self.flow(user_id).cancel_assessment()
        return self.state(user_id)

    def begin_submission(self, user_id: str) -> StudentProfile:
        """Move to loading_results and compute the profile; raises if the questionnaire is not ready."""
        flow = self.flow(user_id)
        answers = flow.begin_submission()
        return compute_profile(flow.questions, answers)

    async def complete_submission(self, user_id: str, profile: StudentProfile,
                                  on_narrative_chunk: Optional[ChunkCallback] = None) -> Tuple[AssessmentRecord, SubmissionOutcome]:
        flow = self.flow(user_id)
        try:
            outcome = await run_submission(profile, self.generator, on_narrative_chunk)
            record = self.repository.save(user_id, outcome.result)
        except Exception as e:
            logger.error(f"Submission failed for user {user_id}: {e}")
            flow.abort_submission(SUBMISSION_FAILED)
            raise
        flow.finish_submission(record.id, outcome.warning)
        if outcome.warning:
            logger.warning(f"Assessment {record.id} saved with warning: {outcome.warning}")
        return record, outcome

    async def submit(self, user_id: str, on_narrative_chunk: Optional[ChunkCallback] = None) -> Tuple[AssessmentRecord, SubmissionOutcome]:
        profile = self.begin_submission(user_id)
        return await self.complete_submission(user_id, profile, on_narrative_chunk)

    # ---------- Stored results ----------
    def owned_record(self, user_id: str, record_id: str) -> Optional[AssessmentRecord]:
        record = self.repository.get_by_id(record_id)
        if record is None or record.user_id != user_id:
            return None
        return record

    def view(self, user_id: str, record_id: str) -> AssessmentRecord:
        flow = self.flow(user_id)
        record = self.owned_record(user_id, record_id)
        if record is None:
            flow.back_to_dashboard(AssessmentNotFound(record_id).message)
            raise AssessmentNotFound(record_id)
        flow.show_record(record.id)
        return record

    def compare(self, user_id: str, first_id: str, second_id: str) -> AssessmentComparison:
        flow = self.flow(user_id)
        if flow.phase == Phase.COMPARE_ASSESSMENTS:
            flow.back_to_dashboard()
        first = self.owned_record(user_id, first_id)
        second = self.owned_record(user_id, second_id)
        if first is None or second is None:
            flow.back_to_dashboard(COMPARE_LOAD_FAILED)
            raise AssessmentNotFound(first_id if first is None else second_id, COMPARE_LOAD_FAILED)
        flow.move(Phase.COMPARE_ASSESSMENTS)
        flow.error = None
        return compare_records(first, second)
