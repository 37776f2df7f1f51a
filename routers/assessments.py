from datetime import datetime
from typing import List
import asyncio
import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from catalog.questions import LIKERT_SCALE_OPTIONS, QUESTIONS
from core.errors import AssessmentNotFound, GuidanceError
from models.schemas import (
    AnswerRequest,
    AssessmentComparison,
    AssessmentRecord,
    AssessmentSummary,
    ChatMessage,
    ChatRequest,
    ComputeProfileRequest,
    FlowState,
    PhaseRequest,
    ProfileInterpretation,
    SkillRequest,
    StudentProfile,
    SubmissionResponse,
    User,
)
from routers.deps import get_current_user, get_generator, get_mentor, get_workflow, to_http
from services.assessment_flow import Phase
from services.assessment_workflow import SUBMISSION_FAILED, AssessmentWorkflow
from services.guidance_generator import GuidanceGenerator
from services.mentor_chat import MentorChatService
from services.profile_aggregator import compute_profile
from services.profile_interpretation import interpret_profile
from services.submission import SubmissionOutcome, TASK_ORDER

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assessments"])


def _submission_response(record: AssessmentRecord, outcome: SubmissionOutcome) -> SubmissionResponse:
    return SubmissionResponse(
        success=True,
        message=f"Assessment saved as '{record.assessment_name}'",
        record=record,
        warning=outcome.warning,
        tasks=[outcome.tasks[name] for name in TASK_ORDER if name in outcome.tasks],
        analysis_date=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
    )


def _record_or_404(workflow: AssessmentWorkflow, user: User, assessment_id: str) -> AssessmentRecord:
    record = workflow.owned_record(user.id, assessment_id)
    if record is None:
        raise to_http(AssessmentNotFound(assessment_id))
    return record


# ---------- Questionnaire ----------
@router.get("/questionnaire")
async def get_questionnaire():
    return {
        "questions": [
            {
                "id": q.id,
                "text": q.text,
                "framework": q.framework.value,
                "category": q.category.value,
                "pole": q.pole.value if q.pole else None,
            }
            for q in QUESTIONS
        ],
        "scale": LIKERT_SCALE_OPTIONS,
        "total": len(QUESTIONS),
    }


@router.post("/profile/compute", response_model=StudentProfile)
async def compute_profile_endpoint(request: ComputeProfileRequest):
    return compute_profile(QUESTIONS, request.answers)


# ---------- Flow ----------
@router.get("/assessments/flow", response_model=FlowState)
async def get_flow(user: User = Depends(get_current_user), workflow: AssessmentWorkflow = Depends(get_workflow)):
    return workflow.state(user.id)


@router.put("/assessments/flow", response_model=FlowState)
async def set_flow(
    request: PhaseRequest,
    user: User = Depends(get_current_user),
    workflow: AssessmentWorkflow = Depends(get_workflow),
):
    try:
        target = Phase(request.phase)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown phase '{request.phase}'")
    try:
        return workflow.go_to(user.id, target)
    except GuidanceError as e:
        raise to_http(e)


@router.post("/assessments/start", response_model=FlowState)
async def start_assessment(user: User = Depends(get_current_user), workflow: AssessmentWorkflow = Depends(get_workflow)):
    try:
        return workflow.start(user.id)
    except GuidanceError as e:
        raise to_http(e)


@router.put("/assessments/answers", response_model=FlowState)
async def record_answer(
    request: AnswerRequest,
    user: User = Depends(get_current_user),
    workflow: AssessmentWorkflow = Depends(get_workflow),
):
    try:
        return workflow.answer(user.id, request.question_id, request.value)
    except GuidanceError as e:
        raise to_http(e)


@router.post("/assessments/cancel", response_model=FlowState)
async def cancel_assessment(user: User = Depends(get_current_user), workflow: AssessmentWorkflow = Depends(get_workflow)):
    try:
        return workflow.cancel(user.id)
    except GuidanceError as e:
        raise to_http(e)


# ---------- Submission ----------
@router.post("/assessments/submit", response_model=SubmissionResponse)
async def submit_assessment(user: User = Depends(get_current_user), workflow: AssessmentWorkflow = Depends(get_workflow)):
    try:
        record, outcome = await workflow.submit(user.id)
        return _submission_response(record, outcome)
    except GuidanceError as e:
        raise to_http(e)
    except Exception as e:
        logger.exception(f"Error submitting assessment: {str(e)}")
        raise HTTPException(status_code=500, detail=SUBMISSION_FAILED)


@router.post("/assessments/submit/stream")
async def submit_assessment_stream(user: User = Depends(get_current_user), workflow: AssessmentWorkflow = Depends(get_workflow)):
    """
    Submit and stream the narrative as it is written.

    Emits one JSON object per line: `chunk` events carrying narrative text,
    then a single `complete` event with the saved record (or an `error` event).
    """
    try:
        profile = workflow.begin_submission(user.id)
    except GuidanceError as e:
        raise to_http(e)

    queue: asyncio.Queue = asyncio.Queue()

    async def on_chunk(text: str) -> None:
        await queue.put({"type": "chunk", "text": text})

    async def run() -> None:
        try:
            record, outcome = await workflow.complete_submission(user.id, profile, on_chunk)
            await queue.put({"type": "complete", **_submission_response(record, outcome).to_doc()})
        except Exception as e:
            logger.exception(f"Error in streamed submission: {str(e)}")
            await queue.put({"type": "error", "detail": SUBMISSION_FAILED, "retry": True})
        finally:
            await queue.put(None)

    async def events():
        task = asyncio.create_task(run())
        try:
            while True:
                event = await queue.get()
                if event is None:
                    break
                yield json.dumps(event) + "\n"
        finally:
            await task

    return StreamingResponse(events(), media_type="application/x-ndjson")


# ---------- Stored assessments ----------
@router.get("/assessments", response_model=List[AssessmentSummary])
async def list_assessments(user: User = Depends(get_current_user), workflow: AssessmentWorkflow = Depends(get_workflow)):
    return [
        AssessmentSummary(id=r.id, assessment_name=r.assessment_name, timestamp=r.timestamp)
        for r in workflow.repository.list_by_user(user.id)
    ]


@router.get("/assessments/compare", response_model=AssessmentComparison)
async def compare_assessments(
    first: str = Query(...),
    second: str = Query(...),
    user: User = Depends(get_current_user),
    workflow: AssessmentWorkflow = Depends(get_workflow),
):
    try:
        return workflow.compare(user.id, first, second)
    except GuidanceError as e:
        raise to_http(e)


@router.get("/assessments/{assessment_id}", response_model=AssessmentRecord)
async def view_assessment(
    assessment_id: str,
    user: User = Depends(get_current_user),
    workflow: AssessmentWorkflow = Depends(get_workflow),
):
    try:
        return workflow.view(user.id, assessment_id)
    except GuidanceError as e:
        raise to_http(e)


@router.get("/assessments/{assessment_id}/interpretation", response_model=ProfileInterpretation)
async def interpret_assessment(
    assessment_id: str,
    user: User = Depends(get_current_user),
    workflow: AssessmentWorkflow = Depends(get_workflow),
):
    record = _record_or_404(workflow, user, assessment_id)
    return interpret_profile(record.profile)


# ---------- Mentor chat ----------
@router.get("/assessments/{assessment_id}/chat", response_model=List[ChatMessage])
async def chat_history(
    assessment_id: str,
    user: User = Depends(get_current_user),
    workflow: AssessmentWorkflow = Depends(get_workflow),
    mentor: MentorChatService = Depends(get_mentor),
):
    return mentor.history(_record_or_404(workflow, user, assessment_id))


@router.post("/assessments/{assessment_id}/chat")
async def chat_with_mentor(
    assessment_id: str,
    request: ChatRequest,
    user: User = Depends(get_current_user),
    workflow: AssessmentWorkflow = Depends(get_workflow),
    mentor: MentorChatService = Depends(get_mentor),
):
    if not request.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")
    record = _record_or_404(workflow, user, assessment_id)
    return StreamingResponse(mentor.send(record, request.message), media_type="text/plain; charset=utf-8")


# ---------- Skills ----------
@router.post("/assessments/{assessment_id}/skills")
async def recommend_skills(
    assessment_id: str,
    request: SkillRequest,
    user: User = Depends(get_current_user),
    workflow: AssessmentWorkflow = Depends(get_workflow),
    generator: GuidanceGenerator = Depends(get_generator),
):
    record = _record_or_404(workflow, user, assessment_id)
    if not generator.enabled:
        raise HTTPException(status_code=503, detail="AI features disabled: API Key missing.")
    try:
        skills = await generator.skill_recommendations(record.profile, request.career_context)
    except GuidanceError as e:
        raise to_http(e)
    return {
        "success": True,
        "careerContext": request.career_context,
        "skills": [s.to_doc() for s in skills],
        "warning": None if skills else "Could not generate skill recommendations. Please try again.",
    }
