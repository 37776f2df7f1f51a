"""
Fan-out/fan-in of the AI calls made when a questionnaire is submitted.

The narrative stream and the three suggestion batches run concurrently and
are joined with a barrier: the result is only assembled once every task has
either finished or failed. A failed task contributes nothing (an empty list
or no narrative) and is reported, but never aborts the others.
"""
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional
import asyncio
import inspect
import logging

from models.schemas import AssessmentResultData, StudentProfile, TaskStatus
from services.guidance_generator import GuidanceGenerator

logger = logging.getLogger(__name__)

NARRATIVE = "narrative"
CAREERS = "careers"
STREAMS = "streams"
SKILLS = "skills"
TASK_ORDER = (NARRATIVE, CAREERS, STREAMS, SKILLS)

AI_DISABLED_NARRATIVE = "AI features disabled: API Key missing."
ALL_FAILED_WARNING = "Could not retrieve full personalized guidance from AI. Basic profile calculated."

ChunkCallback = Callable[[str], Optional[Awaitable[None]]]


@dataclass
class SubmissionOutcome:
    result: AssessmentResultData
    tasks: Dict[str, TaskStatus] = field(default_factory=dict)
    warning: Optional[str] = None

    @property
    def failed(self) -> List[str]:
        return [name for name in TASK_ORDER if name in self.tasks and not self.tasks[name].succeeded]

    @property
    def complete(self) -> bool:
        return not self.failed


def build_warning(tasks: Dict[str, TaskStatus], disabled: bool = False) -> Optional[str]:
    """One message covering every shortfall, or None when all succeeded."""
    if disabled:
        return f"{AI_DISABLED_NARRATIVE} Basic profile calculated."
    failed = [name for name in TASK_ORDER if name in tasks and not tasks[name].succeeded]
    if not failed:
        return None
    if len(failed) == len(tasks):
        return ALL_FAILED_WARNING
    return f"Some personalized guidance could not be generated ({', '.join(failed)}). Showing what is available."


async def _emit(callback: Optional[ChunkCallback], chunk: str) -> None:
    if callback is None:
        return
    maybe = callback(chunk)
    if inspect.isawaitable(maybe):
        await maybe


def disabled_outcome(profile: StudentProfile) -> SubmissionOutcome:
    tasks = {name: TaskStatus(name=name, succeeded=False, error="AI disabled") for name in TASK_ORDER}
    return SubmissionOutcome(
        result=AssessmentResultData(profile=profile, profile_narrative=AI_DISABLED_NARRATIVE),
        tasks=tasks,
        warning=build_warning(tasks, disabled=True),
    )


async def run_submission(
    profile: StudentProfile,
    generator: GuidanceGenerator,
    on_narrative_chunk: Optional[ChunkCallback] = None,
    career_count: int = 3,
) -> SubmissionOutcome:
    if not generator.enabled:
        logger.warning("Submission without AI: API key missing")
        return disabled_outcome(profile)

    narrative_parts: List[str] = []

    async def narrative() -> str:
        async for chunk in generator.stream_profile_narrative(profile):
            narrative_parts.append(chunk)
            await _emit(on_narrative_chunk, chunk)
        return "".join(narrative_parts)

    results: List[Any] = await asyncio.gather(
        narrative(),
        generator.career_suggestions(profile, count=career_count),
        generator.stream_suggestions(profile),
        generator.skill_recommendations(profile),
        return_exceptions=True,
    )

    tasks: Dict[str, TaskStatus] = {}
    values: Dict[str, Any] = {}
    for name, value in zip(TASK_ORDER, results):
        if isinstance(value, BaseException):
            logger.error(f"Submission task '{name}' failed: {value}")
            tasks[name] = TaskStatus(name=name, succeeded=False, error=str(value) or type(value).__name__)
            values[name] = None
        else:
            tasks[name] = TaskStatus(name=name, succeeded=True)
            values[name] = value

    # Fragments streamed before a failure are kept
    narrative_text = values[NARRATIVE] if values[NARRATIVE] is not None else "".join(narrative_parts)

    result = AssessmentResultData(
        profile=profile,
        profile_narrative=narrative_text or None,
        career_suggestions=values[CAREERS] or [],
        stream_suggestions=values[STREAMS] or [],
        skill_recommendations=values[SKILLS] or [],
    )
    return SubmissionOutcome(result=result, tasks=tasks, warning=build_warning(tasks))
