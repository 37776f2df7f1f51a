import asyncio

from catalog.questions import QUESTIONS
from services.profile_aggregator import compute_profile
from services.submission import (
    AI_DISABLED_NARRATIVE,
    ALL_FAILED_WARNING,
    TASK_ORDER,
    build_warning,
    run_submission,
)

from tests.conftest import FakeGenerator, all_answers

PROFILE = compute_profile(QUESTIONS, all_answers(4))


def test_all_tasks_succeed():
    outcome = asyncio.run(run_submission(PROFILE, FakeGenerator()))

    assert outcome.complete
    assert outcome.warning is None
    assert outcome.result.profile_narrative == "You are curious."
    assert len(outcome.result.career_suggestions) == 3
    assert outcome.result.stream_suggestions[0].name == "Science (PCM Focus)"
    assert outcome.result.skill_recommendations[0].skill_name == "Critical Thinking"
    assert list(outcome.tasks) == list(TASK_ORDER)


def test_career_count_is_forwarded():
    outcome = asyncio.run(run_submission(PROFILE, FakeGenerator(), career_count=5))

    assert len(outcome.result.career_suggestions) == 5


def test_partial_failure_keeps_the_rest():
    outcome = asyncio.run(run_submission(PROFILE, FakeGenerator(fail={"careers", "skills"})))

    assert outcome.failed == ["careers", "skills"]
    assert outcome.result.career_suggestions == []
    assert outcome.result.skill_recommendations == []
    assert outcome.result.stream_suggestions
    assert outcome.result.profile_narrative == "You are curious."
    assert "careers, skills" in outcome.warning
    assert outcome.tasks["careers"].error == "careers failed"


def test_narrative_fragments_survive_stream_failure():
    outcome = asyncio.run(run_submission(PROFILE, FakeGenerator(fail={"narrative"})))

    assert outcome.failed == ["narrative"]
    assert outcome.result.profile_narrative == "You are "


def test_everything_fails():
    generator = FakeGenerator(fail={"narrative", "careers", "streams", "skills"}, narrative=[])

    outcome = asyncio.run(run_submission(PROFILE, generator))

    assert outcome.warning == ALL_FAILED_WARNING
    assert outcome.result.profile == PROFILE
    assert outcome.result.profile_narrative is None


def test_ai_disabled():
    outcome = asyncio.run(run_submission(PROFILE, FakeGenerator(enabled=False)))

    assert outcome.result.profile_narrative == AI_DISABLED_NARRATIVE
    assert outcome.result.career_suggestions == []
    assert outcome.warning.startswith(AI_DISABLED_NARRATIVE)
    assert not outcome.complete


def test_chunks_forwarded_in_order():
    sync_chunks, async_chunks = [], []

    async def collect(chunk):
        async_chunks.append(chunk)

    asyncio.run(run_submission(PROFILE, FakeGenerator(), sync_chunks.append))
    asyncio.run(run_submission(PROFILE, FakeGenerator(), collect))

    assert sync_chunks == ["You are ", "curious."]
    assert async_chunks == sync_chunks


def test_build_warning_without_failures():
    assert build_warning({}) is None
