import asyncio

import pytest

from catalog.questions import QUESTIONS
from core.errors import AssessmentNotFound, IncompleteQuestionnaire, InvalidAnswer, InvalidPhaseTransition
from services.assessment_flow import AssessmentFlow, Phase
from services.assessment_service import AssessmentRepository
from services.assessment_workflow import COMPARE_LOAD_FAILED, SUBMISSION_FAILED, AssessmentWorkflow

from tests.conftest import FakeGenerator, all_answers


def _answer_all(workflow, user_id, value=4):
    for qid, v in all_answers(value).items():
        workflow.answer(user_id, qid, v)


@pytest.fixture
def workflow(store):
    return AssessmentWorkflow(AssessmentRepository(store), FakeGenerator())


def test_flow_starts_at_login():
    flow = AssessmentFlow()

    assert flow.phase == Phase.LOGIN
    with pytest.raises(InvalidPhaseTransition):
        flow.move(Phase.QUESTIONNAIRE)
    flow.login()
    assert flow.phase == Phase.DASHBOARD


def test_record_answer_validation():
    flow = AssessmentFlow(phase=Phase.DASHBOARD)

    with pytest.raises(InvalidPhaseTransition):
        flow.record_answer("b5_o1", 3)

    flow.start_assessment()
    with pytest.raises(InvalidAnswer):
        flow.record_answer("unknown", 3)
    for bad in (0, 6, True, 2.5):
        with pytest.raises(InvalidAnswer):
            flow.record_answer("b5_o1", bad)

    flow.record_answer("b5_o1", 3)
    flow.record_answer("b5_o1", 5)
    assert flow.answers == {"b5_o1": 5}


def test_incomplete_submission_stays_in_questionnaire():
    flow = AssessmentFlow(phase=Phase.DASHBOARD)
    flow.start_assessment()
    flow.record_answer("b5_o1", 3)

    with pytest.raises(IncompleteQuestionnaire) as exc:
        flow.begin_submission()

    assert flow.phase == Phase.QUESTIONNAIRE
    assert "b5_o1" not in exc.value.missing
    assert len(exc.value.missing) == len(QUESTIONS) - 1
    assert flow.error == "Please answer all questions before submitting."


def test_starting_again_clears_answers():
    flow = AssessmentFlow(phase=Phase.DASHBOARD)
    flow.start_assessment()
    flow.record_answer("b5_o1", 3)
    flow.cancel_assessment()
    flow.start_assessment()

    assert flow.answers == {}


def test_explorers_return_to_dashboard_only():
    flow = AssessmentFlow(phase=Phase.DASHBOARD)
    flow.move(Phase.EDUCATION_EXPLORER)

    with pytest.raises(InvalidPhaseTransition):
        flow.move(Phase.RESOURCE_HUB)
    flow.back_to_dashboard()
    assert flow.phase == Phase.DASHBOARD


def test_submit_moves_to_results(workflow):
    workflow.start("u1")
    _answer_all(workflow, "u1")

    record, outcome = asyncio.run(workflow.submit("u1"))

    state = workflow.state("u1")
    assert state.phase == "results"
    assert state.current_record_id == record.id
    assert state.error is None
    assert outcome.complete
    assert workflow.repository.list_by_user("u1")[0].id == record.id


def test_partial_submission_shows_warning(store):
    workflow = AssessmentWorkflow(AssessmentRepository(store), FakeGenerator(fail={"streams"}))
    workflow.start("u1")
    _answer_all(workflow, "u1")

    record, outcome = asyncio.run(workflow.submit("u1"))

    assert workflow.state("u1").phase == "results"
    assert workflow.state("u1").error == outcome.warning
    assert record.stream_suggestions == []


def test_unexpected_submission_error_returns_to_dashboard(store):
    class BrokenRepository(AssessmentRepository):
        def save(self, user_id, result):
            raise RuntimeError("disk full")

    workflow = AssessmentWorkflow(BrokenRepository(store), FakeGenerator())
    workflow.start("u1")
    _answer_all(workflow, "u1")

    with pytest.raises(RuntimeError):
        asyncio.run(workflow.submit("u1"))

    state = workflow.state("u1")
    assert state.phase == "dashboard"
    assert state.error == SUBMISSION_FAILED


def test_view_other_users_record_is_not_found(workflow):
    workflow.start("u1")
    _answer_all(workflow, "u1")
    record, _ = asyncio.run(workflow.submit("u1"))

    with pytest.raises(AssessmentNotFound):
        workflow.view("u2", record.id)
    assert workflow.state("u2").phase == "dashboard"

    workflow.go_to("u1", Phase.DASHBOARD)
    assert workflow.view("u1", record.id).id == record.id
    assert workflow.state("u1").phase == "results"


def test_compare_and_missing_record(workflow):
    ids = []
    for value in (2, 5):
        workflow.start("u1")
        _answer_all(workflow, "u1", value)
        record, _ = asyncio.run(workflow.submit("u1"))
        ids.append(record.id)
        workflow.go_to("u1", Phase.DASHBOARD)

    comparison = workflow.compare("u1", ids[0], ids[1])
    assert workflow.state("u1").phase == "compare_assessments"
    assert all(d.change == "increased" for d in comparison.big_five)

    with pytest.raises(AssessmentNotFound) as exc:
        workflow.compare("u1", ids[0], "asmt_missing")
    assert exc.value.message == COMPARE_LOAD_FAILED
    assert workflow.state("u1").phase == "dashboard"
    assert workflow.state("u1").error == COMPARE_LOAD_FAILED


def test_logout_resets_flow(workflow):
    workflow.start("u1")
    workflow.answer("u1", "b5_o1", 4)
    workflow.logout("u1")

    assert workflow.state("u1").phase == "dashboard"
    assert workflow.state("u1").answered == []
