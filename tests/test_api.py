import json

import pytest
from fastapi.testclient import TestClient

from catalog.isco_sample import ISCO_SAMPLE_CSV
from core.config import settings
from core.storage import InMemoryStore
from main import app
from routers.deps import get_generator, get_isco, get_store
from services.isco_service import IscoBootstrap

from tests.conftest import FakeGenerator, all_answers

MOBILE = "9876543210"


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def isco(isco_data):
    bootstrap = IscoBootstrap(InMemoryStore())
    bootstrap.use(isco_data, "sample")
    return bootstrap


@pytest.fixture
def client(generator, isco):
    store = InMemoryStore()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_generator] = lambda: generator
    app.dependency_overrides[get_isco] = lambda: isco
    yield TestClient(app)
    app.dependency_overrides.clear()


def _login(client, mobile=MOBILE):
    client.post("/auth/otp/request", json={"mobile": mobile})
    response = client.post("/auth/otp/verify", json={"mobile": mobile, "otp": settings.SIMULATED_OTP})
    assert response.status_code == 200
    return {"X-Session-Token": response.json()["sessionToken"]}


def _complete_questionnaire(client, headers, value=4):
    assert client.post("/assessments/start", headers=headers).status_code == 200
    for qid, v in all_answers(value).items():
        assert client.put("/assessments/answers", json={"questionId": qid, "value": v}, headers=headers).status_code == 200


def test_root_and_health(client):
    assert client.get("/").json()["message"] == "NextStep Guidance API"

    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["isco"]["state"] == "loaded"


def test_login_flow(client):
    assert client.post("/auth/otp/request", json={"mobile": "123"}).status_code == 400

    headers = _login(client)
    me = client.get("/auth/me", headers=headers)
    assert me.json()["mobile"] == MOBILE

    assert client.post("/auth/logout", headers=headers).status_code == 200
    assert client.get("/auth/me", headers=headers).status_code == 401


def test_wrong_otp(client):
    client.post("/auth/otp/request", json={"mobile": MOBILE})

    response = client.post("/auth/otp/verify", json={"mobile": MOBILE, "otp": "000000"})

    assert response.status_code == 400


def test_protected_routes_need_session(client):
    assert client.get("/assessments").status_code == 401
    assert client.get("/goals", headers={"X-Session-Token": "bogus"}).status_code == 401


def test_questionnaire_and_stateless_profile(client):
    questionnaire = client.get("/questionnaire").json()
    assert questionnaire["total"] == 35
    assert len(questionnaire["scale"]) == 5

    profile = client.post("/profile/compute", json={"answers": {"mbti_ei_e": 4, "mbti_ei_i": 2}}).json()
    assert profile["mbti"]["E/I"] == {"dominantPole": "E", "scoreDominant": 4.0, "scoreRecessive": 2.0}
    assert profile["bigFive"] == {}


def test_stateless_profile_rejects_out_of_scale_answers(client):
    assert client.post("/profile/compute", json={"answers": {"b5_o1": 0}}).status_code == 422
    assert client.post("/profile/compute", json={"answers": {"b5_o1": 99}}).status_code == 422
    assert client.post("/profile/compute", json={"answers": {"b5_o1": 5}}).status_code == 200


def test_answer_validation(client):
    headers = _login(client)
    assert client.put("/assessments/answers", json={"questionId": "b5_o1", "value": 3}, headers=headers).status_code == 409

    client.post("/assessments/start", headers=headers)
    assert client.put("/assessments/answers", json={"questionId": "b5_o1", "value": 9}, headers=headers).status_code == 422
    assert client.put("/assessments/answers", json={"questionId": "nope", "value": 3}, headers=headers).status_code == 400


def test_incomplete_submission_rejected(client):
    headers = _login(client)
    client.post("/assessments/start", headers=headers)
    client.put("/assessments/answers", json={"questionId": "b5_o1", "value": 3}, headers=headers)

    response = client.post("/assessments/submit", headers=headers)

    assert response.status_code == 400
    assert len(response.json()["detail"]["missing"]) == 34
    assert client.get("/assessments/flow", headers=headers).json()["phase"] == "questionnaire"


def test_submit_view_and_interpret(client):
    headers = _login(client)
    _complete_questionnaire(client, headers)

    body = client.post("/assessments/submit", headers=headers).json()

    assert body["success"] is True
    assert body["warning"] is None
    record = body["record"]
    assert record["profileNarrative"] == "You are curious."
    assert len(record["careerSuggestions"]) == 3
    assert [t["name"] for t in body["tasks"]] == ["narrative", "careers", "streams", "skills"]

    listed = client.get("/assessments", headers=headers).json()
    assert [r["id"] for r in listed] == [record["id"]]

    client.put("/assessments/flow", json={"phase": "dashboard"}, headers=headers)
    viewed = client.get(f"/assessments/{record['id']}", headers=headers)
    assert viewed.json()["profile"]["bigFive"]["Openness"] == 4.0
    assert client.get("/assessments/flow", headers=headers).json()["phase"] == "results"

    interpretation = client.get(f"/assessments/{record['id']}/interpretation", headers=headers).json()
    assert interpretation["bigFive"][0]["level"] == "high"


def test_partial_failure_warning(client, generator):
    generator.fail = {"careers"}
    headers = _login(client)
    _complete_questionnaire(client, headers)

    body = client.post("/assessments/submit", headers=headers).json()

    assert "careers" in body["warning"]
    assert body["record"]["careerSuggestions"] == []
    assert body["record"]["streamSuggestions"]


def test_streamed_submission(client):
    headers = _login(client)
    _complete_questionnaire(client, headers)

    response = client.post("/assessments/submit/stream", headers=headers)

    events = [json.loads(line) for line in response.text.splitlines() if line]
    assert [e["type"] for e in events] == ["chunk", "chunk", "complete"]
    assert "".join(e["text"] for e in events[:2]) == "You are curious."
    assert events[-1]["record"]["profileNarrative"] == "You are curious."


def test_records_are_private(client):
    alice = _login(client, "9876543210")
    _complete_questionnaire(client, alice)
    record_id = client.post("/assessments/submit", headers=alice).json()["record"]["id"]

    bob = _login(client, "9123456780")
    assert client.get(f"/assessments/{record_id}", headers=bob).status_code == 404
    assert client.get("/assessments", headers=bob).json() == []


def test_compare(client):
    headers = _login(client)
    ids = []
    for value in (2, 5):
        _complete_questionnaire(client, headers, value)
        ids.append(client.post("/assessments/submit", headers=headers).json()["record"]["id"])
        client.put("/assessments/flow", json={"phase": "dashboard"}, headers=headers)

    comparison = client.get("/assessments/compare", params={"first": ids[0], "second": ids[1]}, headers=headers)
    assert comparison.status_code == 200
    assert comparison.json()["bigFive"][0]["change"] == "increased"

    missing = client.get("/assessments/compare", params={"first": ids[0], "second": "asmt_x"}, headers=headers)
    assert missing.status_code == 404
    assert client.get("/assessments/flow", headers=headers).json()["phase"] == "dashboard"


def test_illegal_phase_change(client):
    headers = _login(client)

    assert client.put("/assessments/flow", json={"phase": "results"}, headers=headers).status_code == 409
    assert client.put("/assessments/flow", json={"phase": "nowhere"}, headers=headers).status_code == 400


def test_chat_and_skills(client):
    headers = _login(client)
    _complete_questionnaire(client, headers)
    record_id = client.post("/assessments/submit", headers=headers).json()["record"]["id"]

    reply = client.post(f"/assessments/{record_id}/chat", json={"message": "Hi"}, headers=headers)
    assert reply.text == "Hello there!"
    history = client.get(f"/assessments/{record_id}/chat", headers=headers).json()
    assert [m["role"] for m in history] == ["user", "model"]

    skills = client.post(f"/assessments/{record_id}/skills", json={"careerContext": "Data Scientist"}, headers=headers).json()
    assert skills["skills"][0]["skillName"] == "Data Scientist"


def test_goals_crud(client):
    headers = _login(client)

    created = client.post("/goals", json={"text": "Learn Python", "relatedTo": "Engineer"}, headers=headers)
    assert created.status_code == 201
    goal_id = created.json()["id"]

    assert client.post("/goals", json={"text": "  "}, headers=headers).status_code == 400
    assert client.post(f"/goals/{goal_id}/toggle", headers=headers).json()["isCompleted"] is True
    assert client.put(f"/goals/{goal_id}", json={"text": "Learn Go"}, headers=headers).json()["text"] == "Learn Go"
    assert [g["id"] for g in client.get("/goals", headers=headers).json()] == [goal_id]
    assert client.delete(f"/goals/{goal_id}", headers=headers).status_code == 200
    assert client.delete(f"/goals/{goal_id}", headers=headers).status_code == 404


def test_occupation_endpoints(client):
    view = client.get("/occupations/navigate", params={"path": "2,21"}).json()
    assert [c["key"] for c in view["levels"][2]["candidates"]] == ["214"]
    assert view["breadcrumbs"][-1]["clickable"] is False

    assert client.get("/occupations/navigate", params={"path": "2,11"}).status_code == 404

    results = client.get("/occupations/search", params={"q": "engineer"}).json()
    assert {u["code"] for u in results} == {"2143", "2144", "3112"}

    detail = client.get("/occupations/2143").json()
    assert [n["key"] for n in detail["path"]] == ["2", "21", "214", "2143"]
    assert detail["detail"]["minorGroupCode"] == "214"

    deep_dive = client.post("/occupations/2143/deep-dive").json()
    assert deep_dive["deepDive"]["automationRisk"] == "Low"
    assert client.post("/occupations/9999/deep-dive").status_code == 404


def test_occupations_load_on_first_request(client):
    async def fetch():
        return ISCO_SAMPLE_CSV

    bootstrap = IscoBootstrap(InMemoryStore(), fetch_csv=fetch)
    app.dependency_overrides[get_isco] = lambda: bootstrap
    assert client.get("/occupations/status").json()["state"] == "idle"

    response = client.get("/occupations/navigate")

    assert response.status_code == 200
    assert [c["key"] for c in response.json()["levels"][0]["candidates"]] == ["1", "2", "3"]
    assert client.get("/occupations/status").json() == {"state": "loaded", "source": "remote", "error": None}


def test_occupations_unavailable_when_load_fails(client):
    async def fetch():
        raise ConnectionError("offline")

    app.dependency_overrides[get_isco] = lambda: IscoBootstrap(InMemoryStore(), fetch_csv=fetch, fallback_to_sample=False)

    response = client.get("/occupations/navigate")

    assert response.status_code == 503
    assert response.json()["detail"]["status"]["state"] == "failed"
    assert client.get("/occupations/status").json()["state"] == "idle"


def test_education_navigation(client):
    view = client.get("/education/navigate", params={"path": "cbse,cbse_science_mpc"}).json()

    assert [c["key"] for c in view["levels"][2]["candidates"]] == ["be_btech_cse", "bsc_physics"]
    assert view["breadcrumbs"][0]["label"] == "Education"
    assert client.get("/education/navigate", params={"path": "cbse,isc_science_pcm"}).status_code == 404


def test_resources(client):
    everything = client.get("/resources").json()
    assert len(everything) == 10

    tags = client.get("/resources/tags").json()["tags"]
    filtered = client.get("/resources", params={"tag": tags[0]}).json()
    assert filtered
    assert all(tags[0].lower() in [t.lower() for t in r["tags"]] for r in filtered)
