import asyncio
import json

import pytest

from core.errors import AIServiceError
from catalog.questions import QUESTIONS
from models.schemas import CareerSuggestion
from services.guidance_generator import GuidanceGenerator, parse_json_payload, validate_items
from services.profile_aggregator import compute_profile

from tests.conftest import all_answers, stub_openai

PROFILE = compute_profile(QUESTIONS, all_answers(4))

CAREERS = {
    "careers": [
        {
            "name": "Environmental Engineer",
            "description": "Designs solutions to environmental problems.",
            "rationale": "Fits high investigative interest.",
            "educationPathIndia": "B.Tech in Environmental Engineering",
            "dayInTheLifeNarrative": "Site visits and water testing.",
            "iscoCode": "2143",
        }
    ]
}


async def _collect(stream):
    return [chunk async for chunk in stream]


def test_parse_json_payload_variants():
    assert parse_json_payload('{"a": 1}') == {"a": 1}
    assert parse_json_payload('```json\n{"a": 1}\n```') == {"a": 1}
    assert parse_json_payload('Sure! Here it is: [1, 2] hope that helps') == [1, 2]
    assert parse_json_payload("no json here") is None
    assert parse_json_payload(None) is None


def test_validate_items_drops_malformed_batches():
    assert validate_items({"careers": [{"name": "x"}]}, "careers", CareerSuggestion) == []
    assert validate_items({"unexpected": "shape"}, "careers", CareerSuggestion) == []
    assert validate_items(None, "careers", CareerSuggestion) == []


def test_validate_items_accepts_bare_or_renamed_list():
    item = CAREERS["careers"][0]
    assert len(validate_items([item], "careers", CareerSuggestion)) == 1
    assert len(validate_items({"results": [item]}, "careers", CareerSuggestion)) == 1


def test_career_suggestions_parse_camel_case():
    client = stub_openai(content="```json\n" + json.dumps(CAREERS) + "\n```")
    generator = GuidanceGenerator(client=client, model="test-model", generate_images=False)

    careers = asyncio.run(generator.career_suggestions(PROFILE))

    assert careers[0].education_path_india == "B.Tech in Environmental Engineering"
    assert careers[0].isco_code == "2143"
    assert careers[0].day_in_the_life_image_url is None
    call = client.calls[0]
    assert call["model"] == "test-model"
    assert call["response_format"] == {"type": "json_object"}
    assert PROFILE.summary in call["messages"][1]["content"]


def test_career_images_attached_when_enabled():
    client = stub_openai(content=json.dumps(CAREERS), image_b64="aGVsbG8=")
    generator = GuidanceGenerator(client=client, generate_images=True)

    careers = asyncio.run(generator.career_suggestions(PROFILE))

    assert careers[0].day_in_the_life_image_url == "data:image/png;base64,aGVsbG8="


def test_career_image_failure_gives_none():
    client = stub_openai(content=json.dumps(CAREERS))
    generator = GuidanceGenerator(client=client, generate_images=True)

    careers = asyncio.run(generator.career_suggestions(PROFILE))

    assert len(careers) == 1
    assert careers[0].day_in_the_life_image_url is None


def test_malformed_streams_give_empty_list():
    generator = GuidanceGenerator(client=stub_openai(content="I cannot help with that"))

    assert asyncio.run(generator.stream_suggestions(PROFILE)) == []


def test_skill_recommendations_include_career_context():
    payload = {"skills": [{
        "skillName": "Python Programming",
        "description": "Write code.",
        "relevance": "Needed for software roles.",
        "learningResources": [{"title": "Intro", "url": "#", "type": "Online Course"}],
    }]}
    client = stub_openai(content=json.dumps(payload))

    skills = asyncio.run(GuidanceGenerator(client=client).skill_recommendations(PROFILE, "Data Scientist"))

    assert skills[0].learning_resources[0].type == "Online Course"
    assert "Data Scientist" in client.calls[0]["messages"][1]["content"]


def test_transport_failure_raises_ai_service_error():
    generator = GuidanceGenerator(client=stub_openai(error=RuntimeError("timeout")))

    with pytest.raises(AIServiceError):
        asyncio.run(generator.career_suggestions(PROFILE))


def test_narrative_streams_chunks():
    generator = GuidanceGenerator(client=stub_openai(stream_chunks=["Hello", " world", ""]))

    assert asyncio.run(_collect(generator.stream_profile_narrative(PROFILE))) == ["Hello", " world"]


def test_stream_failure_raises_ai_service_error():
    generator = GuidanceGenerator(client=stub_openai(error=RuntimeError("boom")))

    with pytest.raises(AIServiceError):
        asyncio.run(_collect(generator.stream_profile_narrative(PROFILE)))


def test_chat_sends_summary_history_and_message():
    client = stub_openai(stream_chunks=["Sure"])
    generator = GuidanceGenerator(client=client)
    history = [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}]

    reply = asyncio.run(_collect(generator.stream_chat("My summary", history, "What next?")))

    assert reply == ["Sure"]
    messages = client.calls[0]["messages"]
    assert messages[0]["role"] == "system"
    assert "My summary" in messages[0]["content"]
    assert messages[1:3] == history
    assert messages[-1] == {"role": "user", "content": "What next?"}


def test_deep_dive():
    payload = {
        "salaryIndia": "INR 50,000 - 1,20,000 per month",
        "marketDemand": "Growing",
        "automationRisk": "Low",
        "topSkills": ["Hydrology", "GIS"],
        "growthPotential": "Strong",
        "careerPathSummary": "Junior to lead engineer.",
    }
    generator = GuidanceGenerator(client=stub_openai(content=json.dumps(payload)))

    deep_dive = asyncio.run(generator.occupation_deep_dive("Environmental Engineers", "2143"))

    assert deep_dive.top_skills == ["Hydrology", "GIS"]


def test_deep_dive_malformed_is_none():
    generator = GuidanceGenerator(client=stub_openai(content='{"salaryIndia": "x"}'))

    assert asyncio.run(generator.occupation_deep_dive("Environmental Engineers", "2143")) is None


def test_enabled_follows_client():
    client = stub_openai()
    client.configured = False

    assert GuidanceGenerator(client=client).enabled is False
