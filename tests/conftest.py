from types import SimpleNamespace
from typing import Dict, List, Optional

import pytest

from catalog.isco_sample import ISCO_SAMPLE_CSV
from catalog.questions import QUESTIONS
from core.errors import AIServiceError
from core.storage import InMemoryStore
from models.schemas import CareerSuggestion, OccupationDeepDive, SkillRecommendation, StreamSuggestion
from services.isco_service import parse_isco_csv


class FakeGenerator:
    """Stands in for GuidanceGenerator; `fail` names the calls that raise."""

    def __init__(self, enabled: bool = True, fail: Optional[set] = None, narrative: List[str] = None) -> None:
        self.enabled = enabled
        self.fail = set(fail or ())
        self.narrative = narrative if narrative is not None else ["You are ", "curious."]
        self.chat_calls: List[Dict] = []

    async def _stream(self, chunks: List[str], name: str):
        for i, chunk in enumerate(chunks):
            if name in self.fail and i == 1:
                raise AIServiceError(f"{name} stream broke")
            yield chunk
        if name in self.fail:
            raise AIServiceError(f"{name} stream broke")

    def stream_profile_narrative(self, profile):
        return self._stream(self.narrative, "narrative")

    async def career_suggestions(self, profile, count: int = 3):
        if "careers" in self.fail:
            raise AIServiceError("careers failed")
        return [
            CareerSuggestion(name=f"Career {i}", description="d", rationale="r", isco_code="2143")
            for i in range(count)
        ]

    async def stream_suggestions(self, profile):
        if "streams" in self.fail:
            raise AIServiceError("streams failed")
        return [StreamSuggestion(name="Science (PCM Focus)", description="d", rationale="r", subjects=["Physics"])]

    async def skill_recommendations(self, profile, career_context=None):
        if "skills" in self.fail:
            raise AIServiceError("skills failed")
        return [SkillRecommendation(skill_name=career_context or "Critical Thinking", description="d", relevance="r")]

    async def occupation_deep_dive(self, title, code):
        if "deep_dive" in self.fail:
            return None
        return OccupationDeepDive(
            salary_india="INR 40k-90k",
            market_demand="High",
            automation_risk="Low",
            top_skills=["Modelling"],
            growth_potential="Strong",
            career_path_summary=f"{title} grows into senior roles.",
        )

    def stream_chat(self, summary, history, message):
        self.chat_calls.append({"summary": summary, "history": history, "message": message})
        return self._stream(["Hello ", "there!"], "chat")


def stub_openai(content: Optional[str] = None, stream_chunks: Optional[List[str]] = None,
                error: Optional[Exception] = None, image_b64: Optional[str] = None):
    """Minimal object with the AsyncOpenAI surface GuidanceGenerator touches."""
    calls: List[Dict] = []

    async def _chunks():
        for text in stream_chunks or []:
            yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=text))])

    async def create(**kwargs):
        calls.append(kwargs)
        if error is not None:
            raise error
        if kwargs.get("stream"):
            return _chunks()
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])

    async def generate(**kwargs):
        if image_b64 is None:
            raise RuntimeError("image service down")
        return SimpleNamespace(data=[SimpleNamespace(b64_json=image_b64, url=None)])

    return SimpleNamespace(
        configured=True,
        chat=SimpleNamespace(completions=SimpleNamespace(create=create)),
        images=SimpleNamespace(generate=generate),
        calls=calls,
    )


def all_answers(value: int = 3) -> Dict[str, int]:
    return {q.id: value for q in QUESTIONS}


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def isco_data():
    return parse_isco_csv(ISCO_SAMPLE_CSV)
