from typing import Any, AsyncIterator, Dict, List, Optional, Type
import asyncio
import json
import logging
import re

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.config import settings
from core.errors import AIServiceError
from core.openai_client import OpenAIClient, openai_client
from models.schemas import (
    CareerSuggestion,
    OccupationDeepDive,
    SkillRecommendation,
    StreamSuggestion,
    StudentProfile,
)

logger = logging.getLogger(__name__)

AUDIENCE = "a student in India (ages 12-18)"

MENTOR_SYSTEM_PROMPT = """You are NextStep, a friendly and helpful career and academic mentor for students (ages 12-18). You are chatting with a student who has just completed a psychometric assessment.
Their profile summary is: {summary}
Keep your responses concise, encouraging, and easy to understand. Do not give financial advice or medical advice. Help them explore their results and options.
Answer questions based on their profile and the context of career/academic guidance."""

_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def parse_json_payload(content: Optional[str]) -> Any:
    """Best-effort JSON extraction from a model reply; None when unusable."""
    text = (content or "").strip()
    fenced = _FENCE.match(text)
    if fenced:
        text = fenced.group(1).strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    match_obj = re.search(r"(\{.*\}|\[.*\])", text, re.DOTALL)
    if match_obj:
        try:
            return json.loads(match_obj.group())
        except json.JSONDecodeError:
            return None
    return None


def _items(payload: Any, key: str) -> Optional[List]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        if isinstance(payload.get(key), list):
            return payload[key]
        lists = [v for v in payload.values() if isinstance(v, list)]
        if len(lists) == 1:
            return lists[0]
    return None


def validate_items(payload: Any, key: str, model: Type[BaseModel]) -> List:
    """Schema check at the boundary: anything malformed becomes []."""
    items = _items(payload, key)
    if items is None:
        logger.warning(f"AI response had no '{key}' list")
        return []
    try:
        return TypeAdapter(List[model]).validate_python(items)
    except ValidationError as e:
        logger.warning(f"AI response for '{key}' failed validation: {e.error_count()} errors")
        return []


class GuidanceGenerator:
    """Every call to the generative-AI provider goes through here."""

    def __init__(
        self,
        client: Optional[OpenAIClient] = None,
        model: Optional[str] = None,
        image_model: Optional[str] = None,
        generate_images: Optional[bool] = None,
    ) -> None:
        self.client = client or openai_client
        self.model = model or settings.OPENAI_TEXT_MODEL
        self.image_model = image_model or settings.OPENAI_IMAGE_MODEL
        self.generate_images = settings.GENERATE_CAREER_IMAGES if generate_images is None else generate_images

    @property
    def enabled(self) -> bool:
        return self.client.configured

    # ---------- Low-level calls ----------
    async def _complete_json(self, prompt: str, temperature: float, max_tokens: int = 1500) -> Any:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "You respond only with a single valid JSON object."},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as e:
            logger.error(f"AI call failed: {str(e)}")
            raise AIServiceError(f"AI service request failed: {e}") from e
        return parse_json_payload(response.choices[0].message.content)

    async def _stream_text(self, messages: List[Dict[str, str]], temperature: float) -> AsyncIterator[str]:
        try:
            stream = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                stream=True,
            )
            async for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta.content
                if delta:
                    yield delta
        except Exception as e:
            logger.error(f"AI stream failed: {str(e)}")
            raise AIServiceError(f"AI stream failed: {e}") from e

    # ---------- Narrative ----------
    def stream_profile_narrative(self, profile: StudentProfile) -> AsyncIterator[str]:
        prompt = f"""
You are an insightful and encouraging AI career counselor. Based on the following student psychometric profile summary:
{profile.summary}

Write a 2-3 paragraph personalized narrative overview for this student that:
- is positive and encouraging,
- highlights the key strengths and tendencies in the profile,
- briefly interprets what these traits together mean for how they learn, work and decide,
- is easy for {AUDIENCE} to understand.
Do NOT suggest specific careers or streams; those are provided separately.
Respond only with the narrative text, without greetings or sign-offs.
"""
        return self._stream_text([{"role": "user", "content": prompt}], temperature=0.7)

    # ---------- Suggestions ----------
    async def career_suggestions(self, profile: StudentProfile, count: int = 3) -> List[CareerSuggestion]:
        prompt = f"""
You are an expert AI career counselor. Based on the student's psychometric profile summary:
{profile.summary}

Suggest {count} diverse career paths suitable for {AUDIENCE}.
Return JSON: {{"careers": [ ... ]}} where each career has:
- "name": the career title
- "description": brief description (max 30 words)
- "rationale": why it fits the profile (max 30 words)
- "educationPathIndia": the typical educational pathway in India
- "dayInTheLifeNarrative": an engaging "day in the life" summary (1-2 sentences, max 40 words)
- "iscoCode": the closest 4-digit ISCO-08 unit group code
"""
        careers = validate_items(await self._complete_json(prompt, temperature=0.5), "careers", CareerSuggestion)
        if careers and self.generate_images:
            images = await asyncio.gather(*(self.career_image(c.name) for c in careers))
            careers = [c.model_copy(update={"day_in_the_life_image_url": url}) for c, url in zip(careers, images)]
        return careers

    async def stream_suggestions(self, profile: StudentProfile) -> List[StreamSuggestion]:
        prompt = f"""
You are an expert AI academic advisor. Based on the student psychometric profile summary:
{profile.summary}

Suggest 2-3 suitable academic streams for {AUDIENCE} choosing after 10th grade.
Return JSON: {{"streams": [ ... ]}} where each stream has:
- "name": stream name (e.g. "Science (PCM Focus)")
- "description": brief overview (max 30 words)
- "rationale": why it fits the profile (max 30 words)
- "subjects": array of 3-5 key subjects
"""
        return validate_items(await self._complete_json(prompt, temperature=0.5), "streams", StreamSuggestion)

    async def skill_recommendations(self, profile: StudentProfile, career_context: Optional[str] = None) -> List[SkillRecommendation]:
        context = f"Based on the following student psychometric profile summary:\n{profile.summary}"
        if career_context:
            context += f"\nAnd considering their interest in the career/area of: {career_context}"
        prompt = f"""
{context}

Suggest 2-3 key skills this student would benefit from developing.
Return JSON: {{"skills": [ ... ]}} where each skill has:
- "skillName": e.g. "Python Programming", "Critical Thinking"
- "description": brief explanation (max 20 words)
- "relevance": why it matters for this student (max 30 words)
- "learningResources": 1-2 objects with "title", "url" ('#' if unknown) and "type" (e.g. "Online Course", "Book", "Website")
"""
        return validate_items(await self._complete_json(prompt, temperature=0.6), "skills", SkillRecommendation)

    async def career_image(self, career_name: str) -> Optional[str]:
        """Illustration for a career; None on any failure."""
        prompt = (
            f"A hopeful and positive depiction of a young student in India imagining themselves as a {career_name}. "
            f"Professional setting, bright, aspirational."
        )
        try:
            response = await self.client.images.generate(model=self.image_model, prompt=prompt, size="1024x1024", n=1)
            image = response.data[0] if response.data else None
            if image is None:
                return None
            if getattr(image, "b64_json", None):
                return f"data:image/png;base64,{image.b64_json}"
            return getattr(image, "url", None)
        except Exception as e:
            logger.error(f"Image generation failed for {career_name}: {str(e)}")
            return None

    # ---------- Occupation deep dive ----------
    async def occupation_deep_dive(self, title: str, code: str) -> Optional[OccupationDeepDive]:
        prompt = f"""
Provide a deep dive into this ISCO-08 occupation, focusing on the Indian labour market where possible.
Title: {title}
Code: {code}

Return a JSON object with:
- "salaryIndia": typical monthly salary range in INR for early and mid-career professionals
- "marketDemand": qualitative description of current demand in India
- "automationRisk": Low/Medium/High with a brief reason
- "topSkills": array of 3-5 crucial technical or soft skills
- "growthPotential": outlook for the next 10 years
- "careerPathSummary": 1-2 sentences on the typical advancement path
"""
        payload = await self._complete_json(prompt, temperature=0.4, max_tokens=800)
        if not isinstance(payload, dict):
            return None
        try:
            return OccupationDeepDive.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Deep dive for {code} failed validation: {e.error_count()} errors")
            return None

    # ---------- Mentor chat ----------
    def stream_chat(self, summary: str, history: List[Dict[str, str]], message: str) -> AsyncIterator[str]:
        messages = [{"role": "system", "content": MENTOR_SYSTEM_PROMPT.format(summary=summary)}]
        messages.extend(history)
        messages.append({"role": "user", "content": message})
        return self._stream_text(messages, temperature=0.7)
