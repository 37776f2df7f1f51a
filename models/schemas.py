from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Annotated, Dict, List, Literal, Optional

from models.taxonomy import BigFiveCategory, MBTIAxis, MBTIPole, RIASECCategory, ValueCategory


class CamelModel(BaseModel):
    """Stored and transmitted documents keep camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_doc(self) -> Dict:
        return self.model_dump(mode="json", by_alias=True)


# ---------- Profile ----------
class MBTIAxisScore(CamelModel):
    dominant_pole: MBTIPole
    score_dominant: float
    score_recessive: float


class StudentProfile(CamelModel):
    big_five: Dict[BigFiveCategory, float] = Field(default_factory=dict)
    mbti: Dict[MBTIAxis, MBTIAxisScore] = Field(default_factory=dict)
    riasec: Dict[RIASECCategory, float] = Field(default_factory=dict)
    values: Dict[ValueCategory, float] = Field(default_factory=dict)
    summary: str = ""


# ---------- AI suggestions ----------
class CareerSuggestion(CamelModel):
    kind: Literal["career"] = "career"
    name: str
    description: str
    rationale: str
    education_path_india: str = ""
    day_in_the_life_narrative: Optional[str] = None
    day_in_the_life_image_url: Optional[str] = None
    isco_code: Optional[str] = None


class StreamSuggestion(CamelModel):
    kind: Literal["stream"] = "stream"
    name: str
    description: str
    rationale: str
    subjects: List[str] = Field(default_factory=list)


class LearningResource(CamelModel):
    title: str
    url: str
    type: str = "article"


class SkillRecommendation(CamelModel):
    kind: Literal["skill"] = "skill"
    skill_name: str
    description: str
    relevance: str
    learning_resources: List[LearningResource] = Field(default_factory=list)


class OccupationDeepDive(CamelModel):
    salary_india: str
    market_demand: str
    automation_risk: str
    top_skills: List[str] = Field(default_factory=list)
    growth_potential: str
    career_path_summary: str


# ---------- Assessments ----------
class AssessmentResultData(CamelModel):
    profile: StudentProfile
    profile_narrative: Optional[str] = None
    career_suggestions: List[CareerSuggestion] = Field(default_factory=list)
    stream_suggestions: List[StreamSuggestion] = Field(default_factory=list)
    skill_recommendations: List[SkillRecommendation] = Field(default_factory=list)


class AssessmentRecord(AssessmentResultData):
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    timestamp: int
    assessment_name: str


class AssessmentSummary(CamelModel):
    id: str
    assessment_name: str
    timestamp: int


class CategoryDelta(CamelModel):
    category: str
    first: Optional[float] = None
    second: Optional[float] = None
    change: Optional[Literal["increased", "decreased", "unchanged"]] = None


class AxisDelta(CamelModel):
    axis: MBTIAxis
    first: Optional[MBTIAxisScore] = None
    second: Optional[MBTIAxisScore] = None
    change: Optional[Literal["unchanged", "preference_shifted"]] = None


class AssessmentComparison(CamelModel):
    first: AssessmentSummary
    second: AssessmentSummary
    big_five: List[CategoryDelta] = Field(default_factory=list)
    mbti: List[AxisDelta] = Field(default_factory=list)
    riasec: List[CategoryDelta] = Field(default_factory=list)
    values: List[CategoryDelta] = Field(default_factory=list)


# ---------- Interpretation ----------
class TraitInsight(CamelModel):
    category: str
    score: float
    level: Literal["high", "moderate", "low"]
    label: str
    general: str
    description: str


class AxisInsight(CamelModel):
    axis: MBTIAxis
    dimension: str
    dominant_pole: MBTIPole
    pole_name: str
    description: str
    score_dominant: float
    score_recessive: float


class ProfileInterpretation(CamelModel):
    big_five: List[TraitInsight] = Field(default_factory=list)
    mbti: List[AxisInsight] = Field(default_factory=list)
    riasec: List[TraitInsight] = Field(default_factory=list)
    values: List[TraitInsight] = Field(default_factory=list)


# ---------- Users, goals, chat ----------
class User(CamelModel):
    id: str
    mobile: str


class UserGoal(CamelModel):
    id: str
    user_id: str
    text: str
    related_to: Optional[str] = None
    created_at: int
    is_completed: bool = False


class ChatMessage(CamelModel):
    id: str
    role: Literal["user", "model", "error"]
    text: str
    timestamp: int


class ResourceItem(CamelModel):
    id: str
    title: str
    type: Literal["article", "video", "tool", "course_platform"]
    url: str
    description: str
    tags: List[str] = Field(default_factory=list)


# ---------- API requests / responses ----------
class OtpRequest(BaseModel):
    mobile: str = Field(..., description="10-digit mobile number")


class OtpVerifyRequest(BaseModel):
    mobile: str
    otp: str


class LoginResponse(CamelModel):
    user: User
    session_token: str
    message: str


class AnswerRequest(CamelModel):
    question_id: str
    value: int = Field(..., ge=1, le=5)


class ComputeProfileRequest(BaseModel):
    answers: Dict[str, Annotated[int, Field(ge=1, le=5)]] = Field(default_factory=dict)


class GoalCreateRequest(CamelModel):
    text: str
    related_to: Optional[str] = None


class GoalUpdateRequest(CamelModel):
    text: Optional[str] = None
    related_to: Optional[str] = None
    is_completed: Optional[bool] = None


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)


class SkillRequest(CamelModel):
    career_context: Optional[str] = None


class TaskStatus(CamelModel):
    name: str
    succeeded: bool
    error: Optional[str] = None


class SubmissionResponse(CamelModel):
    success: bool
    message: str
    record: AssessmentRecord
    warning: Optional[str] = None
    tasks: List[TaskStatus] = Field(default_factory=list)
    analysis_date: Optional[str] = None


class FlowState(CamelModel):
    phase: str
    answered: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    current_record_id: Optional[str] = None
    error: Optional[str] = None


class PhaseRequest(BaseModel):
    phase: str
