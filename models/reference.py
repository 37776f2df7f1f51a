from pydantic import Field
from typing import List, Literal, Optional, Tuple

from models.schemas import CamelModel


# ---------- ISCO-08 occupations ----------
class RequiredSkill(CamelModel):
    name: str
    type: Literal["technical", "soft"]


class SpecializedRole(CamelModel):
    name: str
    toolsets: List[str] = Field(default_factory=list)
    typical_degrees: List[str] = Field(default_factory=list)


class ISCOMajorGroup(CamelModel):
    code: str
    title: str


class ISCOSubMajorGroup(CamelModel):
    code: str
    title: str
    major_group_code: str


class ISCOMinorGroup(CamelModel):
    code: str
    title: str
    sub_major_group_code: str


class ISCOUnitGroup(CamelModel):
    code: str
    title: str
    minor_group_code: str
    education_paths: List[str] = Field(default_factory=list)
    required_skills: List[RequiredSkill] = Field(default_factory=list)
    salary_range: str = "N/A"
    demand_outlook: str = "N/A"
    specialized_roles: List[SpecializedRole] = Field(default_factory=list)


class ISCOData(CamelModel):
    major_groups: List[ISCOMajorGroup] = Field(default_factory=list)
    sub_major_groups: List[ISCOSubMajorGroup] = Field(default_factory=list)
    minor_groups: List[ISCOMinorGroup] = Field(default_factory=list)
    unit_groups: List[ISCOUnitGroup] = Field(default_factory=list)

    @property
    def group_count(self) -> int:
        return len(self.major_groups) + len(self.sub_major_groups) + len(self.minor_groups) + len(self.unit_groups)


# ---------- Indian education system ----------
class CompetitiveExam(CamelModel):
    id: str
    name: str
    short_name: Optional[str] = None
    description: str
    level: Literal["National", "State", "University", "International"]
    target_stages: List[str] = Field(default_factory=list)
    typical_subjects_covered: List[str] = Field(default_factory=list)
    official_website: Optional[str] = None


class PhdOption(CamelModel):
    id: str
    name: str
    description: str
    typical_duration_years_range: Tuple[int, int]
    common_research_areas: List[str] = Field(default_factory=list)
    competitive_exams_for_phd: List[CompetitiveExam] = Field(default_factory=list)


class PgDegreeOption(CamelModel):
    id: str
    name: str
    description: str
    duration_years: float
    typical_specializations: List[str] = Field(default_factory=list)
    competitive_exams_for_pg: List[CompetitiveExam] = Field(default_factory=list)
    phd_options: List[PhdOption] = Field(default_factory=list)


class UgDegreeOption(CamelModel):
    id: str
    name: str
    description: str
    duration_years: float
    typical_subjects_core: List[str] = Field(default_factory=list)
    competitive_exams_for_ug: List[CompetitiveExam] = Field(default_factory=list)
    pg_options: List[PgDegreeOption] = Field(default_factory=list)


class Stream(CamelModel):
    id: str
    name: str
    description: str
    typical_subjects: List[str] = Field(default_factory=list)
    grade12_equivalent_exam_name: str
    competitive_exams_post10th: List[CompetitiveExam] = Field(default_factory=list)
    ug_options: List[UgDegreeOption] = Field(default_factory=list)


class Curriculum(CamelModel):
    id: str
    name: str
    short_name: Optional[str] = None
    description: str
    grade10_equivalent_exam_name: str
    streams_after10th: List[Stream] = Field(default_factory=list)


class IndianEducationSystem(CamelModel):
    version: str
    last_updated: str
    curricula: List[Curriculum] = Field(default_factory=list)


# ---------- Navigation views ----------
class NodeRef(CamelModel):
    level: int
    key: str
    title: str


class LevelView(CamelModel):
    level: int
    name: str
    candidates: List[NodeRef] = Field(default_factory=list)
    selected: Optional[str] = None


class Breadcrumb(CamelModel):
    label: str
    depth: int
    clickable: bool


class NavigationView(CamelModel):
    path: List[NodeRef] = Field(default_factory=list)
    levels: List[LevelView] = Field(default_factory=list)
    breadcrumbs: List[Breadcrumb] = Field(default_factory=list)
    detail: Optional[dict] = None
