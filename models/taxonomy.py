from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class Framework(str, Enum):
    BIG_FIVE = "BigFive"
    MBTI = "MBTI"
    RIASEC = "RIASEC"
    VALUES = "Values"


class BigFiveCategory(str, Enum):
    OPENNESS = "Openness"
    CONSCIENTIOUSNESS = "Conscientiousness"
    EXTRAVERSION = "Extraversion"
    AGREEABLENESS = "Agreeableness"
    NEUROTICISM = "Neuroticism"


class MBTIAxis(str, Enum):
    EXTRAVERSION_INTROVERSION = "E/I"
    SENSING_INTUITION = "S/N"
    THINKING_FEELING = "T/F"
    JUDGING_PERCEIVING = "J/P"


class MBTIPole(str, Enum):
    EXTRAVERSION = "E"
    INTROVERSION = "I"
    SENSING = "S"
    INTUITION = "N"
    THINKING = "T"
    FEELING = "F"
    JUDGING = "J"
    PERCEIVING = "P"


class RIASECCategory(str, Enum):
    REALISTIC = "Realistic"
    INVESTIGATIVE = "Investigative"
    ARTISTIC = "Artistic"
    SOCIAL = "Social"
    ENTERPRISING = "Enterprising"
    CONVENTIONAL = "Conventional"


class ValueCategory(str, Enum):
    AUTONOMY = "Autonomy"
    TEAMWORK = "Teamwork"
    STABILITY = "Stability"
    INNOVATION = "Innovation"
    WORK_LIFE_BALANCE = "Work-Life Balance"


# First-listed pole wins ties
AXIS_POLES: Dict[MBTIAxis, Tuple[MBTIPole, MBTIPole]] = {
    MBTIAxis.EXTRAVERSION_INTROVERSION: (MBTIPole.EXTRAVERSION, MBTIPole.INTROVERSION),
    MBTIAxis.SENSING_INTUITION: (MBTIPole.SENSING, MBTIPole.INTUITION),
    MBTIAxis.THINKING_FEELING: (MBTIPole.THINKING, MBTIPole.FEELING),
    MBTIAxis.JUDGING_PERCEIVING: (MBTIPole.JUDGING, MBTIPole.PERCEIVING),
}

FRAMEWORK_CATEGORIES = {
    Framework.BIG_FIVE: BigFiveCategory,
    Framework.MBTI: MBTIAxis,
    Framework.RIASEC: RIASECCategory,
    Framework.VALUES: ValueCategory,
}

Category = Union[BigFiveCategory, MBTIAxis, RIASECCategory, ValueCategory]


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    framework: Framework
    category: Category
    pole: Optional[MBTIPole] = None

    def __post_init__(self):
        if not isinstance(self.category, FRAMEWORK_CATEGORIES[self.framework]):
            raise ValueError(f"Question {self.id}: {self.category!r} does not belong to {self.framework.value}")
        if (self.framework == Framework.MBTI) != (self.pole is not None):
            raise ValueError(f"Question {self.id}: a pole is required for MBTI questions only")
        if self.pole is not None and self.pole not in AXIS_POLES[self.category]:
            raise ValueError(f"Question {self.id}: pole {self.pole.value} is not on axis {self.category.value}")
