from typing import Dict, List

from catalog.descriptions import (
    BIG_FIVE_DESCRIPTIONS,
    MBTI_DESCRIPTIONS,
    RIASEC_DESCRIPTIONS,
    VALUE_DESCRIPTIONS,
)
from models.schemas import AxisInsight, ProfileInterpretation, StudentProfile, TraitInsight

HIGH_THRESHOLD = 3.8
MODERATE_THRESHOLD = 2.3
VERY_HIGH_THRESHOLD = 4.5


def score_level(score: float) -> str:
    if score >= HIGH_THRESHOLD:
        return "high"
    if score >= MODERATE_THRESHOLD:
        return "moderate"
    return "low"


def qualitative_label(score: float) -> str:
    if score >= VERY_HIGH_THRESHOLD:
        return "Very High"
    return score_level(score).capitalize()


def _trait_insights(scores: Dict, descriptions: Dict) -> List[TraitInsight]:
    insights = []
    for category, score in scores.items():
        text = descriptions[category]
        level = score_level(score)
        insights.append(TraitInsight(
            category=category.value,
            score=round(score, 2),
            level=level,
            label=qualitative_label(score),
            general=text["general"],
            description=text[level],
        ))
    return insights


def interpret_profile(profile: StudentProfile) -> ProfileInterpretation:
    """Attach the level-specific reading to every measured category."""
    mbti = []
    for axis, score in profile.mbti.items():
        entry = MBTI_DESCRIPTIONS[axis]
        pole_name, description = entry[score.dominant_pole]
        mbti.append(AxisInsight(
            axis=axis,
            dimension=entry["dimension"],
            dominant_pole=score.dominant_pole,
            pole_name=pole_name,
            description=description,
            score_dominant=score.score_dominant,
            score_recessive=score.score_recessive,
        ))

    return ProfileInterpretation(
        big_five=_trait_insights(profile.big_five, BIG_FIVE_DESCRIPTIONS),
        mbti=mbti,
        riasec=_trait_insights(profile.riasec, RIASEC_DESCRIPTIONS),
        values=_trait_insights(profile.values, VALUE_DESCRIPTIONS),
    )
