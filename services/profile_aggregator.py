"""
Turns a questionnaire answer map into a StudentProfile.

Each framework category is scored as the plain mean of its answered items.
Categories with no answered item are left out entirely rather than reported
as zero, so downstream consumers can tell "not measured" from "low".
"""
from typing import Dict, Iterable, List, Mapping, Optional
import logging

import numpy as np

from models.schemas import MBTIAxisScore, StudentProfile
from models.taxonomy import (
    AXIS_POLES,
    BigFiveCategory,
    Framework,
    MBTIAxis,
    MBTIPole,
    Question,
    RIASECCategory,
    ValueCategory,
)

logger = logging.getLogger(__name__)

SUMMARY_HEADER = "Psychometric Profile Summary:"


def _mean(values: List[int]) -> float:
    return float(np.mean(values)) if values else 0.0


def _group_answers(questions: Iterable[Question], answers: Mapping[str, int], framework: Framework) -> Dict:
    """Collect present answers per category (or per pole for MBTI)."""
    buckets: Dict = {}
    for question in questions:
        if question.framework != framework or question.id not in answers:
            continue
        key = question.pole if framework == Framework.MBTI else question.category
        buckets.setdefault(key, []).append(answers[question.id])
    return buckets


def _category_means(buckets: Dict, categories) -> Dict:
    # Enumeration order keeps output (and the summary) stable
    return {category: _mean(buckets[category]) for category in categories if buckets.get(category)}


def _mbti_scores(buckets: Dict[MBTIPole, List[int]]) -> Dict[MBTIAxis, MBTIAxisScore]:
    scores: Dict[MBTIAxis, MBTIAxisScore] = {}
    for axis in MBTIAxis:
        first, second = AXIS_POLES[axis]
        if not buckets.get(first) and not buckets.get(second):
            continue
        first_avg = _mean(buckets.get(first, []))
        second_avg = _mean(buckets.get(second, []))
        if first_avg >= second_avg:
            scores[axis] = MBTIAxisScore(dominant_pole=first, score_dominant=first_avg, score_recessive=second_avg)
        else:
            scores[axis] = MBTIAxisScore(dominant_pole=second, score_dominant=second_avg, score_recessive=first_avg)
    return scores


def build_summary(profile: StudentProfile) -> str:
    lines = [SUMMARY_HEADER]
    if profile.big_five:
        traits = ", ".join(f"{c.value} ({s:.1f}/5)" for c, s in profile.big_five.items())
        lines.append(f"Big Five Traits: {traits}.")
    if profile.mbti:
        prefs = ", ".join(
            f"{axis.value} (Prefers {score.dominant_pole.value}: {score.score_dominant:.1f} vs {score.score_recessive:.1f})"
            for axis, score in profile.mbti.items()
        )
        lines.append(f"MBTI-Style Preferences: {prefs}.")
    if profile.riasec:
        interests = ", ".join(f"{c.value} ({s:.1f}/5)" for c, s in profile.riasec.items())
        lines.append(f"RIASEC Interests: {interests}.")
    if profile.values:
        values = ", ".join(f"{c.value} ({s:.1f}/5)" for c, s in profile.values.items())
        lines.append(f"Work Values: {values}.")
    return "\n".join(lines).strip()


def compute_profile(questions: Iterable[Question], answers: Optional[Mapping[str, int]]) -> StudentProfile:
    """Aggregate answers into per-category averages plus the text summary."""
    questions = list(questions)
    answers = answers or {}

    known = {q.id for q in questions}
    unknown = [qid for qid in answers if qid not in known]
    if unknown:
        logger.warning(f"Ignoring answers for unknown questions: {', '.join(sorted(unknown))}")

    profile = StudentProfile(
        big_five=_category_means(_group_answers(questions, answers, Framework.BIG_FIVE), BigFiveCategory),
        mbti=_mbti_scores(_group_answers(questions, answers, Framework.MBTI)),
        riasec=_category_means(_group_answers(questions, answers, Framework.RIASEC), RIASECCategory),
        values=_category_means(_group_answers(questions, answers, Framework.VALUES), ValueCategory),
    )
    profile.summary = build_summary(profile)
    return profile
