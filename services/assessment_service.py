from datetime import datetime
from typing import Dict, List, Optional
import logging

from core.ids import new_id, now_ms
from core.storage import KeyValueStore, StorageKey
from models.schemas import (
    AssessmentComparison,
    AssessmentRecord,
    AssessmentResultData,
    AssessmentSummary,
    AxisDelta,
    CategoryDelta,
)
from models.taxonomy import BigFiveCategory, MBTIAxis, RIASECCategory, ValueCategory

logger = logging.getLogger(__name__)


class AssessmentRepository:
    """Append-only collection of assessment records in the key/value store."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._last_timestamp = 0

    def _load(self) -> List[Dict]:
        return self.store.get_list(StorageKey.ASSESSMENTS)

    def _next_timestamp(self) -> int:
        # Clock steps backwards must not reorder a user's history
        self._last_timestamp = max(now_ms(), self._last_timestamp)
        return self._last_timestamp

    def save(self, user_id: str, result: AssessmentResultData) -> AssessmentRecord:
        timestamp = self._next_timestamp()
        record = AssessmentRecord(
            **result.model_dump(include=set(AssessmentResultData.model_fields)),
            id=new_id("asmt"),
            user_id=user_id,
            timestamp=timestamp,
            assessment_name=f"Assessment - {datetime.fromtimestamp(timestamp / 1000).strftime('%Y-%m-%d')}",
        )
        docs = self._load()
        docs.append(record.to_doc())
        self.store.set(StorageKey.ASSESSMENTS, docs)
        logger.info(f"Saved assessment {record.id} for user {user_id}")
        return record

    def list_by_user(self, user_id: str) -> List[AssessmentRecord]:
        records = [AssessmentRecord(**doc) for doc in self._load() if doc.get("userId") == user_id]
        # Newest first; equal timestamps fall back to save order
        return [r for _, r in sorted(enumerate(records), key=lambda p: (p[1].timestamp, p[0]), reverse=True)]

    def get_by_id(self, assessment_id: str) -> Optional[AssessmentRecord]:
        for doc in self._load():
            if doc.get("id") == assessment_id:
                return AssessmentRecord(**doc)
        return None


# ---------- Comparison ----------
def _summary(record: AssessmentRecord) -> AssessmentSummary:
    return AssessmentSummary(id=record.id, assessment_name=record.assessment_name, timestamp=record.timestamp)


def _numeric_deltas(first: Dict, second: Dict, categories) -> List[CategoryDelta]:
    deltas = []
    for category in categories:
        a, b = first.get(category), second.get(category)
        change = None
        if a is not None and b is not None:
            change = "increased" if b > a else "decreased" if b < a else "unchanged"
        deltas.append(CategoryDelta(category=category.value, first=a, second=b, change=change))
    return deltas


def compare_records(first: AssessmentRecord, second: AssessmentRecord) -> AssessmentComparison:
    """Per-category movement from `first` to `second`."""
    p1, p2 = first.profile, second.profile

    mbti = []
    for axis in MBTIAxis:
        a, b = p1.mbti.get(axis), p2.mbti.get(axis)
        change = None
        if a is not None and b is not None:
            change = "unchanged" if a.dominant_pole == b.dominant_pole else "preference_shifted"
        mbti.append(AxisDelta(axis=axis, first=a, second=b, change=change))

    return AssessmentComparison(
        first=_summary(first),
        second=_summary(second),
        big_five=_numeric_deltas(p1.big_five, p2.big_five, BigFiveCategory),
        mbti=mbti,
        riasec=_numeric_deltas(p1.riasec, p2.riasec, RIASECCategory),
        values=_numeric_deltas(p1.values, p2.values, ValueCategory),
    )
