"""
ISCO-08 occupation reference data: CSV ingestion and one-shot bootstrap.

The ILO publishes the classification as one CSV with a row per unit group
that repeats its ancestors' codes and titles. Parsing collapses that into
four flat arrays linked by parent codes. The bootstrap caches the parsed
arrays in the key/value store so later starts skip the download.
"""
import asyncio
import csv
import io
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Optional

import httpx

from catalog.isco_sample import ISCO_SAMPLE_CSV
from core.config import settings
from core.errors import ReferenceDataError, StorageError
from core.storage import KeyValueStore, StorageKey
from models.reference import (
    ISCOData,
    ISCOMajorGroup,
    ISCOMinorGroup,
    ISCOSubMajorGroup,
    ISCOUnitGroup,
)
from services.hierarchy_navigator import OccupationIndex

logger = logging.getLogger(__name__)

COLUMNS = {
    "major_code": 0, "major_title": 1,
    "sub_major_code": 4, "sub_major_title": 5,
    "minor_code": 8, "minor_title": 9,
    "unit_code": 12, "unit_title": 13,
}
MIN_COLUMNS = max(COLUMNS.values()) + 1


def parse_isco_csv(csv_text: str) -> Optional[ISCOData]:
    """Parse the ILO CSV. Returns None when nothing usable was found."""
    majors: Dict[str, ISCOMajorGroup] = {}
    sub_majors: Dict[str, ISCOSubMajorGroup] = {}
    minors: Dict[str, ISCOMinorGroup] = {}
    units: Dict[str, ISCOUnitGroup] = {}

    reader = csv.reader(io.StringIO(csv_text or ""))
    for line_no, row in enumerate(reader, start=1):
        if line_no == 1 or not any(cell.strip() for cell in row):
            continue  # header / blank
        if len(row) < MIN_COLUMNS:
            logger.warning(f"Skipping malformed ISCO CSV line {line_no}: only {len(row)} columns")
            continue

        v = {name: row[idx].strip() for name, idx in COLUMNS.items()}

        # First occurrence of a code wins
        if v["major_code"] and v["major_title"] and v["major_code"] not in majors:
            majors[v["major_code"]] = ISCOMajorGroup(code=v["major_code"], title=v["major_title"])

        if v["sub_major_code"] and v["sub_major_title"] and v["major_code"] and v["sub_major_code"] not in sub_majors:
            sub_majors[v["sub_major_code"]] = ISCOSubMajorGroup(
                code=v["sub_major_code"], title=v["sub_major_title"], major_group_code=v["major_code"],
            )

        if v["minor_code"] and v["minor_title"] and v["sub_major_code"] and v["minor_code"] not in minors:
            minors[v["minor_code"]] = ISCOMinorGroup(
                code=v["minor_code"], title=v["minor_title"], sub_major_group_code=v["sub_major_code"],
            )

        if v["unit_code"] and v["unit_title"] and v["minor_code"] and v["unit_code"] not in units:
            units[v["unit_code"]] = ISCOUnitGroup(
                code=v["unit_code"], title=v["unit_title"], minor_group_code=v["minor_code"],
            )

    data = ISCOData(
        major_groups=list(majors.values()),
        sub_major_groups=list(sub_majors.values()),
        minor_groups=list(minors.values()),
        unit_groups=list(units.values()),
    )
    if data.group_count == 0:
        logger.error("ISCO CSV produced no groups")
        return None
    logger.info(
        f"Parsed ISCO data: {len(data.major_groups)} major, {len(data.sub_major_groups)} sub-major, "
        f"{len(data.minor_groups)} minor, {len(data.unit_groups)} unit groups"
    )
    return data


async def download_isco_csv(url: Optional[str] = None, timeout: Optional[float] = None) -> str:
    async with httpx.AsyncClient(timeout=timeout or settings.ISCO_FETCH_TIMEOUT, follow_redirects=True) as client:
        response = await client.get(url or settings.ISCO_CSV_URL)
        response.raise_for_status()
        return response.text


# ---------- Cache ----------
_CACHE_KEYS = {
    "major_groups": StorageKey.ISCO_MAJOR_GROUPS,
    "sub_major_groups": StorageKey.ISCO_SUB_MAJOR_GROUPS,
    "minor_groups": StorageKey.ISCO_MINOR_GROUPS,
    "unit_groups": StorageKey.ISCO_UNIT_GROUPS,
}


def save_isco_data(store: KeyValueStore, data: ISCOData) -> None:
    for field, key in _CACHE_KEYS.items():
        store.set(key, [group.to_doc() for group in getattr(data, field)])
    store.set(StorageKey.ISCO_DATA_LOADED, True)


def load_isco_data(store: KeyValueStore) -> Optional[ISCOData]:
    if store.get(StorageKey.ISCO_DATA_LOADED) is not True:
        return None
    data = ISCOData(**{field: store.get_list(key) for field, key in _CACHE_KEYS.items()})
    return data if data.group_count else None


# ---------- Bootstrap ----------
@dataclass
class BootstrapStatus:
    state: str = "idle"  # idle | loading | loaded | failed
    source: Optional[str] = None  # cache | remote | sample
    error: Optional[str] = None

    def as_dict(self) -> Dict:
        return {"state": self.state, "source": self.source, "error": self.error}


class IscoBootstrap:
    """Loads occupation data once per process; other features never wait on it."""

    def __init__(
        self,
        store: KeyValueStore,
        fetch_csv: Optional[Callable[[], Awaitable[str]]] = None,
        fallback_to_sample: Optional[bool] = None,
    ) -> None:
        self.store = store
        self.fetch_csv = fetch_csv or download_isco_csv
        self.fallback_to_sample = settings.ISCO_FALLBACK_TO_SAMPLE if fallback_to_sample is None else fallback_to_sample
        self.status = BootstrapStatus()
        self._index: Optional[OccupationIndex] = None
        self._lock = asyncio.Lock()

    @property
    def loaded(self) -> bool:
        return self._index is not None

    @property
    def index(self) -> OccupationIndex:
        if self._index is None:
            raise ReferenceDataError(self.status.error or f"Occupation data is {self.status.state}")
        return self._index

    def use(self, data: ISCOData, source: str = "cache") -> OccupationIndex:
        self._index = OccupationIndex(data)
        self.status = BootstrapStatus(state="loaded", source=source)
        return self._index

    async def _fetch_text(self) -> tuple:
        try:
            return await self.fetch_csv(), "remote"
        except Exception as e:
            logger.warning(f"ISCO CSV download failed: {e}")
            if not self.fallback_to_sample:
                raise ReferenceDataError(f"Failed to fetch ISCO data: {e}") from e
            logger.warning("Using bundled ISCO sample data")
            return ISCO_SAMPLE_CSV, "sample"

    async def ensure_loaded(self) -> Optional[OccupationIndex]:
        async with self._lock:
            if self._index is not None:
                return self._index

            self.status = BootstrapStatus(state="loading")
            try:
                cached = load_isco_data(self.store)
            except StorageError as e:
                logger.warning(f"ISCO cache unreadable, fetching instead: {e.message}")
                cached = None
            if cached is not None:
                logger.info("ISCO data loaded from cache")
                return self.use(cached, "cache")

            try:
                text, source = await self._fetch_text()
                data = parse_isco_csv(text)
                if data is None:
                    raise ReferenceDataError("Failed to parse ISCO data")
            except ReferenceDataError as e:
                logger.error(f"ISCO bootstrap failed: {e.message}")
                self.status = BootstrapStatus(state="failed", error=e.message)
                return None
            except Exception as e:
                logger.error(f"ISCO bootstrap failed: {e}")
                self.status = BootstrapStatus(state="failed", error=f"Failed to load ISCO data: {e}")
                return None

            if source != "sample":
                try:
                    save_isco_data(self.store, data)
                except Exception as e:
                    logger.error(f"Could not cache ISCO data: {e}")

            logger.info(f"ISCO data loaded from {source}")
            return self.use(data, source)
