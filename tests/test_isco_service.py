import asyncio

from catalog.isco_sample import ISCO_SAMPLE_CSV
from core.errors import StorageError
from core.storage import InMemoryStore, StorageKey
from services.isco_service import IscoBootstrap, load_isco_data, parse_isco_csv

HEADER = ISCO_SAMPLE_CSV.splitlines()[0]


def _failing_fetch():
    async def fetch():
        raise ConnectionError("offline")
    return fetch


def test_parse_sample(isco_data):
    assert [g.code for g in isco_data.major_groups] == ["1", "2", "3"]
    assert [g.code for g in isco_data.sub_major_groups] == ["11", "12", "21", "31"]
    assert [g.code for g in isco_data.minor_groups] == ["111", "121", "214", "311"]
    assert len(isco_data.unit_groups) == 6
    unit = next(u for u in isco_data.unit_groups if u.code == "2143")
    assert unit.title == "Environmental Engineers"
    assert unit.minor_group_code == "214"
    assert unit.salary_range == "N/A"


def test_first_occurrence_wins():
    text = "\n".join([
        HEADER,
        '1,"Managers",,,11,"Chief Executives",,,111,"Legislators",,,1111,"Legislators"',
        '1,"Bosses",,,11,"Other",,,111,"Other",,,1111,"Other"',
    ])

    data = parse_isco_csv(text)

    assert data.major_groups[0].title == "Managers"
    assert data.unit_groups[0].title == "Legislators"
    assert len(data.unit_groups) == 1


def test_short_and_blank_rows_skipped():
    text = "\n".join([
        HEADER,
        "",
        "1,Managers,,,11",
        '2,"Professionals",,,21,"Science",,,214,"Engineering",,,2144,"Mechanical Engineers"',
    ])

    data = parse_isco_csv(text)

    assert [u.code for u in data.unit_groups] == ["2144"]
    assert [g.code for g in data.major_groups] == ["2"]


def test_nothing_usable_returns_none():
    assert parse_isco_csv("") is None
    assert parse_isco_csv(HEADER) is None
    assert parse_isco_csv(HEADER + "\nnot,a,valid,row") is None


def test_bootstrap_downloads_and_caches():
    store = InMemoryStore()

    async def fetch():
        return ISCO_SAMPLE_CSV

    bootstrap = IscoBootstrap(store, fetch_csv=fetch)
    index = asyncio.run(bootstrap.ensure_loaded())

    assert bootstrap.loaded
    assert bootstrap.status.state == "loaded"
    assert bootstrap.status.source == "remote"
    assert index.unit("2143").title == "Environmental Engineers"
    assert store.get(StorageKey.ISCO_DATA_LOADED) is True
    assert len(load_isco_data(store).unit_groups) == 6


def test_bootstrap_prefers_cache():
    store = InMemoryStore()

    async def fetch():
        return ISCO_SAMPLE_CSV

    asyncio.run(IscoBootstrap(store, fetch_csv=fetch).ensure_loaded())
    fresh = IscoBootstrap(store, fetch_csv=_failing_fetch(), fallback_to_sample=False)
    asyncio.run(fresh.ensure_loaded())

    assert fresh.status.source == "cache"
    assert fresh.index.unit("3112") is not None


def test_bootstrap_falls_back_to_sample():
    bootstrap = IscoBootstrap(InMemoryStore(), fetch_csv=_failing_fetch(), fallback_to_sample=True)

    asyncio.run(bootstrap.ensure_loaded())

    assert bootstrap.status.source == "sample"
    assert bootstrap.loaded


def test_sample_fallback_is_not_cached():
    store = InMemoryStore()
    asyncio.run(IscoBootstrap(store, fetch_csv=_failing_fetch(), fallback_to_sample=True).ensure_loaded())

    assert store.get(StorageKey.ISCO_DATA_LOADED) is None

    async def fetch():
        return ISCO_SAMPLE_CSV

    later = IscoBootstrap(store, fetch_csv=fetch)
    asyncio.run(later.ensure_loaded())

    assert later.status.source == "remote"
    assert store.get(StorageKey.ISCO_DATA_LOADED) is True


def test_unreadable_cache_falls_through_to_download():
    class UnreadableStore(InMemoryStore):
        def get(self, key):
            raise StorageError("Could not read cache")

    async def fetch():
        return ISCO_SAMPLE_CSV

    bootstrap = IscoBootstrap(UnreadableStore(), fetch_csv=fetch)
    asyncio.run(bootstrap.ensure_loaded())

    assert bootstrap.status.state == "loaded"
    assert bootstrap.status.source == "remote"


def test_bootstrap_failure_is_reported_not_raised():
    bootstrap = IscoBootstrap(InMemoryStore(), fetch_csv=_failing_fetch(), fallback_to_sample=False)

    assert asyncio.run(bootstrap.ensure_loaded()) is None
    assert bootstrap.status.state == "failed"
    assert "offline" in bootstrap.status.error
    assert not bootstrap.loaded


def test_bootstrap_unparseable_download_fails():
    async def fetch():
        return HEADER

    bootstrap = IscoBootstrap(InMemoryStore(), fetch_csv=fetch, fallback_to_sample=False)
    asyncio.run(bootstrap.ensure_loaded())

    assert bootstrap.status.state == "failed"
    assert bootstrap.status.error == "Failed to parse ISCO data"
