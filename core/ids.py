import time
import uuid


def now_ms() -> int:
    return int(time.time() * 1000)


def new_id(prefix: str) -> str:
    """`<prefix>_<epoch ms>_<9 hex chars>`, e.g. asmt_1718000000000_3f9c2a1b0."""
    return f"{prefix}_{now_ms()}_{uuid.uuid4().hex[:9]}"
