"""
Shared fixtures: an in-memory stand-in for the Supabase client so no test
touches the network.
"""
import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
from postgrest import APIError

from mentorship_bridge.bridge import MentorshipBridge
from mentorship_bridge.core.config import Settings
from mentorship_bridge.core.database import SupabaseConnection

PRIMARY_KEYS = {"users": "email", "mentors": "user_email", "requests": "id", "goals": "id"}
GENERATED_IDS = {"requests", "goals"}
BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeResponse:
    def __init__(self, data):
        self.data = data
        self.count = None


class FakeQuery:
    """Records one chained table call and applies it to the fake store on execute()"""

    def __init__(self, db: "FakeSupabase", name: str):
        self.db = db
        self.name = name
        self.op = "select"
        self.columns = "*"
        self.payload: Optional[Dict[str, Any]] = None
        self.on_conflict: Optional[str] = None
        self.filters: List[tuple] = []
        self.ordering: Optional[tuple] = None
        self.limit_count: Optional[int] = None

    def select(self, columns="*"):
        self.op = "select"
        self.columns = columns
        return self

    def insert(self, payload):
        self.op = "insert"
        self.payload = payload
        return self

    def upsert(self, payload, on_conflict=None):
        self.op = "upsert"
        self.payload = payload
        self.on_conflict = on_conflict
        return self

    def update(self, payload):
        self.op = "update"
        self.payload = payload
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, count):
        self.limit_count = count
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        self.db.calls.append(self)
        failure = self.db.failures.get((self.name, self.op))
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            raise APIError(failure)
        return FakeResponse(copy.deepcopy(getattr(self, f"_run_{self.op}")()))

    def _run_select(self):
        rows = [row for row in self.db.rows(self.name) if self._matches(row)]
        if self.ordering:
            column, desc = self.ordering
            rows.sort(key=lambda r: r.get(column) or "", reverse=desc)
        if self.limit_count is not None:
            rows = rows[:self.limit_count]
        return rows

    def _run_insert(self):
        return [self.db.store(self.name, dict(self.payload))]

    def _run_upsert(self):
        key = self.on_conflict or PRIMARY_KEYS[self.name]
        for row in self.db.tables.setdefault(self.name, []):
            if row.get(key) == self.payload.get(key):
                row.update(self.payload)
                return [row]
        return [self.db.store(self.name, dict(self.payload))]

    def _run_update(self):
        updated = []
        for row in self.db.tables.setdefault(self.name, []):
            if self._matches(row):
                row.update(self.payload)
                updated.append(row)
        return updated


class FakeSupabase:
    """Enough of supabase.Client for the bridge: table(), the request view and injectable failures"""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[FakeQuery] = []
        self.failures: Dict[tuple, Any] = {}
        self._tick = 0

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, name: str, op: str, message: str = "boom", code: str = "XX000"):
        self.failures[(name, op)] = {"message": message, "code": code, "hint": None, "details": None}

    def break_transport(self, name: str, op: str, error: Exception):
        self.failures[(name, op)] = error

    def next_timestamp(self) -> str:
        self._tick += 1
        return (BASE_TIME + timedelta(seconds=self._tick)).isoformat()

    def store(self, name: str, row: Dict[str, Any]) -> Dict[str, Any]:
        table = self.tables.setdefault(name, [])
        if name in GENERATED_IDS and "id" not in row:
            row["id"] = len(table) + 1
        row.setdefault("created_at", self.next_timestamp())
        table.append(row)
        return row

    def rows(self, name: str) -> List[Dict[str, Any]]:
        if name == "v_requests_with_names":
            names = {u["email"]: u.get("name") for u in self.tables.get("users", [])}
            return [
                dict(r, mentee_name=names.get(r["mentee_email"]), mentor_name=names.get(r["mentor_email"]))
                for r in self.tables.get("requests", [])
            ]
        return self.tables.get(name, [])

    def remote_calls(self, op: Optional[str] = None) -> List[FakeQuery]:
        return [c for c in self.calls if op is None or c.op == op]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def bridge(fake_db, clean_env) -> MentorshipBridge:
    connection = SupabaseConnection(settings=Settings(_env_file=None), client=fake_db)
    return MentorshipBridge(connection)
