"""
Tests for goal creation.
"""
import pytest

from mentorship_bridge.core.exceptions import InvalidInputError, RemoteError


@pytest.mark.asyncio
async def test_create_goal_defaults(bridge, fake_db):
    row = await bridge.create_goal("a@x", "Learn X")
    assert row["status"] == "open"
    assert row["progress"] == 0
    assert row["mentor_email"] is None
    assert row["notes"] is None
    assert row["start_date"] is None and row["due_date"] is None
    assert [u["email"] for u in fake_db.tables["users"]] == ["a@x"]


@pytest.mark.asyncio
async def test_create_goal_with_mentor_upserts_mentor(bridge, fake_db):
    row = await bridge.create_goal(
        "a@x",
        "Ship a side project",
        mentor_email="m@x",
        notes="Weekly check-ins",
        status="in_progress",
        progress=40,
        start_date="2024-02-01",
        due_date="2024-05-01",
    )
    roles = {u["email"]: u["role"] for u in fake_db.tables["users"]}
    assert roles == {"a@x": "mentee", "m@x": "mentor"}
    assert row["mentor_email"] == "m@x"
    assert row["status"] == "in_progress"
    assert row["progress"] == 40
    assert row["due_date"] == "2024-05-01"


@pytest.mark.asyncio
@pytest.mark.parametrize("progress", [None, "50", True])
async def test_create_goal_non_numeric_progress_falls_back_to_zero(bridge, progress):
    row = await bridge.create_goal("a@x", "Learn X", progress=progress)
    assert row["progress"] == 0


@pytest.mark.asyncio
async def test_create_goal_empty_status_defaults_to_open(bridge):
    row = await bridge.create_goal("a@x", "Learn X", status="")
    assert row["status"] == "open"


@pytest.mark.asyncio
@pytest.mark.parametrize("mentee,title", [("", "Learn X"), ("a@x", ""), (None, None)])
async def test_create_goal_requires_mentee_and_title(bridge, fake_db, mentee, title):
    with pytest.raises(InvalidInputError, match="mentee_email and title required"):
        await bridge.create_goal(mentee, title)
    assert fake_db.calls == []


@pytest.mark.asyncio
async def test_create_goal_insert_failure_keeps_users(bridge, fake_db):
    fake_db.fail("goals", "insert")
    with pytest.raises(RemoteError):
        await bridge.create_goal("a@x", "Learn X", mentor_email="m@x")
    assert len(fake_db.tables["users"]) == 2
    assert "goals" not in fake_db.tables
