"""Helpers shared by the Supabase repositories."""

from datetime import date, datetime

from postgrest.exceptions import APIError

from yoga_studio.domain.teachers import Teacher

UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: APIError) -> bool:
    """Return True when PostgREST reports a unique constraint violation."""
    return exc.code == UNIQUE_VIOLATION


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO timestamp column, tolerating nulls."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def parse_date(value: object) -> date:
    """Parse a DATE column."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_teacher(row: dict[str, object]) -> Teacher:
    """Build a teacher from a `teachers` row."""
    return Teacher(
        id=int(row["id"]),
        first_name=str(row["first_name"]),
        last_name=str(row["last_name"]),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
