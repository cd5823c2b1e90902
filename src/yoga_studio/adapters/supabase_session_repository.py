"""Supabase-backed session repository."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from postgrest.exceptions import APIError
from supabase import Client

from yoga_studio.adapters.supabase_rows import (
    is_unique_violation,
    parse_date,
    parse_teacher,
    parse_timestamp,
)
from yoga_studio.domain.errors import DuplicateRecordError
from yoga_studio.domain.sessions import SessionDraft, YogaSession
from yoga_studio.services.sessions import SessionRepository

_SESSION_COLUMNS = (
    "id, name, date, description, teacher_id, created_at, updated_at, "
    "teacher:teachers(id, first_name, last_name, created_at, updated_at), "
    "participations(user_id)"
)


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for sessions and participations."""

    client: Client

    def list_sessions(self) -> list[YogaSession]:
        """Return all sessions ordered by id."""
        response = (
            self.client.table("sessions")
            .select(_SESSION_COLUMNS)
            .order("id")
            .execute()
        )
        return [_parse_session(row) for row in response.data or []]

    def get_session(self, session_id: int) -> YogaSession | None:
        """Return a session by id, if present."""
        response = (
            self.client.table("sessions")
            .select(_SESSION_COLUMNS)
            .eq("id", session_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def create_session(self, draft: SessionDraft) -> YogaSession:
        """Create a session row and return it with its teacher."""
        response = (
            self.client.table("sessions")
            .insert(
                {
                    "name": draft.name,
                    "date": draft.date.isoformat(),
                    "description": draft.description,
                    "teacher_id": draft.teacher_id,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create session")
        return self._reload(int(response.data[0]["id"]))

    def update_session(
        self, session_id: int, changes: dict[str, object]
    ) -> YogaSession:
        """Apply field changes and return the updated session."""
        payload: dict[str, object] = {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in changes.items()
        }
        payload["updated_at"] = datetime.now(tz=UTC).isoformat()
        self.client.table("sessions").update(payload).eq("id", session_id).execute()
        return self._reload(session_id)

    def delete_session(self, session_id: int) -> None:
        """Delete a session row; participations cascade in the database."""
        self.client.table("sessions").delete().eq("id", session_id).execute()

    def has_participant(self, session_id: int, user_id: int) -> bool:
        """Return True when the participation row exists."""
        response = (
            self.client.table("participations")
            .select("session_id")
            .eq("session_id", session_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        return bool(response.data)

    def add_participant(self, session_id: int, user_id: int) -> None:
        """Insert a participation row."""
        try:
            self.client.table("participations").insert(
                {"session_id": session_id, "user_id": user_id}
            ).execute()
        except APIError as exc:
            if is_unique_violation(exc):
                raise DuplicateRecordError(f"{session_id}:{user_id}") from exc
            raise

    def remove_participant(self, session_id: int, user_id: int) -> None:
        """Delete a participation row."""
        (
            self.client.table("participations")
            .delete()
            .eq("session_id", session_id)
            .eq("user_id", user_id)
            .execute()
        )

    def _reload(self, session_id: int) -> YogaSession:
        session = self.get_session(session_id)
        if session is None:
            raise RuntimeError(f"Session {session_id} disappeared after write")
        return session


def _parse_session(row: dict[str, object]) -> YogaSession:
    participations = row.get("participations") or []
    return YogaSession(
        id=int(row["id"]),
        name=str(row["name"]),
        date=parse_date(row["date"]),
        description=str(row["description"]),
        teacher=parse_teacher(row["teacher"]),
        participant_ids=sorted(int(item["user_id"]) for item in participations),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
