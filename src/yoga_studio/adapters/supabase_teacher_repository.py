"""Supabase-backed teacher repository."""

from dataclasses import dataclass

from supabase import Client

from yoga_studio.adapters.supabase_rows import parse_teacher
from yoga_studio.domain.teachers import Teacher
from yoga_studio.services.teachers import TeacherRepository

_TEACHER_COLUMNS = "id, first_name, last_name, created_at, updated_at"


@dataclass
class SupabaseTeacherRepository(TeacherRepository):
    """Supabase implementation for teacher lookups."""

    client: Client

    def list_teachers(self) -> list[Teacher]:
        """Return all teachers, newest first."""
        response = (
            self.client.table("teachers")
            .select(_TEACHER_COLUMNS)
            .order("created_at", desc=True)
            .order("id", desc=True)
            .execute()
        )
        return [parse_teacher(row) for row in response.data or []]

    def get_teacher(self, teacher_id: int) -> Teacher | None:
        """Return a teacher by id, if present."""
        response = (
            self.client.table("teachers")
            .select(_TEACHER_COLUMNS)
            .eq("id", teacher_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_teacher(response.data[0])

    def create_teacher(self, first_name: str, last_name: str) -> Teacher:
        """Create a teacher row and return it."""
        response = (
            self.client.table("teachers")
            .insert({"first_name": first_name, "last_name": last_name})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create teacher")
        return parse_teacher(response.data[0])
