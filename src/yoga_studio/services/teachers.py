"""Read-only teacher directory."""

from dataclasses import dataclass
from typing import Protocol

from yoga_studio.domain.errors import NotFound
from yoga_studio.domain.teachers import Teacher


class TeacherRepository(Protocol):
    """Persistence interface for teachers."""

    def list_teachers(self) -> list[Teacher]:
        """Return all teachers, newest first."""

    def get_teacher(self, teacher_id: int) -> Teacher | None:
        """Return a teacher by id, if present."""

    def create_teacher(self, first_name: str, last_name: str) -> Teacher:
        """Create a teacher and return it."""


@dataclass
class TeacherDirectory:
    """Application service for teacher lookups."""

    repository: TeacherRepository

    def list_teachers(self) -> list[Teacher]:
        """Return all teachers, newest-created first."""
        return self.repository.list_teachers()

    def get_teacher(self, teacher_id: int) -> Teacher:
        """Return a teacher or raise NotFound."""
        teacher = self.repository.get_teacher(teacher_id)
        if teacher is None:
            raise NotFound("Teacher not found")
        return teacher

    def provision(self, first_name: str, last_name: str) -> Teacher:
        """Return the teacher with this name, creating it when missing."""
        for teacher in self.repository.list_teachers():
            if (teacher.first_name, teacher.last_name) == (first_name, last_name):
                return teacher
        return self.repository.create_teacher(first_name, last_name)
