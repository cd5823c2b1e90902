"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from postgrest.exceptions import APIError
from supabase import Client

from yoga_studio.adapters.supabase_rows import is_unique_violation, parse_timestamp
from yoga_studio.domain.errors import DuplicateRecordError
from yoga_studio.domain.users import UserRecord
from yoga_studio.services.users import UserRepository

_USER_COLUMNS = (
    "id, email, password, first_name, last_name, admin, created_at, updated_at"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with the email, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(
        self, email: str, password_hash: str, first_name: str, last_name: str
    ) -> UserRecord:
        """Create a new user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "email": email,
                        "password": password_hash,
                        "first_name": first_name,
                        "last_name": last_name,
                        "admin": False,
                    }
                )
                .execute()
            )
        except APIError as exc:
            if is_unique_violation(exc):
                raise DuplicateRecordError(email) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def set_admin(self, user_id: int, admin: bool) -> UserRecord:
        """Update the admin flag and return the updated user."""
        response = (
            self.client.table("users")
            .update({"admin": admin, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", user_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])

    def delete_user(self, user_id: int) -> None:
        """Delete a user row; participations cascade in the database."""
        self.client.table("users").delete().eq("id", user_id).execute()


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=int(row["id"]),
        email=str(row["email"]),
        password_hash=str(row.get("password") or ""),
        first_name=str(row["first_name"]),
        last_name=str(row["last_name"]),
        admin=bool(row.get("admin")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
