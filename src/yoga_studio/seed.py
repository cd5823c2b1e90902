"""Seed the database with the default studio accounts, teachers and sessions."""

import logging
from datetime import date

from yoga_studio.app_logging import configure_logging
from yoga_studio.containers import AppContainer, build_container

_logger = logging.getLogger(__name__)

SEED_USERS = (
    ("yoga@studio.com", "Admin", "Yoga", True),
    ("user@test.com", "John", "Doe", False),
)
SEED_TEACHERS = (
    ("Margot", "Delahaye"),
    ("Hélène", "Thiercelin"),
    ("David", "Martin"),
)
SEED_SESSIONS = (
    (
        "Yoga Vinyasa",
        date(2026, 2, 15),
        "A dynamic class that links movement and breath. "
        "Builds strength and improves flexibility.",
        0,
    ),
    (
        "Yoga Hatha",
        date(2026, 2, 20),
        "A gentle practice open to everyone, focused on postures and mindful breathing.",
        1,
    ),
    (
        "Yoga Ashtanga",
        date(2026, 2, 25),
        "A traditional, structured style with a flowing series of linked postures.",
        0,
    ),
    (
        "Yin Yoga",
        date(2026, 3, 1),
        "A slow, meditative practice with long holds that stretch the deep tissues.",
        2,
    ),
)


def seed(container: AppContainer) -> None:
    """Create missing seed records; existing ones are left untouched."""
    password = container.settings.seed_password
    for email, first_name, last_name, admin in SEED_USERS:
        user = container.credential_service.provision_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            admin=admin,
        )
        _logger.info("Seeded user: email=%s admin=%s", user.email, user.admin)

    teachers = [
        container.teacher_directory.provision(first_name, last_name)
        for first_name, last_name in SEED_TEACHERS
    ]
    _logger.info("Seeded teachers: count=%s", len(teachers))

    existing_names = {
        session.name for session in container.session_registry.list_sessions()
    }
    for name, session_date, description, teacher_index in SEED_SESSIONS:
        if name in existing_names:
            continue
        container.session_registry.create_session(
            name=name,
            session_date=session_date,
            description=description,
            teacher_id=teachers[teacher_index].id,
        )
    _logger.info("Seed completed")


def main() -> None:
    """Seed the configured database."""
    container = build_container()
    configure_logging(container.settings.log_level)
    seed(container)


if __name__ == "__main__":
    main()
