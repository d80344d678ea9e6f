"""
Startup Seeding

Creates the optional default user configured through SEED_USER_* settings,
so a fresh installation has an account to log in with.
"""

import logging

from src.application.ports.password_hasher import PasswordHasherProtocol
from src.application.ports.unit_of_work import UnitOfWorkProtocol
from src.domain.identity.entities.user import User
from src.shared.config import Settings

logger = logging.getLogger(__name__)


def seed_default_user(
    unit_of_work: UnitOfWorkProtocol,
    password_hasher: PasswordHasherProtocol,
    settings: Settings,
) -> bool:
    """
    Create the default user when configured and not yet registered.

    Args:
        unit_of_work: Unit of work used for the lookup and insert
        password_hasher: Hasher for the configured password
        settings: Settings with seed_user_name/email/password

    Returns:
        True if a user was created, False otherwise

    Raises:
        DomainValidationError: If the configured name/email is invalid
        PersistenceError: If the store fails
    """
    if not settings.seed_user_email:
        logger.debug("Seed user not configured, skipping")
        return False

    if not settings.seed_user_password:
        logger.warning(
            f"SEED_USER_EMAIL set without SEED_USER_PASSWORD, "
            f"not seeding {settings.seed_user_email}"
        )
        return False

    with unit_of_work as uow:
        if uow.users.get_by_email(settings.seed_user_email) is not None:
            logger.info(f"Seed user {settings.seed_user_email} already exists")
            return False

        user = User.register(
            name=settings.seed_user_name,
            email=settings.seed_user_email,
            password_hash=password_hasher.hash(settings.seed_user_password),
        )
        uow.users.add(user)
        uow.commit()

    logger.info(f"Seed user {user.email} created with id {user.id}")
    return True
