"""
Authentication Service

Responsibility:
    Registration, credential verification and token issuance.

Architecture Notes:
    - Part of Application Layer (Services)
    - Password hashing delegated to PasswordHasherProtocol (Argon2, per-user salt)
    - Token signing delegated to TokenServiceProtocol (JWT)
    - Per-request token verification is NOT done here; the API Layer
      dependency calls TokenServiceProtocol.verify() directly

Contains:
    - AuthService: register, login
"""

import logging

from src.application.commands.authenticate import LoginCommand, RegisterUserCommand
from src.application.models import AuthResult, UserSummary
from src.application.ports.password_hasher import PasswordHasherProtocol
from src.application.ports.token_service import TokenServiceProtocol
from src.application.ports.unit_of_work import (
    IntegrityViolationError,
    UnitOfWorkProtocol,
)
from src.domain.identity.entities.user import User
from src.domain.identity.value_objects.caller_identity import CallerIdentity
from src.domain.shared.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)


class AuthService:
    """
    Use cases for user registration and login.

    Attributes:
        unit_of_work: Unit of work opened once per method call (injected)
        password_hasher: Password hashing implementation (injected)
        token_service: Bearer token issuer (injected)

    Examples:
        >>> service = AuthService(uow, Argon2PasswordHasher(), JwtTokenService(settings))
        >>> result = service.register(RegisterUserCommand(
        ...     name="Alice", email="alice@example.com", password="s3cret!"
        ... ))
        >>> result.user.email
        'alice@example.com'
    """

    def __init__(
        self,
        unit_of_work: UnitOfWorkProtocol,
        password_hasher: PasswordHasherProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.unit_of_work = unit_of_work
        self.password_hasher = password_hasher
        self.token_service = token_service

    def register(self, command: RegisterUserCommand) -> AuthResult:
        """
        Register a new user and sign them in.

        Process Flow:
            1. Validate name/email/password
            2. Reject an email that is already registered
            3. Hash password (random salt per user)
            4. Persist user (unique index catches concurrent duplicates)
            5. Issue token

        Args:
            command: Registration data

        Returns:
            AuthResult with token and user

        Raises:
            DomainValidationError: If input is invalid
            EmailAlreadyRegisteredError: If the email already exists
            PersistenceError: If the store fails
        """
        command.validate_business_rules()
        email = command.normalized_email

        with self.unit_of_work as uow:
            if uow.users.get_by_email(email) is not None:
                logger.warning(f"Registration rejected, email already exists: {email}")
                raise EmailAlreadyRegisteredError(email)

            user = User.register(
                name=command.name,
                email=email,
                password_hash=self.password_hasher.hash(command.password),
            )
            uow.users.add(user)

            try:
                uow.commit()
            except IntegrityViolationError as e:
                logger.warning(f"Registration lost race on unique email: {email}")
                raise EmailAlreadyRegisteredError(email) from e

        logger.info(f"User {user.id} registered")
        return self._issue(user)

    def login(self, command: LoginCommand) -> AuthResult:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password raise the same error. When the
        stored hash uses outdated parameters it is replaced in the same
        unit of work.

        Args:
            command: Login credentials

        Returns:
            AuthResult with token and user

        Raises:
            InvalidCredentialsError: If email is unknown or password is wrong
        """
        email = command.normalized_email

        with self.unit_of_work as uow:
            user = uow.users.get_by_email(email)
            if user is None:
                logger.warning(f"Login failed for unknown email: {email}")
                raise InvalidCredentialsError()

            valid, updated_hash = self.password_hasher.verify_and_update(
                command.password, user.password_hash
            )
            if not valid:
                logger.warning(f"Login failed for user {user.id}: wrong password")
                raise InvalidCredentialsError()

            if updated_hash is not None:
                user.password_hash = updated_hash
                uow.users.update(user)
                uow.commit()
                logger.info(f"Password hash of user {user.id} upgraded")

        logger.info(f"User {user.id} logged in")
        return self._issue(user)

    def _issue(self, user: User) -> AuthResult:
        issued = self.token_service.issue(CallerIdentity(user_id=user.id, name=user.name))
        return AuthResult(
            token=issued.token,
            expires_at=issued.expires_at,
            user=UserSummary.from_user(user),
        )
