"""User Registration Domain Service.

Turns a raw signup request into a stored `User`: parse the inputs into value
objects, hash the password off the event loop, then insert. Nothing reaches
the store unless both inputs are valid.
"""

import structlog

from auth_service.core.exceptions import AuthServiceError, UnexpectedError
from auth_service.domain.entities.user import User
from auth_service.domain.interfaces import IPasswordHasher, IUserStore
from auth_service.domain.value_objects import Email, Password

logger = structlog.get_logger(__name__)


class UserRegistrationService:
    """Domain service for account creation.

    Args:
        user_store: Where accounts are kept.
        password_hasher: Produces the argon2id hash that is stored.
    """

    def __init__(self, user_store: IUserStore, password_hasher: IPasswordHasher):
        self._user_store = user_store
        self._password_hasher = password_hasher

    async def signup(self, email: str, password: str, requires_2fa: bool) -> User:
        """Registers a new account.

        Args:
            email: Raw email address.
            password: Raw password.
            requires_2fa: Whether logins for this account need an emailed code.

        Returns:
            User: The stored user.

        Raises:
            ValidationError: If the email or password is malformed.
            UserAlreadyExistsError: If the email is already registered.
            UnexpectedError: If hashing or the store fails.
        """
        parsed_email = Email.parse(email)
        parsed_password = Password.parse(password)

        try:
            hashed_password = await self._password_hasher.hash(parsed_password)
            user = User(
                email=parsed_email,
                hashed_password=hashed_password,
                requires_2fa=requires_2fa,
            )
            await self._user_store.add_user(user)
        except AuthServiceError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error during signup",
                email=parsed_email.mask_for_logging(),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise UnexpectedError() from e

        logger.info(
            "User registered",
            email=parsed_email.mask_for_logging(),
            requires_2fa=requires_2fa,
        )
        return user
