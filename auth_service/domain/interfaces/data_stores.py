"""Store interfaces for users, banned tokens and pending 2FA challenges.

These interfaces are the persistence boundary of the domain. The orchestrator
depends only on them; the in-memory, Postgres and Redis adapters in
`auth_service.infrastructure.data_stores` implement them.

Key DDD Principles Applied:
- Dependency Inversion: Domain depends on abstractions, not concretions
- Interface Segregation: One narrow contract per store
- Ubiquitous Language: Methods speak of users, tokens and codes, not rows or keys

Every method is a coroutine. Implementations must make each call atomic with
respect to concurrent calls on the same store.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from auth_service.domain.entities.user import User
from auth_service.domain.value_objects import (
    Email,
    LoginAttemptId,
    Password,
    Token,
    TwoFACode,
)


class IUserStore(ABC):
    """Interface for the registry of user accounts, keyed by email."""

    @abstractmethod
    async def add_user(self, user: User) -> None:
        """Registers a new user.

        Args:
            user: The user to store. Its password is already hashed.

        Raises:
            UserAlreadyExistsError: If a user with the same email exists.
            UnexpectedError: If the backing store fails.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_user(self, email: Email) -> User:
        """Fetches a user by email.

        Raises:
            UserNotFoundError: If no user has this email.
            UnexpectedError: If the backing store fails.
        """
        raise NotImplementedError

    @abstractmethod
    async def validate_user(self, email: Email, password: Password) -> None:
        """Checks a plaintext password against the stored hash.

        Implementations verify through the injected password hasher. When the
        user does not exist they still burn one dummy verification, so a
        missing user and a wrong password take the same time.

        Raises:
            UserNotFoundError: If no user has this email.
            InvalidCredentialsError: If the password does not match.
            UnexpectedError: If the backing store fails.
        """
        raise NotImplementedError


class IBannedTokenStore(ABC):
    """Interface for the set of revoked session tokens."""

    @abstractmethod
    async def add_token(self, token: Token) -> None:
        """Bans a token. Banning a token that is already banned succeeds.

        Raises:
            UnexpectedError: If the backing store fails.
        """
        raise NotImplementedError

    @abstractmethod
    async def contains_token(self, token: Token) -> bool:
        """Returns whether the token has been banned.

        Raises:
            UnexpectedError: If the backing store fails.
        """
        raise NotImplementedError


class ITwoFACodeStore(ABC):
    """Interface for pending 2FA challenges, at most one per email."""

    @abstractmethod
    async def add_code(
        self, email: Email, login_attempt_id: LoginAttemptId, code: TwoFACode
    ) -> None:
        """Stores a challenge for an email, replacing any previous one.

        Replacing is what invalidates an older login attempt when the user
        logs in again.

        Raises:
            UnexpectedError: If the backing store fails.
        """
        raise NotImplementedError

    @abstractmethod
    async def remove_code(self, email: Email) -> None:
        """Deletes the challenge for an email. Removing a missing entry succeeds.

        Raises:
            UnexpectedError: If the backing store fails.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_code(self, email: Email) -> Tuple[LoginAttemptId, TwoFACode]:
        """Returns the live challenge for an email.

        Raises:
            TwoFACodeNotFoundError: If there is no challenge or it has expired.
            UnexpectedError: If the backing store fails or holds an unreadable value.
        """
        raise NotImplementedError
