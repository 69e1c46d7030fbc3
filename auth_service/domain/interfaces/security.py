"""Password hashing interface.

The hasher is the only component that sees a plaintext password besides the
value object that carries it. Hashing is memory-hard and CPU-bound, so
implementations must never run it on the event loop thread.
"""

from abc import ABC, abstractmethod

from auth_service.domain.value_objects import HashedPassword, Password


class IPasswordHasher(ABC):
    """Interface for memory-hard password hashing and verification."""

    @abstractmethod
    async def hash(self, password: Password) -> HashedPassword:
        """Hashes a password with a fresh random salt.

        Raises:
            UnexpectedError: If the hashing backend fails.
        """
        raise NotImplementedError

    @abstractmethod
    async def verify(self, hashed: HashedPassword, candidate: Password) -> None:
        """Verifies a candidate password against a stored hash.

        Raises:
            PasswordMismatchError: If the candidate does not match.
            UnexpectedError: If the hash cannot be read or the backend fails.
        """
        raise NotImplementedError

    @abstractmethod
    async def verify_dummy(self, candidate: Password) -> None:
        """Performs one verification against a fixed dummy hash and discards the result.

        Used when the user does not exist so that the response time does not
        reveal whether an email is registered.
        """
        raise NotImplementedError
