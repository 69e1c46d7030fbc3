"""argon2id password hashing on a dedicated thread pool.

Hashing is memory-hard and takes tens of milliseconds of CPU per
call. Every call runs on a `ThreadPoolExecutor` owned by the hasher, never on
the event loop thread and never on the loop's default executor.

Default cost parameters: time_cost=2, memory_cost=15000 KiB, parallelism=1.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar

from passlib.context import CryptContext
from structlog import get_logger

from auth_service.core.exceptions import PasswordMismatchError, UnexpectedError, ValidationError
from auth_service.domain.interfaces import IPasswordHasher
from auth_service.domain.value_objects import HashedPassword, Password

logger = get_logger(__name__)

T = TypeVar("T")

_DUMMY_PASSWORD = "dummy-password-for-timing-equalisation"


class Argon2PasswordHasher(IPasswordHasher):
    """passlib-backed argon2id implementation of `IPasswordHasher`.

    Args:
        time_cost: Number of argon2 iterations.
        memory_cost: Memory usage in KiB.
        parallelism: Number of argon2 lanes.
        max_workers: Size of the dedicated hashing thread pool.
    """

    def __init__(
        self,
        time_cost: int = 2,
        memory_cost: int = 15000,
        parallelism: int = 1,
        max_workers: int = 4,
    ):
        self._context = CryptContext(
            schemes=["argon2"],
            deprecated="auto",
            argon2__type="ID",
            argon2__time_cost=time_cost,
            argon2__memory_cost=memory_cost,
            argon2__parallelism=parallelism,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="password-hasher"
        )
        self._dummy_hash = self._context.hash(_DUMMY_PASSWORD)
        logger.info(
            "Argon2PasswordHasher initialized",
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            max_workers=max_workers,
        )

    async def hash(self, password: Password) -> HashedPassword:
        try:
            digest = await self._run(self._context.hash, password.expose_secret())
            return HashedPassword(digest)
        except (ValueError, TypeError, ValidationError) as e:
            logger.error("Password hashing failed", error_type=type(e).__name__)
            raise UnexpectedError() from e

    async def verify(self, hashed: HashedPassword, candidate: Password) -> None:
        try:
            matches = await self._run(
                self._context.verify, candidate.expose_secret(), hashed.value
            )
        except (ValueError, TypeError) as e:
            logger.error("Stored password hash is unreadable", error_type=type(e).__name__)
            raise UnexpectedError() from e
        if not matches:
            raise PasswordMismatchError()

    async def verify_dummy(self, candidate: Password) -> None:
        await self._run(self._context.verify, candidate.expose_secret(), self._dummy_hash)

    def shutdown(self) -> None:
        """Releases the hashing pool. Called once at application shutdown."""
        self._executor.shutdown(wait=True)
        logger.info("Password hasher pool shut down")

    async def _run(self, func: Callable[..., T], *args) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, func, *args)
