"""Adapters implementing the domain store interfaces.

- In-memory stores for single-process deployments and tests.
- Postgres user store and Redis banned-token / 2FA code stores for
  multi-instance deployments.
"""

from .in_memory import InMemoryBannedTokenStore, InMemoryTwoFACodeStore, InMemoryUserStore
from .postgres_user_store import PostgresUserStore
from .redis_banned_token_store import RedisBannedTokenStore
from .redis_two_fa_code_store import RedisTwoFACodeStore

__all__ = [
    "InMemoryBannedTokenStore",
    "InMemoryTwoFACodeStore",
    "InMemoryUserStore",
    "PostgresUserStore",
    "RedisBannedTokenStore",
    "RedisTwoFACodeStore",
]
