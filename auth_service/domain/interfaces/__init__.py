"""Domain interfaces for dependency inversion.

Interface Organization:
- Data stores: users, banned tokens, pending 2FA challenges
- Security: password hashing
- Token management: session token issue and verification
- Email: out-of-band delivery of 2FA codes
"""

from .data_stores import IBannedTokenStore, ITwoFACodeStore, IUserStore
from .email import IEmailClient
from .security import IPasswordHasher
from .token_management import Claims, ITokenService

__all__ = [
    "Claims",
    "IBannedTokenStore",
    "IEmailClient",
    "IPasswordHasher",
    "ITokenService",
    "ITwoFACodeStore",
    "IUserStore",
]
