from .jwt_token_service import JWTTokenService
from .password_hasher import Argon2PasswordHasher

__all__ = ["Argon2PasswordHasher", "JWTTokenService"]
