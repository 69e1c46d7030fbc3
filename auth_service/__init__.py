"""Authentication service: signup, password login, 2FA challenges and session tokens."""

__version__ = "0.1.0"
