from .fastmail_client import FastMailEmailClient
from .mock_client import MockEmailClient

__all__ = ["FastMailEmailClient", "MockEmailClient"]
