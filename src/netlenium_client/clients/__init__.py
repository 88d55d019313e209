from .admin_client import AdminClient
from .base import BaseClient

__all__ = [
    "AdminClient",
    "BaseClient",
]
