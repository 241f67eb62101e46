"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity
- UserTable: Database persistence model
- UserRepository: Data access layer
- UserDto: Wire representation used by the HTTP API
"""

from .dto import UserDto
from .entity import User
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserDto", "UserTable", "UserRepository"]
