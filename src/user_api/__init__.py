"""User CRUD API.

A FastAPI service exposing create, read, update and delete operations on a
single User resource persisted through SQLModel.
"""

__version__ = "0.1.0"
