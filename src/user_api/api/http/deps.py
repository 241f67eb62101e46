"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.user_api.api.http.app_data import ApplicationDependencies
from src.user_api.core.services import UserService
from src.user_api.entities.user import UserRepository


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session scoped to the current request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    with app_deps.database_service.session_scope() as session:
        yield session


def get_user_repository(db: Session = Depends(get_db_session)) -> UserRepository:
    return UserRepository(db)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Get the User service instance."""
    return UserService(repository)
