"""Generic data-access layer shared by entity repositories."""

from typing import Generic, TypeVar

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.user_api.core.exceptions import ResourceConflictError
from src.user_api.entities._base import Entity, EntityTable

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class CrudRepository(Generic[EntityT, TableT]):
    """Create/read/update/delete operations for one entity and its table.

    Subclasses bind ``entity_type`` and ``table_type``. Every write commits on
    its own, so two calls are two independent transactions.
    """

    entity_type: type[EntityT]
    table_type: type[TableT]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)

    def save(self, entity: EntityT) -> EntityT:
        """Insert the entity when it has no id, otherwise overwrite its row.

        Raises:
            ResourceConflictError: a unique constraint rejected the write.
        """
        row = self.table_type(**entity.model_dump())
        try:
            row = self._session.merge(row)
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            logger.warning(
                "Integrity violation saving {}: {}", self.table_type.__name__, exc.orig
            )
            raise ResourceConflictError(str(exc.orig)) from exc

        self._session.refresh(row)
        return self._to_entity(row)

    def find_by_id(self, entity_id: int) -> EntityT | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find_all(self) -> list[EntityT]:
        rows = self._session.exec(select(self.table_type)).all()
        return [self._to_entity(row) for row in rows]

    def exists_by_id(self, entity_id: int) -> bool:
        statement = select(self.table_type.id).where(self.table_type.id == entity_id)
        return self._session.exec(statement).first() is not None

    def delete_by_id(self, entity_id: int) -> None:
        """Delete the row with this id; a missing row is ignored."""
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()
