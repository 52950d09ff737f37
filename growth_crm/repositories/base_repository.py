"""
Shared record store contract.

Every entity repository inherits from BaseRepository and gets the same
behaviour: ids and timestamps are stamped on create, listings come back
newest first, updates merge partial fields, and a missing record is reported
rather than raised.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from ..core.database import Base, utcnow

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Args:
            model: Mapped entity class this repository stores
            db: Open session on the record store
        """
        self.model = model
        self.db = db

    def now(self) -> datetime:
        """Current time from the store clock."""
        clock = self.db.info.get("clock", utcnow)
        return clock()

    def _by_id(self, id: str) -> Query:
        return self.db.query(self.model).filter(self.model.id == id)

    def _stamp(self, values: Dict[str, Any], *, created: bool) -> Dict[str, Any]:
        stamp = self.now()
        if created and hasattr(self.model, "created_at"):
            values["created_at"] = stamp
        if hasattr(self.model, "updated_at"):
            values["updated_at"] = stamp
        return values

    def _commit(self, instance: Optional[ModelType] = None) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        if instance is not None:
            self.db.refresh(instance)

    def create(self, *, obj_in: Dict[str, Any]) -> ModelType:
        """
        Store a new record built from obj_in.

        Column defaults fill anything obj_in leaves out. No validation happens
        here; callers pass already-validated values.

        Raises:
            SQLAlchemyError: If the write fails (the session is rolled back)
        """
        record = self.model(**self._stamp(dict(obj_in), created=True))
        self.db.add(record)
        self._commit(record)
        return record

    def get(self, id: str) -> Optional[ModelType]:
        return self._by_id(id).first()

    def exists(self, id: str) -> bool:
        return self.db.query(self._by_id(id).exists()).scalar()

    def list_all(self) -> List[ModelType]:
        """All records of this type, newest first."""
        return self.db.query(self.model).order_by(desc(self.model.created_at)).all()

    def count(self) -> int:
        return self.db.query(self.model).count()

    def update(self, *, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """Merge obj_in onto db_obj; keys the entity does not have are ignored."""
        changes = {key: value for key, value in obj_in.items() if hasattr(db_obj, key)}
        for key, value in self._stamp(changes, created=False).items():
            setattr(db_obj, key, value)
        self._commit(db_obj)
        return db_obj

    def update_by_id(self, id: str, obj_in: Dict[str, Any]) -> Optional[ModelType]:
        """
        Returns:
            The updated record, or None when nothing is stored at id
            (in which case nothing is written)
        """
        record = self.get(id)
        if record is None:
            return None
        return self.update(db_obj=record, obj_in=obj_in)

    def delete(self, *, id: str) -> bool:
        """Remove the record at id. Returns False when there was none."""
        record = self.get(id)
        if record is None:
            return False
        self.db.delete(record)
        self._commit()
        return True
