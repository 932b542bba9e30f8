# app/repositories/base.py
import logging
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, load_only

from app.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class Repository(Generic[ModelType]):
    """Thin create/read/update/delete adapter over a single mapped model.

    The repository holds no per-request state: the session is passed to
    every call, so one instance per model is shared by the whole process.
    Each call is a single round trip. Store errors are re-raised unchanged
    after the session is rolled back; translating them into domain errors
    is the caller's job.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model
        self.name = model.__name__

    def _query(self, db: Session, where: Optional[Mapping[str, Any]], select: Optional[Iterable[str]]):
        query = db.query(self.model)
        if select:
            query = query.options(load_only(*[getattr(self.model, field) for field in select]))
        if where:
            query = query.filter_by(**where)
        return query

    def save(self, db: Session, data: Union[ModelType, Dict[str, Any]]) -> ModelType:
        entity = data if isinstance(data, self.model) else self.model(**data)
        try:
            db.add(entity)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Could not save {self.name}")
            raise
        db.refresh(entity)
        return entity

    def update(self, db: Session, id: int, patch: Mapping[str, Any]) -> Optional[ModelType]:
        entity = db.get(self.model, id)
        if entity is None:
            return None

        for key, value in patch.items():
            if value is not None:
                setattr(entity, key, value)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Could not update {self.name} {id}")
            raise
        db.refresh(entity)
        return entity

    def find_one(
        self,
        db: Session,
        where: Optional[Mapping[str, Any]] = None,
        select: Optional[Iterable[str]] = None,
    ) -> Optional[ModelType]:
        return self._query(db, where, select).first()

    def find_all(
        self,
        db: Session,
        where: Optional[Mapping[str, Any]] = None,
        select: Optional[Iterable[str]] = None,
    ) -> List[ModelType]:
        return self._query(db, where, select).order_by(self.model.id).all()

    def delete(self, db: Session, id: int) -> int:
        try:
            deleted = db.query(self.model).filter(self.model.id == id).delete(synchronize_session="fetch")
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Could not delete {self.name} {id}")
            raise
        return deleted
