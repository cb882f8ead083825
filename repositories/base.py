"""
Base repository for the data access layer.
Services talk to repositories, repositories talk to the SQLAlchemy session.
"""

from typing import Any, Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Common CRUD operations shared by the concrete repositories.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: Any) -> Optional[ModelType]:
        """
        Get entity by primary key.

        Subclasses override this when the key needs coercion or eager loading.
        """
        return self.db.get(self.model, entity_id)

    def create(self, entity: ModelType) -> ModelType:
        """Persist a new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity
