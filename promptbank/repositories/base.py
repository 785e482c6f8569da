"""Base repository for rows owned by a single user.

Every query built here is filtered by ``user_id``, so a row belonging
to someone else is indistinguishable from a missing one. Subclasses
specify model_class and not_found_error; the base provides lookups and
the commit wrapper that turns driver failures into DataError.
"""

import logging
from typing import TypeVar, Generic, Optional, Type

import sqlalchemy.exc
from sqlalchemy.orm import Session, Query

from ..database import Base
from ..exceptions import DataError, PromptbankError

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class OwnedRepository(Generic[ModelT]):
    """Shared repository logic for SQLAlchemy models with a ``user_id`` column.

    Class variables to set in subclasses:
        model_class:     The SQLAlchemy model (e.g., Folder)
        not_found_error: Exception class to raise from get_by_id
    """

    model_class: Type[ModelT]
    not_found_error: Type[PromptbankError]

    def __init__(self, db: Session, user_id: str):
        self.db = db
        self.user_id = user_id

    def _base_query(self) -> Query:
        """All rows of this model owned by the current user."""
        return self.db.query(self.model_class).filter(
            self.model_class.user_id == self.user_id
        )

    def _by_id(self, entity_id: str) -> Query:
        return self._base_query().filter(self.model_class.id == entity_id)

    def get_by_id(self, entity_id: str) -> ModelT:
        """Get an owned entity by id. Raises not_found_error if missing or foreign."""
        entity = self._by_id(entity_id).first()
        if not entity:
            raise self.not_found_error(entity_id)
        return entity

    def get_by_id_optional(self, entity_id: str) -> Optional[ModelT]:
        return self._by_id(entity_id).first()

    def delete(self, entity_id: str) -> None:
        """Delete an owned entity with a single id+owner filtered statement."""
        try:
            count = self._by_id(entity_id).delete(synchronize_session=False)
        except sqlalchemy.exc.SQLAlchemyError as e:
            self.db.rollback()
            raise DataError(str(e.orig) if getattr(e, "orig", None) else str(e)) from e
        if count == 0:
            self.db.rollback()
            raise self.not_found_error(entity_id)
        self.commit()

    def commit(self, refresh: Optional[ModelT] = None) -> None:
        """Commit the session, translating database failures into DataError."""
        try:
            self.db.commit()
        except sqlalchemy.exc.IntegrityError as e:
            self.db.rollback()
            logger.warning("Integrity error on %s: %s", self.model_class.__tablename__, e.orig)
            raise DataError(str(e.orig), status_code=409) from e
        except sqlalchemy.exc.SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database error on %s: %s", self.model_class.__tablename__, e)
            raise DataError(str(e)) from e
        if refresh is not None:
            self.db.refresh(refresh)
