import logging
from typing import Iterable, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.exc import StaleDataError

from ..exceptions import ConcurrencyConflictError, PersistenceError, UnknownRelationshipError
from .models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=Base)

class Repository:
    """Row-level CRUD over the catalogue tables for one unit of work.

    Related rows are only loaded when a caller names them in ``include``, e.g.
    ``include=("artworks.exhibitions",)`` loads an artist's artworks and every
    artwork's exhibitions. Nothing is cached: each query reloads from the store.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, model: Type[ModelT], entity_id: int, include: Sequence[str] = ()) -> Optional[ModelT]:
        """Get one row by primary key, or None"""
        logger.debug(f"Fetching {model.__name__} {entity_id} include={list(include)}")
        stmt = select(model).where(model.id == entity_id)
        return self._execute(stmt, model, include).scalar_one_or_none()

    def find_all(self, model: Type[ModelT], include: Sequence[str] = ()) -> List[ModelT]:
        """Get every row of a table, ordered by id"""
        logger.debug(f"Fetching all {model.__name__} include={list(include)}")
        stmt = select(model).order_by(model.id)
        return list(self._execute(stmt, model, include).scalars().all())

    def find_many(self, model: Type[ModelT], ids: Iterable[int], include: Sequence[str] = ()) -> List[ModelT]:
        """Get the rows whose id is in ``ids``; unknown ids are simply missing from the result"""
        ids = list(ids)
        if not ids:
            return []
        logger.debug(f"Fetching {model.__name__} ids={ids}")
        stmt = select(model).where(model.id.in_(ids)).order_by(model.id)
        return list(self._execute(stmt, model, include).scalars().all())

    def count(self, model: Type[ModelT]) -> int:
        try:
            return self.session.execute(select(func.count()).select_from(model)).scalar_one()
        except SQLAlchemyError as e:
            logger.exception(f"Error counting {model.__name__}: {e}")
            raise PersistenceError(f"Could not count {model.__name__} rows") from e

    def save(self, entity: ModelT) -> ModelT:
        """Insert or update an entity and commit"""
        self.session.add(entity)
        self._commit(f"save {type(entity).__name__}")
        return entity

    def remove(self, entity: ModelT) -> None:
        """Delete an entity (and whatever its relationships cascade to) and commit"""
        self.session.delete(entity)
        self._commit(f"remove {type(entity).__name__}")

    def _execute(self, stmt, model, include: Sequence[str]):
        stmt = stmt.options(*self._loader_options(model, include)).execution_options(populate_existing=True)
        try:
            return self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception(f"Error querying {model.__name__}: {e}")
            self.session.rollback()
            raise PersistenceError(f"Could not read {model.__name__} rows") from e

    def _commit(self, action: str) -> None:
        try:
            self.session.commit()
        except StaleDataError as e:
            logger.warning(f"Concurrent modification during {action}: {e}")
            self.session.rollback()
            raise ConcurrencyConflictError(
                f"The record was changed or removed by another request during {action}"
            ) from e
        except SQLAlchemyError as e:
            logger.exception(f"Failed to {action}: {e}")
            self.session.rollback()
            raise PersistenceError(f"Failed to {action}") from e

    @staticmethod
    def _loader_options(model, include: Sequence[str]) -> list:
        """Turn dotted relationship paths into chained selectinload options"""
        options = []
        for path in include:
            current = model
            option = None
            for name in path.split('.'):
                relationships = inspect(current).relationships
                if name not in relationships:
                    raise UnknownRelationshipError(model.__name__, path)
                attribute = getattr(current, name)
                option = selectinload(attribute) if option is None else option.selectinload(attribute)
                current = relationships[name].mapper.class_
            options.append(option)
        return options
