from typing import Callable, Generic, TypeVar, Type, Optional, List, Dict, Union
from pydantic import BaseModel
import asyncio
import uuid
import structlog

logger = structlog.get_logger()

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseDAO(Generic[ModelType]):
    """
    In-memory record store keyed by id.

    Records keep insertion order. Every read and write takes the same lock so
    two requests can never interleave a read-modify-write on the collection.
    The DAO generates ids itself; callers never choose one.
    """

    def __init__(self, model: Type[ModelType], records: Optional[List[ModelType]] = None):
        self.model = model
        self._records: Dict[str, ModelType] = {obj.id: obj for obj in records or []}
        self._lock = asyncio.Lock()

    def _new_id(self) -> str:
        return str(uuid.uuid4())

    async def create(self, *, obj_in: dict) -> ModelType:
        async with self._lock:
            obj_id = self._new_id()
            fields = {k: v for k, v in obj_in.items() if k != "id"}
            db_obj = self.model(id=obj_id, **fields)
            self._records[obj_id] = db_obj
            logger.info(f"Created {self.model.__name__}", id=obj_id)
            return db_obj

    async def get_by_id(self, id: str) -> Optional[ModelType]:
        async with self._lock:
            return self._records.get(id)

    async def get_multi(self) -> List[ModelType]:
        async with self._lock:
            return list(self._records.values())

    async def count(self) -> int:
        async with self._lock:
            return len(self._records)

    async def update(
        self, *, id: str, obj_in: Union[dict, Callable[[ModelType], dict]]
    ) -> Optional[ModelType]:
        """
        Overwrite fields of the record with ``id``.

        ``obj_in`` may be a callable receiving the current record; it runs
        under the lock, so the merge sees the latest state.
        """
        async with self._lock:
            db_obj = self._records.get(id)
            if db_obj is None:
                return None
            if callable(obj_in):
                obj_in = obj_in(db_obj)
            fields = {k: v for k, v in obj_in.items() if k in self.model.model_fields and k != "id"}
            # stored records are never mutated in place
            db_obj = db_obj.model_copy(update=fields)
            self._records[id] = db_obj
            logger.info(f"Updated {self.model.__name__}", id=id, fields=sorted(fields))
            return db_obj

    async def delete(self, *, id: str) -> Optional[ModelType]:
        async with self._lock:
            obj = self._records.pop(id, None)
            if obj is not None:
                logger.info(f"Deleted {self.model.__name__}", id=id)
            return obj

    async def replace_all(self, records: List[ModelType]) -> None:
        async with self._lock:
            self._records = {obj.id: obj for obj in records}
