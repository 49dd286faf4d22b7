# cctvlog/crud/base.py
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.core.exceptions import StorageError
from cctvlog.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger("cctvlog.crud")


def _as_dict(obj_in: Union[BaseModel, Dict[str, Any]], *, exclude_unset: bool) -> Dict[str, Any]:
    if isinstance(obj_in, dict):
        return dict(obj_in)
    if isinstance(obj_in, BaseModel):
        # sempre pelos nomes Python (serial_number), nunca pelos aliases JSON
        return obj_in.model_dump(exclude_unset=exclude_unset, by_alias=False)
    raise TypeError("obj_in must be a dict or a Pydantic BaseModel instance")


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    CRUD genérico assíncrono.

    Toda falha do SQLAlchemy vira StorageError; em escritas a sessão sofre
    rollback antes, então nada fica pela metade.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def _execute(self, db: AsyncSession, stmt):
        try:
            return await db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.exception("[crud] falha de leitura em %s", self.model.__tablename__)
            raise StorageError("Storage is unavailable") from exc

    async def _commit(self, db: AsyncSession, db_obj: Optional[ModelType] = None) -> None:
        try:
            await db.commit()
            if db_obj is not None:
                await db.refresh(db_obj)
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception("[crud] falha de escrita em %s", self.model.__tablename__)
            raise StorageError("Storage rejected the operation") from exc

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        stmt = select(self.model).where(self.model.id == id)
        result = await self._execute(db, stmt)
        return result.scalar_one_or_none()

    def _list_query(self):
        """Consulta base das listagens; subclasses definem a ordem."""
        return select(self.model)

    async def get_multi(self, db: AsyncSession) -> List[ModelType]:
        result = await self._execute(db, self._list_query())
        return list(result.scalars().all())

    async def create(
        self,
        db: AsyncSession,
        obj_in: Union[CreateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        """
        Cria um objeto no banco.

        Aceita tanto um Pydantic (CreateSchemaType) quanto um dict já pronto.
        Um `id` None é descartado para que o default do model gere um novo.
        """
        obj_in_data = _as_dict(obj_in, exclude_unset=False)
        if obj_in_data.get("id") is None:
            obj_in_data.pop("id", None)

        db_obj = self.model(**obj_in_data)  # type: ignore[arg-type]
        db.add(db_obj)
        await self._commit(db, db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        update_data = _as_dict(obj_in, exclude_unset=False)
        # id é imutável
        update_data.pop("id", None)

        for field, value in update_data.items():
            setattr(db_obj, field, value)

        db.add(db_obj)
        await self._commit(db, db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """Remove se existir; id inexistente não é erro (retorna None)."""
        obj = await self.get(db, id)
        if obj is None:
            return None
        await db.delete(obj)
        await self._commit(db)
        return obj
