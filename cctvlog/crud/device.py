# cctvlog/crud/device.py
from __future__ import annotations

from typing import Optional, Set

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.crud.base import CRUDBase
from cctvlog.models.device import Device
from cctvlog.schemas.device import DeviceUpsert


class CRUDDevice(CRUDBase[Device, DeviceUpsert, DeviceUpsert]):
    def _list_query(self):
        # mais antigo primeiro; é o desempate de nomes duplicados
        return select(self.model).order_by(self.model.created_at.asc(), self.model.id.asc())

    async def find_by_name(self, db: AsyncSession, name: str) -> Optional[Device]:
        """Match exato (case-sensitive). Com nomes repetidos, vence o mais antigo."""
        stmt = self._list_query().where(self.model.name == name).limit(1)
        result = await self._execute(db, stmt)
        return result.scalars().first()

    async def list_names(self, db: AsyncSession) -> Set[str]:
        result = await self._execute(db, select(self.model.name))
        return set(result.scalars().all())

    async def upsert(self, db: AsyncSession, obj_in: DeviceUpsert) -> Device:
        """
        Se o id já existe, substitui name/sn/model/ip; senão insere com esse id
        (ou com um uuid novo quando o id não vem). Última escrita vence.
        """
        existing = await self.get(db, obj_in.id) if obj_in.id else None
        if existing is None:
            return await self.create(db, obj_in)
        return await self.update(db, existing, obj_in)


device = CRUDDevice(Device)
