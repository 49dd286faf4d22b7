# cctvlog/crud/incident.py
from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.crud.base import CRUDBase
from cctvlog.models.incident import Incident
from cctvlog.schemas.incident import IncidentSave


def month_bounds(month: int, year: int) -> tuple[datetime, datetime]:
    """
    Intervalo [início, fim) do mês. `month` é 0-11 (convenção do front);
    aqui vira 1-12.
    """
    start = datetime(year, month + 1, 1)
    if month == 11:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, month + 2, 1)
    return start, end


class CRUDIncident(CRUDBase[Incident, IncidentSave, IncidentSave]):
    def _list_query(self):
        inc = self.model
        return select(inc).order_by(inc.incident_time.desc(), inc.created_at.desc())

    async def list_by_month(
        self,
        db: AsyncSession,
        *,
        month: int,
        year: int,
    ) -> List[Incident]:
        start, end = month_bounds(month, year)
        inc = self.model
        stmt = self._list_query().where(
            inc.incident_time >= start,
            inc.incident_time < end,
        )
        result = await self._execute(db, stmt)
        return list(result.scalars().all())


incident = CRUDIncident(Incident)
