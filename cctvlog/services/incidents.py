# cctvlog/services/incidents.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.core.config import settings
from cctvlog.core.exceptions import NotFoundError, ValidationError
from cctvlog.crud import incident as crud_incident
from cctvlog.models.incident import Incident
from cctvlog.schemas.incident import IncidentBase, IncidentSave

logger = logging.getLogger("cctvlog.services.incidents")

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def year_options(now: Optional[datetime] = None) -> list[int]:
    """Anos selecionáveis no front: ano atual -2 até +7."""
    current = (now or datetime.now()).year
    return [current - 2 + i for i in range(10)]


def _normalize_incident_time(value: datetime) -> datetime:
    # coluna é "de parede": mantém o horário local informado e descarta o offset
    if value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


def prepare_incident(incident_in: IncidentBase) -> dict:
    """Valida regras que o schema não cobre e devolve o dict para o CRUD."""
    if not incident_in.device or not incident_in.device.strip():
        raise ValidationError("Incident device is required")

    if incident_in.incident_time is None:
        raise ValidationError("Incident time is required")

    if incident_in.alert_source not in settings.ALERT_SOURCES:
        raise ValidationError(
            f"Unknown alert source '{incident_in.alert_source}'"
        )

    data = incident_in.model_dump(by_alias=False)
    data["incident_time"] = _normalize_incident_time(incident_in.incident_time)
    return data


async def list_incidents(
    db: AsyncSession,
    *,
    month: Optional[int] = None,
    year: Optional[int] = None,
) -> List[Incident]:
    """
    Incidentes do mês/ano (mês 0-11), mais recentes primeiro.
    Só filtra se os dois vierem; senão devolve tudo.
    """
    if month is not None and year is not None:
        return await crud_incident.list_by_month(db, month=month, year=year)
    return await crud_incident.get_multi(db)


async def get_incident(db: AsyncSession, incident_id: str) -> Incident:
    db_inc = await crud_incident.get(db, id=incident_id)
    if db_inc is None:
        raise NotFoundError("Incident not found")
    return db_inc


async def update_incident(
    db: AsyncSession,
    incident_id: str,
    incident_in: IncidentBase,
) -> Incident:
    data = prepare_incident(incident_in)
    db_inc = await get_incident(db, incident_id)
    updated = await crud_incident.update(db, db_inc, data)
    logger.info("[incidents] incidente %s atualizado (status=%s)", updated.id, updated.status)
    return updated


async def save_incident(db: AsyncSession, incident_in: IncidentSave) -> Incident:
    """Sem id => cria; com id => atualiza o existente."""
    if incident_in.id:
        return await update_incident(db, incident_in.id, incident_in)

    data = prepare_incident(incident_in)
    data.pop("id", None)
    db_inc = await crud_incident.create(db, data)
    logger.info("[incidents] incidente %s criado para device=%s", db_inc.id, db_inc.device)
    return db_inc


async def delete_incident(db: AsyncSession, incident_id: str) -> None:
    deleted = await crud_incident.remove(db, id=incident_id)
    if deleted is None:
        logger.debug("[incidents] delete de id inexistente %s ignorado", incident_id)
