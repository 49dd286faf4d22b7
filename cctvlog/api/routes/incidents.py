# cctvlog/api/routes/incidents.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.api.deps import get_db_session
from cctvlog.core.config import settings
from cctvlog.schemas import (
    INCIDENT_STATUSES,
    IncidentAutofillRequest,
    IncidentDraft,
    IncidentOptions,
    IncidentRead,
    IncidentSave,
)
from cctvlog.services import incidents as incident_service
from cctvlog.services.autofill import apply_device_name, load_registry_snapshot
from cctvlog.services.incident_export import export_filename, iter_incidents_csv

router = APIRouter()

MonthQuery = Query(None, ge=0, le=11, description="Mês 0-11 (janeiro = 0)")
YearQuery = Query(None, ge=1, le=9998)


# ---------------------------------------------------------------------------
# LIST / EXPORT / OPTIONS
# ---------------------------------------------------------------------------


@router.get("/", response_model=List[IncidentRead])
async def list_incidents(
    month: Optional[int] = MonthQuery,
    year: Optional[int] = YearQuery,
    db: AsyncSession = Depends(get_db_session),
):
    """
    Lista incidentes, mais recentes primeiro.

    - `month` + `year` -> só o mês (month é 0-indexado)
    - sem filtro -> todos
    """
    return await incident_service.list_incidents(db, month=month, year=year)


@router.get("/options", response_model=IncidentOptions)
async def incident_options():
    """Valores selecionáveis no formulário e no seletor de mês/ano."""
    return IncidentOptions(
        statuses=list(INCIDENT_STATUSES),
        alert_sources=list(settings.ALERT_SOURCES),
        months=list(incident_service.MONTHS),
        years=incident_service.year_options(),
    )


@router.get("/export")
async def export_incidents(
    month: Optional[int] = MonthQuery,
    year: Optional[int] = YearQuery,
    db: AsyncSession = Depends(get_db_session),
):
    """CSV do relatório do mês (mesmas colunas do front)."""
    incidents = await incident_service.list_incidents(db, month=month, year=year)
    filename = export_filename(month, year)
    return StreamingResponse(
        iter_incidents_csv(incidents),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/autofill", response_model=IncidentDraft)
async def autofill_incident_draft(
    autofill_in: IncidentAutofillRequest,
    db: AsyncSession = Depends(get_db_session),
):
    """
    Aplica o nome digitado ao rascunho: se existir no registro, sn/ip são
    sobrescritos; senão o rascunho fica como está.
    """
    snapshot = await load_registry_snapshot(db)
    return apply_device_name(autofill_in.draft, autofill_in.name, snapshot)


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------


@router.get("/{incident_id}", response_model=IncidentRead)
async def get_incident(
    incident_id: str,
    db: AsyncSession = Depends(get_db_session),
):
    return await incident_service.get_incident(db, incident_id)


@router.post("/", response_model=IncidentRead, status_code=status.HTTP_201_CREATED)
async def save_incident(
    incident_in: IncidentSave,
    db: AsyncSession = Depends(get_db_session),
):
    """
    Cria um incidente; se o corpo trouxer `id`, atualiza o existente.
    """
    return await incident_service.save_incident(db, incident_in)


@router.put("/{incident_id}", response_model=IncidentRead)
async def update_incident(
    incident_id: str,
    incident_in: IncidentSave,
    db: AsyncSession = Depends(get_db_session),
):
    return await incident_service.update_incident(db, incident_id, incident_in)


@router.delete("/{incident_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_incident(
    incident_id: str,
    db: AsyncSession = Depends(get_db_session),
):
    """Id inexistente não é erro."""
    await incident_service.delete_incident(db, incident_id)
    return None
