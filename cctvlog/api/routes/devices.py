# cctvlog/api/routes/devices.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.api.deps import get_current_admin, get_db_session
from cctvlog.core.exceptions import ValidationError
from cctvlog.crud import device as crud_device
from cctvlog.schemas import (
    DeviceFields,
    DeviceRead,
    DeviceSyncRequest,
    DeviceSyncResult,
    DeviceUpsert,
    TokenPayload,
)
from cctvlog.services.autofill import load_registry_snapshot, resolve_device_fields
from cctvlog.services.device_sync import import_default_devices, merge_defaults

router = APIRouter()
logger = logging.getLogger("cctvlog.api.devices")


def _require_name(device_in: DeviceUpsert) -> None:
    if not device_in.name.strip():
        raise ValidationError("Device name is required")


@router.get("/", response_model=List[DeviceRead])
async def list_devices(
    db: AsyncSession = Depends(get_db_session),
):
    """
    Registro completo de devices (mais antigos primeiro).
    """
    return await crud_device.get_multi(db)


@router.post("/", response_model=DeviceRead)
async def upsert_device(
    device_in: DeviceUpsert,
    db: AsyncSession = Depends(get_db_session),
    admin: TokenPayload = Depends(get_current_admin),
):
    """
    Cria ou substitui um device pelo id (id ausente => gera um novo).
    """
    _require_name(device_in)
    device = await crud_device.upsert(db, device_in)
    logger.info("[devices] device %s salvo (name=%s)", device.id, device.name)
    return device


# ⚠️ rotas fixas VÊM ANTES de "/{device_id}"
@router.post("/sync", response_model=DeviceSyncResult)
async def sync_devices(
    sync_in: DeviceSyncRequest,
    db: AsyncSession = Depends(get_db_session),
    admin: TokenPayload = Depends(get_current_admin),
):
    """
    Importa uma lista de devices sem sobrescrever os que já existem pelo nome.
    Tudo ou nada.
    """
    return await merge_defaults(db, sync_in.devices)


@router.post("/sync/defaults", response_model=DeviceSyncResult)
async def sync_default_devices(
    db: AsyncSession = Depends(get_db_session),
    admin: TokenPayload = Depends(get_current_admin),
):
    """
    Mesmo merge de /sync, usando a lista configurada em DEFAULT_DEVICES_FILE.
    """
    return await import_default_devices(db)


@router.get("/resolve", response_model=Optional[DeviceFields])
async def resolve_device(
    name: str = Query(..., description="Nome exato digitado no formulário"),
    db: AsyncSession = Depends(get_db_session),
):
    """
    sn/ip do device com esse nome, ou null. Nunca falha por causa do banco.
    """
    snapshot = await load_registry_snapshot(db)
    return resolve_device_fields(name, snapshot)


@router.put("/{device_id}", response_model=DeviceRead)
async def put_device(
    device_id: str,
    device_in: DeviceUpsert,
    db: AsyncSession = Depends(get_db_session),
    admin: TokenPayload = Depends(get_current_admin),
):
    # o id da URL manda
    _require_name(device_in)
    device_in = device_in.model_copy(update={"id": device_id})
    device = await crud_device.upsert(db, device_in)
    logger.info("[devices] device %s salvo (name=%s)", device.id, device.name)
    return device


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(
    device_id: str,
    db: AsyncSession = Depends(get_db_session),
    admin: TokenPayload = Depends(get_current_admin),
):
    """
    Remove o device. Id inexistente não é erro (retry-safe).
    Incidentes que citam o nome antigo não são tocados.
    """
    deleted = await crud_device.remove(db, id=device_id)
    if deleted is not None:
        logger.info("[devices] device %s removido (name=%s)", deleted.id, deleted.name)
    return None
