# cctvlog/services/autofill.py
"""
Autofill do formulário de incidente a partir do registro de devices.

É só conveniência no momento do preenchimento: o incidente guarda uma cópia
de sn/ip e não acompanha mudanças posteriores no registro.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.core.exceptions import StorageError
from cctvlog.crud import device as crud_device
from cctvlog.models.device import Device
from cctvlog.schemas.device import DeviceFields
from cctvlog.schemas.incident import IncidentDraft

logger = logging.getLogger("cctvlog.services.autofill")


async def load_registry_snapshot(db: AsyncSession) -> Optional[list[Device]]:
    """
    Carrega o registro uma vez (ao abrir o formulário).

    Falha de storage aqui é engolida: o formulário continua utilizável com
    preenchimento manual.
    """
    try:
        return await crud_device.get_multi(db)
    except StorageError:
        logger.warning("[autofill] não foi possível carregar o registro de devices; autofill desativado")
        return None


def resolve_device_fields(
    typed_name: str,
    registry_snapshot: Optional[Sequence[Device]],
) -> Optional[DeviceFields]:
    """Match exato pelo nome; com nomes repetidos vence o primeiro do snapshot."""
    if not registry_snapshot:
        return None

    for dev in registry_snapshot:
        if dev.name == typed_name:
            return DeviceFields(
                serial_number=dev.serial_number or "",
                ip=dev.ip or "",
            )
    return None


def apply_device_name(
    form: IncidentDraft,
    typed_name: str,
    registry_snapshot: Optional[Sequence[Device]],
) -> IncidentDraft:
    """
    Aplica a digitação do nome no formulário.

    Achou no registro => sobrescreve sn e ip (mesmo se o usuário já digitou).
    Não achou => mantém o que estiver lá.
    """
    updated = form.model_copy(update={"device": typed_name})

    fields = resolve_device_fields(typed_name, registry_snapshot)
    if fields is None:
        return updated

    return updated.model_copy(
        update={"serial_number": fields.serial_number, "ip": fields.ip}
    )
