# cctvlog/services/device_sync.py
"""
Merge da lista de devices "padrão" no registro.

Regra: só entra quem ainda não existe pelo NOME. Devices já cadastrados
nunca são alterados, nem para preencher campos vazios. Assim o admin pode
clicar em "Import Defaults" quantas vezes quiser sem perder edições manuais.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Sequence

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cctvlog.core.config import settings
from cctvlog.core.exceptions import NotFoundError, StorageError, ValidationError
from cctvlog.crud import device as crud_device
from cctvlog.models.device import Device, new_device_id
from cctvlog.schemas.device import DeviceSyncResult, DeviceUpsert

logger = logging.getLogger("cctvlog.services.device_sync")

_candidate_list = TypeAdapter(List[DeviceUpsert])


def _validate_candidates(candidates: Sequence[DeviceUpsert]) -> None:
    for pos, cand in enumerate(candidates):
        if not cand.name or not cand.name.strip():
            raise ValidationError(f"Device #{pos + 1} has an empty name")


async def merge_defaults(
    db: AsyncSession,
    candidates: Sequence[DeviceUpsert],
) -> DeviceSyncResult:
    """
    Insere, numa única transação, os candidatos cujo nome ainda não existe.

    - nomes comparados de forma exata (case-sensitive)
    - duplicados dentro do lote: vale o primeiro, na ordem de entrada
    - id do candidato é preservado; sem id, gera uuid4
    - qualquer falha => rollback do lote inteiro + StorageError
    """
    _validate_candidates(candidates)

    inserted = 0
    try:
        known_names = await crud_device.list_names(db)

        for cand in candidates:
            if cand.name in known_names:
                continue

            db.add(
                Device(
                    id=cand.id or new_device_id(),
                    name=cand.name,
                    serial_number=cand.serial_number,
                    model=cand.model,
                    ip=cand.ip,
                )
            )
            # flush por item para a falha aparecer no candidato certo
            await db.flush()
            known_names.add(cand.name)
            inserted += 1

        await db.commit()
    except (SQLAlchemyError, StorageError) as exc:
        await db.rollback()
        logger.exception(
            "[device_sync] merge abortado após %s inserções; rollback do lote (%s candidatos)",
            inserted,
            len(candidates),
        )
        raise StorageError("Device sync failed; no device was imported") from exc

    logger.info(
        "[device_sync] merge concluído: %s inseridos de %s candidatos",
        inserted,
        len(candidates),
    )
    return DeviceSyncResult(inserted_count=inserted)


def load_default_devices(path: str | Path) -> List[DeviceUpsert]:
    """Lê o JSON (lista de devices no mesmo formato da API)."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
        return _candidate_list.validate_python(json.loads(raw))
    except (OSError, json.JSONDecodeError, PydanticValidationError) as exc:
        logger.error("[device_sync] arquivo de defaults inválido %s: %s", path, exc)
        raise ValidationError(f"Default device list at {path} is invalid") from exc


async def import_default_devices(db: AsyncSession) -> DeviceSyncResult:
    if not settings.DEFAULT_DEVICES_FILE:
        raise NotFoundError("No default device list configured")

    candidates = load_default_devices(settings.DEFAULT_DEVICES_FILE)
    return await merge_defaults(db, candidates)
