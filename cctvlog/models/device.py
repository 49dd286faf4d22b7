# cctvlog/models/device.py
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, String, text
from sqlalchemy.orm import Mapped, mapped_column

from cctvlog.db.base_class import Base


def new_device_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Device(Base):
    """
    Registro de câmeras/equipamentos.

    `name` é a chave natural usada pelo merge de defaults e pelo autofill
    dos incidentes, mas NÃO tem unique no banco (ver find_by_name).
    """

    __tablename__ = "devices"

    # id opaco, pode vir do cliente (crypto.randomUUID no front)
    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        default=new_device_id,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    serial_number: Mapped[str] = mapped_column(
        "sn",
        String(128),
        nullable=False,
        default="",
    )
    model: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    ip: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    # default no Python (com microssegundos) para desempatar nomes duplicados
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )
