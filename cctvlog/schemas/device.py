# cctvlog/schemas/device.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class DeviceBase(BaseModel):
    """
    Campos do registro de devices, com os nomes JSON que o front já usa
    (`sn`). Nomes snake_case também são aceitos na entrada.
    """

    name: str = Field(..., min_length=1, max_length=255)
    serial_number: str = Field("", alias="sn", max_length=128)
    model: Optional[str] = Field(None, max_length=128)
    ip: Optional[str] = Field(None, max_length=64)

    class Config:
        populate_by_name = True


class DeviceUpsert(DeviceBase):
    # sem id => o servidor gera um uuid4
    id: Optional[str] = Field(None, min_length=1, max_length=64)


class DeviceRead(DeviceBase):
    id: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class DeviceSyncRequest(BaseModel):
    devices: List[DeviceUpsert] = []


class DeviceSyncResult(BaseModel):
    inserted_count: int = Field(..., alias="insertedCount")

    class Config:
        populate_by_name = True


class DeviceFields(BaseModel):
    """Campos copiados do registro para o formulário de incidente."""

    serial_number: str = Field("", alias="sn")
    ip: str = ""

    class Config:
        populate_by_name = True
