# cctvlog/schemas/incident.py
from datetime import datetime
from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, Field

IncidentStatus = Literal["Open", "In Progress", "Resolved", "Closed"]
INCIDENT_STATUSES: tuple[str, ...] = get_args(IncidentStatus)


class IncidentBase(BaseModel):
    incident_time: datetime = Field(..., alias="incidentTime")
    device: str = Field(..., min_length=1, max_length=255)
    ip: Optional[str] = Field("", max_length=64)
    serial_number: Optional[str] = Field("", alias="sn", max_length=128)

    # validado contra settings.ALERT_SOURCES no service
    alert_source: str = Field(..., alias="alertSource", max_length=64)
    status: IncidentStatus = "Open"

    reason: Optional[str] = ""
    resolution: Optional[str] = ""

    class Config:
        populate_by_name = True


class IncidentSave(IncidentBase):
    # sem id => cria; com id => atualiza (404 se não existir)
    id: Optional[str] = Field(None, min_length=1, max_length=64)


class IncidentRead(IncidentBase):
    id: str

    class Config:
        from_attributes = True
        populate_by_name = True


class IncidentDraft(BaseModel):
    """Estado parcial do formulário de incidente (campos do autofill)."""

    device: str = ""
    serial_number: str = Field("", alias="sn")
    ip: str = ""

    class Config:
        populate_by_name = True


class IncidentAutofillRequest(BaseModel):
    draft: IncidentDraft = IncidentDraft()
    name: str


class IncidentOptions(BaseModel):
    statuses: List[str]
    alert_sources: List[str] = Field(..., alias="alertSources")
    months: List[str]
    years: List[int]

    class Config:
        populate_by_name = True
