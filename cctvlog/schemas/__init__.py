# cctvlog/schemas/__init__.py
from cctvlog.schemas.device import (
    DeviceBase,
    DeviceUpsert,
    DeviceRead,
    DeviceSyncRequest,
    DeviceSyncResult,
    DeviceFields,
)
from cctvlog.schemas.incident import (
    INCIDENT_STATUSES,
    IncidentStatus,
    IncidentBase,
    IncidentSave,
    IncidentRead,
    IncidentDraft,
    IncidentAutofillRequest,
    IncidentOptions,
)
from cctvlog.schemas.auth import (
    Token,
    TokenPayload,
    LoginRequest,
)

__all__ = [
    "DeviceBase",
    "DeviceUpsert",
    "DeviceRead",
    "DeviceSyncRequest",
    "DeviceSyncResult",
    "DeviceFields",
    "INCIDENT_STATUSES",
    "IncidentStatus",
    "IncidentBase",
    "IncidentSave",
    "IncidentRead",
    "IncidentDraft",
    "IncidentAutofillRequest",
    "IncidentOptions",
    "Token",
    "TokenPayload",
    "LoginRequest",
]
