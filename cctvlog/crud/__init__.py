# cctvlog/crud/__init__.py
from cctvlog.crud.device import CRUDDevice, device
from cctvlog.crud.incident import CRUDIncident, incident

__all__ = [
    "CRUDDevice",
    "device",
    "CRUDIncident",
    "incident",
]
