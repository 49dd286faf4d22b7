# cctvlog/models/__init__.py
from cctvlog.models.device import Device
from cctvlog.models.incident import Incident

__all__ = [
    "Device",
    "Incident",
]
