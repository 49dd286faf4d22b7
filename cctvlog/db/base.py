from cctvlog.db.base_class import Base  # noqa

from cctvlog.models.device import Device  # noqa
from cctvlog.models.incident import Incident  # noqa

__all__ = [
    "Base",
    "Device",
    "Incident",
]
