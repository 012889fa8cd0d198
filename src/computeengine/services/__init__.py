from computeengine.services.regions import RegionsService
from computeengine.services.zones import ZonesService

__all__ = [
    "RegionsService",
    "ZonesService",
]
