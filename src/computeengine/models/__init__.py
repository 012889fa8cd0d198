from computeengine.models.common import ComputeModel, DeprecationStatus, ResourceSummary
from computeengine.models.regions import Region, RegionItem, RegionList
from computeengine.models.zones import Zone, ZoneItem, ZoneList

__all__ = [
    "ComputeModel",
    "DeprecationStatus",
    "Region",
    "RegionItem",
    "RegionList",
    "ResourceSummary",
    "Zone",
    "ZoneItem",
    "ZoneList",
]
