import pyproj

__all__ = [
    "CRS_WGS84",
    "LATITUDE_LIMIT",
    "LONGITUDE_LIMIT",
    "get_limit",
]

# https://epsg.io/4326
CRS_WGS84 = pyproj.CRS.from_authority("epsg", "4326")

_west, _south, _east, _north = CRS_WGS84.area_of_use.bounds

LATITUDE_LIMIT = max(abs(_south), abs(_north))
LONGITUDE_LIMIT = max(abs(_west), abs(_east))


def get_limit(is_latitude: bool) -> float:
    return LATITUDE_LIMIT if is_latitude else LONGITUDE_LIMIT
