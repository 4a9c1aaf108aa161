from . import api_football_mapper, soccersapi_mapper
from .common import parse_stat_value, split_datetime, tally_h2h
from .status_mapper import map_api_football_status, map_event_type, map_soccersapi_status, map_status

__all__ = [
    "api_football_mapper",
    "soccersapi_mapper",
    "map_api_football_status",
    "map_event_type",
    "map_soccersapi_status",
    "map_status",
    "parse_stat_value",
    "split_datetime",
    "tally_h2h",
]
