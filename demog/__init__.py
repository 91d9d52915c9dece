"""demog: demographic data for sets of US states."""

from .state_data import StateRecord, GeographyMatch, GeographyResponse, DemographicResponse
from .normalize import normalize_states
from .broadband_api import BroadbandAPI
from .report import OUTPUT_FORMATS, weighted_average, render_csv, render_averages, write_report
from .config import Config

__version__ = "1.0.0"

__all__ = [
    "BroadbandAPI",
    "Config",
    "DemographicResponse",
    "GeographyMatch",
    "GeographyResponse",
    "OUTPUT_FORMATS",
    "StateRecord",
    "normalize_states",
    "render_averages",
    "render_csv",
    "weighted_average",
    "write_report",
]
