"""Service layer orchestrating sources, extraction and normalization."""

from .errors import LeaderNetError, NoNetworkDataError, ScenarioRequestError
from .network import LeaderNetworkService
from .scenario import ScenarioService

__all__ = [
    "LeaderNetError",
    "LeaderNetworkService",
    "NoNetworkDataError",
    "ScenarioRequestError",
    "ScenarioService",
]
