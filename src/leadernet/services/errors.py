"""Service-level errors mapped onto HTTP responses by the API layer."""


class LeaderNetError(RuntimeError):
    """Base class for leadernet service failures."""


class NoNetworkDataError(LeaderNetError):
    """Raised when no source data or no surviving connections exist for a leader."""

    def __init__(self, message: str, *, leader_name: str | None = None) -> None:
        super().__init__(message)
        self.leader_name = leader_name


class ScenarioRequestError(LeaderNetError):
    """Raised when a scenario request carries an unusable network."""
