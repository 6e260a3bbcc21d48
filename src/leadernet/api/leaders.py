"""Leader network API router."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from leadernet.network.models import ConnectionsRequest, ConnectionsResult, LeaderNetworkRequest, LeaderNetworkResult
from leadernet.scenario.models import ScenarioAnalysis, ScenarioRequest
from leadernet.services import LeaderNetworkService, NoNetworkDataError, ScenarioRequestError, ScenarioService

router = APIRouter(prefix="/leaders", tags=["leaders"])
LOGGER = logging.getLogger(__name__)


def get_network_service() -> LeaderNetworkService:
    """Dependency provider returning a LeaderNetworkService instance."""

    return LeaderNetworkService()


def get_scenario_service() -> ScenarioService:
    """Dependency provider returning a ScenarioService instance."""

    return ScenarioService()


@router.post(
    "/connections",
    response_model=ConnectionsResult,
    summary="Build a leader's top-connection network from web search",
)
def leader_connections(
    payload: ConnectionsRequest,
    service: LeaderNetworkService = Depends(get_network_service),
) -> ConnectionsResult:
    try:
        return service.top_connections(payload)
    except NoNetworkDataError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Exception as exc:
        LOGGER.exception("Error processing leader connections for %s", payload.leader_name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error processing connections: {exc}",
        ) from exc


@router.post(
    "/scenario",
    response_model=ScenarioAnalysis,
    summary="Analyze a hypothetical scenario against a leader network",
)
def leader_scenario(
    payload: ScenarioRequest,
    service: ScenarioService = Depends(get_scenario_service),
) -> ScenarioAnalysis:
    try:
        return service.analyze(payload)
    except ScenarioRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        LOGGER.exception("Error processing scenario for %s", payload.leader_name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error processing scenario: {exc}",
        ) from exc


@router.post(
    "/{name}/network",
    response_model=LeaderNetworkResult,
    summary="Build a leader's network from recent news coverage",
)
def leader_network(
    name: str,
    payload: LeaderNetworkRequest | None = None,
    service: LeaderNetworkService = Depends(get_network_service),
) -> LeaderNetworkResult:
    """Fetch GDELT coverage for ``name``, extract, normalize and summarize it."""

    try:
        return service.analyze_leader(name, payload)
    except NoNetworkDataError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Exception as exc:
        LOGGER.exception("Error processing leader data for %s", name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error processing data: {exc}",
        ) from exc


__all__ = ["get_network_service", "get_scenario_service", "router"]
