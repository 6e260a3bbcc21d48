"""Command-line entry point for leader network analysis.

Examples:

    leadernet-analyze network "Vladimir Putin" --days-back 7
    leadernet-analyze connections "Xi Jinping" --num-connections 8
    leadernet-analyze scenario "Xi Jinping" --question "What if ..." --network-file graph.json
    leadernet-analyze serve --port 8080
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from leadernet.network.models import ConnectionsRequest, LeaderNetworkRequest, NetworkGraph
from leadernet.scenario.models import ScenarioRequest
from leadernet.services import LeaderNetError, LeaderNetworkService, ScenarioService
from leadernet.settings import Settings, get_settings

LOGGER = logging.getLogger("leadernet.cli.analyze")


def _configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def parse_args(argv: list[str], settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="leadernet-analyze", description="Analyze political leader networks")
    subparsers = parser.add_subparsers(dest="command", required=True)

    network = subparsers.add_parser("network", help="Build a network from recent GDELT news coverage")
    network.add_argument("leader_name")
    network.add_argument("--days-back", type=int, default=settings.news.default_days_back)
    network.add_argument("--max-records", type=int, default=settings.news.default_max_records)
    network.add_argument(
        "--english-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Drop untranslated non-English entities (defaults to network.news_english_only)",
    )

    connections = subparsers.add_parser("connections", help="Build a top-connection network from web search")
    connections.add_argument("leader_name")
    connections.add_argument("--num-connections", type=int, default=settings.network.default_num_connections)

    scenario = subparsers.add_parser("scenario", help="Analyze a what-if scenario against a saved network")
    scenario.add_argument("leader_name")
    scenario.add_argument("--question", required=True)
    scenario.add_argument("--network-file", type=Path, required=True, help="JSON file with entities/relationships")

    serve = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default=settings.api.host)
    serve.add_argument("--port", type=int, default=settings.api.port)

    return parser.parse_args(argv)


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("leadernet.api.app:app", host=args.host, port=args.port)
    return 0


def run(args: argparse.Namespace, settings: Settings) -> str:
    """Execute one analysis subcommand and return its JSON output."""

    if args.command == "network":
        service = LeaderNetworkService(settings=settings)
        request = LeaderNetworkRequest(
            days_back=args.days_back,
            max_records=args.max_records,
            english_only=args.english_only,
        )
        return service.analyze_leader(args.leader_name, request).model_dump_json(indent=2)

    if args.command == "connections":
        service = LeaderNetworkService(settings=settings)
        request = ConnectionsRequest(leader_name=args.leader_name, num_connections=args.num_connections)
        return service.top_connections(request).model_dump_json(indent=2)

    if args.command == "scenario":
        graph = NetworkGraph.model_validate(json.loads(args.network_file.read_text(encoding="utf-8")))
        request = ScenarioRequest(leader_name=args.leader_name, question=args.question, network_data=graph)
        return ScenarioService(settings=settings).analyze(request).model_dump_json(indent=2)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    _configure_logging(settings)
    args = parse_args(sys.argv[1:] if argv is None else argv, settings)
    if args.command == "serve":
        return _serve(args)
    try:
        output = run(args, settings)
    except LeaderNetError as exc:
        LOGGER.error("%s", exc)
        return 1
    except (ValidationError, ValueError, OSError) as exc:
        LOGGER.error("Invalid input: %s", exc)
        return 2
    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
