from __future__ import annotations

import argparse
import json
from datetime import UTC, datetime
from typing import Any

from coasterapi.core.config import settings
from coasterapi.core.errors import ConfigurationError
from coasterapi.core.logging import logger


def _emit(payload: dict[str, Any], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, indent=2))
        return
    for key, value in payload.items():
        print(f"{key}: {value}")


def _run_health(args: argparse.Namespace) -> int:
    _emit(
        {
            "status": "ok",
            "component": "coaster-api-cli",
            "timestamp_utc": datetime.now(UTC).isoformat(),
        },
        as_json=args.output_json,
    )
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    from coasterapi.main import create_application

    try:
        app = create_application()
    except ConfigurationError as exc:
        logger.error("startup_configuration_error", error_message=str(exc))
        _emit(
            {
                "status": "error",
                "error_code": "CONFIGURATION_ERROR",
                "message": str(exc),
            },
            as_json=args.output_json,
        )
        return 1

    import uvicorn

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("server_starting", host=host, port=port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="coaster-api")
    subparsers = parser.add_subparsers(dest="command", required=True)

    health = subparsers.add_parser("health")
    health.add_argument("--output-json", action="store_true")
    health.set_defaults(handler=_run_health)

    serve = subparsers.add_parser("serve")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--output-json", action="store_true")
    serve.set_defaults(handler=_run_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return int(args.handler(args))


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    raise SystemExit(main())
