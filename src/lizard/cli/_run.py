"""``lizard run``: serve an app with uvicorn."""

import argparse
import sys

from lizard.cli._resolve import resolve_app


def run_app(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it until interrupted.

    ``--host`` / ``--port`` override the app's ``AppConfig``.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.listen(args.port, host=args.host)
