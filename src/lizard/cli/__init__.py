"""Lizard CLI: serve an app or list its routes.

Entry point registered as ``lizard`` in ``pyproject.toml``::

    [project.scripts]
    lizard = "lizard.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``lizard`` command."""
    parser = argparse.ArgumentParser(
        prog="lizard",
        description="Lizard: a minimal HTTP routing layer.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- lizard run -------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve an app with uvicorn")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    # -- lizard routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from lizard.cli._run import run_app

        run_app(args)
    elif args.command == "routes":
        from lizard.cli._routes import run_routes

        run_routes(args)
