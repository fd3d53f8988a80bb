"""Command line tools for API key management and database setup."""

import argparse
import json
import re
import sys
from collections.abc import Callable
from pathlib import Path

from nvc_exercises.config import configure_logging, get_settings
from nvc_exercises.core import build_container
from nvc_exercises.database import Database
from nvc_exercises.domain.common.exceptions import DomainError
from nvc_exercises.domain.identity.exceptions import ApiKeyNotFoundError
from nvc_exercises.infrastructure.identity.schemas import ApiKeySummary, IssuedApiKeyResponse

PrintFn = Callable[[str], None]

_RULE = "-" * 60


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nvc-exercises", description="NVC Exercises API administration"
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy database URL (defaults to the DATABASE_URL setting)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-key", help="Issue a new API key")
    create.add_argument("label", help="Name of the key holder, e.g. 'Mobile App'")
    create.add_argument("--json", action="store_true", help="Print the result as JSON")

    list_keys = commands.add_parser("list-keys", help="List all API keys")
    list_keys.add_argument("--json", action="store_true", help="Print the keys as JSON")

    revoke = commands.add_parser("revoke-key", help="Revoke an API key permanently")
    revoke.add_argument("id", help="ID of the key to revoke")

    commands.add_parser("init-db", help="Create the database tables")

    load = commands.add_parser("load-exercises", help="Load exercises from a JSON seed file")
    load.add_argument("path", type=Path, help="Seed file with a JSON array of exercises")
    load.add_argument(
        "--force", action="store_true", help="Load even if exercises already exist"
    )

    return parser


def _create_key(database: Database, args: argparse.Namespace, print_fn: PrintFn) -> int:
    with database.session() as db:
        issued = build_container(db).api_key_use_case().issue(args.label)

    if args.json:
        print_fn(IssuedApiKeyResponse(id=issued.id, key=issued.key).model_dump_json(indent=2))
        return 0

    print_fn("API key created.")
    print_fn(f"Label: {args.label.strip()}")
    print_fn(f"ID: {issued.id}")
    print_fn(f"Key: {issued.key}")
    print_fn("\nSave this key now. It will not be shown again.")
    return 0


def _list_keys(database: Database, args: argparse.Namespace, print_fn: PrintFn) -> int:
    with database.session() as db:
        api_keys = build_container(db).api_key_use_case().list_keys()

    summaries = [ApiKeySummary.from_entity(api_key) for api_key in api_keys]
    if args.json:
        print_fn(json.dumps([s.model_dump(mode="json", by_alias=True) for s in summaries], indent=2))
        return 0

    if not summaries:
        print_fn("No API keys found.")
        return 0

    print_fn(_RULE)
    for summary in summaries:
        last_used = summary.last_used_at.isoformat() if summary.last_used_at else "Never"
        print_fn(f"ID: {summary.id}")
        print_fn(f"Label: {summary.label}")
        print_fn(f"Status: {summary.status.value}")
        print_fn(f"Issued: {summary.issued_at.isoformat()}")
        print_fn(f"Last used: {last_used}")
        print_fn(_RULE)
    return 0


def _revoke_key(database: Database, args: argparse.Namespace, print_fn: PrintFn) -> int:
    if not re.fullmatch(r"[0-9]+", args.id):
        print_fn(f"Error: invalid API key ID '{args.id}'")
        return 1
    api_key_id = int(args.id)

    with database.session() as db:
        use_case = build_container(db).api_key_use_case()
        try:
            use_case.get(api_key_id)
        except ApiKeyNotFoundError:
            print_fn(f"Error: API key {api_key_id} not found")
            return 1
        revoked = use_case.revoke(api_key_id)

    if revoked:
        print_fn(f"API key {api_key_id} revoked.")
    else:
        print_fn(f"API key {api_key_id} was already revoked.")
    return 0


def _init_db(database: Database, args: argparse.Namespace, print_fn: PrintFn) -> int:
    print_fn(f"Database ready at {database.url}")
    return 0


def _load_exercises(database: Database, args: argparse.Namespace, print_fn: PrintFn) -> int:
    if not args.path.is_file():
        print_fn(f"Error: seed file not found: {args.path}")
        return 1

    with database.session() as db:
        loaded = build_container(db).exercise_seed_loader().load(args.path, force=args.force)

    if loaded == 0:
        print_fn("Exercises already loaded; nothing to do. Use --force to load anyway.")
    else:
        print_fn(f"Loaded {loaded} exercises from {args.path}")
    return 0


_COMMANDS: dict[str, Callable[[Database, argparse.Namespace, PrintFn], int]] = {
    "create-key": _create_key,
    "list-keys": _list_keys,
    "revoke-key": _revoke_key,
    "init-db": _init_db,
    "load-exercises": _load_exercises,
}


def run(argv: list[str] | None = None, print_fn: PrintFn = print) -> int:
    """Run one CLI command and return the process exit code."""
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    # Logs go to stderr so that --json output stays parseable
    configure_logging(settings.ENVIRONMENT, stream=sys.stderr)

    database = Database(args.database_url or settings.DATABASE_URL)
    database.open()
    try:
        database.create_schema()
        return _COMMANDS[args.command](database, args, print_fn)
    except DomainError as e:
        print_fn(f"Error: {e.message}")
        return 1
    finally:
        database.close()


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
