"""
rps_contract.cli — Command-line interface
==========================================

Acts as the hosting runtime: it supplies the sender identity, turns
arguments into messages, runs them against a contract instance and
prints the result as JSON.

Usage:
    python -m rps_contract instantiate --sender alice
    python -m rps_contract start-game --sender alice --opponent bob --move rock
    python -m rps_contract submit-move --sender bob --move scissors
    python -m rps_contract query owner --sender carol
    python -m rps_contract execute --sender alice --msg '{"start_game": {...}}'
    python -m rps_contract schema --out-dir schema/

Configuration comes from --config, a .env file, or environment
variables (RPS_DB_PATH, RPS_LOG_FILE, RPS_LOG_LEVEL).
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from ._config import load_config, validate_config
from ._resolver.enums import Move
from ._shared import log_contract_error, setup_logging
from .contract import Contract
from .errors import ErrorKind, RpsContractError
from .schema import export_schemas
from .types import ExecuteMsg, QueryMsg

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INVALID_MESSAGE = 2

# One exit code per error kind so scripts can tell failures apart
ERROR_EXIT_CODES = {
    ErrorKind.INVALID_ADDRESS: 3,
    ErrorKind.UNAUTHORIZED: 4,
    ErrorKind.NOT_FOUND: 5,
    ErrorKind.GAME_ALREADY_RESOLVED: 6,
    ErrorKind.STORAGE_FAILURE: 7,
}

QUERY_VARIANTS = {
    "move": "get_move",
    "opponent": "get_opponent",
    "owner": "get_owner",
    "result": "get_result",
    "game": "get_game",
}

MOVE_CHOICES = [m.value for m in Move]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rps-contract",
        description="Rock-Paper-Scissors match contract",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rps-contract instantiate --sender alice
  rps-contract start-game --sender alice --opponent bob --move rock
  rps-contract submit-move --sender bob --move scissors
  rps-contract query game --sender alice
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--db", type=str, help="Path to the SQLite registry (overrides config)")
    parser.add_argument("--log-level", type=str, help="Logging level (overrides config)")

    sub = parser.add_subparsers(dest="cmd", required=True)

    inst = sub.add_parser("instantiate", help="Instantiate the contract; the sender becomes owner")
    inst.add_argument("--sender", required=True)

    start = sub.add_parser("start-game", help="Start a game against an opponent (owner only)")
    start.add_argument("--sender", required=True)
    start.add_argument("--opponent", required=True)
    start.add_argument("--move", required=True, choices=MOVE_CHOICES)

    submit = sub.add_parser("submit-move", help="Submit the opponent's move")
    submit.add_argument("--sender", required=True)
    submit.add_argument("--move", required=True, choices=MOVE_CHOICES)
    submit.add_argument("--host", default=None, help="Host key of the match (default: contract owner)")

    query = sub.add_parser("query", help="Run a read-only query")
    query.add_argument("what", choices=sorted(QUERY_VARIANTS))
    query.add_argument("--sender", required=True)
    query.add_argument("--host", default=None, help="Host key of the match (default: sender)")

    raw = sub.add_parser("execute", help="Execute a raw JSON execute message")
    raw.add_argument("--sender", required=True)
    raw.add_argument("--msg", required=True, help='e.g. {"submit_move": {"move": "rock"}}')

    schema = sub.add_parser("schema", help="Export JSON schemas for all messages")
    schema.add_argument("--out-dir", default="schema")

    return parser


def _build_message(args: argparse.Namespace) -> BaseModel:
    if args.cmd == "start-game":
        return ExecuteMsg.model_validate(
            {"start_game": {"opponent": args.opponent, "host_move": args.move}}
        )
    if args.cmd == "submit-move":
        payload = {"move": args.move}
        if args.host:
            payload["host"] = args.host
        return ExecuteMsg.model_validate({"submit_move": payload})
    if args.cmd == "execute":
        return ExecuteMsg.model_validate_json(args.msg)
    if args.cmd == "query":
        payload = {}
        if args.host and args.what != "owner":
            payload["host"] = args.host
        return QueryMsg.model_validate({QUERY_VARIANTS[args.what]: payload})
    raise ValueError(f"No message for command {args.cmd!r}")


def _print_model(model: BaseModel) -> None:
    print(model.model_dump_json(indent=2, exclude_none=True))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        if args.db:
            config["db_path"] = args.db
        if args.log_level:
            config["log_level"] = args.log_level.upper()
        validate_config(config)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(
        log_file_path=config["log_file"],
        level=getattr(logging, config["log_level"]),
    )

    if args.cmd == "schema":
        try:
            written = export_schemas(args.out_dir)
        except OSError as e:
            print(f"Error: cannot write schemas: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        for path in written:
            print(path)
        return EXIT_OK

    try:
        contract = Contract(db_path=config["db_path"])
        if args.cmd == "instantiate":
            _print_model(contract.instantiate(args.sender))
            return EXIT_OK

        msg = _build_message(args)
        if isinstance(msg, QueryMsg):
            _print_model(contract.query(args.sender, msg))
        else:
            _print_model(contract.execute(args.sender, msg))
        return EXIT_OK
    except ValidationError as e:
        print(f"Error: invalid message: {e}", file=sys.stderr)
        return EXIT_INVALID_MESSAGE
    except RpsContractError as e:
        log_contract_error(e)
        return ERROR_EXIT_CODES[e.kind]
