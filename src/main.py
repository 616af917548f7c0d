"""Command-line entry point.

Run with:
    python -m src.main generate --count 5
    python -m src.main decode 1234567890123456789
"""

import argparse
import dataclasses
import logging
import sys

from config.settings import settings
from src.vf_common.errors import AppError
from src.vf_flake.application.service import decode_id
from src.vf_flake.domain.configuration import configuration_from_settings
from src.vf_flake.engine.generator import FlakeGenerator


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=settings.APP_NAME.lower(), description="Generate or decode 64-bit ids.")
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Allocate ids and print one per line.")
    gen.add_argument("--count", type=int, default=1, help="How many ids to allocate.")
    gen.add_argument("--node-id", type=int, default=settings.FLAKE_NODE_ID,
                     help="Node id (default: FLAKE_NODE_ID).")
    gen.add_argument("--strict", action=argparse.BooleanOptionalAction,
                     default=settings.FLAKE_STRICT_MODE,
                     help="Fail instead of waiting when the clock moves backward.")

    dec = sub.add_parser("decode", help="Print the fields of each id as JSON.")
    dec.add_argument("ids", nargs="+", help="Decimal ids to decode.")
    return p


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.command == "generate":
            cfg = dataclasses.replace(configuration_from_settings(settings), strict_mode=args.strict)
            generator = FlakeGenerator(args.node_id, cfg)
            for _ in range(args.count):
                print(generator.allocate())
        else:
            for raw in args.ids:
                print(decode_id(raw).model_dump_json())
    except AppError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    return 0


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
