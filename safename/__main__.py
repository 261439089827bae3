"""Command line entry point for safename."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import NameKind, Namer, NamingConfig


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Turn arbitrary text into safe filenames or slugs.")
    parser.add_argument(
        "kind",
        choices=[kind.value for kind in NameKind],
        help="Output form to produce.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Values to convert. Read one per line from stdin when omitted.",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        help="Override the configured maximum output length.",
    )
    parser.add_argument(
        "--hash-length",
        type=int,
        help="Override the configured hash suffix length (0 disables it).",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="YAML or JSON file with naming defaults.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON list.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_intermixed_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = NamingConfig.load(args.config) if args.config else NamingConfig()
        config = _apply_overrides(config, NameKind(args.kind), args.max_length, args.hash_length)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    values = args.values or [line.rstrip("\r\n") for line in sys.stdin if line.strip()]
    results = Namer(config).name_many(values, NameKind(args.kind))

    if args.json:
        json.dump([result.as_dict() for result in results], sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for result in results:
            if result.ok:
                sys.stdout.write(f"{result.output}\n")
            else:
                sys.stderr.write(f"error: {result.source!r}: {result.error_message}\n")

    if not all(result.ok for result in results):
        sys.exit(1)


def _apply_overrides(
    config: NamingConfig,
    kind: NameKind,
    max_length: int | None,
    hash_length: int | None,
) -> NamingConfig:
    updates: dict[str, int] = {}
    if max_length is not None:
        updates[f"{kind.value}_max_length"] = max_length
    if hash_length is not None:
        updates[f"{kind.value}_hash_length"] = hash_length
    if not updates:
        return config
    return NamingConfig.model_validate({**config.as_dict(), **updates})


if __name__ == "__main__":  # pragma: no cover
    main()
