"""CLI interface for dualview.

Usage:
    # Redact a JSON object (stdin: JSON object, stdout: redacted JSON)
    echo '{"user":"alice","password":"hunter2"}' | \
        python -m dualview.cli --sensitive password redact

    # Show both read paths side by side
    echo '{"user":"alice","password":"hunter2"}' | \
        python -m dualview.cli --sensitive password --tokens show

    # Settings from a YAML file (see dualview.config)
    python -m dualview.cli --config dualview.yaml redact < settings.json
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any

import yaml

from .config import DEFAULT_REPLACEMENT, load_config, load_from_yaml, create_dual_view
from .dualview import DualView

logger = logging.getLogger(__name__)


def _build_config(args: argparse.Namespace) -> dict[str, Any]:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.sensitive:
        cfg["sensitive_keys"] |= {k for k in args.sensitive.split(",") if k}
    if args.replacement is not None:
        cfg["replacement_mode"] = "value"
        cfg["replacement_value"] = args.replacement
    elif args.tokens:
        cfg["replacement_mode"] = "token"
    return cfg


def _read_dual_view(args: argparse.Namespace) -> DualView:
    data = json.loads(sys.stdin.read())
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object on stdin, got {type(data).__name__}")

    dv = create_dual_view(_build_config(args))
    for key, value in data.items():
        dv[key] = value
    logger.debug("loaded %d keys, %d sensitive", len(dv), len(dv.sensitive_keys))
    return dv


def cmd_redact(args: argparse.Namespace) -> None:
    """Print the redacted read path of the JSON object on stdin."""
    dv = _read_dual_view(args)
    json.dump(dv.redacting_view().redacted_copy(), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_show(args: argparse.Namespace) -> None:
    """Print exposed and redacted read paths together."""
    dv = _read_dual_view(args)
    output = {
        "exposed": dict(dv.exposed),
        "redacted": dv.redacting_view().redacted_copy(),
        "sensitive_keys": sorted(dv.sensitive_keys, key=str),
    }
    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dualview",
        description="Show a JSON object through exposed and redacted views",
    )
    parser.add_argument("--config", default=None, help="YAML config path")
    parser.add_argument("--sensitive", default="", help="Comma-separated sensitive keys")
    replacement = parser.add_mutually_exclusive_group()
    replacement.add_argument(
        "--replacement", default=None,
        help=f"Constant shown for sensitive values (default {DEFAULT_REPLACEMENT!r})",
    )
    replacement.add_argument("--tokens", action="store_true", help="Show per-key tokens instead")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("redact", help="Redact a JSON object (stdin)")
    sub.add_parser("show", help="Show exposed and redacted views (stdin)")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "redact": cmd_redact,
        "show": cmd_show,
    }
    try:
        cmds[args.command](args)
    except (ValueError, OSError, yaml.YAMLError) as e:
        # json.JSONDecodeError and InvalidArgumentError are ValueErrors too
        logger.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
