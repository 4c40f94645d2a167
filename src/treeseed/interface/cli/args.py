from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treeseed.domain.constants import APP_VERSION
from treeseed.domain.tree_models import format_names
from treeseed.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeseed CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeseed",
        description=i18n.t("app.description"),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # --- Input Sourcing ---
    p.add_argument(
        "seed",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.seed"),
    )
    p.add_argument(
        "-f", "--file",
        dest="file_path",
        default=None,
        help=i18n.t("cli.args.file"),
    )
    p.add_argument(
        "-c", "--clipboard",
        dest="from_clipboard",
        action="store_true",
        help=i18n.t("cli.args.clipboard"),
    )
    p.add_argument(
        "--format",
        dest="format",
        choices=format_names(),
        default=None,
        help=i18n.t("cli.args.format"),
    )

    # --- Planting ---
    p.add_argument(
        "-o", "--output",
        dest="target_dir",
        default=None,
        help=i18n.t("cli.args.output"),
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )

    # --- Console & Diagnostics ---
    p.add_argument(
        "-s", "--silent",
        action="store_true",
        help=i18n.t("cli.args.silent"),
    )
    p.add_argument(
        "--no-color",
        action="store_true",
        help=i18n.t("cli.args.no_color"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Configuration ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.use_defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump_config"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save_config"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags that were not given are left out so the persisted configuration
    keeps precedence over the parser defaults.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.format:
        overrides["format"] = args.format
    if args.target_dir is not None:
        overrides["target_dir"] = args.target_dir
    if args.log_file is not None:
        overrides["log_file"] = args.log_file

    if args.dry_run:
        overrides["dry_run"] = True
    if args.silent:
        overrides["silent"] = True
    if args.no_color:
        overrides["color"] = False

    return overrides
