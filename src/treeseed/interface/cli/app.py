from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration merging
(defaults, persisted file, CLI overrides), logging bootstrap, input sourcing
(argument, file or clipboard), the planting run and result rendering.
"""

import argparse
import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treeseed.core.pipeline.engine import plant_tree
from treeseed.core.pipeline.validator import validate_config
from treeseed.domain.config import get_config_path, get_default_config, load_config, save_config
from treeseed.domain.errors import InputSourceError
from treeseed.domain.pipeline_models import SeedResult
from treeseed.infra import clipboard
from treeseed.infra.fs import normalize_path, read_text_file
from treeseed.infra.logging import (
    LoggingConfig,
    SeedLogger,
    configure_logging,
    get_logger,
    get_seed_logger,
)
from treeseed.interface.cli import args as cli_args
from treeseed.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 planting failure, 2 usage or
             input-source failure, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (defaults vs persisted state, then overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    i18n.set_locale(conf["locale"])

    # 3. Logging bootstrap (console on stderr, optional file)
    planter = _bootstrap_logging(args, conf)
    for w in warnings:
        planter.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        path = get_config_path()
        save_config(conf, path)
        planter.plain(i18n.t("cli.status.config_saved", path=path))
        if not _has_source(args):
            return EXIT_OK

    # 4. Input sourcing phase
    if not _has_source(args):
        planter.error(i18n.t("cli.errors.no_source"))
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        text = _read_seed(args, planter)
    except InputSourceError as e:
        planter.error(i18n.t("cli.errors.source_failed", error=str(e)))
        return EXIT_USAGE

    # 5. Planting phase
    target_dir = normalize_path(conf["target_dir"])
    try:
        result = plant_tree(
            text,
            fmt=conf["format"],
            target_dir=target_dir,
            dry_run=conf["dry_run"],
            planter=planter,
        )
    except KeyboardInterrupt:
        planter.warning(i18n.t("cli.status.interrupted"))
        return EXIT_INTERRUPTED

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    _report(result, planter)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged, preventing schema pollution from external
    sources.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = ["format", "target_dir", "dry_run", "silent", "color", "log_file"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _bootstrap_logging(args: argparse.Namespace, conf: Dict[str, Any]) -> SeedLogger:
    if args.debug:
        level = "DEBUG"
    elif conf["silent"]:
        level = "WARNING"
    else:
        level = "INFO"

    configure_logging(
        LoggingConfig(
            level=level,
            console=True,
            color=conf["color"],
            log_file=conf["log_file"] or None,
        ),
        force=True,
    )
    logger.debug("CLI execution initiated.")
    return get_seed_logger("treeseed.planter")

# -----------------------------------------------------------------------------
# INPUT SOURCING
# -----------------------------------------------------------------------------

def _has_source(args: argparse.Namespace) -> bool:
    return bool(args.from_clipboard or args.file_path or args.seed)


def _read_seed(args: argparse.Namespace, planter: SeedLogger) -> str:
    """
    Resolve the tree text; clipboard wins over file, file over argument.

    Raises:
        InputSourceError: If the clipboard or the file cannot be read.
    """
    if args.from_clipboard:
        planter.plain(i18n.t("cli.status.from_clipboard"))
        return clipboard.paste_text()

    if args.file_path:
        planter.plain(i18n.t("cli.status.from_file", name=os.path.basename(args.file_path)))
        try:
            return read_text_file(args.file_path)
        except OSError as e:
            raise InputSourceError("file", f"{args.file_path}: {e.strerror or e}") from e

    planter.plain(i18n.t("cli.status.from_argument"))
    return args.seed

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _report(result: SeedResult, planter: SeedLogger) -> None:
    """
    Render the run outcome through the console logger.

    Args:
        result: The planting result to render.
        planter: Console logging collaborator.
    """
    if not result.ok:
        planter.error(i18n.t("cli.errors.plant_failed", error=result.error))
        if result.planted and not result.dry_run:
            planter.warning(i18n.t("cli.errors.partial", count=len(result.planted)))
        return

    if result.dry_run:
        planter.success(i18n.t("cli.status.dry_run", count=len(result.planted)))
        return

    planter.success(i18n.t("cli.status.success"))


# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
