# src/main.py — v1
"""CLI entry point — revision files and write a manifest.

Usage:
    assetrev rev <file>... --base <dir> --dest <dir> [--manifest PATH] [--merge]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from assetrev.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="assetrev",
        description=f"assetrev v{__version__} - content-hash asset revisioning",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- rev ---
    p_rev = subparsers.add_parser(
        "rev", help="Revision files and optionally write a manifest",
    )
    p_rev.add_argument("files", type=Path, nargs="+", help="Files to revision")
    p_rev.add_argument(
        "-b", "--base", type=Path, default=Path("."),
        help="Base directory the output layout is relative to (default: .)",
    )
    p_rev.add_argument(
        "-d", "--dest", type=Path, required=True,
        help="Output directory for revisioned files",
    )
    p_rev.add_argument(
        "-m", "--manifest", default=None,
        help="Manifest path relative to --dest (default: no manifest)",
    )
    p_rev.add_argument(
        "--merge", action="store_true", default=None,
        help="Merge into an existing manifest at the same location",
    )
    p_rev.add_argument(
        "--format", dest="manifest_format", choices=["json", "yaml"], default=None,
        help="Manifest format (default: MANIFEST_FORMAT or json)",
    )
    p_rev.set_defaults(func=_cmd_rev)

    return parser


async def _cmd_rev(args: argparse.Namespace) -> int:
    """Revision files into the destination directory."""
    from assetrev.config.settings import load_settings
    from assetrev.core.models import FileRecord
    from assetrev.core.paths import rel_path
    from assetrev.manifest.stage import ManifestOptions, ManifestStage
    from assetrev.pipeline.base_stage import BaseStage
    from assetrev.pipeline.runner import run_pipeline
    from assetrev.rev.stage import RevisionStage
    from assetrev.storage.local_writer import LocalWriter

    overrides: dict[str, object] = {}
    if args.manifest is not None:
        overrides["manifest_path"] = args.manifest
    if args.merge is not None:
        overrides["manifest_merge"] = args.merge
    if args.manifest_format is not None:
        overrides["manifest_format"] = args.manifest_format
    settings = load_settings(**overrides)

    base = args.base.resolve()
    missing = [f for f in args.files if not f.is_file()]
    if missing:
        for f in missing:
            logger.error("File not found: %s", f)
        return 1

    outside = [f for f in args.files if not f.resolve().is_relative_to(base)]
    if outside:
        for f in outside:
            logger.error("File not under --base %s: %s", base, f)
        return 1

    manifest_path = Path(settings.manifest_path)
    if args.manifest is not None and (
        manifest_path.is_absolute() or ".." in manifest_path.parts
    ):
        logger.error("Manifest path must be relative to --dest: %s", manifest_path)
        return 1

    source = LocalWriter()
    records: list[FileRecord] = []
    for file_path in args.files:
        data = await source.read(str(file_path.resolve()))
        records.append(
            FileRecord.from_bytes(str(file_path.resolve()), data, base=str(base))
        )

    dest = LocalWriter(args.dest)
    stages: list[BaseStage] = [RevisionStage(hash_length=settings.hash_length)]
    if args.manifest is not None:
        stages.append(
            ManifestStage(ManifestOptions.from_settings(settings), writer=dest)
        )

    emitted = await run_pipeline(records, stages)

    # The manifest stage consumes the revisioned files; write them all.
    seen = {id(r) for r in records}
    written = records + [r for r in emitted if id(r) not in seen]
    for record in written:
        if record.is_null:
            continue
        target = rel_path(record.base, record.path)
        await dest.write(target, record.data)
        if record.original_path:
            print(f"{rel_path(record.base, record.original_path)} -> {target}")
        else:
            print(f"wrote {target}")
    return 0


def _setup_logging(verbose: bool) -> None:
    """Configure logging from settings, forcing DEBUG when verbose."""
    from pydantic import ValidationError

    from assetrev.config.settings import ConfigurationError, Settings
    from assetrev.logging.logger import setup_logging

    try:
        settings = Settings()
    except (ValidationError, ConfigurationError) as exc:
        setup_logging(level="DEBUG" if verbose else "INFO", log_format="text")
        logger.warning("Invalid settings, logging with defaults: %s", exc)
        return

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
