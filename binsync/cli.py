"""Click-based CLI for binsync - agent binary installer."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from binsync import __version__
from binsync.config import (
    BinsyncConfig,
    apply_env_overrides,
    ensure_config_exists,
    get_config_path,
    load_config_or_defaults,
    validate_config_file,
)
from binsync.logger import InstallLogger
from binsync.output import create_console
from binsync.sync import BinarySyncError, SyncRequest, copy_binaries, inspect_targets

console = create_console()


def _configure_output(config: BinsyncConfig, verbose: bool) -> InstallLogger:
    """Rebuild the console from the output settings and return a logger writing to it."""
    global console
    console = create_console(verbose=verbose, colored=config.output.colored)
    return InstallLogger(console=console.rich_console, verbose=verbose)


def _load_effective_config(config_path: Optional[Path]) -> tuple[BinsyncConfig, bool]:
    """Load config file (or defaults) and apply environment overrides, exiting on errors."""
    try:
        config, loaded = load_config_or_defaults(config_path)
        return apply_env_overrides(config), loaded
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        console.print_error(f"Invalid configuration: {e}")
        sys.exit(1)


def _build_request(
    config: BinsyncConfig,
    source_dir: Optional[Path],
    target_dirs: tuple[Path, ...],
    update: Optional[bool],
    skip: tuple[str, ...],
    prefix: Optional[str],
) -> SyncRequest:
    """Combine configuration with command line overrides."""
    request = SyncRequest.from_config(config)

    if source_dir is not None:
        request.source_dir = source_dir
    if target_dirs:
        request.target_dirs = list(target_dirs)
    if update is not None:
        request.update_binaries = update
    if skip:
        request.skip_binaries = {name for name in skip if name}
    if prefix is not None:
        if "/" in prefix or "\\" in prefix:
            console.print_error("--prefix must not contain a path separator")
            sys.exit(1)
        request.binaries_prefix = prefix

    return request


@click.group()
@click.version_option(version=__version__, prog_name="binsync")
def cli() -> None:
    """binsync - install agent binaries onto a node.

    Copies every binary found in a source directory into one or more
    target directories. Read-only targets are skipped, existing binaries
    are replaced atomically.
    """
    pass


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: ~/.config/binsync/config.yaml or $BINSYNC_CONFIG)",
)
@click.option("--source-dir", type=click.Path(file_okay=False, path_type=Path), help="Override source directory")
@click.option(
    "--target-dir",
    "target_dirs",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Target directory (repeatable, replaces configured targets)",
)
@click.option("--update/--no-update", default=None, help="Overwrite binaries that are already installed")
@click.option("--skip", multiple=True, help="Binary name to skip (repeatable)")
@click.option("--prefix", default=None, help="Prefix for installed filenames")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def install(
    config_path: Optional[Path],
    source_dir: Optional[Path],
    target_dirs: tuple[Path, ...],
    update: Optional[bool],
    skip: tuple[str, ...],
    prefix: Optional[str],
    verbose: bool,
) -> None:
    """Install binaries into every writable target directory."""
    config, loaded = _load_effective_config(config_path)
    logger = _configure_output(config, verbose or config.output.verbose)
    request = _build_request(config, source_dir, target_dirs, update, skip, prefix)

    if not loaded:
        logger.debug("No configuration file found, using built-in defaults")
    if logger.verbose:
        console.print_request(request)

    try:
        copy_binaries(
            request.source_dir,
            request.target_dirs,
            request.update_binaries,
            request.skip_binaries,
            request.binaries_prefix,
            logger=logger,
        )
    except BinarySyncError as e:
        console.print_error(str(e))
        sys.exit(1)

    logger.success("Install completed")


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: ~/.config/binsync/config.yaml or $BINSYNC_CONFIG)",
)
@click.option("--source-dir", type=click.Path(file_okay=False, path_type=Path), help="Override source directory")
@click.option(
    "--target-dir",
    "target_dirs",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Target directory (repeatable, replaces configured targets)",
)
@click.option("--skip", multiple=True, help="Binary name to skip (repeatable)")
@click.option("--prefix", default=None, help="Prefix for installed filenames")
@click.option("--verbose", "-v", is_flag=True, help="List every binary")
def status(
    config_path: Optional[Path],
    source_dir: Optional[Path],
    target_dirs: tuple[Path, ...],
    skip: tuple[str, ...],
    prefix: Optional[str],
    verbose: bool,
) -> None:
    """Show what is installed in each target directory without changing anything."""
    config, _ = _load_effective_config(config_path)
    _configure_output(config, verbose or config.output.verbose)
    request = _build_request(config, source_dir, target_dirs, None, skip, prefix)

    try:
        statuses = inspect_targets(
            request.source_dir,
            request.target_dirs,
            skip_binaries=request.skip_binaries,
            binaries_prefix=request.binaries_prefix,
        )
    except BinarySyncError as e:
        console.print_error(str(e))
        sys.exit(1)

    console.print_targets(statuses)

    writable = [s for s in statuses if s.writable]
    if writable and all(s.is_complete and not s.has_stale_temps for s in writable):
        console.print_success("All writable targets are up to date")


@cli.group()
def config() -> None:
    """Manage the binsync configuration file."""
    pass


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing configuration file")
def config_init(force: bool) -> None:
    """Create a configuration file with default values."""
    config_path = get_config_path()

    if force and config_path.exists():
        config_path.unlink()

    path, created = ensure_config_exists(config_path)
    if created:
        console.print_success(f"Created configuration: {path}")
    else:
        console.print_warning(f"Configuration already exists: {path} (use --force to overwrite)")


@config.command("show")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file to show",
)
def config_show(config_path: Optional[Path]) -> None:
    """Show the effective configuration, including environment overrides."""
    config, loaded = _load_effective_config(config_path)
    _configure_output(config, config.output.verbose)
    console.print_config_summary(str(config_path or get_config_path()), loaded)
    console.print(yaml.dump(config.model_dump(mode="json"), default_flow_style=False, sort_keys=False), markup=False)


@config.command("path")
def config_path_cmd() -> None:
    """Print the configuration file location."""
    click.echo(str(get_config_path()))


@config.command("check")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def config_check(file: Path) -> None:
    """Validate a configuration file."""
    valid, errors = validate_config_file(file)

    if valid:
        console.print_success(f"Configuration is valid: {file}")
        return

    console.print_error(f"Configuration is invalid: {file}")
    for error in errors:
        console.print(f"  • {error}", markup=False)
    sys.exit(1)
