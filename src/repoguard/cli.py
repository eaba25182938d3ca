"""Repo guard CLI - admission check and proofgate commands."""

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from repoguard import __version__
from repoguard.artifacts.canonical_json import pretty_dumps
from repoguard.artifacts.writer import write_evidence
from repoguard.config import ConfigError, load_guard_config, parse_config_file
from repoguard.engine import check_repo
from repoguard.obs.run_artifacts import REPO_GUARD_EVIDENCE_DIR_ENV, get_default_evidence_root
from repoguard.proofgate import ProofgateResult, emit_bundle, verify_structural, write_state_snapshot
from repoguard.types import Outcome, parse_mode

logger = logging.getLogger(__name__)

cli = typer.Typer(
    name="repo-guard",
    help="WFSL Repo Admission Guard v1 - repository admission checks with durable evidence",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

config_app = typer.Typer(
    name="config",
    help="Configuration file commands",
    no_args_is_help=True,
)
cli.add_typer(config_app, name="config")


def _configure_logging(verbose: bool) -> None:
    """Attach a rich handler to the package logger (idempotent)."""
    pkg_logger = logging.getLogger("repoguard")
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(RichHandler(console=err_console, show_path=False))
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _version_option_callback(value: bool) -> None:
    """Handle eager --version option."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@cli.callback()
def _cli_callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show repo guard version and exit.",
        is_eager=True,
        callback=_version_option_callback,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log probe details to stderr.",
    ),
) -> None:
    """Runs before every command."""
    _ = version
    _configure_logging(verbose)


def _resolve_evidence_dir(root: Path, evidence_dir: Path | None) -> Path:
    return get_default_evidence_root(evidence_dir, root=root)


def _finish_proofgate(result: ProofgateResult) -> None:
    if result.ok:
        typer.echo(result.status)
    else:
        typer.echo(result.status, err=True)
    raise typer.Exit(result.exit_code)


@cli.command()
def check(
    root: Path = typer.Option(
        Path("."),
        "--root",
        help="Repository root to inspect",
    ),
    mode: str = typer.Option(
        "repo",
        "--mode",
        help="Check posture: repo or marketplace (anything else falls back to repo)",
    ),
    evidence_dir: Path | None = typer.Option(
        None,
        "--evidence-dir",
        help=f"Evidence root (default: ${REPO_GUARD_EVIDENCE_DIR_ENV} or <root>/evidence)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: repo-guard.config.json/.yaml under root)",
    ),
    no_write: bool = typer.Option(
        False,
        "--no-write",
        help="Do not persist evidence files",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the evidence record as JSON instead of the summary",
    ),
) -> None:
    """Check a repository against the v1 admission ruleset."""
    try:
        selected_mode = parse_mode(mode)
        root_abs = root.expanduser().resolve()

        try:
            guard_config = load_guard_config(root_abs, config)
        except ConfigError as e:
            if config is not None:
                raise
            # Only an explicitly requested config is fatal.
            logger.warning("Ignoring config: %s", e)
            guard_config = None

        result = check_repo(root_abs, selected_mode)
        evidence = result.evidence

        written = None
        explicit_location = evidence_dir is not None or os.getenv(REPO_GUARD_EVIDENCE_DIR_ENV, "").strip()
        # An invalid root has nowhere to hold evidence unless a location is given.
        if not no_write and (evidence.outcome is not Outcome.ERROR or explicit_location):
            written = write_evidence(_resolve_evidence_dir(root_abs, evidence_dir), evidence)

        if json_output:
            typer.echo(pretty_dumps(evidence.to_dict()))
            raise typer.Exit(evidence.exit_code)

        console.print("[bold]WFSL Repo Guard v1[/bold]")
        typer.echo(f"Mode: {evidence.mode.value}")
        typer.echo(f"Root: {evidence.root}")
        if guard_config is not None:
            typer.echo(f"Config: {guard_config.source} (v1 ruleset is fixed)")
        typer.secho(f"Outcome: {evidence.outcome.value}", fg="green" if result.ok else "red")
        if written is not None:
            typer.echo(f"Wrote: {written.json_path}")
            typer.echo(f"Wrote: {written.md_path}")

        if not result.ok:
            for finding in evidence.findings:
                for line in finding.render_lines():
                    typer.echo(line, err=True)

        raise typer.Exit(evidence.exit_code)

    except typer.Exit:
        raise
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(2) from e
    except Exception as e:
        typer.echo(f"Repo guard failed: {e}", err=True)
        raise typer.Exit(2) from e


@cli.command()
def snapshot(
    root: Path = typer.Option(Path("."), "--root", help="Repository root"),
    evidence_dir: Path | None = typer.Option(None, "--evidence-dir", help="Evidence root"),
) -> None:
    """Write the repository-structure state snapshot and its SHA-256."""
    try:
        root_abs = root.expanduser().resolve()
        result = write_state_snapshot(root_abs, _resolve_evidence_dir(root_abs, evidence_dir))
        if result.path is not None:
            typer.echo(f"Wrote: {result.path}")
        _finish_proofgate(result)
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Repo guard failed: {e}", err=True)
        raise typer.Exit(2) from e


@cli.command()
def verify(
    root: Path = typer.Option(Path("."), "--root", help="Repository root"),
    evidence_dir: Path | None = typer.Option(None, "--evidence-dir", help="Evidence root"),
) -> None:
    """Verify the state snapshot against its stored hash and record a verdict."""
    try:
        _finish_proofgate(verify_structural(_resolve_evidence_dir(root.expanduser().resolve(), evidence_dir)))
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Repo guard failed: {e}", err=True)
        raise typer.Exit(2) from e


@cli.command()
def bundle(
    root: Path = typer.Option(Path("."), "--root", help="Repository root"),
    evidence_dir: Path | None = typer.Option(None, "--evidence-dir", help="Evidence root"),
) -> None:
    """Emit the proofgate bundle manifest over the structural evidence."""
    try:
        _finish_proofgate(emit_bundle(_resolve_evidence_dir(root.expanduser().resolve(), evidence_dir)))
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Repo guard failed: {e}", err=True)
        raise typer.Exit(2) from e


@config_app.command(name="validate")
def config_validate(
    path: Path = typer.Argument(..., help="Config file to validate"),
) -> None:
    """Validate a config file against the v1 config schema."""
    try:
        parsed = parse_config_file(path)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(2) from e

    typer.echo(f"Config OK: {path} (schema {parsed.schema}, version {parsed.version})")
    for mode_name, defaults in (("repo", parsed.repo), ("marketplace", parsed.marketplace)):
        if defaults is None:
            continue
        typer.echo(f"  {mode_name}:")
        typer.echo(f"    require_files: {', '.join(defaults.require_files) or '-'}")
        typer.echo(f"    forbid_paths: {', '.join(defaults.forbid_paths) or '-'}")
        if defaults.require_action_yml is not None:
            typer.echo(f"    require_action_yml: {str(defaults.require_action_yml).lower()}")
        if defaults.require_tags is not None:
            typer.echo(f"    require_tags: {str(defaults.require_tags).lower()}")


if __name__ == "__main__":

    cli()
