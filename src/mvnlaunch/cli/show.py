"""
mvnlaunch CLI - Show command.

Assemble one launch and display the launcher class, classpath, program
arguments and JVM arguments that would be handed to the process launcher.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mvnlaunch.cli.errors import report_error
from mvnlaunch.core.launch import LaunchConfiguration, LaunchError, LaunchRequest
from mvnlaunch.core.services.launch import LaunchService

console = Console()


def _collect_overrides(
    goals: str | None,
    properties: list[str] | None,
    profiles: str | None,
    debug_output: bool | None,
    offline: bool | None,
    update_snapshots: bool,
    non_recursive: bool,
    skip_tests: bool,
    threads: int | None,
    settings: str | None,
    pom_dir: Path | None,
    runtime: str | None,
    vm_args: str | None,
) -> dict[str, Any]:
    """Launch attributes given on the command line, keyed by field name."""
    overrides: dict[str, Any] = {}
    if goals is not None:
        overrides["goals"] = goals
    if properties:
        overrides["properties"] = list(properties)
    if profiles is not None:
        overrides["profiles"] = profiles
    if debug_output is not None:
        overrides["debug_output"] = debug_output
    if offline is not None:
        overrides["offline"] = offline
    if update_snapshots:
        overrides["update_snapshots"] = True
    if non_recursive:
        overrides["non_recursive"] = True
    if skip_tests:
        overrides["skip_tests"] = True
    if threads is not None:
        overrides["threads"] = threads
    if settings is not None:
        overrides["user_settings"] = settings
    if pom_dir is not None:
        overrides["pom_directory"] = str(pom_dir)
    if runtime is not None:
        overrides["runtime_id"] = runtime
    if vm_args is not None:
        overrides["vm_arguments"] = vm_args
    return overrides


def _request_as_dict(request: LaunchRequest) -> dict[str, Any]:
    return {
        "main_type_name": request.main_type_name,
        "classpath": list(request.classpath),
        "program_arguments": request.program_arguments,
        "vm_arguments": request.vm_arguments,
        "working_directory": str(request.working_directory),
        "command_line": request.command_line(),
    }


def _print_request(request: LaunchRequest) -> None:
    table = Table(title="Maven launch", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")

    table.add_row("Entry point", escape(request.main_type_name))
    table.add_row("Classpath", escape("\n".join(request.classpath)) or "[dim](empty)[/dim]")
    table.add_row("Program arguments", escape(request.program_arguments.strip()))
    table.add_row("VM arguments", escape(request.vm_arguments) or "[dim](none)[/dim]")
    table.add_row("Working directory", escape(str(request.working_directory)))
    console.print(table)


def show(
    goals: Annotated[
        Optional[str],
        typer.Option("--goals", "-g", help="Goals and phases, e.g. 'clean install'"),
    ] = None,
    properties: Annotated[
        Optional[list[str]],
        typer.Option("--property", "-D", help="System property name[=value] (repeatable)"),
    ] = None,
    profiles: Annotated[
        Optional[str],
        typer.Option("--profiles", "-P", help="Whitespace-separated profile ids"),
    ] = None,
    debug_output: Annotated[
        Optional[bool],
        typer.Option("--debug-output/--no-debug-output", help="Run Maven with -X -e"),
    ] = None,
    offline: Annotated[
        Optional[bool],
        typer.Option("--offline/--no-offline", help="Run Maven offline (-o)"),
    ] = None,
    update_snapshots: Annotated[
        bool,
        typer.Option("--update-snapshots", "-U", help="Force a check for updated snapshots"),
    ] = False,
    non_recursive: Annotated[
        bool,
        typer.Option("--non-recursive", "-N", help="Do not recurse into sub-projects"),
    ] = False,
    skip_tests: Annotated[
        bool,
        typer.Option("--skip-tests", help="Skip compiling and running tests"),
    ] = False,
    threads: Annotated[
        Optional[int],
        typer.Option("--threads", "-T", min=1, help="Build thread count"),
    ] = None,
    settings: Annotated[
        Optional[str],
        typer.Option("--settings", "-s", help="User settings.xml for this launch"),
    ] = None,
    pom_dir: Annotated[
        Optional[Path],
        typer.Option("--pom-dir", help="Directory containing the pom.xml"),
    ] = None,
    runtime: Annotated[
        Optional[str],
        typer.Option("--runtime", "-r", help="Configured runtime id to launch"),
    ] = None,
    vm_args: Annotated[
        Optional[str],
        typer.Option("--vm-args", help="Extra JVM arguments, passed through verbatim"),
    ] = None,
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            "-f",
            help="Launch configuration file (YAML or JSON); options override its values",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the launch request as JSON"),
    ] = False,
) -> None:
    """
    Show how Maven would be launched.

    Examples:

        # Offline parallel build with a property and two profiles
        mvnlaunch show -g "clean install" -D skip=true -P "ci release" --offline -T 4

        # Start from a saved launch file
        mvnlaunch show --file launch.yaml --json
    """
    overrides = _collect_overrides(
        goals,
        properties,
        profiles,
        debug_output,
        offline,
        update_snapshots,
        non_recursive,
        skip_tests,
        threads,
        settings,
        pom_dir,
        runtime,
        vm_args,
    )

    try:
        if file is not None:
            base = LaunchService.load_configuration(file).model_dump()
        else:
            base = LaunchConfiguration().model_dump()
        configuration = LaunchService.build_configuration({**base, **overrides})

        # Project config and .env files come from the launch's pom directory
        project_dir = Path(configuration.pom_directory) if configuration.pom_directory else None
        service = LaunchService.from_config(project_dir=project_dir)
        request = service.assemble(configuration)
    except (LaunchError, ValidationError) as e:
        raise typer.Exit(report_error(e)) from e

    if as_json:
        typer.echo(json.dumps(_request_as_dict(request), indent=2))
    else:
        _print_request(request)
