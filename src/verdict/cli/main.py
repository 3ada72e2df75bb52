"""CLI entry point for verdict."""
from __future__ import annotations

import sys
from typing import Optional, Tuple

import click

from verdict import __version__, bootstrap
from verdict.config import Language
from verdict.plan import PlanOptions, load_plan, run_plan
from verdict.registry import registry


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"verdict {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the verdict version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for verdict."""

    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option(
    "--plan",
    "plan_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="YAML plan file.",
)
@click.option("--suites", "suite_filters", type=str, help="Comma-separated suite filters (supports globs).")
@click.option("--tests", "test_filters", type=str, help="Comma-separated test filters (supports globs).")
@click.option("--tags", "tag_filters", type=str, help="Comma-separated tags to include.")
@click.option("--skip-tags", "skip_tag_filters", type=str, help="Comma-separated tags to skip.")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), help="Default timeout in seconds.")
@click.option(
    "--language",
    type=click.Choice([language.value for language in Language]),
    help="Language of the messages (overrides plan).",
)
@click.option("--list", "list_only", is_flag=True, help="List matched tests without running.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.option("--quiet", is_flag=True, help="Do not print per-test progress.")
@click.pass_obj
def run(
    state: CliState,
    plan_path: Optional[str],
    suite_filters: Optional[str],
    test_filters: Optional[str],
    tag_filters: Optional[str],
    skip_tag_filters: Optional[str],
    timeout: Optional[float],
    language: Optional[str],
    list_only: bool,
    report_format: Optional[str],
    report_path: Optional[str],
    no_color: bool,
    quiet: bool,
) -> None:
    """Run the test suites defined in a plan file."""

    assert plan_path  # required by click
    options = PlanOptions(
        suites=_split_csv(suite_filters),
        tests=_split_csv(test_filters),
        tags=_split_csv(tag_filters),
        skip_tags=_split_csv(skip_tag_filters),
        timeout=timeout,
        language=language,
        list_only=list_only,
        quiet=quiet,
    )
    try:
        plan = load_plan(plan_path)
        if state.verbose:
            tests = sum(len(suite.tests) for suite in plan.suites)
            click.echo(f"Loaded plan {plan_path}: {len(plan.suites)} suite(s), {tests} test(s)")
            if plan.description:
                click.echo(plan.description)
        exit_code = run_plan(
            plan,
            options,
            report_format=report_format or "terminal",
            report_path=report_path,
            use_color=not no_color,
        )
    except Exception as exc:  # CLI error translation
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


@cli.command()
def predicates() -> None:
    """List the named predicates usable from plan files."""

    for name in sorted(registry.names()):
        help_text = registry.get(name).help
        click.echo(f"{name}: {help_text}" if help_text else name)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="verdict", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


def _split_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return tuple()
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return tuple(parts)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
