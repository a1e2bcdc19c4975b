"""CLI adapter for ``assert_panic`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators check that an importable callable panics the way they expect
without writing a test module, and inspect the installed distribution.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_check` – runs :func:`assert_panic.core.assert_panic` against a
  ``module:callable`` target.
* :func:`cli_fail` – raises the deterministic failure from
  :mod:`assert_panic.testing`.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. It parses arguments, delegates to the composition root and
logs failed checks at error level and lets diagnostics propagate so
``lib_cli_exit_tools`` renders them and chooses the exit code.
"""

from __future__ import annotations

import builtins
import sys
from importlib import import_module, metadata
from typing import Any, Callable, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.env.default import coerce_flag
from .core import assert_panic
from .domain.captured import type_name
from .domain.errors import DiagnosticFailure
from .domain.modes import MatchMode
from .observability import log_error
from .testing import i_should_fail

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_DISTRIBUTION: Final[str] = "assert_panic"


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when not installed."""

    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Assert that a callable panics, and with what",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=_DISTRIBUTION,
    message="assert_panic version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        click.echo("assert_panic (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', _DISTRIBUTION)}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")
    for entry in meta.get_all("Project-URL") or []:
        click.echo(f"  {entry}")


@cli.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("target")
@click.option(
    "--type",
    "type_spec",
    default=None,
    help="Expected payload type: a builtin name (str, int, ...) or module:Class",
)
@click.option("--equals", "equals", default=None, help="Payload must equal this value")
@click.option("--starts-with", "starts_with", default=None, help="Payload must start with this value")
@click.option("--contains", "contains", default=None, help="Payload must contain this value")
@click.option(
    "--silent/--no-silent",
    default=None,
    help="Suppress default failure-reporting hooks (defaults to ASSERT_PANIC_SILENT)",
)
def cli_check(
    target: str,
    type_spec: Optional[str],
    equals: Optional[str],
    starts_with: Optional[str],
    contains: Optional[str],
    silent: Optional[bool],
) -> None:
    """Call TARGET (``module:callable``) and assert that it panics.

    Comparison values are converted with the expected type's constructor
    unless the type is ``str``; bytes types get the encoded text and ``bool``
    takes flag spellings such as ``false`` or ``off``. Only one of
    ``--equals``, ``--starts-with`` and ``--contains`` may be given, and each
    requires ``--type``.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["check", "assert_panic.testing:i_should_panic", "--type", "str"])
    >>> result.output.strip()
    'assert_panic.testing:i_should_panic panicked with a `str` payload'
    """

    operation = _resolve_target(target)
    comparison = _comparison_from_options(equals=equals, starts_with=starts_with, contains=contains)
    if type_spec is None and comparison:
        raise click.UsageError("--equals/--starts-with/--contains require --type")
    try:
        outcome = _run_check(operation, type_spec, comparison, silent)
    except DiagnosticFailure as exc:
        log_error("cli_check_failed", stage="cli", target=target, failure=type(exc).__name__)
        raise
    click.echo(f"{target} panicked with {outcome}")


def _run_check(
    operation: Callable[[], Any],
    type_spec: Optional[str],
    comparison: tuple[MatchMode, str] | None,
    silent: Optional[bool],
) -> str:
    """Run the requested assertion and describe what was confirmed."""

    if type_spec is None:
        captured = assert_panic(operation, silent=silent)
        return f"a `{type_name(captured.payload_type)}` payload"

    expected_type = _resolve_type(type_spec)
    if comparison:
        mode, raw = comparison
        assert_panic(operation, expected_type, mode, _convert(expected_type, raw), silent=silent)
        return f"a `{type_name(expected_type)}` payload {mode.value} {raw!r}"
    assert_panic(operation, expected_type, silent=silent)
    return f"a `{type_name(expected_type)}` payload"


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Trigger a deterministic error for testing traceback handling."""

    i_should_fail()


def _resolve_target(target: str) -> Callable[[], Any]:
    """Import ``module:attr.path`` and return the callable it names."""

    obj = _import_object(target, param_hint="TARGET")
    if not callable(obj):
        raise click.BadParameter(f"{target} is not callable", param_hint="TARGET")
    return obj


def _resolve_type(spec: str) -> type:
    """Return the class named by *spec* (a builtin name or ``module:Class``)."""

    if ":" in spec:
        candidate = _import_object(spec, param_hint="--type")
    else:
        candidate = getattr(builtins, spec, None)
    if not isinstance(candidate, type):
        raise click.BadParameter(f"{spec} is not a class", param_hint="--type")
    return candidate


def _import_object(spec: str, *, param_hint: str) -> Any:
    """Resolve ``module:attr.path`` to an object or raise ``click.BadParameter``."""

    module_name, _, attr_path = spec.partition(":")
    if not module_name or not attr_path:
        raise click.BadParameter(f"{spec} must look like module:attribute", param_hint=param_hint)
    try:
        obj: Any = import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import {module_name}: {exc}", param_hint=param_hint) from exc
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise click.BadParameter(f"{module_name} has no attribute {attr_path}", param_hint=param_hint) from exc
    return obj


def _comparison_from_options(
    *, equals: Optional[str], starts_with: Optional[str], contains: Optional[str]
) -> tuple[MatchMode, str] | None:
    """Return the single requested ``(mode, raw value)`` pair, if any."""

    given = [
        (mode, value)
        for mode, value in (
            (MatchMode.EQUALS, equals),
            (MatchMode.STARTS_WITH, starts_with),
            (MatchMode.CONTAINS, contains),
        )
        if value is not None
    ]
    if len(given) > 1:
        raise click.UsageError("use only one of --equals, --starts-with and --contains")
    return given[0] if given else None


def _convert(expected_type: type, raw: str) -> Any:
    """Convert the CLI string *raw* into an *expected_type* value.

    Bytes types receive the UTF-8 encoding of *raw*; ``bool`` accepts the
    same spellings as the environment flags.
    """

    if issubclass(expected_type, str):
        return raw
    try:
        if issubclass(expected_type, (bytes, bytearray)):
            return expected_type(raw.encode())
        if issubclass(expected_type, bool):
            return coerce_flag("value", raw)
        return expected_type(raw)
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(f"cannot convert {raw!r} to {type_name(expected_type)}: {exc}") from exc


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=_DISTRIBUTION,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
