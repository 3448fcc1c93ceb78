# topmark:header:start
#
#   project      : XmlMode
#   file         : detect.py
#   file_relpath : src/xmlmode/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlMode `detect` command.

Resolves each location (file, directory, ``package:`` entry, URL or ``-`` for
standard input), runs the validation mode detector and prints one result per input.

Exit codes:
    - ``0``: every input was processed.
    - ``1``: ``--strict`` (or ``strict = true``) and at least one input yielded ``AUTO``.
    - ``66``: an input does not exist.
    - ``74``: an input could not be read.

Input errors take precedence over the strict check; the first error encountered
determines the code.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from xmlmode.cli.cli_types import EnumChoiceParam
from xmlmode.cli.cmd_common import build_config, get_console, get_effective_verbosity
from xmlmode.cli.errors import XmlModeUsageError
from xmlmode.cli.options import common_config_options, common_detection_options
from xmlmode.cli_shared.exit_codes import ExitCode
from xmlmode.cli_shared.utils import OutputFormat, render_markdown_table
from xmlmode.config.logging import get_logger
from xmlmode.constants import STDIN_LOCATION, XMLMODE_VERSION
from xmlmode.detector.engine import XmlValidationModeDetector
from xmlmode.detector.mode import ValidationMode
from xmlmode.file_resolver import resolve_locations
from xmlmode.resources.loader import ResourceLoader
from xmlmode.results import DetectionResult, DetectionStatus, count_modes, run_detection

if TYPE_CHECKING:
    from xmlmode.cli_shared.console_api import ConsoleLike
    from xmlmode.config.logging import XmlModeLogger
    from xmlmode.config.model import Config

logger: XmlModeLogger = get_logger(__name__)

_MODE_FG: dict[ValidationMode, str] = {
    ValidationMode.NONE: "white",
    ValidationMode.AUTO: "yellow",
    ValidationMode.DTD: "cyan",
    ValidationMode.XSD: "green",
}

_STATUS_EXIT_CODE: dict[DetectionStatus, ExitCode] = {
    DetectionStatus.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    DetectionStatus.READ_ERROR: ExitCode.IO_ERROR,
}


def compute_exit_code(results: list[DetectionResult], *, strict: bool) -> ExitCode:
    """Map a batch of results to the command's exit code."""
    for r in results:
        if r.is_error:
            return _STATUS_EXIT_CODE[r.status]
    if strict and any(r.mode is ValidationMode.AUTO for r in results):
        return ExitCode.FAILURE
    return ExitCode.SUCCESS


def _emit_default(console: ConsoleLike, results: list[DetectionResult], vlevel: int) -> None:
    for r in results:
        if r.mode is None:
            console.error(f"{r.location}: error: {r.error}")
            continue
        if vlevel < 0:
            continue
        mode_text: str = console.styled(r.mode.name, fg=_MODE_FG[r.mode], bold=True)
        if vlevel > 0:
            console.print(f"{r.location}: {mode_text} ({r.mode.label})")
        else:
            console.print(f"{r.location}: {mode_text}")

    if vlevel > 0:
        counts: dict[str, int] = count_modes(results)
        summary: str = ", ".join(f"{key}: {n}" for key, n in counts.items())
        console.print()
        console.print(console.styled(f"Summary: {summary}", bold=True))


def _emit_markdown(console: ConsoleLike, results: list[DetectionResult]) -> None:
    console.print("# XmlMode Detection Results\n")
    rows: list[list[str]] = [
        [
            f"`{r.location}`",
            r.mode.name if r.mode is not None else "ERROR",
            r.error or "",
        ]
        for r in results
    ]
    console.print(render_markdown_table(["Location", "Mode", "Error"], rows), nl=False)


def _emit_json(console: ConsoleLike, results: list[DetectionResult], config: Config) -> None:
    payload: dict[str, object] = {
        "meta": {"tool": "xmlmode", "version": XMLMODE_VERSION},
        "config": {"encoding": config.encoding, "strict": config.strict},
        "results": [r.to_dict() for r in results],
        "summary": count_modes(results),
    }
    console.print(json.dumps(payload, indent=2))


def _emit_ndjson(console: ConsoleLike, results: list[DetectionResult]) -> None:
    for r in results:
        console.print(json.dumps(r.to_dict()))


@click.command(
    name="detect",
    help="Detect the validation mode (DTD or XSD) of XML documents.",
)
@click.argument("locations", nargs=-1, metavar="[LOCATIONS]...")
@common_detection_options
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def detect_command(
    ctx: click.Context,
    *,
    locations: tuple[str, ...],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    encoding: str | None,
    strict: bool | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """Detect validation modes and exit with a status reflecting the outcome.

    Args:
        ctx (click.Context): Click context.
        locations (tuple[str, ...]): Paths, directories, ``package:`` entries, URLs or ``-``.
        include_patterns (tuple[str, ...]): Include globs applied inside directories.
        exclude_patterns (tuple[str, ...]): Exclude globs applied inside directories.
        encoding (str | None): Input text encoding override.
        strict (bool | None): Strict mode override.
        no_config (bool): Skip config discovery.
        config_paths (tuple[str, ...]): Extra config files.
        output_format (OutputFormat | None): Output format.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if not locations:
        raise XmlModeUsageError(
            "No input locations given. Pass files, directories, URLs or '-' for standard input."
        )
    if locations.count(STDIN_LOCATION) > 1:
        raise XmlModeUsageError("Standard input ('-') may be given only once.")

    config: Config = build_config(
        no_config=no_config,
        config_paths=config_paths,
        files=locations,
        encoding=encoding,
        strict=strict,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )

    resolved: list[str] = resolve_locations(config)
    if not resolved:
        if vlevel >= 0:
            console.print(console.styled("No files to process.", fg="blue"))
        return

    detector = XmlValidationModeDetector(encoding=config.encoding, loader=ResourceLoader())
    results: list[DetectionResult] = run_detection(detector, resolved)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        _emit_json(console, results, config)
    elif fmt == OutputFormat.NDJSON:
        _emit_ndjson(console, results)
    elif fmt == OutputFormat.MARKDOWN:
        _emit_markdown(console, results)
    else:
        _emit_default(console, results, vlevel)

    code: ExitCode = compute_exit_code(results, strict=config.strict)
    logger.debug("detect: exit code %s", code)
    if code is not ExitCode.SUCCESS:
        ctx.exit(int(code))
