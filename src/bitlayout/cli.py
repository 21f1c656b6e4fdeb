from dataclasses import replace
from pathlib import Path
from types import ModuleType
from typing import List, Optional, Tuple
import importlib
import importlib.util
import re
import sys

import typer

from .catalog.widths import CATALOG
from .config import Settings, use_settings
from .errors import MisalignedTotal, UnknownFieldWidth
from .layout.gate import CAPABILITY_NAME, implements_byte_aligned
from .layout.remainder import classify
from .logging import get_logger
from .output.report import build_report, failure_entry, write_report_json
from .validation.entry import check_widths, layout_of, records_in
from .validation.outcome import Layout

app = typer.Typer(help="bitlayout – bitfield record layout validator", no_args_is_help=True)

EXIT_MISALIGNED = 1
EXIT_UNKNOWN_WIDTH = 2
EXIT_LOAD_FAILED = 3

# Undefined names that look like width markers (B65, B128, ...) are unknown field widths
MARKER_NAME_PATTERN = re.compile(r"B\d+")


def safe_echo(message: str) -> None:
    """Echo message with an ASCII fallback for consoles that cannot encode the status symbols."""
    try:
        typer.echo(message)
    except UnicodeEncodeError:
        fallback_message = (
            message.replace("✅", "[OK]")
            .replace("❌", "[FAIL]")
            .replace("📦", "[REC]")
            .replace("🔢", "[BITS]")
            .replace("📋", "[LIST]")
            .replace("📁", "[DIR]")
            .replace("–", "-")
        )
        try:
            typer.echo(fallback_message)
        except UnicodeEncodeError:
            print("Output contains unsupported characters")


def _settings_for(backend: Optional[str]) -> Settings:
    logger = get_logger(__name__)
    try:
        settings = Settings.from_env()
        if backend is not None:
            settings = replace(settings, backend=backend.strip().lower())
    except ValueError as exc:
        logger.error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc
    return settings


def import_target(target: str) -> ModuleType:
    """
    Import a dotted module name or a ``.py`` file, running any ``@bitfield`` checks it contains.

    Files are loaded under a private module name so they never shadow an installed module.
    A class body that names a width outside the catalog (``body: B65``) fails before
    ``@bitfield`` runs; that NameError is reported as UnknownFieldWidth.
    """
    try:
        return _load_target(target)
    except NameError as exc:
        name = getattr(exc, "name", None)
        if name and MARKER_NAME_PATTERN.fullmatch(name):
            raise UnknownFieldWidth(name, detail=str(exc)) from exc
        raise


def _load_target(target: str) -> ModuleType:
    path = Path(target)
    if path.suffix != ".py":
        return importlib.import_module(target)

    if not path.exists():
        raise FileNotFoundError(f"Target file does not exist: {path}")

    module_name = f"_bitlayout_check_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load target file: {path}")

    module = importlib.util.module_from_spec(spec)
    # String annotations are resolved through sys.modules while the module executes
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


@app.command()
def check(
    targets: List[str] = typer.Argument(..., help="Dotted module names or .py files defining @bitfield records"),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="Validation backend: 'gate' or 'index'"),
    report: Optional[Path] = typer.Option(None, "--report", "-r", help="Directory to write layout_report.json into (default: BITLAYOUT_REPORT_DIR)"),
    no_report: bool = typer.Option(False, "--no-report", help="Do not write a report, even when BITLAYOUT_REPORT_DIR is set"),
) -> None:
    """
    Import modules and validate every @bitfield record they define.

    Exits 0 when every record is byte-aligned, 1 when a record's total width is
    not a multiple of 8, 2 when a field type is not a width marker, and 3 when a
    target cannot be loaded.
    """
    logger = get_logger(__name__)
    settings = _settings_for(backend)

    accepted: List[Tuple[str, Layout]] = []
    failures = []
    exit_code = 0

    with use_settings(settings):
        for target in targets:
            logger.info(f"Checking {target} with {settings.backend} backend")
            try:
                module = import_target(target)
            except UnknownFieldWidth as exc:
                logger.error(f"Unknown field width in {target}: {exc}")
                safe_echo(f"❌ {target}: {exc}")
                failures.append(failure_entry(target, exc))
                exit_code = max(exit_code, EXIT_UNKNOWN_WIDTH)
                continue
            except MisalignedTotal as exc:
                logger.error(f"Misaligned record in {target}: {exc}")
                safe_echo(f"❌ {target}: {exc}")
                failures.append(failure_entry(target, exc, exc.outcome))
                exit_code = max(exit_code, EXIT_MISALIGNED)
                continue
            except Exception as exc:
                logger.error(f"Failed to load {target}: {type(exc).__name__}: {exc}")
                safe_echo(f"❌ {target}: cannot be loaded ({type(exc).__name__}: {exc})")
                failures.append(failure_entry(target, exc))
                exit_code = max(exit_code, EXIT_LOAD_FAILED)
                continue

            records = records_in(module)
            if not records:
                logger.warning(f"No @bitfield records found in {target}")
            for record in records:
                layout = layout_of(record)
                accepted.append((target, layout))
                safe_echo(f"✅ {layout.record}: {layout.total_bits} bits ({layout.byte_size} bytes)")

    safe_echo(f"\n📦 Records accepted: {len(accepted)}")
    if failures:
        safe_echo(f"❌ Targets failed: {len(failures)}")

    report_dir = None if no_report else (report or settings.report_dir)
    if report_dir is not None:
        report_path = write_report_json(build_report(accepted, failures), report_dir)
        safe_echo(f"📁 Report: {report_path}")

    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command()
def widths(
    values: Optional[List[int]] = typer.Argument(None, help="Field widths in declaration order"),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="Validation backend: 'gate' or 'index'"),
) -> None:
    """Validate a raw list of field widths."""
    logger = get_logger(__name__)
    settings = _settings_for(backend)
    values = values or []

    with use_settings(settings):
        try:
            outcome = check_widths(values)
        except UnknownFieldWidth as exc:
            logger.error(str(exc))
            safe_echo(f"❌ {exc}")
            raise typer.Exit(code=EXIT_UNKNOWN_WIDTH) from exc

    if outcome.accepted:
        safe_echo(f"✅ {outcome.total_bits} bits ({outcome.byte_size} bytes) – accepted by {outcome.backend} backend")
        return

    safe_echo(f"❌ {outcome.describe()}")
    raise typer.Exit(code=EXIT_MISALIGNED)


@app.command("classify")
def classify_total(
    total: int = typer.Argument(..., min=0, help="Total bit-width"),
) -> None:
    """Show the residue class of a total bit-width and whether it is byte-aligned."""
    residue = classify(total)
    verdict = "yes" if implements_byte_aligned(residue) else "no"
    safe_echo(f"🔢 {total} bits -> {residue.marker_name} (remainder {residue.value}); {CAPABILITY_NAME}: {verdict}")


@app.command()
def catalog() -> None:
    """List the width markers that fields may be declared with."""
    safe_echo(f"📋 {len(CATALOG)} width markers:")
    for width, marker in CATALOG.items():
        safe_echo(f"   {marker.__name__}: {width} bits")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
