"""Typer CLI for cutting optimization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cutstock.application import OptimizeCuttingCommand
from cutstock.application.config import ConfigError, config_to_demand, load_config
from cutstock.cli.commands import display_load_error, validate_command
from cutstock.domain import DemandRecord
from cutstock.infrastructure import (
    CuttingPlanFormatter,
    DemandImportError,
    JsonExporter,
    load_demand_csv,
    load_demand_xlsx,
)

OUTPUT_FORMATS = ("text", "json")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _parse_item_option(value: str) -> DemandRecord:
    """Parse an --item value of the form NAME:LENGTH:QTY, LENGTH:QTY or LENGTH.

    Raises:
        typer.BadParameter: If the value cannot be parsed.
    """
    parts = [part.strip() for part in value.split(":")]
    if len(parts) == 3:
        name, raw_length, raw_quantity = parts
    elif len(parts) == 2:
        name, (raw_length, raw_quantity) = "", parts
    elif len(parts) == 1:
        name, raw_length, raw_quantity = "", parts[0], "1"
    else:
        raise typer.BadParameter(
            f"Expected NAME:LENGTH:QTY, got {value!r}", param_hint="--item"
        )

    try:
        return DemandRecord(
            name=name, length=float(raw_length), quantity=int(raw_quantity)
        )
    except ValueError as e:
        raise typer.BadParameter(f"{value!r}: {e}", param_hint="--item") from e


app = typer.Typer(
    name="cutstock",
    help="Plan how to cut pieces from fixed-length stock bars with minimal waste.",
)

app.command(name="validate")(validate_command)


@app.command()
def optimize(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    stock_length: Annotated[
        float | None,
        typer.Option("--stock-length", "-l", help="Length of each stock bar"),
    ] = None,
    csv_file: Annotated[
        Path | None,
        typer.Option("--csv", help="CSV cut list with name, length, quantity columns"),
    ] = None,
    xlsx_file: Annotated[
        Path | None,
        typer.Option("--xlsx", help="Excel workbook; the first sheet holds the cut list"),
    ] = None,
    items: Annotated[
        list[str] | None,
        typer.Option("--item", "-i", help="Piece as NAME:LENGTH:QTY (repeatable)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to this file"),
    ] = None,
    no_improve: Annotated[
        bool,
        typer.Option("--no-improve", help="Skip the local improvement pass"),
    ] = False,
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Length unit shown in reports (default: cm)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log optimizer progress"),
    ] = False,
) -> None:
    """Compute cutting plans for a cut list.

    The cut list comes from a job file (--config) or from --stock-length
    combined with --csv, --xlsx and/or --item options. Options given on the
    command line override the job file.

    Example:
        cutstock optimize -l 600 -i Rail:250:4 -i Post:120:6
    """
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    demand: list[DemandRecord] = []
    improve = not no_improve
    report_unit = unit or "cm"

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
        demand.extend(config_to_demand(config))
        if stock_length is None:
            stock_length = config.stock_length
        improve = improve and config.optimizer.improve
        report_unit = unit or config.unit

    if csv_file is not None:
        try:
            demand.extend(load_demand_csv(csv_file))
        except DemandImportError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    if xlsx_file is not None:
        try:
            demand.extend(load_demand_xlsx(xlsx_file))
        except DemandImportError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    for value in items or []:
        demand.append(_parse_item_option(value))

    if stock_length is None:
        typer.echo("Error: --stock-length is required without --config", err=True)
        raise typer.Exit(code=1)

    if stock_length <= 0:
        typer.echo("Error: --stock-length must be positive", err=True)
        raise typer.Exit(code=1)

    if not demand:
        typer.echo("Error: no items to cut; use --config, --csv, --xlsx or --item", err=True)
        raise typer.Exit(code=1)

    command = OptimizeCuttingCommand(improve=improve)
    result = command.execute(stock_length, demand)

    if not result.is_valid:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        report = JsonExporter().export(result)
    else:
        report = CuttingPlanFormatter(unit=report_unit).format(result)

    if output_file is not None:
        output_file.write_text(report, encoding="utf-8")
        typer.echo(f"Results written to {output_file}")
    else:
        typer.echo(report)


if __name__ == "__main__":
    app()
