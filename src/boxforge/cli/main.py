"""Typer CLI for corrugated box design."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from boxforge.application import (
    BoxDesignOutput,
    BoxInput,
    FoldAnglesCommand,
    GenerateBoxDesignCommand,
)
from boxforge.application.config import (
    ConfigError,
    config_to_box_input,
    config_to_playback,
    load_config,
    merge_config_with_cli,
)
from boxforge.cli.commands import validate_command
from boxforge.domain import (
    BoxDimensions,
    FluteType,
    UnitSystem,
    convert_dimensions,
    get_material,
)
from boxforge.domain.services import active_folds
from boxforge.domain.services.fold_kinematics import clamp_progress
from boxforge.infrastructure import (
    FoldTableFormatter,
    JsonExporter,
    NetOutlineFormatter,
    PanelLayoutFormatter,
    StructuralReportFormatter,
)

app = typer.Typer(
    name="boxforge",
    help="Design regular slotted corrugated boxes: flat layout, fold sequence and strength.",
)

app.command(name="validate")(validate_command)

OUTPUT_FORMATS = ("all", "layout", "analysis", "net", "fold", "json")

LengthOpt = Annotated[float, typer.Option("--length", "-l", help="Interior length")]
WidthOpt = Annotated[float, typer.Option("--width", "-w", help="Interior width")]
HeightOpt = Annotated[float, typer.Option("--height", "-h", help="Interior height")]
FluteOpt = Annotated[
    str, typer.Option("--flute", "-f", help="Flute grade: A, B, C or E")
]
MetricOpt = Annotated[
    bool, typer.Option("--metric", help="Dimensions are in millimetres")
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Corrugated box design tools."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _run_design(box_input: BoxInput) -> BoxDesignOutput:
    result = GenerateBoxDesignCommand().execute(box_input)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


def _box_input(
    length: float, width: float, height: float, flute: str, metric: bool
) -> BoxInput:
    units = UnitSystem.METRIC if metric else UnitSystem.IMPERIAL
    return BoxInput(
        length=length, width=width, height=height, flute=flute, units=units.value
    )


@app.command()
def layout(
    length: LengthOpt,
    width: WidthOpt,
    height: HeightOpt,
    flute: FluteOpt = "B",
    metric: MetricOpt = False,
) -> None:
    """Show flat-pattern panel dimensions."""
    result = _run_design(_box_input(length, width, height, flute, metric))
    typer.echo(PanelLayoutFormatter().format(result.layout))


@app.command()
def analyze(
    length: LengthOpt,
    width: WidthOpt,
    height: HeightOpt,
    flute: FluteOpt = "B",
    metric: MetricOpt = False,
) -> None:
    """Show box compression strength and safe stacking load."""
    result = _run_design(_box_input(length, width, height, flute, metric))
    typer.echo(StructuralReportFormatter().format(result.analysis))


@app.command()
def net(
    length: LengthOpt,
    width: WidthOpt,
    height: HeightOpt,
    flute: FluteOpt = "B",
    metric: MetricOpt = False,
) -> None:
    """List die-line geometry for the blank."""
    result = _run_design(_box_input(length, width, height, flute, metric))
    typer.echo(NetOutlineFormatter().format(result.outline))


@app.command()
def fold(
    progress: Annotated[
        float | None,
        typer.Option("--progress", "-p", help="Assembly progress from 0 to 1"),
    ] = None,
    frames: Annotated[
        int,
        typer.Option("--frames", help="Number of evenly spaced samples"),
    ] = 11,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Step through the fold using the config's manual step size",
        ),
    ] = None,
) -> None:
    """Show fold angles for the assembly animation."""
    command = FoldAnglesCommand()
    if progress is not None:
        try:
            progress = clamp_progress(progress)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        samples = [(progress, command.at(progress))]
    elif config_file is not None:
        try:
            playback = config_to_playback(load_config(config_file))
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        samples = command.steps(playback)
    else:
        if frames < 2:
            typer.echo("Error: --frames must be at least 2", err=True)
            raise typer.Exit(code=1)
        samples = command.frames(frames)

    typer.echo(FoldTableFormatter().format(samples))
    if progress is not None:
        moving = active_folds(progress)
        typer.echo(f"\nIn motion: {', '.join(moving) if moving else 'none'}")


@app.command()
def convert(
    length: LengthOpt,
    width: WidthOpt,
    height: HeightOpt,
    to: Annotated[
        str, typer.Option("--to", help="Target unit system: metric or imperial")
    ] = "metric",
) -> None:
    """Convert dimensions between inches and millimetres (one decimal)."""
    try:
        target = UnitSystem(to.lower())
    except ValueError:
        typer.echo(f"Error: Unknown unit system: {to}", err=True)
        raise typer.Exit(code=1)
    source = UnitSystem.IMPERIAL if target is UnitSystem.METRIC else UnitSystem.METRIC

    converted = convert_dimensions(
        BoxDimensions(length=length, width=width, height=height), source, target
    )
    suffix = "mm" if target is UnitSystem.METRIC else "in"
    typer.echo(
        f"{converted.length:g} x {converted.width:g} x {converted.height:g} {suffix}"
    )


@app.command()
def generate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    length: Annotated[float | None, typer.Option("--length", "-l")] = None,
    width: Annotated[float | None, typer.Option("--width", "-w")] = None,
    height: Annotated[float | None, typer.Option("--height", "-h")] = None,
    flute: Annotated[str | None, typer.Option("--flute", "-f")] = None,
    metric: Annotated[
        bool | None, typer.Option("--metric/--imperial", help="Unit system")
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format", help="Output format: all, layout, analysis, net, fold, json"
        ),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
) -> None:
    """Generate a full box design from a config file and/or options."""
    units = None if metric is None else ("metric" if metric else "imperial")
    frames = 11

    if config_file is not None:
        try:
            config = load_config(config_file)
            config = merge_config_with_cli(
                config,
                length=length,
                width=width,
                height=height,
                flute=flute,
                units=units,
                output_format=output_format,
            )
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        box_input = config_to_box_input(config)
        fmt = config.output.format
        frames = config.output.frames
    else:
        missing = [
            name
            for name, value in (("--length", length), ("--width", width), ("--height", height))
            if value is None
        ]
        if missing:
            typer.echo(
                f"Error: {', '.join(missing)} required when no --config is given",
                err=True,
            )
            raise typer.Exit(code=1)
        box_input = BoxInput(
            length=length,
            width=width,
            height=height,
            flute=flute or "B",
            units=units or "imperial",
        )
        fmt = output_format or "all"

    if fmt not in OUTPUT_FORMATS:
        typer.echo(f"Error: Unknown format: {fmt}", err=True)
        raise typer.Exit(code=1)

    result = _run_design(box_input)
    text = _render(result, fmt, frames)

    if output_file is not None:
        output_file.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output_file}")
    else:
        typer.echo(text)


def _render(result: BoxDesignOutput, fmt: str, frames: int) -> str:
    if fmt == "json":
        return JsonExporter().export(result)

    parts: list[str] = []
    if fmt in ("all", "layout"):
        parts.append(PanelLayoutFormatter().format(result.layout))
    if fmt in ("all", "analysis"):
        parts.append(StructuralReportFormatter().format(result.analysis))
    if fmt in ("all", "net"):
        parts.append(NetOutlineFormatter().format(result.outline))
    if fmt in ("all", "fold"):
        parts.append(FoldTableFormatter().format(FoldAnglesCommand().frames(frames)))
    return "\n\n".join(parts)


@app.command()
def materials() -> None:
    """List the board grades and their calibration values."""
    typer.echo(f"{'Flute':<10} {'Thickness (in)':<16} {'ECT (lbf/in)'}")
    typer.echo("-" * 40)
    for flute in FluteType:
        material = get_material(flute)
        typer.echo(
            f"{flute.value:<10} {material.thickness:<16.4f} {material.edge_crush_test:g}"
        )


if __name__ == "__main__":
    app()
