"""Grid command: expand a JSON range file into a hyperparameter grid."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from typer.models import ArgumentInfo, OptionInfo

from ..constants import DEFAULT_RESOLUTION, SCALE_LINEAR
from ..errors import LearningNetworksError
from ..ranges import NumericRange, ParamRange, make_range, scale_of
from ..sampling.grid import GridSampler


def _normalize_option_value(value):
    """Support calling the Typer command functions directly in tests."""
    return value.default if isinstance(value, (OptionInfo, ArgumentInfo)) else value


def _format_range_line(param_range: ParamRange, n_values: int) -> str:
    if isinstance(param_range, NumericRange):
        return (
            f"    • {param_range.field} ∈ [{param_range.lower}, {param_range.upper}] "
            f"({param_range.kind}, {scale_of(param_range)}, {n_values} values)"
        )
    return f"    • {param_range.field} ∈ {list(param_range.values)}"


def load_range_spec(spec: Dict[str, Any]) -> List[ParamRange]:
    """Build ranges from the contents of a JSON range file.

    The file holds a ``config`` mapping of default hyperparameter
    values (nested mappings for nested models) and a list of ``ranges``,
    each with a ``field`` and either ``values`` or ``lower``/``upper``
    (plus an optional named ``scale``).

    Raises:
        ValueError: If the range file is malformed
        ConfigurationError: If a range does not match its field
    """
    if not isinstance(spec, dict):
        raise ValueError("Range file must contain a JSON object")
    config = spec.get("config")
    entries = spec.get("ranges")
    if not isinstance(config, dict):
        raise ValueError("Range file requires a 'config' object")
    if not isinstance(entries, list) or not entries:
        raise ValueError("Range file requires a non-empty 'ranges' list")

    ranges = []
    for entry in entries:
        if not isinstance(entry, dict) or "field" not in entry:
            raise ValueError(f"Each range needs a 'field', got {entry!r}")
        ranges.append(make_range(
            config,
            entry["field"],
            values=entry.get("values"),
            lower=entry.get("lower"),
            upper=entry.get("upper"),
            scale=entry.get("scale", SCALE_LINEAR),
        ))
    return ranges


def grid_command(
    spec_file: str = typer.Argument(..., help="JSON file with 'config', 'ranges' and optional 'resolution'"),
    resolution: Optional[int] = typer.Option(
        None,
        "--resolution",
        "-n",
        help=f"Points per numeric range (overrides the file; default {DEFAULT_RESOLUTION})",
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output filename (default: stdout)"),
):
    """Expand parameter ranges into the full hyperparameter grid."""
    spec_file = _normalize_option_value(spec_file)
    resolution = _normalize_option_value(resolution)
    output = _normalize_option_value(output)

    try:
        with open(spec_file) as f:
            spec = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Error: Could not read range file '{spec_file}': {e}", err=True)
        raise typer.Exit(1)

    try:
        ranges = load_range_spec(spec)
        if resolution is None:
            resolution = spec.get("resolution", DEFAULT_RESOLUTION)
        sampler = GridSampler(ranges, resolution=resolution)
        samples = sampler.sample()
    except (LearningNetworksError, ValueError, TypeError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    result = {
        "fields": sampler.fields,
        "resolution": resolution,
        "sampling_method": sampler.method_name(),
        "samples": samples,
    }

    if output is None:
        typer.echo(json.dumps(result, indent=2))
        return

    output_path = Path(output)
    with open(output_path, "w") as f:
        json.dump(result, f, indent=2)

    typer.echo(f"✓ Generated grid with {len(samples)} points")
    typer.echo("  Ranges:")
    for r in ranges:
        typer.echo(_format_range_line(r, len(sampler._get_param_values(r))))
    typer.echo(f"  Output : {output_path}")
