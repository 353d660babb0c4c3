"""CLI startup entrypoint for Minr."""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print

from minr.adapters import UNLIMITED_FUEL, SimulatedTurtle, generate_strip_world
from minr.catalog import CatalogError, MaterialCatalog
from minr.cli import confirm_fuel, prompt_mining_config
from minr.config import settings
from minr.fuel import estimate_fuel
from minr.mining import StripController
from minr.models import StripState
from minr.telemetry import configure_logging

app = typer.Typer(help="Minr strip-mining engine")


def _load_catalog(path: str | None) -> MaterialCatalog:
    path = path or settings.catalog_path
    if not path:
        return MaterialCatalog.default()
    try:
        return MaterialCatalog.from_json(path)
    except CatalogError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(settings.model_dump())


@app.command("estimate-fuel")
def estimate_fuel_command(
    depth: int = typer.Option(settings.default_tunnel_depth, min=1, help="Tunnel depth in rows"),
    height: int = typer.Option(settings.default_tunnel_height, min=2, help="Tunnel height in blocks"),
) -> None:
    """Print the fuel a strip of the given size needs, including the way back."""
    print({"depth": depth, "height": height, "fuel_required": estimate_fuel(depth, height)})


@app.command()
def simulate(
    depth: int = typer.Option(None, help="Tunnel depth in rows (prompted when omitted)"),
    height: int = typer.Option(None, help="Tunnel height in blocks (prompted when omitted)"),
    auto_refuel: Optional[bool] = typer.Option(None, "--auto-refuel/--no-auto-refuel", help="Refuel from mined coal"),
    fuel: int = typer.Option(None, min=0, help="Starting fuel; unlimited when omitted"),
    seed: int = typer.Option(None, help="Seed for the generated world"),
    catalog: str = typer.Option(None, help="JSON material catalog override"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the fuel confirmation"),
) -> None:
    """Mine a strip in a generated world and report the outcome."""
    configure_logging(settings.log_level)
    material_catalog = _load_catalog(catalog)

    try:
        config = prompt_mining_config(settings, depth=depth, height=height, auto_refuel=auto_refuel)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    turtle = SimulatedTurtle(
        generate_strip_world(config.depth, config.height, seed=seed),
        fuel=UNLIMITED_FUEL if fuel is None else fuel,
        drops=material_catalog.drops,
        unstable=material_catalog.unstable,
    )
    if fuel is not None and not yes and not confirm_fuel(fuel, config):
        print({"simulation": "cancelled", "reason": "insufficient fuel"})
        raise typer.Exit(code=1)

    controller = StripController(
        turtle,
        config,
        catalog=material_catalog,
        low_fuel_threshold=settings.low_fuel_threshold,
        max_clear_attempts=settings.max_clear_attempts,
    )
    report = controller.run()

    payload = asdict(report)
    payload["state"] = report.state.value
    payload["reason"] = report.reason.value if report.reason else None
    print(
        {
            "report": payload,
            "fuel_level": turtle.fuel_level(),
            "inventory": {
                index: f"{detail.material} x{detail.count}"
                for index, detail in enumerate(turtle.slots, start=1)
                if detail is not None
            },
        }
    )
    if report.state is StripState.ABORTED:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
