"""Interactive prompts that collect a mining configuration from the operator."""

from __future__ import annotations

from typing import Callable

import typer

from minr.config import MiningConfig, Settings
from minr.fuel import estimate_fuel

Prompt = Callable[..., object]


def prompt_mining_config(
    settings: Settings,
    *,
    depth: int | None = None,
    height: int | None = None,
    auto_refuel: bool | None = None,
    prompt: Prompt = typer.prompt,
    confirm: Prompt = typer.confirm,
) -> MiningConfig:
    """Ask for any value not already supplied, offering the configured defaults."""
    if depth is None:
        depth = int(prompt("Please enter the desired tunnel depth", default=settings.default_tunnel_depth, type=int))
    if height is None:
        height = int(
            prompt("Please enter the desired tunnel height", default=settings.default_tunnel_height, type=int)
        )
    if auto_refuel is None:
        auto_refuel = bool(confirm("Refuel automatically from mined fuel items?", default=True))
    return MiningConfig(depth=depth, height=height, auto_refuel=auto_refuel)


def confirm_fuel(available: int, config: MiningConfig, *, confirm: Prompt = typer.confirm) -> bool:
    """Warn when the tank will not cover the whole strip and ask whether to go anyway."""
    required = estimate_fuel(config.depth, config.height)
    if available >= required:
        return True
    message = (
        f"Fuel level {available} is below the {required} needed for a "
        f"{config.depth}x{config.height} strip. Start anyway?"
    )
    return bool(confirm(message, default=False))
