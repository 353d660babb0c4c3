"""Static material classification used by the mining engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ValidationError

IGNORED_MATERIALS = frozenset(
    {
        "minecraft:stone",
        "minecraft:gravel",
        "minecraft:dirt",
        "minecraft:sand",
        "minecraft:cobblestone",
    }
)

UNSTABLE_MATERIALS = frozenset({"minecraft:gravel", "minecraft:sand", "minecraft:red_sand"})

DROPS: Mapping[str, str] = MappingProxyType(
    {
        "minecraft:stone": "minecraft:cobblestone",
        "minecraft:grass_block": "minecraft:dirt",
        "minecraft:deepslate": "minecraft:cobbled_deepslate",
        "minecraft:coal_ore": "minecraft:coal",
        "minecraft:iron_ore": "minecraft:raw_iron",
        "minecraft:copper_ore": "minecraft:raw_copper",
        "minecraft:gold_ore": "minecraft:raw_gold",
        "minecraft:redstone_ore": "minecraft:redstone",
        "minecraft:lapis_ore": "minecraft:lapis_lazuli",
        "minecraft:diamond_ore": "minecraft:diamond",
        "minecraft:emerald_ore": "minecraft:emerald",
    }
)


class CatalogError(ValueError):
    """Raised when a catalog document cannot be parsed."""


class _CatalogDocument(BaseModel):
    ignored: list[str] | None = None
    drops: dict[str, str] | None = None
    unstable: list[str] | None = None


@dataclass(slots=True, frozen=True)
class MaterialCatalog:
    """Which materials are worthless, what they drop, and which ones collapse."""

    ignored: frozenset[str] = IGNORED_MATERIALS
    drops: Mapping[str, str] = field(default_factory=lambda: DROPS)
    unstable: frozenset[str] = UNSTABLE_MATERIALS

    @classmethod
    def default(cls) -> MaterialCatalog:
        return cls()

    @classmethod
    def from_json(cls, path: str | Path) -> MaterialCatalog:
        """Load a catalog override; keys missing from the document keep their defaults."""
        target = Path(path).expanduser()
        try:
            text = target.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Unable to read catalog file {target}: {exc}") from exc

        try:
            document = _CatalogDocument.model_validate_json(text)
        except ValidationError as exc:
            raise CatalogError(f"Malformed catalog file {target}: {exc}") from exc

        return cls(
            ignored=frozenset(document.ignored) if document.ignored is not None else IGNORED_MATERIALS,
            drops=MappingProxyType(dict(document.drops)) if document.drops is not None else DROPS,
            unstable=frozenset(document.unstable) if document.unstable is not None else UNSTABLE_MATERIALS,
        )

    def is_ignored(self, material: str) -> bool:
        return material in self.ignored

    def drop_of(self, material: str) -> str:
        return self.drops.get(material, material)

    def is_unstable(self, material: str) -> bool:
        return material in self.unstable
