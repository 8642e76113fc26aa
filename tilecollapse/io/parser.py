from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Type

import yaml

from tilecollapse.core.compatibility import CompatibilityTable
from tilecollapse.core.errors import TilesetConfigError
from tilecollapse.tilesets import Tileset


@dataclass
class TilesetConfig:
    name: str
    neighbors: Dict[str, List[str]]
    width: int = 16
    height: int = 16
    glyphs: Dict[str, str] = field(default_factory=dict)
    colors: Dict[str, str] = field(default_factory=dict)
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def labels(self) -> List[str]:
        return list(self.neighbors)

    @property
    def seed(self) -> int | None:
        return self.options.get("seed")

    @property
    def max_steps(self) -> int:
        """Configured step budget; defaults to one collapse per cell."""
        return int(self.options.get("max_steps", self.width * self.height))

    def table(self) -> CompatibilityTable:
        return CompatibilityTable.from_mapping(self.neighbors)

    @classmethod
    def from_tileset(cls, tileset: Type[Tileset]) -> "TilesetConfig":
        return cls(
            name=tileset.name,
            neighbors={k: list(v) for k, v in tileset.neighbors.items()},
            width=tileset.width,
            height=tileset.height,
            glyphs=dict(tileset.glyphs),
            colors=dict(tileset.colors),
        )


def parse_tileset(data: Any) -> TilesetConfig:
    """Build a TilesetConfig from an already-decoded YAML document."""
    if not isinstance(data, dict):
        raise TilesetConfigError("tile set document must be a mapping")
    tiles = data.get("tiles")
    if not isinstance(tiles, list) or not tiles:
        raise TilesetConfigError("tile set needs a non-empty 'tiles' list")

    neighbors: Dict[str, List[str]] = {}
    glyphs: Dict[str, str] = {}
    colors: Dict[str, str] = {}
    for i, tile in enumerate(tiles):
        if not isinstance(tile, dict) or "name" not in tile:
            raise TilesetConfigError(f"tile #{i} must be a mapping with a 'name'")
        name = str(tile["name"])
        if name in neighbors:
            raise TilesetConfigError(f"duplicate tile {name!r}")
        allowed = tile.get("neighbors") or []
        if not isinstance(allowed, list):
            raise TilesetConfigError(f"tile {name!r}: 'neighbors' must be a list")
        neighbors[name] = [str(n) for n in allowed]
        if "glyph" in tile:
            glyphs[name] = str(tile["glyph"])
        if "color" in tile:
            colors[name] = str(tile["color"])

    options = data.get("options", {}) or {}
    if not isinstance(options, dict):
        raise TilesetConfigError("'options' must be a mapping")
    try:
        width = int(data.get("width", 16))
        height = int(data.get("height", 16))
    except (TypeError, ValueError) as exc:
        raise TilesetConfigError(f"bad grid size: {exc}") from exc

    return TilesetConfig(
        name=str(data.get("name", "custom")),
        neighbors=neighbors,
        width=width,
        height=height,
        glyphs=glyphs,
        colors=colors,
        options=options,
    )


def load_tileset(path: str | Path) -> TilesetConfig:
    """Load a YAML tile-set description into a TilesetConfig object."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise TilesetConfigError(f"{path}: {exc}") from exc
    return parse_tileset(data)
