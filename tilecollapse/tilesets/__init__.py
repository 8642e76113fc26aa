"""Tile-set registry and base classes."""

from __future__ import annotations

from typing import Dict, List, Type

from tilecollapse.core.compatibility import CompatibilityTable


class Tileset:
    """Base tile-set definition.

    ``neighbors`` maps every tile name to the names allowed next to it;
    ``glyphs`` and ``colors`` are display hints for renderers.
    """
    name: str = "tileset"
    width: int = 16
    height: int = 16
    neighbors: Dict[str, List[str]] = {}
    glyphs: Dict[str, str] = {}
    colors: Dict[str, str] = {}

    @classmethod
    def table(cls) -> CompatibilityTable:
        return CompatibilityTable.from_mapping(cls.neighbors)


TILESET_REGISTRY: Dict[str, Type[Tileset]] = {}


def register_tileset(cls: Type[Tileset]) -> Type[Tileset]:
    TILESET_REGISTRY[cls.name] = cls
    return cls


def get_tileset(name: str) -> Type[Tileset]:
    try:
        return TILESET_REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown tile set {name!r}; known: {sorted(TILESET_REGISTRY)}") from None


# Trigger registration on import.
from . import checkerboard, terrain  # noqa: E402,F401
