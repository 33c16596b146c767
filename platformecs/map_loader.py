"""Reading text level maps into prefab placements.

A map file starts with one ``<symbol> <prefab>`` line per symbol, then a line
holding ``-``, then the grid. In the grid ``#`` is an empty cell and every
other character must be a declared symbol. All grid lines have the same length.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple, Union

from platformecs.vector import Vector2

EMPTY_CELL = "#"
SECTION_SEPARATOR = "-"
ENEMY_PREFAB = "enemy"


class MapError(RuntimeError):
    """A map file is missing or malformed."""


@dataclass
class Placement:
    """One prefab to create at a world position, from a grid cell."""

    prefab: str
    position: Vector2
    row: int
    column: int

    @property
    def is_enemy(self) -> bool:
        """Whether the cell holds an enemy, which turns around on walls."""
        return self.prefab == ENEMY_PREFAB


def parse_prefab_symbols(
    lines: Sequence[str], is_prefab_loaded: Callable[[str], bool]
) -> Tuple[Dict[str, str], List[str]]:
    """Read the symbol section; return the symbol map and the grid lines after it."""
    symbols: Dict[str, str] = {}
    index = 0
    while index < len(lines) and lines[index] != SECTION_SEPARATOR:
        words = lines[index].split()
        symbol = words[0] if words else ""
        prefab = words[1] if len(words) > 1 else ""
        if len(symbol) != 1 or symbol in (EMPTY_CELL, SECTION_SEPARATOR):
            raise MapError(f"Invalid symbol in map: {symbol}")
        if not is_prefab_loaded(prefab):
            raise MapError(f"Unknown prefab in map: {prefab}")
        if symbol in symbols:
            raise MapError(f"Duplicated symbol in map: {symbol}")
        symbols[symbol] = prefab
        index += 1
    return symbols, list(lines[index + 1 :])


def _place(
    grid: Sequence[str], symbols: Dict[str, str], position: Vector2, block_size: float
) -> List[Placement]:
    if grid:
        width = len(grid[0])
        for row, line in enumerate(grid):
            if len(line) != width:
                raise MapError(f"Invalid len of line in map: line {row}")
    placements: List[Placement] = []
    for row, line in enumerate(grid):
        for column, character in enumerate(line):
            if character == EMPTY_CELL:
                continue
            prefab = symbols.get(character)
            if prefab is None:
                raise MapError(
                    f"Unknown character in map: {character},line {row}, column {column}"
                )
            placements.append(
                Placement(
                    prefab=prefab,
                    position=Vector2(position.x + column * block_size, position.y + row * block_size),
                    row=row,
                    column=column,
                )
            )
    return placements


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_map(
    text: str,
    is_prefab_loaded: Callable[[str], bool],
    position: Vector2,
    block_size: float,
) -> List[Placement]:
    """Parse a whole map text into placements, row by row and left to right."""
    symbols, grid = parse_prefab_symbols(_split_lines(text), is_prefab_loaded)
    return _place(grid, symbols, position, block_size)


def read_map(
    path: Union[str, Path],
    is_prefab_loaded: Callable[[str], bool],
    position: Vector2,
    block_size: float,
) -> List[Placement]:
    """Read and parse a map file."""
    try:
        text = Path(path).read_text()
    except OSError:
        raise MapError(f"Map file not found: {path}") from None
    return parse_map(text, is_prefab_loaded, position, block_size)