# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Data models for imported crossword puzzles.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class Direction(Enum):
    ACROSS = "across"
    DOWN = "down"


@dataclass(frozen=True)
class BlockCell:
    """A black square: not playable, never numbered."""

    @property
    def is_block_cell(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"isBlockCell": True}


@dataclass(frozen=True)
class OpenCell:
    """A playable cell, optionally starting a clue and optionally styled."""
    clue_number: Any = None
    background_shape: Optional[str] = None

    @property
    def is_block_cell(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "clueNumber": self.clue_number,
            "backgroundShape": self.background_shape,
        }


Cell = Union[BlockCell, OpenCell]

# Clue number -> clue text
ClueTable = Dict[Any, Any]


@dataclass
class Clues:
    """Across and down clue tables."""
    across: ClueTable = field(default_factory=dict)
    down: ClueTable = field(default_factory=dict)

    def get(self, direction: Direction) -> ClueTable:
        """Get the clue table for a direction."""
        if direction == Direction.ACROSS:
            return self.across
        return self.down


@dataclass
class Puzzle:
    """Canonical crossword puzzle produced by the importers."""
    title: Optional[str] = None
    author: Optional[str] = None
    copyright: Optional[str] = None
    publisher: Optional[str] = None
    difficulty: Optional[str] = None
    intro: Optional[str] = None
    grid: List[List[Cell]] = field(default_factory=list)
    clues: Clues = field(default_factory=Clues)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.grid), default=0)

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position."""
        return self.grid[row][col]

    def count_blocks(self) -> int:
        """Count black squares."""
        return sum(1 for row in self.grid for cell in row if cell.is_block_cell)

    def get_across_clues(self) -> List[Tuple[Any, Any]]:
        """Get all across clues in order."""
        return _sorted_clues(self.clues.across)

    def get_down_clues(self) -> List[Tuple[Any, Any]]:
        """Get all down clues in order."""
        return _sorted_clues(self.clues.down)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the puzzle to plain data."""
        return {
            "title": self.title,
            "author": self.author,
            "copyright": self.copyright,
            "publisher": self.publisher,
            "difficulty": self.difficulty,
            "intro": self.intro,
            "grid": [[cell.to_dict() for cell in row] for row in self.grid],
            "clues": {
                "across": dict(self.clues.across),
                "down": dict(self.clues.down),
            },
        }


def _sorted_clues(table: ClueTable) -> List[Tuple[Any, Any]]:
    # Numeric keys first, then anything else by its string form
    def sort_key(item):
        number = item[0]
        if isinstance(number, (int, float)) and not isinstance(number, bool):
            return (0, number, "")
        return (1, 0, str(number))

    return sorted(table.items(), key=sort_key)
