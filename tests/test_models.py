# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for models module."""

import dataclasses
import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import BlockCell, Clues, Direction, OpenCell, Puzzle


class TestCells(unittest.TestCase):
    """Tests for the cell variants."""

    def test_block_cell(self):
        cell = BlockCell()

        self.assertTrue(cell.is_block_cell)
        self.assertEqual(cell.to_dict(), {"isBlockCell": True})

    def test_open_cell_defaults(self):
        cell = OpenCell()

        self.assertFalse(cell.is_block_cell)
        self.assertIsNone(cell.clue_number)
        self.assertIsNone(cell.background_shape)
        self.assertEqual(
            cell.to_dict(), {"clueNumber": None, "backgroundShape": None}
        )

    def test_cells_are_frozen(self):
        cell = OpenCell(clue_number=1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cell.clue_number = 2

    def test_cells_compare_by_value(self):
        self.assertEqual(BlockCell(), BlockCell())
        self.assertEqual(OpenCell(3, "circle"), OpenCell(3, "circle"))
        self.assertNotEqual(OpenCell(3), OpenCell(4))


class TestPuzzle(unittest.TestCase):
    """Tests for the Puzzle class."""

    def setUp(self):
        self.puzzle = Puzzle(
            title="Mini",
            grid=[
                [OpenCell(1), OpenCell(2), BlockCell()],
                [OpenCell(3, "circle"), OpenCell()],
            ],
            clues=Clues(
                across={3: "Third", 1: "First"},
                down={2: "Second"},
            ),
        )

    def test_defaults(self):
        puzzle = Puzzle()

        self.assertIsNone(puzzle.title)
        self.assertIsNone(puzzle.intro)
        self.assertEqual(puzzle.grid, [])
        self.assertEqual(puzzle.clues.across, {})
        self.assertEqual(puzzle.height, 0)
        self.assertEqual(puzzle.width, 0)

    def test_dimensions(self):
        self.assertEqual(self.puzzle.height, 2)
        self.assertEqual(self.puzzle.width, 3)

    def test_get_cell(self):
        self.assertEqual(self.puzzle.get_cell(1, 0), OpenCell(3, "circle"))

    def test_count_blocks(self):
        self.assertEqual(self.puzzle.count_blocks(), 1)

    def test_sorted_clues(self):
        self.assertEqual(
            self.puzzle.get_across_clues(), [(1, "First"), (3, "Third")]
        )
        self.assertEqual(self.puzzle.get_down_clues(), [(2, "Second")])

    def test_clues_by_direction(self):
        self.assertIs(self.puzzle.clues.get(Direction.ACROSS), self.puzzle.clues.across)
        self.assertIs(self.puzzle.clues.get(Direction.DOWN), self.puzzle.clues.down)

    def test_to_dict(self):
        data = self.puzzle.to_dict()

        self.assertEqual(data["title"], "Mini")
        self.assertIsNone(data["author"])
        self.assertEqual(data["grid"][0][2], {"isBlockCell": True})
        self.assertEqual(
            data["grid"][1][0], {"clueNumber": 3, "backgroundShape": "circle"}
        )
        self.assertEqual(data["clues"]["down"], {2: "Second"})


if __name__ == '__main__':
    unittest.main()
