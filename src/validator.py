# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
IPUZ Document Validator

Checks that a raw IPUZ document has the minimum shape needed for conversion:
1. The 'dimensions' and 'puzzle' keys are present
2. The grid does not exceed the declared width and height

All problems are collected so the caller gets a complete diagnosis at once.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

logger = logging.getLogger(__name__)

ROW_TYPES = (list, tuple, str)


def row_cells(row: Any) -> Sequence[Any]:
    """
    Cells of a raw grid row.

    A row that is not a sequence has no cells.
    """
    if isinstance(row, ROW_TYPES):
        return row
    return ()


def _is_bound(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class ValidationResult:
    """Result of document validation."""
    errors: List[str] = field(default_factory=list)
    stats: Dict = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    def __str__(self):
        if self.valid:
            return "valid"
        return f"{len(self.errors)} error(s): " + "; ".join(self.errors)


class PuzzleValidator:
    """
    Validates raw IPUZ documents for structural correctness.
    """

    def __init__(self, document: Mapping[str, Any]):
        """
        Initialize validator.

        Args:
            document: The raw IPUZ document (decoded JSON mapping)
        """
        self.document = document

    def validate(self) -> ValidationResult:
        """
        Validate the document.

        Returns:
            ValidationResult with details
        """
        result = ValidationResult()

        # A null value counts as missing
        has_dimensions = self.document.get("dimensions") is not None
        has_puzzle = self.document.get("puzzle") is not None

        if not has_dimensions:
            result.errors.append("Puzzle is missing 'dimensions' key")

        if not has_puzzle:
            result.errors.append("Puzzle is missing 'puzzle' key")
        elif has_dimensions:
            self._check_dimensions(result)

        if not result.valid:
            logger.debug(f"Document failed validation with {len(result.errors)} error(s)")

        return result

    def _check_dimensions(self, result: ValidationResult):
        """Check the grid against the declared dimensions."""
        rows = self.document["puzzle"]
        dimensions = self.document["dimensions"]

        if not isinstance(rows, (list, tuple)):
            result.errors.append(
                f"Puzzle 'puzzle' key must be a list of rows, got {type(rows).__name__}"
            )
            return

        # Only the widest row is compared with the declared width
        max_width = max((len(row_cells(row)) for row in rows), default=0)
        num_rows = len(rows)

        result.stats["rows"] = num_rows
        result.stats["max_row_length"] = max_width

        # An undeclared or non-numeric bound is not checked
        if not isinstance(dimensions, Mapping):
            dimensions = {}
        width = dimensions.get("width")
        height = dimensions.get("height")

        if _is_bound(width) and max_width > width:
            result.errors.append(
                f"Too many puzzle cells ({max_width}) for puzzle width ({width})"
            )

        if _is_bound(height) and num_rows > height:
            result.errors.append(
                f"Too many puzzle cells ({num_rows}) for puzzle height ({height})"
            )


def check_dimensions(document: Mapping[str, Any]) -> List[str]:
    """
    Check only the grid bounds of a document.

    The document must contain both 'dimensions' and 'puzzle'.

    Returns:
        List of bound errors (empty if the grid fits)
    """
    result = ValidationResult()
    PuzzleValidator(document)._check_dimensions(result)
    return result.errors


def validate_puzzle(document: Mapping[str, Any]) -> ValidationResult:
    """
    Convenience function to validate a raw IPUZ document.

    Args:
        document: The raw IPUZ document

    Returns:
        ValidationResult
    """
    validator = PuzzleValidator(document)
    return validator.validate()
