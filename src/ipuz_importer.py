# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
IPUZ importer for crossword puzzles.

Reads puzzles in the IPUZ JSON interchange format, either from a file
or from an already-decoded document, checks their structure and
converts them into the canonical Puzzle model.
"""

import json
import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from config import ImporterConfig, DEFAULT_BLOCK_VALUE
from models import BlockCell, Cell, Clues, ClueTable, OpenCell, Puzzle
from validator import ValidationResult, row_cells, validate_puzzle

logger = logging.getLogger(__name__)

METADATA_FIELDS = (
    'title', 'author', 'copyright', 'publisher', 'difficulty', 'intro',
)

PuzzleSource = Union[str, os.PathLike, Mapping[str, Any]]


class IPUZImportError(Exception):
    """Raised when an IPUZ puzzle cannot be imported."""
    pass


class IPUZUsageError(IPUZImportError):
    """Raised when the source is neither a path nor a JSON object."""
    pass


class IPUZLoadError(IPUZImportError):
    """Raised when an IPUZ file cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Unable to read IPUZ puzzle from file {path}: {reason}"
        )


class IPUZValidationError(IPUZImportError):
    """Raised when an IPUZ document fails structural validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid puzzle:\n\t" + "\n\t".join(self.errors))


def map_cell(raw_cell: Any, block_value: str = DEFAULT_BLOCK_VALUE) -> Cell:
    """
    Convert one raw IPUZ cell into a canonical cell.

    Anything that is not the block marker becomes an open cell, even
    when it carries no usable clue number.

    Args:
        raw_cell: Block marker, bare clue number or
            {"cell": n, "style": {"shapebg": ...}} object
        block_value: The block marker

    Returns:
        BlockCell or OpenCell
    """
    if isinstance(raw_cell, str) and raw_cell == block_value:
        return BlockCell()

    if isinstance(raw_cell, Mapping):
        style = raw_cell.get('style')
        shape = style.get('shapebg') if isinstance(style, Mapping) else None
        return OpenCell(
            clue_number=deepcopy(raw_cell.get('cell')),
            background_shape=deepcopy(shape),
        )

    if isinstance(raw_cell, (list, tuple)):
        return OpenCell()

    return OpenCell(clue_number=raw_cell)


def build_clue_table(entries: Optional[Iterable[Any]]) -> ClueTable:
    """
    Fold [number, text] pairs into a clue table.

    Later entries overwrite earlier ones with the same number.

    Args:
        entries: Ordered clue pairs, or None

    Returns:
        Dictionary mapping clue number to clue text
    """
    table: ClueTable = {}
    for entry in entries or ():
        table[entry[0]] = deepcopy(entry[1])
    return table


def convert_puzzle(
    document: Mapping[str, Any],
    block_value: str = DEFAULT_BLOCK_VALUE
) -> Puzzle:
    """
    Convert a validated IPUZ document into a Puzzle.

    The document must already have passed validate_puzzle().

    Args:
        document: Raw IPUZ document
        block_value: The block marker

    Returns:
        Puzzle object
    """
    grid = [
        [map_cell(cell, block_value) for cell in row_cells(row)]
        for row in document['puzzle']
    ]

    clue_data = document.get('clues')
    if not isinstance(clue_data, Mapping):
        clue_data = {}

    metadata = {
        name: deepcopy(document.get(name)) for name in METADATA_FIELDS
    }

    return Puzzle(
        grid=grid,
        clues=Clues(
            across=build_clue_table(clue_data.get('across')),
            down=build_clue_table(clue_data.get('down')),
        ),
        **metadata,
    )


class IPUZImporter:
    """
    Imports crossword puzzles from the IPUZ format.

    Usage:
        importer = IPUZImporter()
        puzzle = importer.parse('puzzle.ipuz')
        puzzle = importer.parse({'dimensions': ..., 'puzzle': ...})
    """

    def __init__(self, config: Optional[ImporterConfig] = None):
        """
        Initialize the IPUZ importer.

        Args:
            config: Importer settings (defaults if not provided)
        """
        self.config = config if config else ImporterConfig()

    def load(self, path: Union[str, os.PathLike]) -> Dict[str, Any]:
        """
        Load a raw IPUZ document from a file.

        Args:
            path: Path to the IPUZ file

        Returns:
            Decoded JSON document

        Raises:
            IPUZLoadError: If the file can't be read or isn't a JSON object
        """
        path_str = os.fspath(path)
        logger.debug(f"Loading IPUZ puzzle from {path_str}")

        try:
            text = Path(path_str).read_text(encoding=self.config.encoding)
            data = json.loads(text)
        except (OSError, LookupError, ValueError) as e:
            logger.error(f"Failed to load {path_str}: {e}")
            raise IPUZLoadError(path_str, str(e)) from e

        return self._require_object(data, path_str)

    def load_string(self, content: str) -> Dict[str, Any]:
        """
        Load a raw IPUZ document from JSON text.

        Args:
            content: JSON string content

        Returns:
            Decoded JSON document
        """
        try:
            data = json.loads(content)
        except ValueError as e:
            raise IPUZLoadError("<string>", str(e)) from e

        return self._require_object(data, "<string>")

    def _require_object(self, data: Any, origin: str) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise IPUZLoadError(
                origin,
                f"IPUZ content must be a JSON object, got {type(data).__name__}"
            )
        return data

    def validate(self, document: Mapping[str, Any]) -> ValidationResult:
        """
        Check the structure of a raw IPUZ document.

        Args:
            document: Raw IPUZ document

        Returns:
            ValidationResult (errors empty if valid)
        """
        return validate_puzzle(document)

    def to_puzzle(self, document: Mapping[str, Any]) -> Puzzle:
        """
        Convert a validated raw IPUZ document to a Puzzle.

        Args:
            document: Raw IPUZ document

        Returns:
            Puzzle object
        """
        puzzle = convert_puzzle(document, self.config.block_value)
        logger.info(
            f"Imported puzzle {puzzle.title!r}: {puzzle.height} rows, "
            f"{len(puzzle.clues.across)} across and "
            f"{len(puzzle.clues.down)} down clues"
        )
        return puzzle

    def parse(self, source: PuzzleSource) -> Puzzle:
        """
        Parse a Puzzle from a file path or a decoded IPUZ document.

        Only mappings count as documents: a JSON array, whether passed
        directly or stored in the file, is rejected with IPUZUsageError
        or IPUZLoadError rather than validated.

        Args:
            source: Path to an IPUZ file, or the document itself

        Returns:
            Puzzle object

        Raises:
            IPUZUsageError: If source is neither a path nor a mapping
            IPUZLoadError: If the file can't be read or decoded
            IPUZValidationError: If the document is structurally invalid
                or its grid or clues cannot be converted
        """
        if isinstance(source, (str, os.PathLike)):
            document = self.load(source)
        elif isinstance(source, Mapping):
            document = source
        else:
            raise IPUZUsageError(
                "parse() expects either a path string or a JSON object"
            )

        result = self.validate(document)
        if not result.valid:
            logger.warning(f"Invalid IPUZ puzzle: {result}")
            raise IPUZValidationError(result.errors)

        try:
            return self.to_puzzle(document)
        except (TypeError, IndexError, KeyError) as e:
            logger.warning(f"Could not convert IPUZ puzzle: {e}")
            raise IPUZValidationError([f"Unable to convert puzzle: {e}"]) from e


async def parse_puzzle(
    source: PuzzleSource,
    config: Optional[ImporterConfig] = None
) -> Puzzle:
    """
    Parse a Puzzle from a file path or a decoded IPUZ document.

    Completes with the Puzzle, or raises an IPUZImportError subclass
    describing why the import failed.

    Args:
        source: Path to an IPUZ file, or the document itself
        config: Importer settings

    Returns:
        Puzzle object
    """
    return IPUZImporter(config).parse(source)


def load_puzzle_from_ipuz(
    path: Union[str, os.PathLike],
    config: Optional[ImporterConfig] = None
) -> Puzzle:
    """
    Convenience function to load a puzzle from an IPUZ file.

    Args:
        path: Path to IPUZ file

    Returns:
        Puzzle object
    """
    importer = IPUZImporter(config)
    return importer.parse(path)
