"""
GWAS Catalog to Turtle conversion.

Reads an export file line by line and streams one Turtle block per row
through a :class:`TurtleWriter`, optionally preceded by the prefix block.
"""

import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from .config import ASSOCIATION_PREFIXES, STUDY_PREFIXES, ConverterConfig
from .model import AssociationRecord, StudyRecord
from .parser import ASSOCIATION, STUDY, open_export, read_records
from .turtle_writer import TurtleWriter

logger = logging.getLogger(__name__)


def _log_ignored_columns(row, record_cls) -> None:
    ignored = [key for key in row if key not in record_cls.field_names()]
    if ignored:
        logger.debug("Ignoring columns not mapped to Turtle: %s", ", ".join(ignored))


def convert_study(
    input_path: Union[str, Path],
    output: TextIO,
    config: Optional[ConverterConfig] = None,
) -> int:
    """
    Convert a studies export to Turtle.

    Args:
        input_path: Path to the studies TSV
        output: Text stream receiving the Turtle
        config: Output options (prefix block, encoding)

    Returns:
        Number of study blocks written

    Raises:
        OSError: If the input file cannot be opened
    """
    return _convert(input_path, output, config, STUDY)


def convert_association(
    input_path: Union[str, Path],
    output: TextIO,
    config: Optional[ConverterConfig] = None,
) -> int:
    """
    Convert an associations export to Turtle.

    Each row is sanitized before rendering (gene identifiers, odds ratio
    and beta split, risk allele frequency, trait URIs).

    Args:
        input_path: Path to the associations TSV
        output: Text stream receiving the Turtle
        config: Output options (prefix block, encoding)

    Returns:
        Number of association blocks written

    Raises:
        OSError: If the input file cannot be opened
    """
    return _convert(input_path, output, config, ASSOCIATION)


def _convert(
    input_path: Union[str, Path],
    output: TextIO,
    config: Optional[ConverterConfig],
    variant: str,
) -> int:
    config = config or ConverterConfig()
    writer = TurtleWriter(output, config)

    if variant == ASSOCIATION:
        record_cls = AssociationRecord
        prefixes = ASSOCIATION_PREFIXES
        write = writer.write_association
    else:
        record_cls = StudyRecord
        prefixes = STUDY_PREFIXES
        write = writer.write_study

    logger.info("Converting %s records from %s", variant, input_path)
    with open_export(input_path, encoding=config.encoding) as f:
        writer.write_prefixes(prefixes)

        first = True
        for row in read_records(f, variant):
            if first:
                _log_ignored_columns(row, record_cls)
                first = False
            write(record_cls.from_row(row))

    logger.info("Converted %d %s records", writer.count, variant)
    return writer.count
