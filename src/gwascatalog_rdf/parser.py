"""
GWAS Catalog export file parser.

Parses the tab-delimited downloads published by the GWAS Catalog:
- studies export (one row per study)
- associations export (one row per reported SNP-trait association)

The first line is a header of human-readable column names which are
normalized into field identifiers shared by every row of the file.
"""

import gzip
import logging
import re
from pathlib import Path
from typing import Dict, Iterator, List, TextIO, Union

logger = logging.getLogger(__name__)

STUDY = "study"
ASSOCIATION = "association"
VARIANTS = (STUDY, ASSOCIATION)

_SEPARATORS = re.compile(r"[-/]|\s+")
_STUDY_STRIP = re.compile(r"[\[\]]")
_ASSOCIATION_STRIP = re.compile(r"[\[\]()%]")
# "95% CI (TEXT)" -> "95_ci_text" -> "ci_text"
_CI_TOKEN = re.compile(r"(?:^|(?<=_))95_")


def normalize_field_name(name: str, variant: str = STUDY) -> str:
    """
    Normalize one header column name into a field identifier.

    Lowercases, turns hyphens, slashes and whitespace runs into ``_`` and
    drops bracket characters. The association variant also drops
    parentheses and ``%`` and collapses the confidence-interval column.

    Args:
        name: Raw column name (e.g. "STRONGEST SNP-RISK ALLELE")
        variant: "study" or "association"

    Returns:
        Field identifier (e.g. "strongest_snp_risk_allele")
    """
    if variant not in VARIANTS:
        raise ValueError(f"Unknown export variant: {variant!r}")

    ident = _SEPARATORS.sub("_", name.lower())
    if variant == ASSOCIATION:
        ident = _ASSOCIATION_STRIP.sub("", ident)
        ident = _CI_TOKEN.sub("", ident)
    else:
        ident = _STUDY_STRIP.sub("", ident)
    return ident


def parse_header(line: str, variant: str = STUDY) -> List[str]:
    """Split a header line into ordered field identifiers."""
    return [normalize_field_name(col, variant) for col in split_fields(line)]


def split_fields(line: str) -> List[str]:
    """Split a data line on tabs, keeping trailing empty fields."""
    return line.rstrip("\r\n").split("\t")


def pad_fields(values: List[str], width: int) -> List[str]:
    """Right-pad ``values`` with empty strings up to ``width`` entries."""
    if len(values) < width:
        return values + [""] * (width - len(values))
    return values


def make_record(keys: List[str], line: str) -> Dict[str, str]:
    """Zip header identifiers with the values of one data line.

    Short rows are padded with ``""``. Values beyond the header width
    are dropped. A duplicated identifier keeps the later column's value.
    """
    values = split_fields(line)
    if len(values) > len(keys):
        logger.debug(
            "Dropping %d values beyond the %d header columns",
            len(values) - len(keys),
            len(keys),
        )
    return dict(zip(keys, pad_fields(values, len(keys))))


def open_export(path: Union[str, Path], encoding: str = "utf-8") -> TextIO:
    """Open a catalog export for reading, decompressing ``.gz`` files."""
    path = Path(path)
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding=encoding, newline="\n")
    return open(path, "r", encoding=encoding, newline="\n")


def iter_records(
    path: Union[str, Path],
    variant: str = STUDY,
    encoding: str = "utf-8",
) -> Iterator[Dict[str, str]]:
    """
    Read a catalog export file one record at a time.

    The header is parsed once and reused for every data line. Blank
    lines are skipped.

    Args:
        path: Path to the TSV export (optionally gzip-compressed)
        variant: "study" or "association"
        encoding: Text encoding of the file

    Yields:
        Dictionary of field identifier -> raw value, in header order

    Raises:
        OSError: If the file cannot be opened
    """
    with open_export(path, encoding=encoding) as f:
        yield from read_records(f, variant)


def read_records(stream: TextIO, variant: str = STUDY) -> Iterator[Dict[str, str]]:
    """Read records from an open export stream positioned at the header."""
    header = stream.readline()
    if not header:
        logger.warning("Export has no header line")
        return
    keys = parse_header(header, variant)

    # Blank lines become empty records unless only blank lines follow
    pending = 0
    for line in stream:
        if not line.rstrip("\r\n"):
            pending += 1
            continue
        for _ in range(pending):
            yield make_record(keys, "")
        pending = 0
        yield make_record(keys, line)
    if pending:
        logger.debug("Skipped %d trailing blank lines", pending)
