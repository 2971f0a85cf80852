from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from gwascatalog_rdf.config import ConverterConfig
from gwascatalog_rdf.converter import convert_association, convert_study

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_INPUT_PATH = click.Path(exists=True, dir_okay=False, readable=True, path_type=Path)


@click.command("gwascatalog-rdf", context_settings=CONTEXT_SETTINGS)
@click.option(
    "-p",
    "--prefixes",
    is_flag=True,
    help="Print the @prefix block before the records.",
)
@click.option(
    "-s",
    "--study",
    "study_path",
    type=_INPUT_PATH,
    help="GWAS Catalog studies export (TSV) to convert.",
)
@click.option(
    "-a",
    "--association",
    "association_path",
    type=_INPUT_PATH,
    help="GWAS Catalog associations export (TSV) to convert.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write Turtle to this file instead of standard output.",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging.")
def cli(
    prefixes: bool,
    study_path: Optional[Path],
    association_path: Optional[Path],
    output: Optional[Path],
    verbose: bool,
) -> None:
    """Convert a GWAS Catalog export file to RDF Turtle.

    Give exactly one of --study or --association.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        stream=sys.stderr,
    )

    if (study_path is None) == (association_path is None):
        # Nothing is converted unless exactly one input is chosen
        logger.warning("Give exactly one of --study or --association; nothing converted.")
        return

    config = ConverterConfig(emit_prefixes=prefixes)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        with output.open("w", encoding="utf-8") as fh:
            count = _run(study_path, association_path, fh, config)
        logger.info("Wrote %d records to %s", count, output)
    else:
        _run(study_path, association_path, sys.stdout, config)


def _run(study_path, association_path, stream, config: ConverterConfig) -> int:
    if study_path is not None:
        return convert_study(study_path, stream, config)
    return convert_association(association_path, stream, config)


def main() -> None:  # pragma: no cover
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
