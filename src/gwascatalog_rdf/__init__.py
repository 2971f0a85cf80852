"""Turtle export for GWAS Catalog studies and associations.

Converts the tab-separated downloads of the GWAS Catalog into RDF
Turtle using a fixed template per export type. Association rows are
cleaned field by field so free-text values become valid literals.

Usage::

    import sys
    from gwascatalog_rdf import ConverterConfig, convert_study

    convert_study("gwas-catalog-studies.tsv", sys.stdout,
                  ConverterConfig(emit_prefixes=True))
"""

from gwascatalog_rdf.config import ASSOCIATION_PREFIXES, STUDY_PREFIXES, ConverterConfig
from gwascatalog_rdf.converter import convert_association, convert_study
from gwascatalog_rdf.model import AssociationRecord, StudyRecord
from gwascatalog_rdf.parser import iter_records, normalize_field_name, parse_header
from gwascatalog_rdf.sanitizer import sanitize_association
from gwascatalog_rdf.turtle_writer import TurtleWriter, render_association, render_study

__all__ = [
    "ASSOCIATION_PREFIXES",
    "STUDY_PREFIXES",
    "ConverterConfig",
    "convert_association",
    "convert_study",
    "AssociationRecord",
    "StudyRecord",
    "iter_records",
    "normalize_field_name",
    "parse_header",
    "sanitize_association",
    "TurtleWriter",
    "render_association",
    "render_study",
]
