"""Turtle writer for GWAS Catalog records.

Renders each record into a fixed Turtle block. Predicate order and the
literal form of every value are declared in static tables; every
predicate line is written for every record, so a missing value becomes
an empty literal rather than an omitted triple.
"""

import enum
import re
from typing import Mapping, NamedTuple, Optional, Sequence, TextIO, Tuple

from .config import ConverterConfig, PrefixTable
from .model import AssociationRecord, StudyRecord
from .sanitizer import EMPTY_LITERAL, format_uri_list, sanitize_association


class TermKind(enum.Enum):
    """How a field value is written in the object position."""

    STRING = "string"  # "value"
    LANG_EN = "lang_en"  # "value"@en
    DATE = "date"  # "value"^^xsd:date
    XSD_STRING = "xsd_string"  # "value"^^xsd:string
    LONG_STRING = "long_string"  # """value"""
    TERM = "term"  # value, unquoted
    PUBMED = "pubmed"  # pubmed:value
    STUDY = "study"  # study:value
    URI_LIST = "uri_list"  # <a>, <b>


class PredicateLine(NamedTuple):
    predicate: str
    field: str
    kind: TermKind
    strip: str = ""  # characters removed at render time


# =============================================================================
# Templates
# =============================================================================

STUDY_TYPE = "gwas:Study"
ASSOCIATION_TYPE = "gwas:Association"

STUDY_LINES: Tuple[PredicateLine, ...] = (
    PredicateLine("dct:identifier", "study_accession", TermKind.STRING),
    PredicateLine("dct:date", "date_added_to_catalog", TermKind.DATE),
    PredicateLine("dct:references", "pubmedid", TermKind.PUBMED),
    PredicateLine("gwas:has_pubmed_id", "pubmedid", TermKind.XSD_STRING),
    PredicateLine("dct:description", "disease_trait", TermKind.LANG_EN),
    PredicateLine("terms:initial_sample_size", "initial_sample_size", TermKind.LANG_EN),
    PredicateLine("terms:replication_sample_size", "replication_sample_size", TermKind.LANG_EN),
    PredicateLine("terms:platform_snps_passing_qc", "platform_snps_passing_qc", TermKind.STRING),
    PredicateLine("terms:association_count", "association_count", TermKind.TERM),
    PredicateLine("terms:mapped_trait", "mapped_trait_uri", TermKind.URI_LIST),
    PredicateLine("terms:genotyping_technology", "genotyping_technology", TermKind.STRING),
)

# Values of TERM fields come out of sanitize_association() already
# formatted (prefixed names, "" placeholders, IRI lists).
ASSOCIATION_LINES: Tuple[PredicateLine, ...] = (
    PredicateLine("dct:isPartOf", "study_accession", TermKind.STUDY),
    PredicateLine("dct:date", "date_added_to_catalog", TermKind.DATE),
    PredicateLine("dct:references", "pubmedid", TermKind.PUBMED),
    PredicateLine("gwas:has_pubmed_id", "pubmedid", TermKind.XSD_STRING),
    PredicateLine("dct:description", "disease_trait", TermKind.LANG_EN),
    PredicateLine("terms:initial_sample_size", "initial_sample_size", TermKind.LANG_EN),
    PredicateLine("terms:replication_sample_size", "replication_sample_size", TermKind.LANG_EN),
    PredicateLine("terms:region", "region", TermKind.STRING),
    PredicateLine("terms:chr_id", "chr_id", TermKind.STRING),
    PredicateLine("terms:chr_pos", "chr_pos", TermKind.STRING),
    PredicateLine("terms:reported_genes", "reported_genes", TermKind.LONG_STRING),
    PredicateLine("terms:mapped_gene", "mapped_gene", TermKind.STRING),
    PredicateLine("terms:upstream_gene_id", "upstream_gene_id", TermKind.TERM),
    PredicateLine("terms:downstream_gene_id", "downstream_gene_id", TermKind.TERM),
    PredicateLine("terms:snp_gene_ids", "snp_gene_ids", TermKind.TERM),
    PredicateLine("terms:upstream_gene_distance", "upstream_gene_distance", TermKind.TERM),
    PredicateLine("terms:downstream_gene_distance", "downstream_gene_distance", TermKind.TERM),
    PredicateLine("terms:strongest_snp_risk_allele", "strongest_snp_risk_allele", TermKind.STRING),
    PredicateLine("terms:snps", "snps", TermKind.STRING),
    PredicateLine("terms:merged", "merged", TermKind.STRING),
    PredicateLine("terms:snp_id_current", "snp_id_current", TermKind.STRING),
    PredicateLine("terms:context", "context", TermKind.STRING),
    PredicateLine("terms:intergenic", "intergenic", TermKind.STRING),
    PredicateLine("terms:risk_allele_frequency", "risk_allele_frequency", TermKind.TERM),
    PredicateLine("gwas:has_p_value", "p_value", TermKind.TERM),
    PredicateLine("terms:pvalue_mlog", "pvalue_mlog", TermKind.STRING),
    PredicateLine("terms:p_value_text", "p_value_text", TermKind.STRING, strip="\\"),
    PredicateLine("gwas:has_odds_ratio", "odds_ratio", TermKind.TERM),
    PredicateLine("gwas:has_beta", "beta", TermKind.TERM),
    PredicateLine("terms:ci_text", "ci_text", TermKind.STRING),
    PredicateLine("terms:platform_snps_passing_qc", "platform_snps_passing_qc", TermKind.STRING),
    PredicateLine("terms:cnv", "cnv", TermKind.STRING),
    PredicateLine("terms:mapped_trait", "mapped_trait", TermKind.STRING),
    PredicateLine("terms:mapped_trait_uri", "mapped_trait_uri", TermKind.TERM),
    PredicateLine("terms:genotyping_technology", "genotyping_technology", TermKind.STRING),
)


# =============================================================================
# Rendering
# =============================================================================

# A double quote not already escaped by the sanitizer
_BARE_QUOTE = re.compile(r'(?<!\\)"')


def quote(value: str) -> str:
    """Wrap ``value`` in double quotes, escaping any bare ``"`` inside it."""
    return '"' + _BARE_QUOTE.sub(r'\\"', value) + '"'


def render_value(kind: TermKind, value: str) -> str:
    """Format one field value as a Turtle object term."""
    if kind is TermKind.STRING:
        return quote(value)
    if kind is TermKind.LANG_EN:
        return quote(value) + "@en"
    if kind is TermKind.DATE:
        return quote(value) + "^^xsd:date"
    if kind is TermKind.XSD_STRING:
        return quote(value) + "^^xsd:string"
    if kind is TermKind.LONG_STRING:
        return f'"""{value}"""'
    if kind is TermKind.PUBMED:
        return f"pubmed:{value}"
    if kind is TermKind.STUDY:
        return f"study:{value}"
    if kind is TermKind.URI_LIST:
        return format_uri_list(value, separator=", ")
    # Unquoted terms with no value would leave a dangling predicate
    return value or EMPTY_LITERAL


def render_block(
    subject: str,
    rdf_type: str,
    values: Mapping[str, str],
    lines: Sequence[PredicateLine],
) -> str:
    """Render one record as a Turtle block ending with a blank line."""
    out = [f"{subject} a {rdf_type} ;"]
    for line in lines:
        value = values.get(line.field, "")
        for char in line.strip:
            value = value.replace(char, "")
        out.append(f"  {line.predicate} {render_value(line.kind, value)} ;")
    out[-1] = out[-1][: -len(" ;")] + " ."
    return "\n".join(out) + "\n\n"


def render_study(record: StudyRecord) -> str:
    """Render a study record under the ``study:`` namespace."""
    subject = f"study:{record.study_accession}"
    return render_block(subject, STUDY_TYPE, record.as_dict(), STUDY_LINES)


def render_association(record: AssociationRecord) -> str:
    """Render an already-sanitized association record as a blank node."""
    return render_block("[]", ASSOCIATION_TYPE, record.as_dict(), ASSOCIATION_LINES)


def render_prefixes(prefixes: PrefixTable) -> str:
    """Render ``@prefix`` directives followed by a blank line."""
    out = [f"@prefix {pfx}: <{str(ns)}> ." for pfx, ns in prefixes.items()]
    return "\n".join(out) + "\n\n"


class TurtleWriter:
    """Streams Turtle blocks for catalog records to a text stream.

    Usage::

        writer = TurtleWriter(sys.stdout, ConverterConfig(emit_prefixes=True))
        writer.write_prefixes(STUDY_PREFIXES)
        writer.write_study(StudyRecord(study_accession="GCST000001"))
    """

    def __init__(self, stream: TextIO, config: Optional[ConverterConfig] = None) -> None:
        self._stream = stream
        self._config = config or ConverterConfig()
        self._prefixes_written = False
        self._count = 0

    @property
    def count(self) -> int:
        """Number of record blocks written so far."""
        return self._count

    def write_prefixes(self, prefixes: PrefixTable) -> bool:
        """Write the prefix block once, if enabled by the configuration.

        Returns:
            True if the block was written by this call
        """
        if not self._config.emit_prefixes or self._prefixes_written:
            return False
        self._stream.write(render_prefixes(prefixes))
        self._prefixes_written = True
        return True

    def write_study(self, record: StudyRecord) -> None:
        self._write(render_study(record))

    def write_association(self, record: AssociationRecord) -> None:
        """Sanitize and write one association record."""
        self._write(render_association(sanitize_association(record)))

    def _write(self, block: str) -> None:
        self._stream.write(block)
        self._stream.flush()
        self._count += 1
