"""
Field cleanup rules for association records.

Association exports carry free-text values in columns that end up as
numeric literals or prefixed terms in Turtle. Each rule here takes an
:class:`AssociationRecord` and returns a new record with one field
rewritten into a Turtle-ready value string:

- quoted literals keep their surrounding quotes (``"NR"``, ``"NA"``)
- missing values become the empty literal ``""``
- gene identifiers become ``ensg:`` prefixed names
- trait URIs become ``<...>`` IRI lists

No rule raises; malformed input is coerced to a sentinel value.
"""

import math
import re
from dataclasses import replace
from typing import Callable, Optional, Tuple

from .model import AssociationRecord

EMPTY_LITERAL = '""'
NA_LITERAL = '"NA"'
NR_LITERAL = '"NR"'
ENSG_PREFIX = "ensg:"

# Leading numeric prefix, as read by a lenient string-to-float parse
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
# Integer, decimal or double lexical forms accepted unquoted by Turtle
_TURTLE_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?")
_DIGITS_AND_DOTS = re.compile(r"[0-9.]+")

Rule = Callable[[AssociationRecord], AssociationRecord]


def parse_float(text: str) -> float:
    """Parse the leading number of ``text``.

    Non-numeric text, and numbers too large for a float, read as ``0.0``.
    """
    match = _LEADING_NUMBER.match(text)
    if not match:
        return 0.0
    number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def is_number(text: str) -> bool:
    return _TURTLE_NUMBER.fullmatch(text) is not None


# =============================================================================
# Per-field rules
# =============================================================================


def sanitize_snp_gene_ids(record: AssociationRecord) -> AssociationRecord:
    value = record.snp_gene_ids
    if "ENSG" in value:
        value = ", ".join(ENSG_PREFIX + gene for gene in value.split(", "))
    else:
        value = EMPTY_LITERAL
    return replace(record, snp_gene_ids=value)


def split_or_beta(value: str) -> Tuple[str, str]:
    """Route an ``OR or BETA`` value to ``(odds_ratio, beta)``.

    Values up to 1.0 are read as odds ratios, larger ones as beta
    coefficients. The other slot gets the ``"NA"`` literal.
    """
    number = parse_float(value)
    if number <= 1.0:
        return str(number), NA_LITERAL
    return NA_LITERAL, str(number)


def sanitize_or_or_beta(record: AssociationRecord) -> AssociationRecord:
    odds_ratio, beta = split_or_beta(record.or_or_beta)
    return replace(record, odds_ratio=odds_ratio, beta=beta)


def _gene_id(value: str) -> str:
    return ENSG_PREFIX + value if value else EMPTY_LITERAL


def sanitize_gene_ids(record: AssociationRecord) -> AssociationRecord:
    return replace(
        record,
        upstream_gene_id=_gene_id(record.upstream_gene_id),
        downstream_gene_id=_gene_id(record.downstream_gene_id),
    )


def sanitize_gene_distances(record: AssociationRecord) -> AssociationRecord:
    return replace(
        record,
        upstream_gene_distance=record.upstream_gene_distance or EMPTY_LITERAL,
        downstream_gene_distance=record.downstream_gene_distance or EMPTY_LITERAL,
    )


def clean_risk_allele_frequency(value: str) -> str:
    """Coerce a risk allele frequency into a Turtle value.

    A truncated decimal such as ``0.`` always becomes ``0.0``, whatever
    its digits.
    """
    if value == "NR":
        return NR_LITERAL
    if not value:
        return EMPTY_LITERAL
    if _DIGITS_AND_DOTS.fullmatch(value) and value.endswith("."):
        return "0.0"
    if not is_number(value):
        return EMPTY_LITERAL
    return value


def sanitize_risk_allele_frequency(record: AssociationRecord) -> AssociationRecord:
    return replace(
        record,
        risk_allele_frequency=clean_risk_allele_frequency(record.risk_allele_frequency),
    )


def sanitize_strongest_snp_risk_allele(record: AssociationRecord) -> AssociationRecord:
    return replace(
        record,
        strongest_snp_risk_allele=record.strongest_snp_risk_allele.replace('"', ""),
    )


def sanitize_reported_genes(record: AssociationRecord) -> AssociationRecord:
    value = record.reported_genes.replace('"', "")
    if "\\" in value:
        value = value.replace("\\", "")
    return replace(record, reported_genes=value)


def sanitize_mapped_trait(record: AssociationRecord) -> AssociationRecord:
    # Empty stays empty; the template quotes it
    return replace(record, mapped_trait=record.mapped_trait.replace('"', '\\"'))


def format_uri_list(value: str, separator: str = " ") -> str:
    """Render a list of IRIs as comma-separated ``<...>`` terms."""
    if not value:
        return EMPTY_LITERAL
    return ", ".join(f"<{uri}>" for uri in value.split(separator))


def sanitize_mapped_trait_uri(record: AssociationRecord) -> AssociationRecord:
    return replace(record, mapped_trait_uri=format_uri_list(record.mapped_trait_uri))


# Applied in order by sanitize_association()
ASSOCIATION_RULES: Tuple[Rule, ...] = (
    sanitize_snp_gene_ids,
    sanitize_or_or_beta,
    sanitize_gene_ids,
    sanitize_gene_distances,
    sanitize_risk_allele_frequency,
    sanitize_strongest_snp_risk_allele,
    sanitize_reported_genes,
    sanitize_mapped_trait,
    sanitize_mapped_trait_uri,
)


def sanitize_association(
    record: AssociationRecord,
    rules: Optional[Tuple[Rule, ...]] = None,
) -> AssociationRecord:
    """Apply every cleanup rule to an association record.

    Args:
        record: Record built from a raw export row
        rules: Rules to apply (defaults to ``ASSOCIATION_RULES``)

    Returns:
        A new record holding Turtle-ready values
    """
    for rule in ASSOCIATION_RULES if rules is None else rules:
        record = rule(record)
    return record
