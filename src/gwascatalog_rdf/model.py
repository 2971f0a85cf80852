"""Typed records for GWAS Catalog export rows.

Each dataclass lists the closed set of field identifiers for one export
variant, as produced by :func:`gwascatalog_rdf.parser.parse_header`.
Pure dataclasses with no external imports.
"""

from dataclasses import dataclass, fields
from typing import Dict, FrozenSet, Mapping, Type, TypeVar

R = TypeVar("R", bound="CatalogRecord")


class CatalogRecord:
    """Mixin building a frozen record from a raw row mapping."""

    @classmethod
    def field_names(cls) -> FrozenSet[str]:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_row(cls: Type[R], row: Mapping[str, str]) -> R:
        """Build a record from a header-keyed row.

        Identifiers missing from the row default to ``""``; identifiers
        outside the record's field set are ignored.
        """
        known = cls.field_names()
        values: Dict[str, str] = {k: v for k, v in row.items() if k in known}
        return cls(**values)

    def as_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class StudyRecord(CatalogRecord):
    """One row of the studies export."""

    date_added_to_catalog: str = ""
    pubmedid: str = ""
    first_author: str = ""
    date: str = ""
    journal: str = ""
    link: str = ""
    study: str = ""
    disease_trait: str = ""
    initial_sample_size: str = ""
    replication_sample_size: str = ""
    platform_snps_passing_qc: str = ""
    association_count: str = ""
    mapped_trait: str = ""
    mapped_trait_uri: str = ""
    study_accession: str = ""
    genotyping_technology: str = ""


@dataclass(frozen=True)
class AssociationRecord(CatalogRecord):
    """One row of the associations export.

    ``odds_ratio`` and ``beta`` are not catalog columns; the sanitizer
    derives them from ``or_or_beta``.
    """

    date_added_to_catalog: str = ""
    pubmedid: str = ""
    first_author: str = ""
    date: str = ""
    journal: str = ""
    link: str = ""
    study: str = ""
    disease_trait: str = ""
    initial_sample_size: str = ""
    replication_sample_size: str = ""
    region: str = ""
    chr_id: str = ""
    chr_pos: str = ""
    reported_genes: str = ""
    mapped_gene: str = ""
    upstream_gene_id: str = ""
    downstream_gene_id: str = ""
    snp_gene_ids: str = ""
    upstream_gene_distance: str = ""
    downstream_gene_distance: str = ""
    strongest_snp_risk_allele: str = ""
    snps: str = ""
    merged: str = ""
    snp_id_current: str = ""
    context: str = ""
    intergenic: str = ""
    risk_allele_frequency: str = ""
    p_value: str = ""
    pvalue_mlog: str = ""
    p_value_text: str = ""
    or_or_beta: str = ""
    ci_text: str = ""
    platform_snps_passing_qc: str = ""
    cnv: str = ""
    mapped_trait: str = ""
    mapped_trait_uri: str = ""
    study_accession: str = ""
    genotyping_technology: str = ""
    # Derived
    odds_ratio: str = ""
    beta: str = ""
