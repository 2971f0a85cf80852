"""Unit tests for gwascatalog_rdf.sanitizer — association field cleanup."""

import pytest

from gwascatalog_rdf.model import AssociationRecord
from gwascatalog_rdf.sanitizer import (
    EMPTY_LITERAL,
    NA_LITERAL,
    clean_risk_allele_frequency,
    parse_float,
    sanitize_association,
    sanitize_gene_distances,
    sanitize_gene_ids,
    sanitize_mapped_trait,
    sanitize_mapped_trait_uri,
    sanitize_or_or_beta,
    sanitize_reported_genes,
    sanitize_snp_gene_ids,
    sanitize_strongest_snp_risk_allele,
    split_or_beta,
)


def _record(**values):
    return AssociationRecord(**values)


# ---------------------------------------------------------------------------
# Gene identifiers
# ---------------------------------------------------------------------------

class TestGeneIds:

    def test_snp_gene_ids_prefixed(self):
        result = sanitize_snp_gene_ids(_record(snp_gene_ids="ENSG001, ENSG002"))
        assert result.snp_gene_ids == "ensg:ENSG001, ensg:ENSG002"

    @pytest.mark.parametrize("value", ["", "intergenic"])
    def test_snp_gene_ids_without_ensembl(self, value):
        assert sanitize_snp_gene_ids(_record(snp_gene_ids=value)).snp_gene_ids == EMPTY_LITERAL

    def test_upstream_downstream_ids(self):
        result = sanitize_gene_ids(_record(upstream_gene_id="ENSG003"))
        assert result.upstream_gene_id == "ensg:ENSG003"
        assert result.downstream_gene_id == EMPTY_LITERAL

    def test_distances(self):
        result = sanitize_gene_distances(_record(upstream_gene_distance="1234"))
        assert result.upstream_gene_distance == "1234"
        assert result.downstream_gene_distance == EMPTY_LITERAL


# ---------------------------------------------------------------------------
# Odds ratio / beta
# ---------------------------------------------------------------------------

class TestOrOrBeta:

    def test_parse_float_lenient(self):
        assert parse_float("1.5") == 1.5
        assert parse_float("2.3 unit increase") == 2.3
        assert parse_float("") == 0.0
        assert parse_float("NR") == 0.0
        assert parse_float("inf") == 0.0

    def test_odds_ratio(self):
        assert split_or_beta("0.85") == ("0.85", NA_LITERAL)

    def test_boundary_is_odds_ratio(self):
        assert split_or_beta("1.0") == ("1.0", NA_LITERAL)

    def test_beta(self):
        assert split_or_beta("1.25") == (NA_LITERAL, "1.25")

    def test_overflow_is_zero(self):
        assert parse_float("1e999") == 0.0
        assert split_or_beta("1e999") == ("0.0", NA_LITERAL)

    def test_non_numeric_is_zero_odds_ratio(self):
        assert split_or_beta("abc") == ("0.0", NA_LITERAL)

    @pytest.mark.parametrize("value", ["", "0", "0.5", "1", "1.0001", "42", "-3", "x"])
    def test_split_is_exclusive(self, value):
        odds_ratio, beta = split_or_beta(value)
        assert (odds_ratio == NA_LITERAL) != (beta == NA_LITERAL)
        if parse_float(value) <= 1.0:
            assert beta == NA_LITERAL
        else:
            assert odds_ratio == NA_LITERAL

    def test_record_fields(self):
        result = sanitize_or_or_beta(_record(or_or_beta="3.2"))
        assert result.odds_ratio == NA_LITERAL
        assert result.beta == "3.2"
        assert result.or_or_beta == "3.2"


# ---------------------------------------------------------------------------
# Risk allele frequency
# ---------------------------------------------------------------------------

class TestRiskAlleleFrequency:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("", EMPTY_LITERAL),
            ("NR", '"NR"'),
            ("0.5", "0.5"),
            ("0.", "0.0"),
            ("abc", EMPTY_LITERAL),
        ],
    )
    def test_values(self, value, expected):
        assert clean_risk_allele_frequency(value) == expected

    def test_truncated_decimal_is_always_zero(self):
        assert clean_risk_allele_frequency("42.") == "0.0"

    def test_malformed_dots(self):
        assert clean_risk_allele_frequency("0.1.2") == EMPTY_LITERAL

    def test_annotated_value(self):
        assert clean_risk_allele_frequency("0.3 (EA)") == EMPTY_LITERAL


# ---------------------------------------------------------------------------
# Quoted text fields
# ---------------------------------------------------------------------------

class TestTextFields:

    def test_strongest_snp_risk_allele(self):
        result = sanitize_strongest_snp_risk_allele(_record(strongest_snp_risk_allele='rs1"-A'))
        assert result.strongest_snp_risk_allele == "rs1-A"

    def test_reported_genes(self):
        result = sanitize_reported_genes(_record(reported_genes='"IL6\\", TNF'))
        assert result.reported_genes == "IL6, TNF"

    def test_mapped_trait_escapes_quotes(self):
        result = sanitize_mapped_trait(_record(mapped_trait='so-called "trait"'))
        assert result.mapped_trait == 'so-called \\"trait\\"'

    def test_mapped_trait_empty_stays_empty(self):
        assert sanitize_mapped_trait(_record()).mapped_trait == ""

    def test_mapped_trait_uri(self):
        result = sanitize_mapped_trait_uri(
            _record(mapped_trait_uri="http://www.ebi.ac.uk/efo/EFO_1 http://www.ebi.ac.uk/efo/EFO_2")
        )
        assert result.mapped_trait_uri == (
            "<http://www.ebi.ac.uk/efo/EFO_1>, <http://www.ebi.ac.uk/efo/EFO_2>"
        )

    def test_mapped_trait_uri_empty(self):
        assert sanitize_mapped_trait_uri(_record()).mapped_trait_uri == EMPTY_LITERAL


# ---------------------------------------------------------------------------
# Full pass
# ---------------------------------------------------------------------------

class TestSanitizeAssociation:

    def test_returns_new_record(self):
        raw = _record(snp_gene_ids="ENSG001", or_or_beta="0.9")
        result = sanitize_association(raw)

        assert result is not raw
        assert raw.snp_gene_ids == "ENSG001"
        assert raw.odds_ratio == ""
        assert result.snp_gene_ids == "ensg:ENSG001"
        assert result.odds_ratio == "0.9"

    def test_every_field_gets_a_value(self):
        result = sanitize_association(_record())
        assert result.upstream_gene_id == EMPTY_LITERAL
        assert result.risk_allele_frequency == EMPTY_LITERAL
        assert result.odds_ratio == "0.0"
        assert result.beta == NA_LITERAL

    def test_custom_rules(self):
        result = sanitize_association(_record(snp_gene_ids="x"), rules=(sanitize_gene_ids,))
        assert result.snp_gene_ids == "x"

    def test_empty_rules_leave_record_unchanged(self):
        raw = _record(snp_gene_ids="x")
        assert sanitize_association(raw, rules=()) == raw
