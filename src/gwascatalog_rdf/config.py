"""RDF namespace definitions and configuration for GWAS Catalog export.

Defines the ontology namespaces used in the Turtle templates, the
per-variant prefix tables and a configuration dataclass controlling
output options.
"""

from dataclasses import dataclass
from typing import Dict, Type, Union

from rdflib import Namespace
from rdflib.namespace import DCTERMS, OWL, RDF, RDFS, XSD, DefinedNamespace

# =============================================================================
# Namespace definitions
# =============================================================================

# Project vocabulary for catalog columns without an upstream term
TERMS = Namespace("http://med2rdf.org/gwascatalog/terms/")

# EBI GWAS ontology
GWAS = Namespace("http://rdf.ebi.ac.uk/terms/gwas/")
OBAN = Namespace("http://purl.org/oban/")
RO = Namespace("http://www.obofoundry.org/ro/ro.owl#")

# Record identifiers
STUDY = Namespace("http://www.ebi.ac.uk/gwas/studies/")
PUBMED = Namespace("http://rdf.ncbi.nlm.nih.gov/pubmed/")
ENSG = Namespace("http://identifiers.org/ensembl/")

# Standard namespaces (rdflib provides RDF, RDFS, OWL, XSD, DCTERMS) are
# DefinedNamespace classes rather than Namespace instances
PrefixTable = Dict[str, Union[Namespace, Type[DefinedNamespace]]]

# Prefix tables, in output order
STUDY_PREFIXES: PrefixTable = {
    "rdf": RDF,
    "terms": TERMS,
    "gwas": GWAS,
    "oban": OBAN,
    "owl": OWL,
    "xsd": XSD,
    "rdfs": RDFS,
    "ro": RO,
    "study": STUDY,
    "dct": DCTERMS,
    "pubmed": PUBMED,
}

ASSOCIATION_PREFIXES: PrefixTable = {
    **STUDY_PREFIXES,
    "ensg": ENSG,
}


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class ConverterConfig:
    """Configuration for catalog to Turtle conversion."""

    emit_prefixes: bool = False  # print the @prefix block before records
    encoding: str = "utf-8"
