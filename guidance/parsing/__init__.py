"""
Document Parsing Module

Converts recognised report-card text into structured subject scores.
"""

from .subject_catalog import SubjectCatalog, subject_catalog
from .score_extractor import extract_score
from .document_parser import DocumentParser, calculate_confidence, parse_document_text
from .recognition import DocumentAnalyzer, TextRecognizer

__all__ = [
    "SubjectCatalog",
    "subject_catalog",
    "extract_score",
    "DocumentParser",
    "calculate_confidence",
    "parse_document_text",
    "DocumentAnalyzer",
    "TextRecognizer",
]
