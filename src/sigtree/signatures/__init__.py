"""Signature extraction from JavaScript source text.

This package turns the text of a source file into an ordered list of callable
declarations, using a tree-sitter syntax tree when the text parses and regular
expressions when it does not.
"""

from .extractor import SignatureExtractor, extract_signatures
from .signature import Signature, format_signature

__all__ = ["Signature", "SignatureExtractor", "extract_signatures", "format_signature"]
