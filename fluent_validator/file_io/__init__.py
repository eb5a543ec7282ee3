"""File I/O related utilities.

This package groups small modules that read data documents from disk and format
file-backed diagnostics.
"""

from .source_location import SourceLocation, display_path, lookup_source, format_source
from .data_loader import DataLoader, DataDocumentLoader, data_loader

__all__ = [
    "SourceLocation",
    "lookup_source",
    "format_source",
    "display_path",
    "DataLoader",
    "DataDocumentLoader",
    "data_loader",
]
