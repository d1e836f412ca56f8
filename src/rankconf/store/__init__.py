"""Settings document stores and their errors."""

from .document import (
    DocumentStore,
    FileDocumentStore,
    JsonDocumentStore,
    YamlDocumentStore,
    open_store,
    render_sections,
    split_sections,
)
from .errors import DocumentError, DocumentUnreadableError, DocumentWriteError, SectionMissingError

__all__ = [
    "DocumentError",
    "DocumentStore",
    "DocumentUnreadableError",
    "DocumentWriteError",
    "FileDocumentStore",
    "JsonDocumentStore",
    "SectionMissingError",
    "YamlDocumentStore",
    "open_store",
    "render_sections",
    "split_sections",
]
