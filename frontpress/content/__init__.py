"""Utilities for parsing and validating source content."""

from .errors import (
    ContentError,
    FrontMatterError,
    InvalidFieldType,
    MalformedFrontMatter,
    MetadataError,
    MissingFrontMatter,
    MissingRequiredField,
)
from .metadata import validate_metadata
from .models import ContentItem, ContentMeta
from .parsers import load_content_item, parse_content_item, split_front_matter

__all__ = [
    "ContentError",
    "ContentItem",
    "ContentMeta",
    "FrontMatterError",
    "InvalidFieldType",
    "MalformedFrontMatter",
    "MetadataError",
    "MissingFrontMatter",
    "MissingRequiredField",
    "load_content_item",
    "parse_content_item",
    "split_front_matter",
    "validate_metadata",
]
