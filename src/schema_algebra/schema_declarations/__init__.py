"""Schema declaration exports."""

from .declaration_loader import (
    DeclarationError,
    SchemaCatalog,
    load_declarations,
    parse_declarations,
)
from .declaration_writer import OUTPUT_FORMATS, format_schema, render_text, to_declaration

__all__ = [
    "DeclarationError",
    "SchemaCatalog",
    "load_declarations",
    "parse_declarations",
    "OUTPUT_FORMATS",
    "format_schema",
    "render_text",
    "to_declaration",
]
