"""Message catalogs and rendering."""

from .catalog import MessageCatalog, load_catalog, load_default_catalog
from .renderer import MessageRenderer, format_template, render

__all__ = [
    "MessageCatalog",
    "MessageRenderer",
    "format_template",
    "load_catalog",
    "load_default_catalog",
    "render",
]
