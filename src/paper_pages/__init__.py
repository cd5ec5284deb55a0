"""Paper page generator: scholarly metadata pages and sitemap from a catalogue."""

from .builder import SiteBuilder
from .catalogue import load_catalogue, load_settings
from .exceptions import CatalogueError, OutputWriteError, PaperPagesError

__all__ = [
    "SiteBuilder",
    "load_catalogue",
    "load_settings",
    "PaperPagesError",
    "CatalogueError",
    "OutputWriteError",
]
