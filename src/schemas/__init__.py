"""Schema definitions for paper-pages."""

from .build import BuildReport, BuiltPage
from .metadata import MetadataBundle, MetaTag
from .paper import Catalogue, LookupTables, Paper, Program
from .site import PinnedAuthor, SiteSettings, StaticPage
from .sitemap import SitemapEntry

__all__ = [
    "BuildReport",
    "BuiltPage",
    "Catalogue",
    "LookupTables",
    "MetadataBundle",
    "MetaTag",
    "Paper",
    "PinnedAuthor",
    "Program",
    "SiteSettings",
    "SitemapEntry",
    "StaticPage",
]
