"""Sitemap entry schema."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SitemapEntry:
    """One <url> element of the sitemap.

    Attributes:
        loc: Absolute page URL
        lastmod: Last-modified date (ISO format)
        changefreq: Expected change frequency
        priority: Priority as written into the XML (e.g. "0.9")
    """

    loc: str
    lastmod: str
    changefreq: str
    priority: str
