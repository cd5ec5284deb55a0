"""Sitemap builder.

Lists the site's static pages followed by every paper page, newest first,
in the sitemaps.org 0.9 format.
"""

import logging
from datetime import date

from lxml import etree

from schemas.paper import Paper
from schemas.site import SiteSettings
from schemas.sitemap import SitemapEntry

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


class SitemapBuilder:
    """Build the sitemap document for a run.

    Every entry carries the run date as its last-modified value, so the
    output changes from one day to the next even for an unchanged catalogue.

    Attributes:
        settings: Site settings holding static pages and priorities
    """

    def __init__(self, settings: SiteSettings | None = None):
        self.settings = settings or SiteSettings()

    def priority(self, paper: Paper) -> str:
        """Sitemap priority: featured statuses rank above all others."""
        if paper.status in self.settings.featured_statuses:
            return self.settings.featured_priority
        return self.settings.default_priority

    def entries(self, papers: list[Paper], today: date) -> list[SitemapEntry]:
        """Static pages first, then papers by descending publication date.

        Papers sharing a date keep their catalogue order.
        """
        lastmod = today.isoformat()
        settings = self.settings
        entries = [
            SitemapEntry(
                loc=settings.site_url(page.path),
                lastmod=lastmod,
                changefreq=page.changefreq,
                priority=page.priority,
            )
            for page in settings.static_pages
        ]
        for paper in sorted(papers, key=lambda p: p.date, reverse=True):
            entries.append(
                SitemapEntry(
                    loc=settings.paper_url(paper.id),
                    lastmod=lastmod,
                    changefreq=settings.paper_changefreq,
                    priority=self.priority(paper),
                )
            )
        return entries

    def build(self, papers: list[Paper], today: date) -> bytes:
        """Serialize the sitemap as UTF-8 XML."""
        entries = self.entries(papers, today)
        root = self._build_urlset(entries)
        logger.debug(f"Built sitemap with {len(entries)} URLs")
        return etree.tostring(
            root,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=True,
        )

    def _build_urlset(self, entries: list[SitemapEntry]) -> etree._Element:
        root = etree.Element(f"{{{SITEMAP_NS}}}urlset", nsmap={None: SITEMAP_NS})
        for entry in entries:
            url_el = etree.SubElement(root, f"{{{SITEMAP_NS}}}url")
            for name in ("loc", "lastmod", "changefreq", "priority"):
                child = etree.SubElement(url_el, f"{{{SITEMAP_NS}}}{name}")
                child.text = getattr(entry, name)
        return root
