"""Site builder: the end-to-end generation run.

Renders every paper page and the sitemap from a validated catalogue, then
hands the finished documents to a writer. Nothing is written until every
document has rendered, so a failure leaves the output untouched.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from schemas.build import BuildReport, BuiltPage
from schemas.paper import Catalogue, Paper
from schemas.site import SiteSettings

from .renderers.chrome import SiteChrome
from .renderers.page_renderer import PageRenderer
from .sitemap import SitemapBuilder
from .writers import Writer

logger = logging.getLogger(__name__)

SITEMAP_PATH = "sitemap.xml"


class SiteBuilder:
    """Run a full, idempotent regeneration of the paper pages and sitemap.

    Attributes:
        writer: Destination for finished documents
        settings: Site settings shared by every component
        chrome: Provider of the navigation and footer fragments
        workers: Number of threads used to render pages
    """

    def __init__(
        self,
        writer: Writer,
        settings: SiteSettings | None = None,
        chrome: SiteChrome | None = None,
        workers: int = 1,
    ):
        self.writer = writer
        self.settings = settings or SiteSettings()
        self.chrome = chrome or SiteChrome()
        self.workers = max(1, workers)

    def build(self, catalogue: Catalogue, today: date | None = None) -> BuildReport:
        """Generate all documents for a catalogue.

        Args:
            catalogue: Validated catalogue
            today: Run date for sitemap lastmod values (default: today)

        Returns:
            BuildReport describing what was written
        """
        today = today or date.today()
        papers = catalogue.papers
        logger.info(f"Building {len(papers)} paper pages")

        renderer = PageRenderer(catalogue.tables, self.settings)
        navigation = self.chrome.navigation("research")
        footer = self.chrome.footer()

        def render(paper: Paper) -> tuple[Paper, str]:
            return paper, renderer.render(paper, navigation, footer)

        if self.workers > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                pages = list(pool.map(render, papers))
        else:
            pages = [render(paper) for paper in papers]

        sitemap_builder = SitemapBuilder(self.settings)
        sitemap = sitemap_builder.build(papers, today)
        sitemap_entries = len(self.settings.static_pages) + len(papers)

        report = BuildReport(generated_on=today, sitemap_path=SITEMAP_PATH)
        for paper, html in pages:
            path = renderer.output_path(paper)
            self.writer.write(path, html)
            report.pages.append(BuiltPage(paper_id=paper.id, path=path))
            logger.info(f"  {path}")

        self.writer.write(SITEMAP_PATH, sitemap)
        report.sitemap_entries = sitemap_entries
        logger.info(f"  {SITEMAP_PATH} ({sitemap_entries} URLs)")

        return report
