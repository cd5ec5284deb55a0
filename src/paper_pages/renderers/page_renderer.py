"""Page renderer for paper detail pages.

Composes formatted fields, synthesized metadata, the BibTeX entry and the
site chrome into one complete HTML document per paper.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from schemas.paper import LookupTables, Paper
from schemas.site import SiteSettings

from ..citations import bibtex_entry, series_name, suggested_citation
from ..metadata import MetadataSynthesizer
from .filters import FILTERS

logger = logging.getLogger(__name__)

# Templates ship inside the package:
#   page_renderer.py → renderers/ → paper_pages/ → resources/templates
PACKAGE_DIR = Path(__file__).parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "resources" / "templates"


def doi_url(identifier: str) -> str:
    """Link target for an identifier: bare DOIs resolve through doi.org."""
    if identifier.startswith("10."):
        return f"https://doi.org/{identifier}"
    return identifier


class PageRenderer:
    """Render paper records into HTML detail pages.

    Rendering is pure: the same paper, tables, settings and chrome always
    produce the same string, and nothing is written to disk.

    Attributes:
        tables: Read-only tag, status and program labels
        settings: Site identifiers
        template_name: Name of the Jinja2 page template
        templates_dir: Directory containing the page template
    """

    def __init__(
        self,
        tables: LookupTables,
        settings: SiteSettings | None = None,
        template_name: str = "paper.html.j2",
        templates_dir: Path | None = None,
    ):
        """Initialize the page renderer.

        Args:
            tables: Lookup tables for tag, status and program labels
            settings: Site settings (default: the published site's settings)
            template_name: Name of the Jinja2 template file
            templates_dir: Directory containing templates (default: resources/templates)
        """
        self.tables = tables
        self.settings = settings or SiteSettings()
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.synthesizer = MetadataSynthesizer(tables, self.settings)

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.policies["json.dumps_kwargs"] = {
            "sort_keys": False,
            "ensure_ascii": False,
        }
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def output_path(self, paper: Paper) -> str:
        """Path of the paper's page relative to the site root."""
        return self.settings.page_path(paper.id)

    def render(
        self,
        paper: Paper,
        navigation: Markup | str = "",
        footer: Markup | str = "",
    ) -> str:
        """Render one paper as a complete HTML document.

        Args:
            paper: Validated paper record
            navigation: Pre-rendered navigation fragment, inserted verbatim
            footer: Pre-rendered footer fragment, inserted verbatim

        Returns:
            The HTML document
        """
        template = self._env.get_template(self.template_name)
        identifier = paper.identifier
        html = template.render(
            paper=paper,
            settings=self.settings,
            meta=self.synthesizer.synthesize(paper),
            canonical_url=self.settings.paper_url(paper.id),
            status_label=self.tables.status_label(paper.status),
            program_label=self.tables.program_label(paper.program) if paper.program else "",
            tag_labels=self.tables.tag_labels(paper.tags),
            doi_url=doi_url(identifier) if identifier else "",
            series=series_name(paper, self.settings),
            citation=suggested_citation(paper, self.settings),
            bibtex=bibtex_entry(paper, self.settings),
            navigation=Markup(navigation),
            footer=Markup(footer),
        )
        logger.debug(f"Rendered page for {paper.id}")
        return html
