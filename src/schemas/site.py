"""Site-wide settings.

Fixed identifiers embedded in every generated page. The defaults reproduce
the published site exactly; a JSON file with the same shape can override
any of them.
"""

from pydantic import BaseModel, Field


class PinnedAuthor(BaseModel):
    """The one author whose structured data carries ORCID and affiliation."""

    name: str = "Murad Farzulla"
    orcid: str = "0009-0002-7164-8704"
    affiliation_name: str = "Dissensus AI"
    affiliation_url: str = "https://dissensus.ai"

    model_config = {"frozen": True}

    @property
    def orcid_url(self) -> str:
        return f"https://orcid.org/{self.orcid}"


class StaticPage(BaseModel):
    """A hand-written page listed in the sitemap ahead of the papers.

    Attributes:
        path: Path relative to the site origin ("" for the home page)
        priority: Sitemap priority, as written into the XML
        changefreq: Sitemap change frequency
    """

    path: str
    priority: str
    changefreq: str

    model_config = {"frozen": True}


DEFAULT_STATIC_PAGES = [
    StaticPage(path="", priority="1.0", changefreq="weekly"),
    StaticPage(path="about.html", priority="0.7", changefreq="monthly"),
    StaticPage(path="services.html", priority="0.7", changefreq="monthly"),
    StaticPage(path="collaborate.html", priority="0.7", changefreq="monthly"),
    StaticPage(path="manifesto.html", priority="0.6", changefreq="monthly"),
    StaticPage(path="charter.html", priority="0.5", changefreq="monthly"),
    StaticPage(path="reading.html", priority="0.5", changefreq="monthly"),
    StaticPage(path="press.html", priority="0.5", changefreq="monthly"),
    StaticPage(path="subscribe.html", priority="0.5", changefreq="monthly"),
    StaticPage(path="privacy.html", priority="0.3", changefreq="yearly"),
    StaticPage(path="terms.html", priority="0.3", changefreq="yearly"),
]


class SiteSettings(BaseModel):
    """Settings shared by metadata synthesis, rendering and the sitemap.

    Attributes:
        origin: Site origin without trailing slash
        site_name: Site name for titles and social previews
        publisher: Publisher name in citation and structured metadata
        papers_dir: Directory (under the origin) holding paper pages
        pdf_origin: Base URL that relative PDF paths are resolved against
        default_image: Social preview image used for every paper
        language: Content language code
        rights: Dublin Core rights statement
        theme_color: Browser theme colour
        discussion_prefix: Series-number prefix marking a discussion paper
        featured_statuses: Statuses whose pages get the higher sitemap priority
        featured_priority: Sitemap priority for featured statuses
        default_priority: Sitemap priority for every other status
        paper_changefreq: Sitemap change frequency for paper pages
        pinned_author: Author with extended structured data
        static_pages: Pages listed in the sitemap before the papers
    """

    origin: str = "https://dissensus.ai"
    site_name: str = "Dissensus AI"
    publisher: str = "Dissensus AI"
    papers_dir: str = "papers"
    pdf_origin: str = "https://farzulla.org/papers"
    default_image: str = "https://dissensus.ai/assets/logo.png"
    language: str = "en"
    rights: str = "CC BY 4.0"
    theme_color: str = "#050505"
    discussion_prefix: str = "DP"
    featured_statuses: tuple[str, ...] = ("peer-review", "published")
    featured_priority: str = "0.9"
    default_priority: str = "0.8"
    paper_changefreq: str = "monthly"
    pinned_author: PinnedAuthor = Field(default_factory=PinnedAuthor)
    static_pages: list[StaticPage] = Field(
        default_factory=lambda: list(DEFAULT_STATIC_PAGES)
    )

    model_config = {"frozen": True}

    def page_path(self, paper_id: str) -> str:
        """Output path of a paper page, relative to the site root."""
        return f"{self.papers_dir}/{paper_id}.html"

    def paper_url(self, paper_id: str) -> str:
        """Canonical URL of a paper page."""
        return f"{self.origin}/{self.page_path(paper_id)}"

    def site_url(self, path: str) -> str:
        return f"{self.origin}/{path}"

    def pdf_url(self, pdf: str) -> str:
        """Absolute URL for a PDF link target."""
        if pdf.startswith(("http://", "https://")):
            return pdf
        return f"{self.pdf_origin}/{pdf}"
