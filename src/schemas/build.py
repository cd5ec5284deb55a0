"""Build report schemas.

A BuildReport summarises one full regeneration of the site: which pages
were written and how many URLs the sitemap lists.
"""

from datetime import date

from pydantic import BaseModel


class BuiltPage(BaseModel):
    """A paper page written during a build.

    Attributes:
        paper_id: Catalogue id of the paper
        path: Output path relative to the site root
    """

    paper_id: str
    path: str


class BuildReport(BaseModel):
    """Summary of a completed build.

    Attributes:
        generated_on: Run date stamped into the sitemap
        pages: Paper pages written, in catalogue order
        sitemap_path: Sitemap output path relative to the site root
        sitemap_entries: Number of URLs in the sitemap
    """

    generated_on: date
    pages: list[BuiltPage] = []
    sitemap_path: str = "sitemap.xml"
    sitemap_entries: int = 0

    @property
    def page_count(self) -> int:
        return len(self.pages)
