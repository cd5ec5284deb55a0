"""Paper catalogue schemas.

The catalogue is a single JSON document holding the paper records plus
three lookup tables that map short keys to display labels:

    {
        "papers": [{"id": "...", "title": "...", ...}, ...],
        "tags": {"ml": "Machine Learning", ...},
        "statuses": {"published": "Published", ...},
        "programs": {"markets": {"title": "Market Microstructure"}, ...}
    }
"""

import datetime
from collections import Counter

from pydantic import BaseModel, Field, field_validator, model_validator

# Ids name output files and URLs, so no separators or dots.
SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]*$"


class Program(BaseModel):
    """A research program a paper may belong to."""

    title: str

    model_config = {"extra": "allow", "frozen": True}


class LookupTables(BaseModel):
    """Read-only label tables shared by every paper in a run.

    Lookups never fail: a key missing from its table resolves to itself.

    Attributes:
        tags: Tag key to display label
        statuses: Status key to display label
        programs: Program key to program details
    """

    tags: dict[str, str] = {}
    statuses: dict[str, str] = {}
    programs: dict[str, Program] = {}

    model_config = {"frozen": True}

    def tag_label(self, key: str) -> str:
        return self.tags.get(key, key)

    def tag_labels(self, keys: list[str]) -> list[str]:
        return [self.tag_label(key) for key in keys]

    def status_label(self, key: str) -> str:
        return self.statuses.get(key, key)

    def program_label(self, key: str) -> str:
        program = self.programs.get(key)
        return program.title if program else key


class Paper(BaseModel):
    """A single paper record from the catalogue.

    Attributes:
        id: URL-safe slug; names the output page and canonical URL
        title: Paper title
        subtitle: Optional subtitle
        abstract: Full abstract text
        authors: Full author names in citation order
        date: Publication date
        status: Key into the status table (e.g. "draft", "published")
        tags: Keys into the tag table
        program: Optional key into the program table
        doi: DOI, preferred over zenodo when both are set
        zenodo: Zenodo identifier or URL
        pdf: PDF link target, relative to the PDF origin or absolute
        github: Repository URL
        dashboard: Dashboard URL
        wp_number: Series number such as "WP3" or "DP1"
        journal: Journal or venue name
    """

    id: str = Field(min_length=1, pattern=SLUG_PATTERN)
    title: str
    subtitle: str | None = None
    abstract: str
    authors: list[str] = Field(min_length=1)
    date: datetime.date
    status: str
    tags: list[str] = []
    program: str | None = None
    doi: str | None = None
    zenodo: str | None = None
    pdf: str | None = None
    github: str | None = None
    dashboard: str | None = None
    wp_number: str | None = Field(default=None, alias="wpNumber")
    journal: str | None = None

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator(
        "subtitle",
        "program",
        "doi",
        "zenodo",
        "pdf",
        "github",
        "dashboard",
        "wp_number",
        "journal",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("authors")
    @classmethod
    def authors_not_blank(cls, value: list[str]) -> list[str]:
        if any(not name.strip() for name in value):
            raise ValueError("author names must not be blank")
        return value

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def identifier(self) -> str | None:
        """The DOI, falling back to the Zenodo identifier."""
        return self.doi or self.zenodo


class Catalogue(BaseModel):
    """The full input: paper records plus lookup tables.

    Paper ids must be unique, since each one names an output page.
    """

    papers: list[Paper] = []
    tags: dict[str, str] = {}
    statuses: dict[str, str] = {}
    programs: dict[str, Program] = {}

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def unique_ids(self) -> "Catalogue":
        counts = Counter(paper.id for paper in self.papers)
        duplicates = sorted(paper_id for paper_id, n in counts.items() if n > 1)
        if duplicates:
            raise ValueError(f"duplicate paper ids: {', '.join(duplicates)}")
        return self

    @property
    def tables(self) -> LookupTables:
        return LookupTables(
            tags=self.tags,
            statuses=self.statuses,
            programs=self.programs,
        )

    def get(self, paper_id: str) -> Paper | None:
        for paper in self.papers:
            if paper.id == paper_id:
                return paper
        return None
