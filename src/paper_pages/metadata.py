"""Discovery metadata for paper pages.

Maps a paper record onto the metadata vocabularies read by scholarly
indexers, search engines and social previews:

- Highwire Press citation_* tags (Google Scholar)
- Dublin Core DC.* tags
- Schema.org ScholarlyArticle structured data (JSON-LD)
- Open Graph og:* tags
- Twitter card tags

Each block is derived from the record, the lookup tables and the site
settings alone; no block reads another block's output.
"""

import logging
from typing import Any

from schemas.metadata import MetadataBundle, MetaTag
from schemas.paper import LookupTables, Paper
from schemas.site import SiteSettings

from .renderers.filters import format_author_list, format_citation_date, truncate

logger = logging.getLogger(__name__)

PAGE_DESCRIPTION_LENGTH = 160
SOCIAL_DESCRIPTION_LENGTH = 200
DUBLIN_CORE_DESCRIPTION_LENGTH = 300


class MetadataSynthesizer:
    """Build every metadata block for a paper.

    Attributes:
        tables: Read-only tag, status and program labels
        settings: Site identifiers embedded in the metadata
    """

    def __init__(self, tables: LookupTables, settings: SiteSettings | None = None):
        self.tables = tables
        self.settings = settings or SiteSettings()

    def synthesize(self, paper: Paper) -> MetadataBundle:
        """Build all metadata blocks for one paper."""
        logger.debug(f"Synthesizing metadata for {paper.id}")
        return MetadataBundle(
            page=self.page_tags(paper),
            citation=self.citation_tags(paper),
            dublin_core=self.dublin_core_tags(paper),
            structured_data=self.structured_data(paper),
            open_graph=self.open_graph_tags(paper),
            twitter=self.twitter_tags(paper),
        )

    def page_tags(self, paper: Paper) -> list[MetaTag]:
        """General description, author and keyword tags."""
        return [
            MetaTag("description", truncate(paper.abstract, PAGE_DESCRIPTION_LENGTH)),
            MetaTag("author", format_author_list(paper.authors)),
            MetaTag("keywords", ", ".join(self.tables.tag_labels(paper.tags))),
            MetaTag("theme-color", self.settings.theme_color),
            MetaTag("robots", "index, follow"),
        ]

    def citation_tags(self, paper: Paper) -> list[MetaTag]:
        """Highwire Press tags, in the order Google Scholar documents them."""
        settings = self.settings
        tags = [MetaTag("citation_title", paper.title)]
        tags.extend(MetaTag("citation_author", author) for author in paper.authors)
        tags.append(
            MetaTag("citation_publication_date", format_citation_date(paper.date))
        )
        if paper.pdf:
            tags.append(MetaTag("citation_pdf_url", settings.pdf_url(paper.pdf)))
        if paper.identifier:
            tags.append(MetaTag("citation_doi", paper.identifier))
        if paper.journal:
            tags.append(MetaTag("citation_journal_title", paper.journal))
        if paper.wp_number:
            tags.append(MetaTag("citation_technical_report_number", paper.wp_number))
        tags.extend([
            MetaTag("citation_publisher", settings.publisher),
            MetaTag("citation_abstract_html_url", settings.paper_url(paper.id)),
            MetaTag("citation_keywords", "; ".join(self.tables.tag_labels(paper.tags))),
            MetaTag("citation_language", settings.language),
        ])
        return tags

    def dublin_core_tags(self, paper: Paper) -> list[MetaTag]:
        settings = self.settings
        tags = [
            MetaTag("DC.title", paper.title),
            MetaTag("DC.creator", format_author_list(paper.authors)),
            MetaTag("DC.date", paper.date.isoformat()),
            MetaTag("DC.publisher", settings.publisher),
            MetaTag(
                "DC.description",
                truncate(paper.abstract, DUBLIN_CORE_DESCRIPTION_LENGTH),
            ),
            MetaTag("DC.type", "Text"),
            MetaTag("DC.format", "text/html"),
            MetaTag("DC.language", settings.language),
        ]
        if paper.identifier:
            tags.append(MetaTag("DC.identifier", f"doi:{paper.identifier}"))
        tags.append(MetaTag("DC.rights", settings.rights))
        return tags

    def structured_data(self, paper: Paper) -> dict[str, Any]:
        """Schema.org ScholarlyArticle object for the JSON-LD block.

        Values are raw strings; the template JSON-encodes the whole object.
        """
        settings = self.settings
        data: dict[str, Any] = {
            "@context": "https://schema.org",
            "@type": "ScholarlyArticle",
            "headline": paper.title,
            "author": [self._author_schema(author) for author in paper.authors],
            "datePublished": paper.date.isoformat(),
            "publisher": self._publisher_schema(),
            "description": paper.abstract.replace("\n", " "),
        }
        if paper.identifier:
            data["identifier"] = {
                "@type": "PropertyValue",
                "propertyID": "DOI",
                "value": paper.identifier,
            }
        data["url"] = settings.paper_url(paper.id)
        data["inLanguage"] = settings.language
        return data

    def open_graph_tags(self, paper: Paper) -> list[MetaTag]:
        settings = self.settings
        return [
            MetaTag("og:type", "article", "property"),
            MetaTag("og:url", settings.paper_url(paper.id), "property"),
            MetaTag("og:title", paper.title, "property"),
            MetaTag(
                "og:description",
                truncate(paper.abstract, SOCIAL_DESCRIPTION_LENGTH),
                "property",
            ),
            MetaTag("og:site_name", settings.site_name, "property"),
            MetaTag("og:image", settings.default_image, "property"),
        ]

    def twitter_tags(self, paper: Paper) -> list[MetaTag]:
        return [
            MetaTag("twitter:card", "summary"),
            MetaTag("twitter:title", paper.title),
            MetaTag(
                "twitter:description",
                truncate(paper.abstract, SOCIAL_DESCRIPTION_LENGTH),
            ),
            MetaTag("twitter:image", self.settings.default_image),
        ]

    def _author_schema(self, name: str) -> dict[str, Any]:
        pinned = self.settings.pinned_author
        if name != pinned.name:
            return {"@type": "Person", "name": name}
        return {
            "@type": "Person",
            "name": name,
            "identifier": {
                "@type": "PropertyValue",
                "propertyID": "ORCID",
                "value": pinned.orcid,
            },
            "url": pinned.orcid_url,
            "affiliation": {
                "@type": "Organization",
                "name": pinned.affiliation_name,
                "url": pinned.affiliation_url,
            },
        }

    def _publisher_schema(self) -> dict[str, str]:
        return {
            "@type": "Organization",
            "name": self.settings.publisher,
            "url": self.settings.origin,
        }
