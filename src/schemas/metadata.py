"""Metadata domain objects.

Plain values produced by the metadata synthesizer. Content strings are raw
text; escaping happens once, in the template that renders them.
"""

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True)
class MetaTag:
    """A single <meta> element.

    Attributes:
        attribute: Attribute that carries the key ("name" or "property")
        key: Metadata key, e.g. "citation_title" or "og:title"
        content: Unescaped content value
    """

    key: str
    content: str
    attribute: Literal["name", "property"] = "name"


@dataclass(frozen=True)
class MetadataBundle:
    """All metadata blocks for one paper page.

    Attributes:
        page: General description, author and keyword tags
        citation: Highwire Press citation_* tags
        dublin_core: DC.* tags
        structured_data: Schema.org ScholarlyArticle object
        open_graph: og:* tags
        twitter: twitter:* tags
    """

    page: list[MetaTag] = field(default_factory=list)
    citation: list[MetaTag] = field(default_factory=list)
    dublin_core: list[MetaTag] = field(default_factory=list)
    structured_data: dict[str, Any] = field(default_factory=dict)
    open_graph: list[MetaTag] = field(default_factory=list)
    twitter: list[MetaTag] = field(default_factory=list)
