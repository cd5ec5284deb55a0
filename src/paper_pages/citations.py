"""BibTeX keys, entries and suggested citations for paper records."""

import re

from schemas.paper import Paper
from schemas.site import SiteSettings

MAX_KEY_LENGTH = 40

_ID_SEPARATORS = re.compile(r"[-_]")


def citation_key(paper: Paper) -> str:
    """Derive the BibTeX key for a paper.

    First author's surname (last whitespace token, lowercased), then the
    year, then the id with separators removed, cut to 40 characters. Keys
    are deterministic but not guaranteed unique across a catalogue.

    Examples:
        >>> citation_key(Paper(id="alpha-1", title="T", abstract="A",
        ...     authors=["Jane A. Doe"], date="2024-03-05", status="draft"))
        'doe2024alpha1'
    """
    surname = paper.authors[0].split()[-1].lower()
    short_id = _ID_SEPARATORS.sub("", paper.id)
    return f"{surname}{paper.year}{short_id}"[:MAX_KEY_LENGTH]


def invert_name(name: str) -> str:
    """Rewrite "First Middle Last" as "Last, First Middle".

    Single-word names are returned unchanged.
    """
    parts = name.split()
    if len(parts) < 2:
        return name.strip()
    return f"{parts[-1]}, {' '.join(parts[:-1])}"


def series_name(paper: Paper, settings: SiteSettings) -> str:
    """Return "Discussion" or "Working" based on the series-number prefix."""
    if paper.wp_number and paper.wp_number.startswith(settings.discussion_prefix):
        return "Discussion"
    return "Working"


def series_label(paper: Paper, settings: SiteSettings) -> str:
    """Publication-venue label, e.g. "Dissensus AI Working Paper WP1"."""
    label = f"{settings.publisher} {series_name(paper, settings)} Paper"
    if paper.wp_number:
        label = f"{label} {paper.wp_number}"
    return label


def bibtex_entry(paper: Paper, settings: SiteSettings) -> str:
    """Format a complete @misc BibTeX entry for a paper.

    The doi field is only present when the paper has an identifier; the url
    field always points at the canonical page.
    """
    authors = " and ".join(invert_name(name) for name in paper.authors)
    lines = [
        f"@misc{{{citation_key(paper)},",
        f"  author = {{{authors}}},",
        f"  title = {{{paper.title}}},",
        f"  year = {{{paper.year}}},",
        f"  howpublished = {{{series_label(paper, settings)}}},",
    ]
    if paper.identifier:
        lines.append(f"  doi = {{{paper.identifier}}},")
    lines.append(f"  url = {{{settings.paper_url(paper.id)}}}")
    lines.append("}")
    return "\n".join(lines)


def suggested_citation(paper: Paper, settings: SiteSettings) -> dict[str, str]:
    """Parts of the human-readable citation shown on the page.

    The title is kept separate so the template can italicise it.

    Returns:
        Dict with 'lead' (authors and year), 'title', 'venue' and 'doi'
        (empty when the paper has no identifier)
    """
    venue = settings.publisher
    if paper.wp_number:
        venue = series_label(paper, settings)
    return {
        "lead": f"{', '.join(paper.authors)} ({paper.year})",
        "title": paper.title,
        "venue": venue,
        "doi": paper.identifier or "",
    }
