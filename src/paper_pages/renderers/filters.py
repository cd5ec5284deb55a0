"""Formatting helpers and Jinja2 filters for paper pages.

These functions turn raw record fields into presentation strings. They are
used directly by the metadata synthesizer and registered as filters for
paper.html.j2.
"""

from datetime import date

from markupsafe import Markup, escape

# Fixed English month names; strftime("%B") follows the process locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

ELLIPSIS = "..."


def escape_text(text: str) -> Markup:
    """Escape the five HTML-significant characters.

    Safe for element content and quoted attribute values. Text that is
    already Markup is returned unchanged, so escaping never doubles up.

    Examples:
        >>> str(escape_text('<a href="x">R&D</a>'))
        '&lt;a href=&#34;x&#34;&gt;R&amp;D&lt;/a&gt;'
    """
    return escape(text)


def format_display_date(value: date) -> str:
    """Format a date as "day Month year".

    Examples:
        >>> format_display_date(date(2024, 3, 5))
        '5 March 2024'
    """
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


def format_citation_date(value: date) -> str:
    """Format a date as YYYY/MM/DD for citation_publication_date.

    Examples:
        >>> format_citation_date(date(2024, 3, 5))
        '2024/03/05'
    """
    return f"{value.year:04d}/{value.month:02d}/{value.day:02d}"


def truncate(text: str, length: int) -> str:
    """Take the first ``length`` characters and append an ellipsis.

    The ellipsis is appended even when nothing was cut.

    Examples:
        >>> truncate("Hello world", 5)
        'Hello...'
        >>> truncate("Hi", 5)
        'Hi...'
    """
    return text[:length] + ELLIPSIS


def format_author_list(authors: list[str]) -> str:
    """Join author names for display.

    Examples:
        >>> format_author_list(["Jane Doe", "John Roe"])
        'Jane Doe, John Roe'
    """
    return ", ".join(authors)


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "display_date": format_display_date,
    "author_list": format_author_list,
}
