"""Command-line interface for paper-pages."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from paper_pages.builder import SiteBuilder
from paper_pages.catalogue import load_catalogue, load_settings
from paper_pages.citations import bibtex_entry
from paper_pages.exceptions import CatalogueError, PaperPagesError
from paper_pages.renderers.chrome import SiteChrome
from paper_pages.writers import FileSystemWriter

DEFAULT_CATALOGUE = Path("papers.json")
DEFAULT_OUTPUT_DIR = Path("./public")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _log_catalogue_error(logger: logging.Logger, error: CatalogueError) -> None:
    logger.error(error.message)
    for line in error.errors:
        logger.error(f"    - {line}")


def build_site(args: argparse.Namespace) -> int:
    """Execute the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.chrome_dir is not None and not args.chrome_dir.is_dir():
        logger.error(f"Chrome directory not found: {args.chrome_dir}")
        return 1

    try:
        settings = load_settings(args.settings)
        catalogue = load_catalogue(args.catalogue)

        builder = SiteBuilder(
            writer=FileSystemWriter(args.output),
            settings=settings,
            chrome=SiteChrome(args.chrome_dir),
            workers=args.workers,
        )
        report = builder.build(catalogue, today=args.date)

        logger.info(
            f"Generated {report.page_count} paper pages + sitemap "
            f"({report.sitemap_entries} URLs)"
        )
        logger.info(f"  Output: {args.output}")
        return 0

    except CatalogueError as e:
        _log_catalogue_error(logger, e)
        return 1

    except PaperPagesError as e:
        logger.error(f"Build failed: {e.message}")
        return 1

    except Exception as e:
        logger.error(f"Build failed: {e}")
        return 1


def validate_catalogue(args: argparse.Namespace) -> int:
    """Execute the validate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        catalogue = load_catalogue(args.catalogue)
    except CatalogueError as e:
        _log_catalogue_error(logger, e)
        return 1

    tables = catalogue.tables
    for paper in catalogue.papers:
        missing = [tag for tag in paper.tags if tag not in tables.tags]
        if missing:
            logger.warning(f"{paper.id}: tags without labels: {', '.join(missing)}")
        if paper.status not in tables.statuses:
            logger.warning(f"{paper.id}: status without label: {paper.status}")
        if paper.program and paper.program not in tables.programs:
            logger.warning(f"{paper.id}: unknown program: {paper.program}")

    logger.info(f"Catalogue OK: {len(catalogue.papers)} papers")
    logger.info(
        f"  Tags: {len(tables.tags)}, statuses: {len(tables.statuses)}, "
        f"programs: {len(tables.programs)}"
    )
    return 0


def print_bibtex(args: argparse.Namespace) -> int:
    """Execute the bibtex command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(args.settings)
        catalogue = load_catalogue(args.catalogue)
    except CatalogueError as e:
        _log_catalogue_error(logger, e)
        return 1
    except PaperPagesError as e:
        logger.error(e.message)
        return 1

    paper = catalogue.get(args.id)
    if paper is None:
        logger.error(f"Paper not found in catalogue: {args.id}")
        return 1

    print(bibtex_entry(paper, settings))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="paper-pages",
        description="Generate paper pages with scholarly metadata and a sitemap",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    build_parser = subparsers.add_parser(
        "build",
        help="Generate every paper page and the sitemap",
        description="Regenerate one HTML page per catalogue paper plus sitemap.xml.",
    )
    build_parser.add_argument(
        "--catalogue",
        type=Path,
        default=DEFAULT_CATALOGUE,
        help=f"Path to the papers catalogue (default: {DEFAULT_CATALOGUE})",
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Site output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    build_parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="JSON file overriding site settings",
    )
    build_parser.add_argument(
        "--chrome-dir",
        type=Path,
        default=None,
        help="Directory with nav.html.j2 and footer.html.j2 to use instead of the built-in chrome",
    )
    build_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Run date for sitemap lastmod values (ISO format: YYYY-MM-DD, default: today)",
    )
    build_parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of threads used to render pages (default: 1)",
    )
    build_parser.set_defaults(func=build_site)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate the catalogue without generating anything",
        description="Check every paper record and report lookup keys without labels.",
    )
    validate_parser.add_argument(
        "--catalogue",
        type=Path,
        default=DEFAULT_CATALOGUE,
        help=f"Path to the papers catalogue (default: {DEFAULT_CATALOGUE})",
    )
    validate_parser.set_defaults(func=validate_catalogue)

    bibtex_parser = subparsers.add_parser(
        "bibtex",
        help="Print the BibTeX entry for one paper",
        description="Print the BibTeX entry embedded in a paper's page.",
    )
    bibtex_parser.add_argument(
        "--catalogue",
        type=Path,
        default=DEFAULT_CATALOGUE,
        help=f"Path to the papers catalogue (default: {DEFAULT_CATALOGUE})",
    )
    bibtex_parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="JSON file overriding site settings",
    )
    bibtex_parser.add_argument(
        "--id",
        required=True,
        help="Catalogue id of the paper",
    )
    bibtex_parser.set_defaults(func=print_bibtex)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
