"""Catalogue loading and validation.

The catalogue is validated as a whole before anything is generated: any
problem in any record fails the run.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from schemas.paper import Catalogue
from schemas.site import SiteSettings

from .exceptions import CatalogueError, PaperPagesError

logger = logging.getLogger(__name__)


def format_validation_errors(error: ValidationError) -> list[str]:
    """Flatten pydantic errors into "location: message" lines."""
    lines = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "catalogue"
        lines.append(f"{location}: {detail['msg']}")
    return lines


def parse_catalogue(data: dict) -> Catalogue:
    """Validate already-decoded catalogue data.

    Raises:
        CatalogueError: If any record or table is invalid, or ids repeat
    """
    try:
        return Catalogue.model_validate(data)
    except ValidationError as e:
        errors = format_validation_errors(e)
        raise CatalogueError(
            f"Catalogue failed validation with {len(errors)} error(s)",
            errors=errors,
        ) from e


def load_catalogue(path: Path) -> Catalogue:
    """Read and validate a catalogue JSON file.

    Args:
        path: Path to papers.json

    Returns:
        Validated Catalogue

    Raises:
        CatalogueError: If the file is missing, is not JSON, or fails validation
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogueError(f"Cannot read catalogue {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogueError(f"Catalogue {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CatalogueError(f"Catalogue {path} must be a JSON object")

    catalogue = parse_catalogue(data)
    logger.info(f"Loaded {len(catalogue.papers)} papers from {path}")
    return catalogue


def load_settings(path: Path | None = None) -> SiteSettings:
    """Load site settings, falling back to the built-in defaults.

    Args:
        path: Optional JSON file overriding any SiteSettings field

    Raises:
        PaperPagesError: If the file cannot be read or fails validation
    """
    if path is None:
        return SiteSettings()

    try:
        settings = SiteSettings.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PaperPagesError(f"Cannot read settings {path}: {e}") from e
    except ValidationError as e:
        errors = "; ".join(format_validation_errors(e))
        raise PaperPagesError(f"Invalid settings {path}: {errors}") from e

    logger.info(f"Loaded site settings from {path}")
    return settings
