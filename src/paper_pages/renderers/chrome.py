"""Site navigation and footer fragments.

The fragments are site chrome shared with the hand-written pages. They are
rendered once per run and inserted into every paper page verbatim.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .page_renderer import TEMPLATES_DIR

logger = logging.getLogger(__name__)

CHROME_DIR = TEMPLATES_DIR / "chrome"


class SiteChrome:
    """Render the navigation bar and footer.

    Attributes:
        chrome_dir: Directory holding nav.html.j2 and footer.html.j2
    """

    def __init__(self, chrome_dir: Path | None = None):
        self.chrome_dir = chrome_dir or CHROME_DIR
        self._env = Environment(
            loader=FileSystemLoader(str(self.chrome_dir)),
            autoescape=True,
        )

    def navigation(self, active: str = "research") -> Markup:
        """Render the navigation bar with ``active`` highlighted."""
        logger.debug(f"Rendering navigation from {self.chrome_dir} (active={active})")
        return Markup(self._env.get_template("nav.html.j2").render(active=active))

    def footer(self) -> Markup:
        return Markup(self._env.get_template("footer.html.j2").render())
