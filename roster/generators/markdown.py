"""
Markdown generator for the contributors and supporters page.

Renders one section per group, one ``* [name](url)`` line per person, from
a Jinja2 template.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..config import ProjectConfig, SupportLink
from .base import BaseGenerator, GeneratorConfig

if TYPE_CHECKING:
    from ..models import Report


def join_links(links: list[SupportLink]) -> str:
    """Join support links as "[A](a), [B](b) or [C](c)"."""
    rendered = [f"[{link.name}]({link.url})" for link in links]
    if len(rendered) < 2:
        return "".join(rendered)
    return ", ".join(rendered[:-1]) + " or " + rendered[-1]


class MarkdownGenerator(BaseGenerator):
    """Generate the Markdown document using Jinja2 templates."""

    # Default template directory (relative to this file)
    DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

    def __init__(self, config: GeneratorConfig | None = None):
        """Initialize Markdown generator.

        Args:
            config: Generator configuration
        """
        super().__init__(config)

        template_dir = self.config.template_dir or self.DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["join_links"] = join_links

    def generate(self, report: Report) -> str:
        """Generate the Markdown document.

        Args:
            report: Sorted report tree

        Returns:
            Generated Markdown content
        """
        template = self.env.get_template(self.config.template_name)
        project = self.config.project or ProjectConfig()
        return template.render(project=project, report=report)
