"""
Base classes for report generators.

Provides abstract base class and configuration for all generators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import ProjectConfig
    from ..models import Report


@dataclass
class GeneratorConfig:
    """Configuration for report generators."""

    # Template settings
    template_dir: Path | None = None
    template_name: str = "contributors.md.j2"

    # JSON settings
    indent: str | int = "\t"
    ensure_ascii: bool = False

    # Page texts; None uses the ProjectConfig defaults
    project: ProjectConfig | None = None


class BaseGenerator(ABC):
    """Abstract base class for report generators."""

    def __init__(self, config: GeneratorConfig | None = None):
        """Initialize generator with configuration.

        Args:
            config: Generator configuration (uses defaults if None)
        """
        self.config = config or GeneratorConfig()

    @abstractmethod
    def generate(self, report: Report) -> str:
        """Render the whole report document.

        Args:
            report: Sorted report tree

        Returns:
            Document content as string
        """
        pass
