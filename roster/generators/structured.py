"""JSON generator mirroring the Markdown document."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .base import BaseGenerator

if TYPE_CHECKING:
    from ..models import Report


class JsonGenerator(BaseGenerator):
    """Serialize the report tree as indented JSON."""

    def generate(self, report: Report) -> str:
        return json.dumps(
            report.model_dump(mode="json"),
            indent=self.config.indent,
            ensure_ascii=self.config.ensure_ascii,
        )
