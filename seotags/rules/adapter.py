"""
Rules adapter for the tags component.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seotags.components.tags import TagStyle
from seotags.rules.models import TagRules


class RulesTagsAdapter:
    """Adapts loaded TagRules to TagRulesPort."""

    def __init__(self, rules: TagRules) -> None:
        self._rules = rules

    def get_tag_style(self) -> TagStyle:
        return TagStyle(self._rules.tags.style)

    def get_title_placeholder(self) -> str:
        return self._rules.tags.title_placeholder

    def get_defaults(self) -> Mapping[str, Any]:
        return self._rules.defaults
