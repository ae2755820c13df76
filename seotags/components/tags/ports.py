"""
Tags component port definitions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from .models import TagStyle


class TagRulesPort(Protocol):
    """Port for build-level tag rendering options."""

    def get_tag_style(self) -> TagStyle:
        """Get how void elements are closed (html or xhtml)."""
        ...

    def get_title_placeholder(self) -> str:
        """Get the placeholder token substituted in title templates."""
        ...

    def get_defaults(self) -> Mapping[str, Any]:
        """Get site-wide camelCase config merged under each page config."""
        ...
