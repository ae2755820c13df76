"""
Tags component - SEO head tag builder.

Builds the <title>/<meta>/<link> fragment for a page from a typed SeoConfig
or its camelCase mapping form.

Invariants:
- Every value is escaped before insertion
- Absent or malformed fields suppress output; building never raises
- Identical input always produces byte-identical output
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ._impl import DEFAULT_TITLE_PLACEHOLDER
from ._impl import build_tags as render_tags
from ._parse import config_from_mapping, merge_config
from .models import BuildTagsInput, BuildTagsOutput, SeoConfig, TagStyle, TagsValidationError
from .ports import TagRulesPort

logger = logging.getLogger(__name__)


def run(
    inp: BuildTagsInput,
    *,
    rules: TagRulesPort | None = None,
) -> BuildTagsOutput:
    """
    Build head tags for one page.

    Args:
        inp: Input containing a SeoConfig or camelCase mapping.
        rules: Optional rules port for tag style, title placeholder and
            site-wide defaults. Defaults only apply to mapping configs.

    Returns:
        BuildTagsOutput with the rendered fragment and coercion warnings.
    """
    style = rules.get_tag_style() if rules else TagStyle.HTML
    placeholder = rules.get_title_placeholder() if rules else DEFAULT_TITLE_PLACEHOLDER

    warnings: list[TagsValidationError]
    if isinstance(inp.config, SeoConfig):
        config, warnings = inp.config, []
    elif not isinstance(inp.config, Mapping):
        message = f"Expected SeoConfig or mapping, got {type(inp.config).__name__}"
        logger.debug("Dropping config: %s", message)
        config = SeoConfig()
        warnings = [TagsValidationError(code="invalid_type", message=message, field="config")]
    else:
        data: Mapping[str, Any] = inp.config
        if rules:
            data = merge_config(rules.get_defaults(), data)
        config, warnings = config_from_mapping(data)

    if warnings:
        logger.debug("Built tags with %d dropped field(s)", len(warnings))

    return BuildTagsOutput(
        html=render_tags(config, style=style, title_placeholder=placeholder),
        warnings=warnings,
        success=True,
    )


def build_tags(
    config: SeoConfig | Mapping[str, Any],
    *,
    rules: TagRulesPort | None = None,
) -> str:
    """Render the head fragment for a config and return it as text."""
    return run(BuildTagsInput(config=config), rules=rules).html
