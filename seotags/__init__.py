"""
seotags - deterministic, escaped SEO head tags from a page configuration.
"""

from seotags.components.tags import (
    BuildTagsInput,
    BuildTagsOutput,
    SeoConfig,
    TagStyle,
    build_tags,
    run,
)

__all__ = ["build_tags", "run", "BuildTagsInput", "BuildTagsOutput", "SeoConfig", "TagStyle"]
