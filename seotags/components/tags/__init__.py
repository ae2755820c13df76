"""
Tags component - SEO head tag builder.
"""

from ._impl import (
    DEFAULT_TITLE_PLACEHOLDER,
    build_open_graph_media_tags,
    build_open_graph_tags,
    build_robots_directives,
    escape_html,
    format_title,
    link_tag,
    meta_tag,
    open_graph_meta,
)
from ._parse import config_from_mapping, merge_config
from .component import build_tags, run
from .models import (
    AdditionalLinkTag,
    AdditionalMetaTag,
    BuildTagsInput,
    BuildTagsOutput,
    Facebook,
    HttpEquivMetaTag,
    LanguageAlternate,
    MobileAlternate,
    NameMetaTag,
    OpenGraph,
    OpenGraphArticle,
    OpenGraphBook,
    OpenGraphMedia,
    OpenGraphProfile,
    OpenGraphVideo,
    OpenGraphVideoActor,
    PropertyMetaTag,
    RobotsProps,
    SeoConfig,
    TagStyle,
    TagsValidationError,
    Twitter,
)
from .ports import TagRulesPort

__all__ = [
    # Entry points
    "run",
    "build_tags",
    # Input / output models
    "BuildTagsInput",
    "BuildTagsOutput",
    "TagsValidationError",
    # Configuration models
    "SeoConfig",
    "RobotsProps",
    "MobileAlternate",
    "LanguageAlternate",
    "OpenGraph",
    "OpenGraphMedia",
    "OpenGraphProfile",
    "OpenGraphBook",
    "OpenGraphArticle",
    "OpenGraphVideo",
    "OpenGraphVideoActor",
    "Facebook",
    "Twitter",
    "AdditionalMetaTag",
    "NameMetaTag",
    "PropertyMetaTag",
    "HttpEquivMetaTag",
    "AdditionalLinkTag",
    "TagStyle",
    # Building blocks
    "DEFAULT_TITLE_PLACEHOLDER",
    "escape_html",
    "meta_tag",
    "link_tag",
    "open_graph_meta",
    "format_title",
    "build_robots_directives",
    "build_open_graph_media_tags",
    "build_open_graph_tags",
    # Mapping config
    "config_from_mapping",
    "merge_config",
    # Ports
    "TagRulesPort",
]
