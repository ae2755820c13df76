"""
Tags component input/output models.

Configuration is immutable: every block is a frozen dataclass and every
sequence is a tuple. ``None`` means "not set" and suppresses output.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# --- Output Style ---


class TagStyle(str, Enum):
    """How void elements are closed."""

    HTML = "html"  # <meta ...>
    XHTML = "xhtml"  # <meta ... />


# --- Validation Error ---


@dataclass(frozen=True)
class TagsValidationError:
    """Configuration problem found while coercing input."""

    code: str
    message: str
    field: str | None = None


# --- Robots ---


@dataclass(frozen=True)
class RobotsProps:
    """Extra robots directives."""

    nosnippet: bool | None = None
    max_snippet: int | None = None
    max_image_preview: str | None = None  # none, standard, large
    noarchive: bool | None = None
    unavailable_after: str | None = None
    noimageindex: bool | None = None
    notranslate: bool | None = None


# --- Links ---


@dataclass(frozen=True)
class MobileAlternate:
    media: str
    href: str


@dataclass(frozen=True)
class LanguageAlternate:
    hreflang: str
    href: str


# --- OpenGraph ---


@dataclass(frozen=True)
class OpenGraphMedia:
    """An og:image or og:video entry."""

    url: str
    alt: str | None = None
    secure_url: str | None = None
    type: str | None = None
    width: int | float | None = None
    height: int | float | None = None


@dataclass(frozen=True)
class OpenGraphProfile:
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    gender: str | None = None


@dataclass(frozen=True)
class OpenGraphBook:
    authors: tuple[str, ...] = ()
    isbn: str | None = None
    release_date: str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class OpenGraphArticle:
    published_time: str | None = None
    modified_time: str | None = None
    expiration_time: str | None = None
    authors: tuple[str, ...] = ()
    section: str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class OpenGraphVideoActor:
    profile: str
    role: str | None = None


@dataclass(frozen=True)
class OpenGraphVideo:
    actors: tuple[OpenGraphVideoActor, ...] = ()
    directors: tuple[str, ...] = ()
    writers: tuple[str, ...] = ()
    duration: int | float | None = None
    release_date: str | None = None
    tags: tuple[str, ...] = ()
    series: str | None = None


@dataclass(frozen=True)
class OpenGraph:
    """
    OpenGraph block.

    Presence of the block (even empty) enables og:title/og:description
    fallback to the top-level title and description.
    """

    title: str | None = None
    description: str | None = None
    url: str | None = None
    type: str | None = None
    locale: str | None = None
    site_name: str | None = None
    images: tuple[OpenGraphMedia, ...] = ()
    videos: tuple[OpenGraphMedia, ...] = ()
    profile: OpenGraphProfile | None = None
    book: OpenGraphBook | None = None
    article: OpenGraphArticle | None = None
    video: OpenGraphVideo | None = None


# --- Social ---


@dataclass(frozen=True)
class Facebook:
    app_id: str | None = None


@dataclass(frozen=True)
class Twitter:
    card_type: str | None = None
    site: str | None = None
    handle: str | None = None


# --- Additional Tags ---


@dataclass(frozen=True)
class NameMetaTag:
    """<meta content="..." name="...">"""

    name: str
    content: str


@dataclass(frozen=True)
class PropertyMetaTag:
    """<meta content="..." property="...">"""

    property: str
    content: str


@dataclass(frozen=True)
class HttpEquivMetaTag:
    """<meta content="..." http-equiv="...">"""

    http_equiv: str
    content: str


AdditionalMetaTag = NameMetaTag | PropertyMetaTag | HttpEquivMetaTag


@dataclass(frozen=True)
class AdditionalLinkTag:
    rel: str
    href: str
    sizes: str | None = None
    media: str | None = None
    type: str | None = None
    color: str | None = None
    as_: str | None = None
    cross_origin: str | None = None


# --- Configuration ---


@dataclass(frozen=True)
class SeoConfig:
    """Everything a page can ask to have rendered in its head."""

    title: str | None = None
    title_template: str | None = None
    description: str | None = None
    noindex: bool | None = None
    nofollow: bool | None = None
    robots_props: RobotsProps | None = None
    canonical: str | None = None
    mobile_alternate: MobileAlternate | None = None
    language_alternates: tuple[LanguageAlternate, ...] = ()
    open_graph: OpenGraph | None = None
    facebook: Facebook | None = None
    twitter: Twitter | None = None
    additional_meta_tags: tuple[AdditionalMetaTag, ...] = ()
    additional_link_tags: tuple[AdditionalLinkTag, ...] = ()


# --- Input / Output Models ---


@dataclass(frozen=True)
class BuildTagsInput:
    """Input for building head tags from a typed or camelCase mapping config."""

    config: SeoConfig | Mapping[str, Any]


@dataclass(frozen=True)
class BuildTagsOutput:
    """Rendered head fragment plus any coercion warnings."""

    html: str
    warnings: list[TagsValidationError] = field(default_factory=list)
    success: bool = True
