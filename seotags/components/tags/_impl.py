"""
TagBuilder - head tag rendering for SEO metadata.

Turns an SeoConfig into the exact <title>/<meta>/<link> fragment a page
emits in its document head.

Key behaviors:
- Every value is HTML-escaped before insertion (text content and attributes)
- Absent values suppress their tag or attribute; nothing renders as "None"
- Fixed section order; one tag per line; leading/trailing whitespace trimmed
- Pure function: same config always produces byte-identical output
"""

from __future__ import annotations

import html
import math
from collections.abc import Iterable, Mapping
from typing import TypeGuard

from .models import (
    AdditionalLinkTag,
    AdditionalMetaTag,
    HttpEquivMetaTag,
    NameMetaTag,
    OpenGraph,
    OpenGraphMedia,
    PropertyMetaTag,
    RobotsProps,
    SeoConfig,
    TagStyle,
)

DEFAULT_TITLE_PLACEHOLDER = "%s"

# --- Escaper ---


def escape_html(value: str) -> str:
    """Escape &, <, >, " and ' for text content or a double-quoted attribute."""
    return html.escape(value, quote=True)


def _present(value: str | None) -> TypeGuard[str]:
    return value is not None and value != ""


def _is_number(value: object) -> TypeGuard[int | float]:
    if not isinstance(value, int | float) or isinstance(value, bool):
        return False
    return math.isfinite(value)


def _number_text(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# --- Primitive Emitters ---


def _element(name: str, attributes: Mapping[str, str], style: TagStyle) -> str:
    attrs = " ".join(f'{key}="{escape_html(value)}"' for key, value in attributes.items())
    if style is TagStyle.XHTML:
        return f"<{name} {attrs} />"
    return f"<{name} {attrs}>"


def meta_tag(attributes: Mapping[str, str], style: TagStyle = TagStyle.HTML) -> str:
    """Render one <meta> element, attributes in the order given."""
    return _element("meta", attributes, style)


def link_tag(attributes: Mapping[str, str], style: TagStyle = TagStyle.HTML) -> str:
    """Render one <link> element, attributes in the order given."""
    return _element("link", attributes, style)


def open_graph_meta(property: str, content: str, style: TagStyle = TagStyle.HTML) -> str:
    """Render <meta property="og:{property}" content="...">."""
    return meta_tag({"property": f"og:{property}", "content": content}, style)


# --- Section Builders ---


def format_title(
    title: str,
    template: str | None,
    placeholder: str = DEFAULT_TITLE_PLACEHOLDER,
) -> str:
    """Substitute the first placeholder in template with title."""
    if not _present(template):
        return title
    return template.replace(placeholder, title, 1)


def build_robots_directives(
    noindex: bool | None,
    nofollow: bool | None,
    props: RobotsProps | None,
) -> list[str]:
    """
    Build the robots directive list in fixed order.

    noindex/nofollow only contribute when explicitly set; max_snippet
    contributes whenever it is a number, including 0.
    """
    directives: list[str] = []

    if noindex is not None:
        directives.append("noindex" if noindex else "index")
    if nofollow is not None:
        directives.append("nofollow" if nofollow else "follow")

    if props is None:
        return directives

    if props.nosnippet:
        directives.append("nosnippet")
    if _is_number(props.max_snippet):
        directives.append(f"max-snippet:{_number_text(props.max_snippet)}")
    if _present(props.max_image_preview):
        directives.append(f"max-image-preview:{props.max_image_preview}")
    if props.noarchive:
        directives.append("noarchive")
    if _present(props.unavailable_after):
        directives.append(f"unavailable_after:{props.unavailable_after}")
    if props.noimageindex:
        directives.append("noimageindex")
    if props.notranslate:
        directives.append("notranslate")

    return directives


def build_open_graph_media_tags(
    kind: str,
    media: Iterable[OpenGraphMedia],
    style: TagStyle = TagStyle.HTML,
) -> list[str]:
    """og:{kind} per medium, followed by whichever sub-attributes are set."""
    tags: list[str] = []

    for medium in media:
        tags.append(open_graph_meta(kind, medium.url, style))
        if _present(medium.alt):
            tags.append(open_graph_meta(f"{kind}:alt", medium.alt, style))
        if _present(medium.secure_url):
            tags.append(open_graph_meta(f"{kind}:secure_url", medium.secure_url, style))
        if _present(medium.type):
            tags.append(open_graph_meta(f"{kind}:type", medium.type, style))
        if _is_number(medium.width):
            tags.append(open_graph_meta(f"{kind}:width", _number_text(medium.width), style))
        if _is_number(medium.height):
            tags.append(open_graph_meta(f"{kind}:height", _number_text(medium.height), style))

    return tags


def build_open_graph_tags(
    og: OpenGraph,
    fallback_title: str | None = None,
    fallback_description: str | None = None,
    style: TagStyle = TagStyle.HTML,
) -> list[str]:
    """
    Build every og:, profile:, book:, article: and video: tag for a block.

    og:title and og:description fall back to the page title/description.
    """
    tags: list[str] = []

    def og_tag(property: str, value: str | None) -> None:
        if _present(value):
            tags.append(open_graph_meta(property, value, style))

    def og_each(property: str, values: Iterable[str]) -> None:
        for value in values:
            og_tag(property, value)

    og_tag("title", og.title if _present(og.title) else fallback_title)
    og_tag("description", og.description if _present(og.description) else fallback_description)
    og_tag("url", og.url)
    og_tag("type", og.type)

    tags.extend(build_open_graph_media_tags("image", og.images, style))
    tags.extend(build_open_graph_media_tags("video", og.videos, style))

    og_tag("locale", og.locale)
    og_tag("site_name", og.site_name)

    if og.profile is not None:
        og_tag("profile:first_name", og.profile.first_name)
        og_tag("profile:last_name", og.profile.last_name)
        og_tag("profile:username", og.profile.username)
        og_tag("profile:gender", og.profile.gender)

    if og.book is not None:
        og_each("book:author", og.book.authors)
        og_tag("book:isbn", og.book.isbn)
        og_tag("book:release_date", og.book.release_date)
        og_each("book:tag", og.book.tags)

    if og.article is not None:
        og_tag("article:published_time", og.article.published_time)
        og_tag("article:modified_time", og.article.modified_time)
        og_tag("article:expiration_time", og.article.expiration_time)
        og_each("article:author", og.article.authors)
        og_tag("article:section", og.article.section)
        og_each("article:tag", og.article.tags)

    if og.video is not None:
        video = og.video
        for actor in video.actors:
            if not _present(actor.profile):
                continue
            og_tag("video:actor", actor.profile)
            og_tag("video:actor:role", actor.role)
        og_each("video:director", video.directors)
        og_each("video:writer", video.writers)
        if _is_number(video.duration):
            og_tag("video:duration", _number_text(video.duration))
        og_tag("video:release_date", video.release_date)
        og_each("video:tag", video.tags)
        og_tag("video:series", video.series)

    return tags


def additional_meta_attributes(tag: AdditionalMetaTag) -> dict[str, str] | None:
    """content first, then the one identifying attribute. None for unknown entries."""
    if isinstance(tag, NameMetaTag):
        return {"content": tag.content, "name": tag.name}
    if isinstance(tag, PropertyMetaTag):
        return {"content": tag.content, "property": tag.property}
    if isinstance(tag, HttpEquivMetaTag):
        return {"content": tag.content, "http-equiv": tag.http_equiv}
    return None


def additional_link_attributes(tag: AdditionalLinkTag) -> dict[str, str] | None:
    """rel and href, then optional attributes in fixed order. None if rel or href is empty."""
    if not (_present(tag.rel) and _present(tag.href)):
        return None
    attributes = {"rel": tag.rel, "href": tag.href}
    optional = (
        ("sizes", tag.sizes),
        ("media", tag.media),
        ("type", tag.type),
        ("color", tag.color),
        ("as", tag.as_),
        ("crossorigin", tag.cross_origin),
    )
    for key, value in optional:
        if _present(value):
            attributes[key] = value
    return attributes


# --- Assembler ---


def build_tags(
    config: SeoConfig,
    style: TagStyle = TagStyle.HTML,
    title_placeholder: str = DEFAULT_TITLE_PLACEHOLDER,
) -> str:
    """
    Render the head fragment for a configuration.

    Order: title, description, robots, canonical, mobile alternate,
    language alternates, OpenGraph, Facebook, Twitter, additional meta,
    additional link. An empty config renders "".
    """
    lines: list[str] = []

    if _present(config.title):
        title = format_title(config.title, config.title_template, title_placeholder)
        lines.append(f"<title>{escape_html(title)}</title>")

    if _present(config.description):
        lines.append(meta_tag({"name": "description", "content": config.description}, style))

    robots = build_robots_directives(config.noindex, config.nofollow, config.robots_props)
    if robots:
        lines.append(meta_tag({"name": "robots", "content": ",".join(robots)}, style))

    if _present(config.canonical):
        lines.append(link_tag({"rel": "canonical", "href": config.canonical}, style))

    alternate = config.mobile_alternate
    if alternate is not None and _present(alternate.media) and _present(alternate.href):
        lines.append(
            link_tag({"rel": "alternate", "media": alternate.media, "href": alternate.href}, style)
        )

    for language in config.language_alternates:
        if not (_present(language.hreflang) and _present(language.href)):
            continue
        lines.append(
            link_tag(
                {"rel": "alternate", "hreflang": language.hreflang, "href": language.href}, style
            )
        )

    if config.open_graph is not None:
        lines.extend(
            build_open_graph_tags(
                config.open_graph,
                fallback_title=config.title,
                fallback_description=config.description,
                style=style,
            )
        )

    if config.facebook is not None and _present(config.facebook.app_id):
        lines.append(meta_tag({"property": "fb:app_id", "content": config.facebook.app_id}, style))

    if config.twitter is not None:
        twitter = (
            ("twitter:card", config.twitter.card_type),
            ("twitter:site", config.twitter.site),
            ("twitter:creator", config.twitter.handle),
        )
        for name, value in twitter:
            if _present(value):
                lines.append(meta_tag({"name": name, "content": value}, style))

    for meta in config.additional_meta_tags:
        meta_attributes = additional_meta_attributes(meta)
        if meta_attributes is not None:
            lines.append(meta_tag(meta_attributes, style))

    for link in config.additional_link_tags:
        link_attributes = additional_link_attributes(link)
        if link_attributes is not None:
            lines.append(link_tag(link_attributes, style))

    return "".join(line + "\n" for line in lines).strip()
