"""
Mapping -> SeoConfig coercion.

Accepts the camelCase configuration shape (titleTemplate, openGraph,
robotsProps, secureUrl, httpEquiv, crossOrigin, ...) and builds the typed,
immutable SeoConfig. Coercion is lenient: a value of the wrong shape is
dropped and reported as a TagsValidationError instead of raising, so tag
building stays total over any input.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from .models import (
    AdditionalLinkTag,
    AdditionalMetaTag,
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
    TagsValidationError,
    Twitter,
)

logger = logging.getLogger(__name__)


class _Reader:
    """Typed field access over one mapping, recording drops as warnings."""

    def __init__(
        self,
        data: Mapping[str, Any],
        path: str,
        warnings: list[TagsValidationError],
    ) -> None:
        self._data = data
        self._path = path
        self._warnings = warnings

    def _field(self, key: str) -> str:
        return f"{self._path}.{key}" if self._path else key

    def drop(self, key: str, expected: str, code: str = "invalid_type") -> None:
        value = self._data.get(key)
        name = self._field(key)
        message = f"Expected {expected}, got {type(value).__name__}"
        logger.debug("Dropping %s: %s", name, message)
        self._warnings.append(TagsValidationError(code=code, message=message, field=name))

    def text(self, key: str) -> str | None:
        value = self._data.get(key)
        if value is None:
            return None
        if isinstance(value, str):
            return value
        self.drop(key, "text")
        return None

    def flag(self, key: str) -> bool | None:
        value = self._data.get(key)
        if value is None or isinstance(value, bool):
            return value
        self.drop(key, "boolean")
        return None

    def number(self, key: str) -> int | float | None:
        value = self._data.get(key)
        if value is None:
            return None
        if isinstance(value, int | float) and not isinstance(value, bool):
            return value
        self.drop(key, "number")
        return None

    def block(self, key: str) -> _Reader | None:
        value = self._data.get(key)
        if value is None:
            return None
        if isinstance(value, Mapping):
            return _Reader(value, self._field(key), self._warnings)
        self.drop(key, "mapping")
        return None

    def items(self, key: str) -> list[_Reader]:
        """Mapping entries of a sequence field; non-mapping entries are dropped."""
        readers: list[_Reader] = []
        for index, entry in enumerate(self._sequence(key)):
            name = f"{self._field(key)}[{index}]"
            if isinstance(entry, Mapping):
                readers.append(_Reader(entry, name, self._warnings))
            else:
                self._warn_entry(name, "mapping", entry)
        return readers

    def texts(self, key: str) -> tuple[str, ...]:
        values: list[str] = []
        for index, entry in enumerate(self._sequence(key)):
            if isinstance(entry, str):
                values.append(entry)
            else:
                self._warn_entry(f"{self._field(key)}[{index}]", "text", entry)
        return tuple(values)

    def _sequence(self, key: str) -> list[Any]:
        value = self._data.get(key)
        if value is None:
            return []
        if isinstance(value, list | tuple):
            return list(value)
        self.drop(key, "sequence")
        return []

    def _warn_entry(self, name: str, expected: str, entry: Any) -> None:
        message = f"Expected {expected}, got {type(entry).__name__}"
        logger.debug("Dropping %s: %s", name, message)
        self._warnings.append(TagsValidationError(code="invalid_type", message=message, field=name))

    def missing(self, key: str) -> None:
        name = self._field(key)
        logger.debug("Dropping %s: required field missing", name)
        self._warnings.append(
            TagsValidationError(code="missing_field", message="Required field missing", field=name)
        )


# --- Block Parsers ---


def _robots_props(r: _Reader) -> RobotsProps:
    max_snippet = r.number("maxSnippet")
    if max_snippet is not None and not (
        math.isfinite(max_snippet) and float(max_snippet).is_integer()
    ):
        r.drop("maxSnippet", "whole number")
        max_snippet = None
    return RobotsProps(
        nosnippet=r.flag("nosnippet"),
        max_snippet=int(max_snippet) if max_snippet is not None else None,
        max_image_preview=r.text("maxImagePreview"),
        noarchive=r.flag("noarchive"),
        unavailable_after=r.text("unavailableAfter"),
        noimageindex=r.flag("noimageindex"),
        notranslate=r.flag("notranslate"),
    )


def _media(r: _Reader) -> OpenGraphMedia | None:
    url = r.text("url")
    if url is None:
        r.missing("url")
        return None
    return OpenGraphMedia(
        url=url,
        alt=r.text("alt"),
        secure_url=r.text("secureUrl"),
        type=r.text("type"),
        width=r.number("width"),
        height=r.number("height"),
    )


def _media_list(r: _Reader, key: str) -> tuple[OpenGraphMedia, ...]:
    media = (_media(entry) for entry in r.items(key))
    return tuple(m for m in media if m is not None)


def _video(r: _Reader) -> OpenGraphVideo:
    actors: list[OpenGraphVideoActor] = []
    for entry in r.items("actors"):
        profile = entry.text("profile")
        if not profile:
            entry.missing("profile")
            continue
        actors.append(OpenGraphVideoActor(profile=profile, role=entry.text("role")))

    return OpenGraphVideo(
        actors=tuple(actors),
        directors=r.texts("directors"),
        writers=r.texts("writers"),
        duration=r.number("duration"),
        release_date=r.text("releaseDate"),
        tags=r.texts("tags"),
        series=r.text("series"),
    )


def _open_graph(r: _Reader) -> OpenGraph:
    profile = r.block("profile")
    book = r.block("book")
    article = r.block("article")
    video = r.block("video")

    return OpenGraph(
        title=r.text("title"),
        description=r.text("description"),
        url=r.text("url"),
        type=r.text("type"),
        locale=r.text("locale"),
        site_name=r.text("site_name"),
        images=_media_list(r, "images"),
        videos=_media_list(r, "videos"),
        profile=OpenGraphProfile(
            first_name=profile.text("firstName"),
            last_name=profile.text("lastName"),
            username=profile.text("username"),
            gender=profile.text("gender"),
        )
        if profile is not None
        else None,
        book=OpenGraphBook(
            authors=book.texts("authors"),
            isbn=book.text("isbn"),
            release_date=book.text("releaseDate"),
            tags=book.texts("tags"),
        )
        if book is not None
        else None,
        article=OpenGraphArticle(
            published_time=article.text("publishedTime"),
            modified_time=article.text("modifiedTime"),
            expiration_time=article.text("expirationTime"),
            authors=article.texts("authors"),
            section=article.text("section"),
            tags=article.texts("tags"),
        )
        if article is not None
        else None,
        video=_video(video) if video is not None else None,
    )


def _additional_meta_tag(r: _Reader) -> AdditionalMetaTag | None:
    """First present of name > property > httpEquiv identifies the tag."""
    content = r.text("content")
    if content is None:
        r.missing("content")
        return None

    name = r.text("name")
    if name:
        return NameMetaTag(name=name, content=content)
    prop = r.text("property")
    if prop:
        return PropertyMetaTag(property=prop, content=content)
    http_equiv = r.text("httpEquiv")
    if http_equiv:
        return HttpEquivMetaTag(http_equiv=http_equiv, content=content)

    r.missing("name")
    return None


def _additional_link_tag(r: _Reader) -> AdditionalLinkTag | None:
    rel = r.text("rel")
    href = r.text("href")
    if rel is None or href is None:
        r.missing("rel" if rel is None else "href")
        return None
    return AdditionalLinkTag(
        rel=rel,
        href=href,
        sizes=r.text("sizes"),
        media=r.text("media"),
        type=r.text("type"),
        color=r.text("color"),
        as_=r.text("as"),
        cross_origin=r.text("crossOrigin"),
    )


# --- Entry Point ---


def config_from_mapping(data: Mapping[str, Any]) -> tuple[SeoConfig, list[TagsValidationError]]:
    """
    Build an SeoConfig from a camelCase mapping.

    Returns:
        Tuple of (config, warnings). Every warning names a dropped field.
    """
    warnings: list[TagsValidationError] = []
    r = _Reader(data, "", warnings)

    robots = r.block("robotsProps")
    mobile = r.block("mobileAlternate")
    open_graph = r.block("openGraph")
    facebook = r.block("facebook")
    twitter = r.block("twitter")

    mobile_alternate: MobileAlternate | None = None
    if mobile is not None:
        media, href = mobile.text("media"), mobile.text("href")
        if media is not None and href is not None:
            mobile_alternate = MobileAlternate(media=media, href=href)
        else:
            mobile.missing("media" if media is None else "href")

    language_alternates: list[LanguageAlternate] = []
    for entry in r.items("languageAlternates"):
        hreflang, href = entry.text("hreflang"), entry.text("href")
        if hreflang is None or href is None:
            entry.missing("hreflang" if hreflang is None else "href")
            continue
        language_alternates.append(LanguageAlternate(hreflang=hreflang, href=href))

    meta_tags = (_additional_meta_tag(entry) for entry in r.items("additionalMetaTags"))
    link_tags = (_additional_link_tag(entry) for entry in r.items("additionalLinkTags"))

    config = SeoConfig(
        title=r.text("title"),
        title_template=r.text("titleTemplate"),
        description=r.text("description"),
        noindex=r.flag("noindex"),
        nofollow=r.flag("nofollow"),
        robots_props=_robots_props(robots) if robots is not None else None,
        canonical=r.text("canonical"),
        mobile_alternate=mobile_alternate,
        language_alternates=tuple(language_alternates),
        open_graph=_open_graph(open_graph) if open_graph is not None else None,
        facebook=Facebook(app_id=facebook.text("appId")) if facebook is not None else None,
        twitter=Twitter(
            card_type=twitter.text("cardType"),
            site=twitter.text("site"),
            handle=twitter.text("handle"),
        )
        if twitter is not None
        else None,
        additional_meta_tags=tuple(m for m in meta_tags if m is not None),
        additional_link_tags=tuple(link for link in link_tags if link is not None),
    )
    return config, warnings


def merge_config(defaults: Mapping[str, Any], page: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge site-wide defaults under a page config.

    Page values win. Nested mappings merge key by key; sequences and
    scalars are replaced. A page value of None leaves the default in place.
    """
    merged: dict[str, Any] = dict(defaults)
    for key, value in page.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config(current, value)
        else:
            merged[key] = value
    return merged
