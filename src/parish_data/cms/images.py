from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict, cast

from parish_data.cms._documents import load_document

if TYPE_CHECKING:
    from pathlib import Path

IMAGES_FILE = "images.json"


class ImageRef(TypedDict):
    url: str
    alt: str


class HeroImage(TypedDict):
    id: str
    url: str
    alt: str
    title: str
    subtitle: str
    overlay: str
    priority: bool


class CategorisedImage(TypedDict):
    id: str
    url: str
    alt: str
    category: str


class SacramentImage(TypedDict):
    sacrament: str
    url: str
    alt: str


class CtaImages(TypedDict):
    priest: ImageRef
    venue: ImageRef


class CmsImages(TypedDict):
    logo: str
    hero: list[HeroImage]
    history: list[CategorisedImage]
    news: list[CategorisedImage]
    cta: CtaImages
    sacraments: list[SacramentImage]
    pages: dict[str, ImageRef]


def get_cms_images(content_dir: Path | None = None) -> CmsImages:
    """Load the image catalogue, overlaying ``content_dir/images.json`` when present."""
    return cast("CmsImages", load_document(IMAGES_FILE, content_dir))


def get_page_image(images: CmsImages, page_name: str) -> ImageRef | None:
    return images["pages"].get(page_name)


def get_sacrament_image(images: CmsImages, sacrament: str) -> SacramentImage | None:
    return next((image for image in images["sacraments"] if image["sacrament"] == sacrament), None)


def _indexed_or_first(items: list[CategorisedImage], index: int) -> CategorisedImage | None:
    if not items:
        return None
    if 0 <= index < len(items):
        return items[index]
    return items[0]


def get_news_image(images: CmsImages, index: int) -> CategorisedImage | None:
    """Return the news image at ``index``, falling back to the first one."""
    return _indexed_or_first(images["news"], index)


def get_history_image(images: CmsImages, index: int) -> CategorisedImage | None:
    """Return the history image at ``index``, falling back to the first one."""
    return _indexed_or_first(images["history"], index)


def get_hero_titles(images: CmsImages) -> list[dict[str, str]]:
    return [{"title": hero["title"], "subtitle": hero["subtitle"]} for hero in images["hero"]]
