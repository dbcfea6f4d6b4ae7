"""Parish data hooks.

Each hook is ``use_data`` with a fixed cache key scheme, so every subscriber
asking for the same entity, listing or document shares one cache entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypedDict

from parish_data.church.models import ChurchEntity, EntityType
from parish_data.church.structure import (
    get_all_church_entities_by_type,
    get_church_children,
    get_church_entity,
    get_church_path,
)
from parish_data.cms.content import get_cms_content
from parish_data.cms.images import get_cms_images, get_page_image
from parish_data.cms.schedule import load_mass_services, load_parish_events
from parish_data.context import current_content_dir
from parish_data.hooks.data import use_data
from parish_data.hooks.derived import DerivedValue

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from parish_data.cache.protocol import CacheStore
    from parish_data.cms.content import (
        ContactSettings,
        FeatureFlags,
        ParishSettings,
        SocialSettings,
        WebsiteSettings,
    )
    from parish_data.cms.images import CmsImages, ImageRef
    from parish_data.cms.schedule import MassServices, ParishEvent
    from parish_data.hooks.data import DataHook

CMS_CONTENT_KEY = "cms-content"
CMS_IMAGES_KEY = "cms-images"
PARISH_GROUPS_KEY = "parish-groups-all"
MASS_SERVICES_KEY = "mass-services"


@dataclass(frozen=True)
class ParishGroupFilters:
    """Case-insensitive substring filters for parish groups. Unset filters match everything."""

    age_group: str | None = None
    schedule: str | None = None
    ministry: str | None = None
    search_term: str | None = None


class PageData(TypedDict):
    content: WebsiteSettings
    images: CmsImages
    page_image: ImageRef | None
    parish: ParishSettings
    contact: ContactSettings
    social: SocialSettings
    features: FeatureFlags


def use_church_entity(entity_id: str | None, *, store: CacheStore | None = None) -> DataHook[ChurchEntity | None]:
    return use_data(
        f"church-entity-{entity_id}" if entity_id else None,
        lambda: get_church_entity(entity_id) if entity_id else None,
        store=store,
    )


def use_church_children(parent_id: str | None, *, store: CacheStore | None = None) -> DataHook[list[ChurchEntity]]:
    return use_data(
        f"church-children-{parent_id}" if parent_id else None,
        lambda: get_church_children(parent_id) if parent_id else [],
        store=store,
    )


def use_church_entities_by_type(
    entity_type: EntityType | str | None,
    *,
    store: CacheStore | None = None,
) -> DataHook[list[ChurchEntity]]:
    return use_data(
        f"church-entities-{entity_type}" if entity_type else None,
        lambda: get_all_church_entities_by_type(entity_type) if entity_type else [],
        store=store,
    )


def use_church_path(entity_id: str | None, *, store: CacheStore | None = None) -> DataHook[list[ChurchEntity]]:
    """Breadcrumb from the parish root down to ``entity_id``."""
    return use_data(
        f"church-path-{entity_id}" if entity_id else None,
        lambda: get_church_path(entity_id) if entity_id else [],
        store=store,
    )


def use_cms_content(*, store: CacheStore | None = None) -> DataHook[WebsiteSettings]:
    content_dir = current_content_dir()
    return use_data(CMS_CONTENT_KEY, lambda: get_cms_content(content_dir), store=store)


def use_cms_images(*, store: CacheStore | None = None) -> DataHook[CmsImages]:
    content_dir = current_content_dir()
    return use_data(CMS_IMAGES_KEY, lambda: get_cms_images(content_dir), store=store)


def filter_parish_groups(
    groups: Sequence[ChurchEntity],
    filters: ParishGroupFilters,
    structure: Mapping[str, ChurchEntity] | None = None,
) -> list[ChurchEntity]:
    """Apply ``filters`` to ``groups``.

    A filter whose target field is missing on a group does not exclude it. The
    ministry filter matches against the title of the group's parent entity.
    """
    return [group for group in groups if _matches(group, filters, structure)]


def _matches(
    group: ChurchEntity,
    filters: ParishGroupFilters,
    structure: Mapping[str, ChurchEntity] | None,
) -> bool:
    meta = group.metadata

    if filters.age_group and meta is not None and meta.age_group:
        if filters.age_group.lower() not in meta.age_group.lower():
            return False

    if filters.schedule and meta is not None and meta.schedule is not None and meta.schedule.day:
        if filters.schedule.lower() not in meta.schedule.day.lower():
            return False

    if filters.ministry and group.parent_id:
        parent = get_church_entity(group.parent_id, structure)
        if parent is None or filters.ministry.lower() not in parent.title.lower():
            return False

    if filters.search_term:
        needle = filters.search_term.lower()
        title_match = needle in group.title.lower()
        desc_match = group.description is not None and needle in group.description.lower()
        req_match = meta is not None and any(needle in req.lower() for req in meta.requirements)
        if not (title_match or desc_match or req_match):
            return False

    return True


def use_parish_groups(
    filters: ParishGroupFilters | None = None,
    *,
    store: CacheStore | None = None,
) -> DerivedValue[list[ChurchEntity] | None]:
    """All parish groups, narrowed by ``filters``. The unfiltered list is what gets cached."""
    groups = use_data(PARISH_GROUPS_KEY, lambda: get_all_church_entities_by_type(EntityType.GROUP), store=store)

    def select(all_groups: list[ChurchEntity] | None) -> list[ChurchEntity] | None:
        if all_groups is None or filters is None:
            return all_groups
        return filter_parish_groups(all_groups, filters)

    return DerivedValue(select, groups)


def use_mass_services(*, store: CacheStore | None = None) -> DataHook[MassServices]:
    """Mass schedule. Loads asynchronously, so an event loop must be running."""
    content_dir = current_content_dir()
    return use_data(MASS_SERVICES_KEY, lambda: load_mass_services(content_dir), store=store)


def use_parish_events(limit: int | None = None, *, store: CacheStore | None = None) -> DataHook[list[ParishEvent]]:
    """Upcoming parish events, cached separately per ``limit``. Needs a running event loop."""
    content_dir = current_content_dir()
    return use_data(
        f"parish-events-{limit}" if limit else "parish-events-all",
        lambda: load_parish_events(content_dir, limit),
        store=store,
    )


def use_page_data(page_name: str, *, store: CacheStore | None = None) -> DerivedValue[PageData | None]:
    """Content and images bundled for one page. None until both are available."""
    content = use_cms_content(store=store)
    images = use_cms_images(store=store)

    def combine(settings: WebsiteSettings | None, catalogue: CmsImages | None) -> PageData | None:
        if settings is None or catalogue is None:
            return None
        return {
            "content": settings,
            "images": catalogue,
            "page_image": get_page_image(catalogue, page_name),
            "parish": settings["parish"],
            "contact": settings["contact"],
            "social": settings["social"],
            "features": settings["features"],
        }

    return DerivedValue(combine, content, images)
