from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class EntityType(StrEnum):
    PARISH = "parish"
    MINISTRY = "ministry"
    GROUP = "group"
    EVENT = "event"
    SACRAMENT = "sacrament"
    SERVICE = "service"


@dataclass(frozen=True)
class ContactInfo:
    email: str | None = None
    phone: str | None = None
    coordinator: str | None = None


@dataclass(frozen=True)
class Schedule:
    day: str | None = None
    time: str | None = None
    frequency: str | None = None


@dataclass(frozen=True)
class EntityMetadata:
    contact_info: ContactInfo | None = None
    schedule: Schedule | None = None
    location: str | None = None
    age_group: str | None = None
    requirements: tuple[str, ...] = ()
    image_id: str | None = None


@dataclass(frozen=True)
class ChurchEntity:
    """One node of the parish organisation tree.

    Attributes:
        id: Unique entity id. The parish root is ``"0"``.
        type: Kind of entity.
        title: Display title.
        description: Optional short description.
        child_ids: Ids of child entities, in display order.
        parent_id: Id of the parent entity, None for the root.
        metadata: Optional contact, schedule and eligibility details.
    """

    id: str
    type: EntityType
    title: str
    description: str | None = None
    child_ids: tuple[str, ...] = ()
    parent_id: str | None = None
    metadata: EntityMetadata | None = field(default=None)


def entity_from_dict(raw: dict[str, Any]) -> ChurchEntity:
    """Build a ``ChurchEntity`` from its JSON form."""
    raw_meta = raw.get("metadata")
    metadata: EntityMetadata | None = None
    if raw_meta is not None:
        contact = raw_meta.get("contact_info")
        schedule = raw_meta.get("schedule")
        metadata = EntityMetadata(
            contact_info=ContactInfo(**contact) if contact is not None else None,
            schedule=Schedule(**schedule) if schedule is not None else None,
            location=raw_meta.get("location"),
            age_group=raw_meta.get("age_group"),
            requirements=tuple(raw_meta.get("requirements", ())),
            image_id=raw_meta.get("image_id"),
        )
    return ChurchEntity(
        id=raw["id"],
        type=EntityType(raw["type"]),
        title=raw["title"],
        description=raw.get("description"),
        child_ids=tuple(raw.get("child_ids", ())),
        parent_id=raw.get("parent_id"),
        metadata=metadata,
    )
