from parish_data.church.models import ChurchEntity, ContactInfo, EntityMetadata, EntityType, Schedule
from parish_data.church.structure import (
    get_all_church_entities_by_type,
    get_church_children,
    get_church_entity,
    get_church_parent,
    get_church_path,
    load_church_structure,
)

__all__ = [
    "ChurchEntity",
    "ContactInfo",
    "EntityMetadata",
    "EntityType",
    "Schedule",
    "get_all_church_entities_by_type",
    "get_church_children",
    "get_church_entity",
    "get_church_parent",
    "get_church_path",
    "load_church_structure",
]
