"""Queries and immutable updates over the normalised parish structure.

The structure is an ``id -> ChurchEntity`` mapping. Each entity lists its
children by id and names its parent, so lookups never walk nested objects.
Every query takes an optional ``structure`` and falls back to the bundled
parish tree.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING

from parish_data.church.models import ChurchEntity, EntityType, entity_from_dict
from parish_data.data import DATA_DIR

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

ROOT_ID = "0"


@lru_cache(maxsize=1)
def load_church_structure() -> Mapping[str, ChurchEntity]:
    """Load the bundled parish structure. The result is read-only and shared."""
    raw = json.loads((DATA_DIR / "church_structure.json").read_text(encoding="utf-8"))
    structure = {entity_id: entity_from_dict(entity) for entity_id, entity in raw.items()}
    logger.debug("Loaded %d church entities", len(structure))
    return MappingProxyType(structure)


def _resolve(structure: Mapping[str, ChurchEntity] | None) -> Mapping[str, ChurchEntity]:
    return structure if structure is not None else load_church_structure()


def get_church_entity(entity_id: str, structure: Mapping[str, ChurchEntity] | None = None) -> ChurchEntity | None:
    return _resolve(structure).get(entity_id)


def get_church_children(parent_id: str, structure: Mapping[str, ChurchEntity] | None = None) -> list[ChurchEntity]:
    """Return the parent's children in order, skipping ids with no entity."""
    structure = _resolve(structure)
    parent = structure.get(parent_id)
    if parent is None:
        return []
    return [structure[child_id] for child_id in parent.child_ids if child_id in structure]


def get_church_parent(child_id: str, structure: Mapping[str, ChurchEntity] | None = None) -> ChurchEntity | None:
    structure = _resolve(structure)
    child = structure.get(child_id)
    if child is None or child.parent_id is None:
        return None
    return structure.get(child.parent_id)


def get_all_church_entities_by_type(
    entity_type: EntityType | str,
    structure: Mapping[str, ChurchEntity] | None = None,
) -> list[ChurchEntity]:
    return [entity for entity in _resolve(structure).values() if entity.type == entity_type]


def get_church_path(entity_id: str, structure: Mapping[str, ChurchEntity] | None = None) -> list[ChurchEntity]:
    """Return the breadcrumb from the root down to ``entity_id``, or [] if unknown."""
    structure = _resolve(structure)
    path: list[ChurchEntity] = []
    seen: set[str] = set()
    current = structure.get(entity_id)
    while current is not None and current.id not in seen:
        seen.add(current.id)
        path.append(current)
        current = structure.get(current.parent_id) if current.parent_id is not None else None
    path.reverse()
    return path


def add_church_entity(
    structure: Mapping[str, ChurchEntity],
    parent_id: str,
    new_entity: ChurchEntity,
) -> dict[str, ChurchEntity]:
    """Return a copy of ``structure`` with ``new_entity`` appended under ``parent_id``.

    An unknown parent leaves the structure unchanged.
    """
    parent = structure.get(parent_id)
    if parent is None:
        return dict(structure)
    updated = dict(structure)
    updated[parent_id] = replace(parent, child_ids=(*parent.child_ids, new_entity.id))
    updated[new_entity.id] = replace(new_entity, parent_id=parent_id)
    return updated


def remove_church_entity(
    structure: Mapping[str, ChurchEntity],
    parent_id: str,
    entity_id: str,
) -> dict[str, ChurchEntity]:
    """Return a copy of ``structure`` without ``entity_id``, detached from ``parent_id``.

    Descendants of the removed entity are left in place.
    """
    parent = structure.get(parent_id)
    if parent is None:
        return dict(structure)
    updated = {key: entity for key, entity in structure.items() if key != entity_id}
    updated[parent_id] = replace(parent, child_ids=tuple(cid for cid in parent.child_ids if cid != entity_id))
    return updated


def update_church_entity(
    structure: Mapping[str, ChurchEntity],
    entity_id: str,
    **updates: object,
) -> dict[str, ChurchEntity]:
    entity = structure.get(entity_id)
    if entity is None:
        return dict(structure)
    updated = dict(structure)
    updated[entity_id] = replace(entity, **updates)  # type: ignore[arg-type]
    return updated
