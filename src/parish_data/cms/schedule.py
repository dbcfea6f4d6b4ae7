"""Mass schedule and parish events.

Both sources read JSON from the content directory on a worker thread, so they
are awaitable fetchers for ``use_data``.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from parish_data.cms._documents import load_document

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

MASS_TIMES_FILE = "mass-times.json"
EVENTS_FILE = "events.json"


@dataclass(frozen=True)
class ServiceTime:
    day: str
    time: str
    type: str


@dataclass(frozen=True)
class MassServices:
    weekday: tuple[ServiceTime, ...]
    weekend: tuple[ServiceTime, ...]
    special: tuple[ServiceTime, ...]


@dataclass(frozen=True)
class ParishEvent:
    id: str
    title: str
    date: str
    time: str
    description: str
    category: str


def _service_times(raw: list[dict[str, Any]]) -> tuple[ServiceTime, ...]:
    return tuple(ServiceTime(day=s["day"], time=s["time"], type=s["type"]) for s in raw)


def parse_mass_services(raw: dict[str, Any]) -> MassServices:
    return MassServices(
        weekday=_service_times(raw.get("weekday", [])),
        weekend=_service_times(raw.get("weekend", [])),
        special=_service_times(raw.get("special", [])),
    )


def parse_events(raw: list[dict[str, Any]]) -> list[ParishEvent]:
    return [
        ParishEvent(
            id=str(e["id"]),
            title=e["title"],
            date=e["date"],
            time=e["time"],
            description=e.get("description", ""),
            category=e.get("category", ""),
        )
        for e in raw
    ]


async def load_mass_services(content_dir: Path | None = None) -> MassServices:
    raw = await asyncio.to_thread(load_document, MASS_TIMES_FILE, content_dir)
    services = parse_mass_services(raw)
    logger.debug(
        "Loaded mass services (%d weekday, %d weekend, %d special)",
        len(services.weekday),
        len(services.weekend),
        len(services.special),
    )
    return services


async def load_parish_events(content_dir: Path | None = None, limit: int | None = None) -> list[ParishEvent]:
    """Load parish events in file order, keeping the first ``limit`` when a limit is given."""
    raw = await asyncio.to_thread(load_document, EVENTS_FILE, content_dir)
    events = parse_events(raw)
    logger.debug("Loaded %d parish events", len(events))
    return events[:limit] if limit else events
