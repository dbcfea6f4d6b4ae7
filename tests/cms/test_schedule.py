from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from parish_data.cms.schedule import (
    ParishEvent,
    ServiceTime,
    load_mass_services,
    load_parish_events,
    parse_events,
    parse_mass_services,
)
from parish_data.errors import ContentLoadError

if TYPE_CHECKING:
    from pathlib import Path


class TestParsing:
    def test_parse_mass_services(self) -> None:
        services = parse_mass_services({"weekday": [{"day": "Monday", "time": "7:00 AM", "type": "Mass"}]})

        assert services.weekday == (ServiceTime(day="Monday", time="7:00 AM", type="Mass"),)
        assert services.weekend == ()
        assert services.special == ()

    def test_parse_events_defaults_optional_fields(self) -> None:
        events = parse_events([{"id": 7, "title": "Fete", "date": "2025-06-01", "time": "12:00 PM"}])

        assert events == [
            ParishEvent(id="7", title="Fete", date="2025-06-01", time="12:00 PM", description="", category="")
        ]


class TestLoaders:
    @pytest.mark.asyncio
    async def test_bundled_mass_services(self) -> None:
        services = await load_mass_services()

        assert len(services.weekday) == 6
        assert len(services.weekend) == 4
        assert services.special[1].day == "Confessions"

    @pytest.mark.asyncio
    async def test_events_in_file_order(self) -> None:
        events = await load_parish_events()

        assert [e.id for e in events] == ["1", "2", "3", "4"]

    @pytest.mark.asyncio
    async def test_events_limit(self) -> None:
        events = await load_parish_events(limit=1)

        assert [e.title for e in events] == ["Lenten Evening Prayer"]

    @pytest.mark.asyncio
    async def test_events_override_replaces_list(self, content_dir: Path) -> None:
        (content_dir / "events.json").write_text(
            json.dumps([{"id": "x", "title": "Carols", "date": "2025-12-20", "time": "6:00 PM"}])
        )

        events = await load_parish_events(content_dir)

        assert [e.title for e in events] == ["Carols"]

    @pytest.mark.asyncio
    async def test_broken_file_raises(self, content_dir: Path) -> None:
        (content_dir / "mass-times.json").write_text("not json")

        with pytest.raises(ContentLoadError):
            await load_mass_services(content_dir)
