from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from parish_data.cms.content import get_announcements, get_full_parish_name, get_office_hours, get_social_links

if TYPE_CHECKING:
    from collections.abc import Sequence

    from parish_data.church.models import ChurchEntity
    from parish_data.cms.content import WebsiteSettings
    from parish_data.cms.schedule import MassServices, ParishEvent, ServiceTime

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_content_summary(content: WebsiteSettings) -> None:
    parish = content["parish"]
    contact = content["contact"]
    hours = get_office_hours(content)
    console.print(f"[bold]{get_full_parish_name(content)}[/bold]")
    console.print(f"  Priest: {parish['priest']}")
    console.print(f"  Diocese: {parish['diocese']} (est. {parish['established']})")
    console.print(f"  Office hours: {hours['days']} {hours['time']}")
    console.print(f"  Address: {contact['address']}")
    console.print(f"  Phone: {contact['phone']}  Email: {contact['email']}")
    for link in get_social_links(content):
        console.print(f"  {link['name']}: {link['url']}")

    announcements = get_announcements(content)
    if announcements:
        console.print()
        console.print("[bold]Announcements[/bold]")
        for ann in announcements:
            console.print(f"  [cyan]{ann['title']}[/cyan]: {ann['message']}")

    console.print()
    console.print("[bold]Features[/bold]")
    for name, enabled in content["features"].items():
        mark = "[green]on[/green]" if enabled else "[dim]off[/dim]"
        console.print(f"  {name}: {mark}")


def print_entity(entity: ChurchEntity) -> None:
    console.print(f"[bold]{entity.title}[/bold] [dim]({entity.type}, id={entity.id})[/dim]")
    if entity.description:
        console.print(f"  {entity.description}")
    meta = entity.metadata
    if meta is None:
        return
    if meta.age_group:
        console.print(f"  Age group: {meta.age_group}")
    if meta.schedule is not None:
        parts = [p for p in (meta.schedule.day, meta.schedule.time, meta.schedule.frequency) if p]
        console.print(f"  Schedule: {', '.join(parts)}")
    if meta.contact_info is not None:
        parts = [p for p in (meta.contact_info.coordinator, meta.contact_info.email, meta.contact_info.phone) if p]
        console.print(f"  Contact: {', '.join(parts)}")
    for req in meta.requirements:
        console.print(f"  - {req}")


def print_entities(entities: Sequence[ChurchEntity], title: str) -> None:
    if not entities:
        console.print(f"No {title.lower()} found.")
        return
    table = Table(title=title, show_edge=False, pad_edge=False)
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Age group")
    table.add_column("Schedule")
    for entity in entities:
        meta = entity.metadata
        schedule = meta.schedule if meta is not None else None
        table.add_row(
            entity.id,
            entity.title,
            (meta.age_group if meta is not None else None) or "",
            " ".join(p for p in ((schedule.day, schedule.time) if schedule is not None else ()) if p),
        )
    console.print(table)


def print_path(path: Sequence[ChurchEntity]) -> None:
    console.print(" > ".join(entity.title for entity in path))


def _service_rows(table: Table, label: str, services: Sequence[ServiceTime]) -> None:
    for service in services:
        table.add_row(label, service.day, service.time, service.type)


def print_mass_services(services: MassServices) -> None:
    table = Table(title="Mass times", show_edge=False, pad_edge=False)
    table.add_column("")
    table.add_column("Day")
    table.add_column("Time")
    table.add_column("Service")
    _service_rows(table, "Weekday", services.weekday)
    _service_rows(table, "Weekend", services.weekend)
    _service_rows(table, "Special", services.special)
    console.print(table)


def print_events(events: Sequence[ParishEvent]) -> None:
    if not events:
        console.print("No upcoming events.")
        return
    table = Table(title="Parish events", show_edge=False, pad_edge=False)
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Event")
    table.add_column("Category")
    for event in events:
        table.add_row(event.date, event.time, event.title, event.category)
    console.print(table)


def print_cache_summary(keys: Sequence[str], size: int) -> None:
    console.print(f"[bold]{size}[/bold] cached entries")
    for key in sorted(keys):
        console.print(f"  {key}")
