import asyncio
from typing import Annotated, TypeVar

import typer
from config import ConfigurationSet

from parish_data.cache.invalidation import get_cache_keys, get_cache_size, invalidate_cache
from parish_data.cli._logging import configure_logging
from parish_data.cli._output import (
    print_cache_summary,
    print_content_summary,
    print_entities,
    print_entity,
    print_error,
    print_events,
    print_mass_services,
    print_path,
)
from parish_data.config import create_config
from parish_data.context import app_context
from parish_data.hooks.church import (
    ParishGroupFilters,
    use_church_children,
    use_church_entity,
    use_church_path,
    use_cms_content,
    use_cms_images,
    use_mass_services,
    use_parish_events,
    use_parish_groups,
)
from parish_data.hooks.data import DataHook, HookStatus

app = typer.Typer(name="parish-data", help="Parish website data: CMS content, parish structure and schedules")

_content_dir: str | None = None


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    content_dir: Annotated[
        str | None, typer.Option("--content-dir", help="Directory holding the CMS JSON files")
    ] = None,
) -> None:
    """Parish website data: CMS content, parish structure and schedules."""
    global _content_dir
    configure_logging(verbose=verbose)
    _content_dir = content_dir
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


def _config() -> ConfigurationSet:
    return create_config(content_dir=_content_dir)


T = TypeVar("T")


def _require(hook: DataHook[T], what: str) -> T:
    if hook.status is HookStatus.ERROR:
        print_error(f"could not load {what}: {hook.error}")
        raise typer.Exit(code=1)
    if hook.value is None:
        print_error(f"{what} not found")
        raise typer.Exit(code=1)
    return hook.value


@app.command()
def content() -> None:
    """Show parish details, announcements and feature flags."""
    with app_context(_config()):
        print_content_summary(_require(use_cms_content(), "CMS content"))


@app.command()
def entity(entity_id: Annotated[str, typer.Argument(help="Church entity id, e.g. 'choir'")]) -> None:
    """Show one entity of the parish structure."""
    with app_context(_config()):
        print_entity(_require(use_church_entity(entity_id), f"entity '{entity_id}'"))


@app.command()
def children(parent_id: Annotated[str, typer.Argument(help="Parent entity id")] = "0") -> None:
    """List the children of an entity (the parish root by default)."""
    with app_context(_config()):
        print_entities(_require(use_church_children(parent_id), "children"), "Children")


@app.command()
def path(entity_id: Annotated[str, typer.Argument(help="Church entity id")]) -> None:
    """Show the breadcrumb from the parish root to an entity."""
    with app_context(_config()):
        crumbs = _require(use_church_path(entity_id), "path")
        if not crumbs:
            print_error(f"entity '{entity_id}' not found")
            raise typer.Exit(code=1)
        print_path(crumbs)


@app.command()
def groups(
    age_group: Annotated[str | None, typer.Option("--age-group", help="Match the group's age group")] = None,
    schedule: Annotated[str | None, typer.Option("--schedule", help="Match the group's meeting day")] = None,
    ministry: Annotated[str | None, typer.Option("--ministry", help="Match the parent ministry's title")] = None,
    search: Annotated[str | None, typer.Option("--search", help="Match title, description or requirements")] = None,
) -> None:
    """List parish groups, optionally filtered."""
    filters = None
    if any(f is not None for f in (age_group, schedule, ministry, search)):
        filters = ParishGroupFilters(age_group=age_group, schedule=schedule, ministry=ministry, search_term=search)
    with app_context(_config()):
        print_entities(use_parish_groups(filters).value or [], "Parish groups")


@app.command(name="mass-times")
def mass_times() -> None:
    """Show the Mass schedule."""

    async def load() -> None:
        with app_context(_config()):
            hook = use_mass_services()
            await hook.wait()
            print_mass_services(_require(hook, "mass times"))

    asyncio.run(load())


@app.command()
def events(limit: Annotated[int | None, typer.Option("--limit", "-n", help="Show at most N events")] = None) -> None:
    """Show upcoming parish events."""

    async def load() -> None:
        with app_context(_config()):
            hook = use_parish_events(limit)
            await hook.wait()
            print_events(_require(hook, "events"))

    asyncio.run(load())


@app.command()
def cache(
    invalidate: Annotated[
        list[str] | None, typer.Option("--invalidate", help="Invalidate a key after warming (repeatable)")
    ] = None,
    clear: Annotated[bool, typer.Option("--clear", help="Clear the whole cache after warming")] = False,
) -> None:
    """Warm the cache with every parish hook and show what it holds."""

    async def warm() -> None:
        with app_context(_config()):
            hooks = [
                use_cms_content(),
                use_cms_images(),
                use_church_children("0"),
                use_mass_services(),
                use_parish_events(),
            ]
            use_parish_groups()
            await asyncio.gather(*(hook.wait() for hook in hooks))
            for key in invalidate or []:
                invalidate_cache(key)
            if clear:
                invalidate_cache()
            print_cache_summary(get_cache_keys(), get_cache_size())

    asyncio.run(warm())
