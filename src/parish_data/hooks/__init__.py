from parish_data.hooks.church import (
    ParishGroupFilters,
    filter_parish_groups,
    use_church_children,
    use_church_entities_by_type,
    use_church_entity,
    use_church_path,
    use_cms_content,
    use_cms_images,
    use_mass_services,
    use_page_data,
    use_parish_events,
    use_parish_groups,
)
from parish_data.hooks.data import DataHook, HookStatus, use_data
from parish_data.hooks.derived import DerivedValue

__all__ = [
    "DataHook",
    "DerivedValue",
    "HookStatus",
    "ParishGroupFilters",
    "filter_parish_groups",
    "use_church_children",
    "use_church_entities_by_type",
    "use_church_entity",
    "use_church_path",
    "use_cms_content",
    "use_cms_images",
    "use_data",
    "use_mass_services",
    "use_page_data",
    "use_parish_events",
    "use_parish_groups",
]
