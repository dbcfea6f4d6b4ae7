from parish_data.cms.content import WebsiteSettings, get_cms_content
from parish_data.cms.images import CmsImages, get_cms_images
from parish_data.cms.schedule import MassServices, ParishEvent, load_mass_services, load_parish_events

__all__ = [
    "CmsImages",
    "MassServices",
    "ParishEvent",
    "WebsiteSettings",
    "get_cms_content",
    "get_cms_images",
    "load_mass_services",
    "load_parish_events",
]
