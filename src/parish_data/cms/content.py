"""CMS website settings.

Settings are stored as camelCase JSON (``settings.json``). The bundled
defaults are overlaid with the copy in the configured content directory, so a
partial file only needs the fields it changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NotRequired, TypedDict, cast

from parish_data.cms._documents import load_document

if TYPE_CHECKING:
    from pathlib import Path

SETTINGS_FILE = "settings.json"


class ContactSettings(TypedDict):
    address: str
    phone: str
    email: str
    emergencyPhone: str
    safeguardingPhone: str


class OfficeHours(TypedDict):
    days: str
    time: str


class ParishSettings(TypedDict):
    name: str
    location: str
    priest: str
    diocese: str
    established: str
    assistantPriest: NotRequired[str]
    charityNumber: NotRequired[str]
    officeHours: NotRequired[OfficeHours]


class SocialSettings(TypedDict):
    facebook: str
    youtube: str
    instagram: str
    twitter: str


class Announcement(TypedDict):
    id: str
    title: str
    message: str
    type: str
    active: bool
    showUntil: str


class SiteSettings(TypedDict):
    announcements: list[Announcement]
    maintenanceMode: bool
    liveStreamEnabled: bool
    liveStreamUrl: str
    donationsEnabled: bool
    donationsUrl: str


class FeatureFlags(TypedDict):
    massBooking: bool
    eventRegistration: bool
    newsletter: bool
    prayerRequests: bool
    venueHire: bool


class WebsiteSettings(TypedDict):
    contact: ContactSettings
    parish: ParishSettings
    social: SocialSettings
    website: SiteSettings
    features: FeatureFlags


class SocialLink(TypedDict):
    name: str
    url: str


_DEFAULT_OFFICE_HOURS: OfficeHours = {"days": "Mon-Fri", "time": "9:00 AM - 5:00 PM"}

_SOCIAL_NAMES = (
    ("Facebook", "facebook"),
    ("YouTube", "youtube"),
    ("Instagram", "instagram"),
    ("Twitter", "twitter"),
)


def get_cms_content(content_dir: Path | None = None) -> WebsiteSettings:
    """Load website settings, overlaying ``content_dir/settings.json`` when present.

    Raises:
        ContentLoadError: If the settings file exists but is not valid JSON.
    """
    return cast("WebsiteSettings", load_document(SETTINGS_FILE, content_dir))


def get_parish_name(content: WebsiteSettings) -> str:
    return content["parish"]["name"]


def get_full_parish_name(content: WebsiteSettings) -> str:
    parish = content["parish"]
    return f"{parish['name']}, {parish['location']}"


def get_office_hours(content: WebsiteSettings) -> OfficeHours:
    return content["parish"].get("officeHours", _DEFAULT_OFFICE_HOURS)


def get_contact_display(content: WebsiteSettings) -> dict[str, str]:
    contact = content["contact"]
    return {"address": contact["address"], "phone": contact["phone"], "email": contact["email"]}


def get_social_links(content: WebsiteSettings) -> list[SocialLink]:
    """Return the configured social links, skipping empty URLs."""
    social = content["social"]
    links: list[SocialLink] = []
    for name, field in _SOCIAL_NAMES:
        url = social.get(field, "")
        if url:
            links.append({"name": name, "url": url})
    return links


def get_announcements(content: WebsiteSettings) -> list[Announcement]:
    """Return only the active announcements."""
    return [ann for ann in content["website"]["announcements"] if ann.get("active")]


def is_maintenance_mode(content: WebsiteSettings) -> bool:
    return bool(content["website"]["maintenanceMode"])


def is_feature_enabled(content: WebsiteSettings, feature: str) -> bool:
    """Check a feature flag by its settings name (``massBooking``, ``venueHire``, ...)."""
    return bool(content["features"].get(feature, False))
