"""Exception types raised by the parish data layer."""


class ParishDataError(Exception):
    """Base class for parish data errors."""


class HookError(ParishDataError):
    """Raised when a data hook is used in a way its lifecycle does not allow."""


class ContentLoadError(ParishDataError):
    """Raised when a CMS content file cannot be read or parsed."""


class ContextNotInitializedError(ParishDataError):
    """Raised when get_context() is called before init_context()."""
