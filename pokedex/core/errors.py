class PokedexError(Exception):
    """Base class for all application errors."""


class FetchFailed(PokedexError):
    """Network or HTTP failure while talking to the remote API."""


class NotFound(PokedexError):
    """The request was valid but no matching record exists."""


class ResolutionFailed(FetchFailed):
    """A type (category) membership lookup could not be completed."""


class InvalidInput(PokedexError, ValueError):
    """User supplied input that cannot be used (e.g. an empty trainer name)."""


class InvalidArgument(PokedexError, ValueError):
    """A function was called with arguments outside its contract."""
