"""Configuration errors raised before any check is fired."""


class ConnectivityConfigError(ValueError):
    """Base class for invalid connectivity configuration."""


class InvalidTargetURL(ConnectivityConfigError):
    """A configured target URL cannot be parsed into scheme/host/path."""


class ProxyConfigError(ConnectivityConfigError):
    """The proxy settings are incomplete or malformed."""
