class OreError(Exception):
    """
    Base class for everything this library raises on its own.
    """


class ConfigurationError(OreError, ValueError):
    """
    Raised at construction time when a required argument is missing or empty.
    """


class AuthenticationError(OreError):
    """
    Raised when a session could not be obtained: the request failed, the
    server refused it, or the answer did not contain a usable session.
    """


class IllegalStateError(OreError, RuntimeError):
    """
    Raised when an object is asked for something it does not have yet.
    """
