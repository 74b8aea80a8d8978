"""Exception hierarchy for JsonTrans."""


class JsonTransError(Exception):
    """Base class for every error JsonTrans reports to the user."""


class ConfigurationError(JsonTransError):
    """Raised when the run cannot start: missing API key, input file, or invalid settings."""


class ProviderError(JsonTransError):
    """Raised when a call to the translation provider fails."""


class IntegrityError(JsonTransError):
    """
    Raised when an internal invariant of a translation run is broken.

    Covers a cache lookup for a key that was never resolved, a provider response
    whose length differs from the submitted batch, and a translation whose marker
    count differs from the placeholders it must restore.
    """
