"""Error raised when project or generator configuration cannot be used."""


class ConfigurationError(ValueError):
    """Missing or malformed repository metadata, config or input file."""
