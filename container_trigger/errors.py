class DispatchError(Exception):
    """Base class for failures raised before a dispatch is sent."""


class UsageError(DispatchError):
    pass


class ConfigError(DispatchError):
    pass
