"""Errors raised while building or running an ID generator."""

from utils.timestamp import format_timestamp


class SnowflakeError(Exception):
    """Base error with context and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        if not self.context:
            return super().__str__()
        details = " ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{super().__str__()} ({details})"


class ConfigurationError(SnowflakeError):
    """Construction-time failure. The generator must not be used."""


class IDWidthExceededError(ConfigurationError):
    """Layout does not fit in 63 bits."""

    def __init__(self, message, total_bits=None, **kwargs):
        context = kwargs.pop("context", {})
        if total_bits is not None:
            context["total_bits"] = total_bits
        super().__init__(message, context=context, **kwargs)


class InvalidBitWidthError(ConfigurationError):
    """A bit width is negative."""


class InvalidEpochError(ConfigurationError):
    """Epoch lies in the future."""

    def __init__(self, message, epoch=None, now=None, **kwargs):
        context = kwargs.pop("context", {})
        if epoch is not None:
            context["epoch"] = epoch
        if now is not None:
            context["now"] = now
        super().__init__(message, context=context, **kwargs)


class _IDOutOfRangeError(ConfigurationError):

    def __init__(self, message, value=None, maximum=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        if maximum is not None:
            context["max"] = maximum
        super().__init__(message, context=context, **kwargs)


class WorkerIDOutOfRangeError(_IDOutOfRangeError):
    """Worker id outside [0, max_worker]."""


class DataCenterIDOutOfRangeError(_IDOutOfRangeError):
    """Data-center id outside [0, max_data_center]."""


class ClockMovedBackError(SnowflakeError):
    """Clock reads earlier than the last stamped millisecond. Not retried."""

    def __init__(self, message, last_timestamp=None, observed_timestamp=None, **kwargs):
        context = kwargs.pop("context", {})
        if last_timestamp is not None:
            context["last_timestamp"] = last_timestamp
        if observed_timestamp is not None:
            context["observed_timestamp"] = observed_timestamp
        super().__init__(message, context=context, **kwargs)
        self.last_timestamp = last_timestamp
        self.observed_timestamp = observed_timestamp
