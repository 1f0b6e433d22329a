"""Error definitions for hostutils."""

# ============================================================================
#                               Base error
# ============================================================================


class HostUtilsError(Exception):
    """Base class for hostutils errors."""


# ============================================================================
#                               URL errors
# ============================================================================


class InvalidURLError(HostUtilsError, ValueError):
    """Raised when a parsed URL has no scheme."""

    def __init__(self, url: str) -> None:
        super().__init__(f"invalid URL <{url}>")
        self.url = url


# ============================================================================
#                           Configuration errors
# ============================================================================


class ConfigError(HostUtilsError):
    """Base class for configuration errors."""


class InvalidTraceThresholdError(ConfigError):
    """Raised when HOSTUTILS_TRACE_THRESHOLD is not a non-negative number."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"HOSTUTILS_TRACE_THRESHOLD must be a non-negative number of "
            f"seconds, got {value!r}."
        )
        self.value = value
