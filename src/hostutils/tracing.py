"""Enter/exit tracers that log slow calls.

A trace handle is a ``(function_name, entered)`` pair taken when a scope is
entered and handed back unchanged when it is left. If the scope took at least
the threshold (one second unless configured otherwise), one line of the form
``"<name>() took <seconds> seconds"`` is logged. Shorter calls are dropped;
this is a coarse slow-call detector, not a profiler.

The function name is found by walking the call stack, so callers never have
to spell it out:

    ```py
    def rebalance():
        handle = trace_enter()
        try:
            ...
        finally:
            trace_exit(*handle)
    ```

The same contract is available as a context manager (`traced`) and a
decorator (`trace`). All entry points are safe to call from any thread; each
handle belongs to the call site that created it.
"""

from __future__ import annotations

import functools
import inspect
import logging
import os
import re
from datetime import datetime, timezone
from typing import TYPE_CHECKING, NamedTuple, ParamSpec, TypeVar

from hostutils import config
from hostutils.errors import InvalidTraceThresholdError

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

P = ParamSpec("P")
R = TypeVar("R")

UNKNOWN_FUNCTION = "<unknown>"
SLOW_CALL_FORMAT = "%s() took %s seconds"

# Keeps only what follows the last "." of a qualified name.
STRIP_PREAMBLE_PATTERN = re.compile(r"^.*\.(.*)$")


class TraceHandle(NamedTuple):
    """Name and entry time of a traced scope."""

    function_name: str
    entered: datetime


def utc_now() -> datetime:
    """Return the current time as a tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def short_function_name(qualified_name: str) -> str:
    """Strip the module/class path from *qualified_name*.

    Examples:
        ```py
        >>> short_function_name("hostutils.cluster.Node.refresh")
        'refresh'
        >>> short_function_name("refresh")
        'refresh'
        ```
    """
    return STRIP_PREAMBLE_PATTERN.sub(r"\1", qualified_name)


def caller_name(stacklevel: int = 1) -> str:
    """Return the short name of a function further up the call stack.

    Args:
        stacklevel: How many frames above the function calling `caller_name`
            to look. ``1`` names the caller's caller.

    Returns:
        The bare function name, or ``"<unknown>"`` when the stack cannot be
        inspected that far.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel + 1):
            if frame is None:
                return UNKNOWN_FUNCTION
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_FUNCTION
        module = frame.f_globals.get("__name__", "")
        return short_function_name(f"{module}.{frame.f_code.co_qualname}")
    finally:
        # break the frame reference cycle
        del frame


def _with_extra(name: str, extra: str) -> str:
    return f"{name}-{extra}" if extra else name


class Tracer:
    """Slow-call tracer writing to an injected logger.

    Args:
        logger: Destination for slow-call lines. Defaults to this module's logger.
        threshold: Minimum duration in seconds that gets logged. When ``None``,
            `config.get_trace_threshold` is consulted again whenever
            HOSTUTILS_TRACE_THRESHOLD changes; an invalid value is reported once
            and replaced by the default.
        level: Log level used for slow-call lines.
        clock: Returns the current time; must agree with the handles' timestamps.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        threshold: float | None = None,
        level: int = logging.INFO,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._threshold = threshold
        # (raw env value, threshold it resolved to)
        self._env_threshold: tuple[str, float] | None = None
        self.level = level
        self.clock = clock

    @property
    def threshold(self) -> float:
        """Effective slow-call threshold in seconds."""
        if self._threshold is not None:
            return self._threshold
        raw = os.environ.get(config.TRACE_THRESHOLD_ENV, "")
        cached = self._env_threshold
        if cached is None or cached[0] != raw:
            cached = self._env_threshold = (raw, self._threshold_from_env())
        return cached[1]

    def _threshold_from_env(self) -> float:
        try:
            return config.get_trace_threshold()
        except InvalidTraceThresholdError as e:
            self.logger.warning(
                "%s Using %s seconds.", e, config.DEFAULT_TRACE_THRESHOLD
            )
            return config.DEFAULT_TRACE_THRESHOLD

    def enter(self, extra: str = "", stacklevel: int = 1) -> TraceHandle:
        """Start timing the calling function.

        Args:
            extra: Appended to the function name as ``name-extra`` when non-empty,
                to tell apart several trace points in one function.
            stacklevel: ``1`` traces the direct caller of `enter`; wrappers
                pass a higher value to trace their own caller.

        Returns:
            TraceHandle: To be passed unchanged to `exit`.
        """
        name = caller_name(stacklevel)
        return TraceHandle(_with_extra(name, extra), self.clock())

    def exit(self, function_name: str, entered: datetime) -> None:
        """Log the elapsed time since *entered* if it reaches the threshold."""
        elapsed = (self.clock() - entered).total_seconds()
        if elapsed >= self.threshold:
            self.logger.log(self.level, SLOW_CALL_FORMAT, function_name, elapsed)

    def traced(self, extra: str = "") -> TracedScope:
        """Return a context manager tracing the function that enters it."""
        return TracedScope(self, extra)

    def trace(self, func: Callable[P, R]) -> Callable[P, R]:
        """Decorate *func* so every call to it is traced."""
        name = short_function_name(func.__qualname__)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            entered = self.clock()
            try:
                return func(*args, **kwargs)
            finally:
                self.exit(name, entered)

        return wrapper


class TracedScope:
    """Context manager pairing `Tracer.enter` with `Tracer.exit`.

    The exit is recorded when the ``with`` block is left, whether it returns
    normally or raises. Exceptions are never suppressed.

    One scope object may be re-entered (for instance by a recursive function
    holding it); each ``with`` block pops its own handle. Share a scope object
    between threads only if they never overlap; give each thread its own
    `Tracer.traced` scope otherwise.
    """

    def __init__(self, tracer: Tracer, extra: str = "") -> None:
        self._tracer = tracer
        self._extra = extra
        self._handles: list[TraceHandle] = []

    def __enter__(self) -> TraceHandle:
        # frames: with-statement owner -> __enter__ -> Tracer.enter
        handle = self._tracer.enter(self._extra, stacklevel=2)
        self._handles.append(handle)
        return handle

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._handles:
            self._tracer.exit(*self._handles.pop())


_default_tracer = Tracer()


def trace_enter() -> TraceHandle:
    """Record the calling function's name and the current time."""
    return _default_tracer.enter(stacklevel=2)


def trace_enter_extra(extra: str) -> TraceHandle:
    """Like `trace_enter`, appending *extra* to the name as ``name-extra``."""
    return _default_tracer.enter(extra, stacklevel=2)


def trace_exit(function_name: str, entered: datetime) -> None:
    """Log ``"<function_name>() took <seconds> seconds"`` for slow calls."""
    _default_tracer.exit(function_name, entered)


def traced(extra: str = "") -> TracedScope:
    """Context manager form of `trace_enter`/`trace_exit`."""
    return TracedScope(_default_tracer, extra)


def trace(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator form of `trace_enter`/`trace_exit`."""
    return _default_tracer.trace(func)
