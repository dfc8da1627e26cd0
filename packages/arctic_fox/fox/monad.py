"""ArcticFox: a freezable result container.

An ``ArcticFox`` starts ``Live`` around a cub. Each chained operation receives
a clone of the current value and returns the replacement value. The first
operation that raises freezes the container: the pre-call value and the
normalized error are kept, and every later operation is skipped without being
called. Nothing inside the container ever unfreezes it.

Containers are not synchronized. One owner drives a container at a time,
including across ``await`` points in ``run_async``.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Generic, TypeVar, assert_never

from packages.arctic_fox.errors import ArcticFoxError, codes, exception_to_error, server_error
from packages.arctic_fox.logging import fields, get_logger, log_context

from .cub import AdoptedCub, Cub
from .state import FoxState, Frozen, Live

T = TypeVar("T", bound=Cub)

_LOGGER = get_logger(__name__)


class FrozenFoxError(RuntimeError):
    """Raised when live-only access is attempted on a frozen container."""

    def __init__(self, error: ArcticFoxError) -> None:
        super().__init__(f"ArcticFox is frozen: {error.describe()}")
        self.error = error


class ArcticFox(Generic[T]):
    """Two-state container that freezes at the first failed operation."""

    __slots__ = ("_state",)

    def __init__(self, state: FoxState[T]) -> None:
        match state:
            case Live(value=value) | Frozen(value=value):
                if not isinstance(value, Cub):
                    raise TypeError(f"ArcticFox value must implement Cub, got {type(value).__name__}")
            case _:
                raise TypeError(f"ArcticFox state must be Live or Frozen, got {type(state).__name__}")
        self._state: FoxState[T] = state

    @classmethod
    def live(cls, value: T) -> ArcticFox[T]:
        """Build a live container around ``value``."""
        return cls(Live(value))

    @classmethod
    def frozen(cls, value: T, error: ArcticFoxError) -> ArcticFox[T]:
        """Build an already-frozen container, e.g. to replace one wholesale."""
        return cls(Frozen(value, error))

    @property
    def state(self) -> FoxState[T]:
        """Return the current state variant for exhaustive matching."""
        return self._state

    def run(self, operation: Callable[[T], T]) -> ArcticFox[T]:
        """Apply ``operation`` to a clone of the live value.

        A returned value replaces the live value. A raised exception is
        normalized into the error taxonomy and freezes the container with the
        value held before the call. Frozen containers skip ``operation``.
        """
        match self._state:
            case Live(value=value):
                try:
                    updated = _require_cub(operation(value.clone()))
                except Exception as exc:
                    self._freeze(value, exc, operation)
                else:
                    self._state = Live(updated)
            case Frozen():
                pass
            case _:
                assert_never(self._state)
        return self

    async def run_async(self, operation: Callable[[T], Awaitable[T]]) -> ArcticFox[T]:
        """Await ``operation`` on a clone of the live value.

        Same transition rule as ``run``. The state is only touched after the
        awaitable resolves, so cancellation leaves the pre-call state intact.
        """
        match self._state:
            case Live(value=value):
                try:
                    updated = _require_cub(await operation(value.clone()))
                except Exception as exc:
                    self._freeze(value, exc, operation)
                else:
                    self._state = Live(updated)
            case Frozen():
                pass
            case _:
                assert_never(self._state)
        return self

    def is_success(self) -> bool:
        """Return ``True`` while the container is live."""
        return isinstance(self._state, Live)

    def is_failure(self) -> bool:
        """Return ``True`` once the container has frozen."""
        return isinstance(self._state, Frozen)

    def extract(self) -> tuple[T, ArcticFoxError | None]:
        """Return a clone of the value and the freezing error, if any."""
        match self._state:
            case Live(value=value):
                return value.clone(), None
            case Frozen(value=value, error=error):
                return value.clone(), error.clone()
            case _:
                assert_never(self._state)

    def successful(self) -> T:
        """Return a clone of the live value; raise ``FrozenFoxError`` when frozen."""
        match self._state:
            case Live(value=value):
                return value.clone()
            case Frozen(error=error):
                raise FrozenFoxError(error.clone())
            case _:
                assert_never(self._state)

    def clone(self) -> ArcticFox[T]:
        """Return a structural copy; nothing is re-evaluated."""
        match self._state:
            case Live(value=value):
                return ArcticFox(Live(value.clone()))
            case Frozen(value=value, error=error):
                return ArcticFox(Frozen(value.clone(), error.clone()))
            case _:
                assert_never(self._state)

    def __copy__(self) -> ArcticFox[T]:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> ArcticFox[T]:
        return self.clone()

    def __repr__(self) -> str:
        return f"ArcticFox({self._state!r})"

    def _freeze(self, value: T, exc: Exception, operation: Callable[..., Any]) -> None:
        """Transition to ``Frozen`` with the normalized form of ``exc``."""
        error = exception_to_error(exc)
        name = _operation_name(operation)
        if error is not exc:
            _LOGGER.warning(
                "Chained operation raised a non-taxonomy exception: operation=%s exception_type=%s",
                name,
                type(exc).__name__,
                exc_info=exc,
            )
        with log_context(
            {
                fields.OPERATION: name,
                fields.ERROR_KIND: error.kind,
                fields.STATUS_CODE: error.status_hint(),
            }
        ):
            _LOGGER.debug("ArcticFox frozen")
        self._state = Frozen(value, error.clone())


def bond(value: T) -> ArcticFox[T]:
    """Build a live container around a cub."""
    return ArcticFox.live(value)


def adopt(value: Any) -> ArcticFox[AdoptedCub[Any]]:
    """Wrap a plain value in an ``AdoptedCub`` and bond it."""
    return ArcticFox.live(AdoptedCub(data=value))


def _require_cub(value: Any) -> Any:
    """Reject values lacking the cub capability."""
    if isinstance(value, Cub):
        return value
    _LOGGER.error("Container value lacks the cub capability: value_type=%s", type(value).__name__)
    raise server_error(codes.UNEXPECTED_ERROR)


def _operation_name(operation: Callable[..., Any]) -> str:
    return getattr(operation, "__qualname__", type(operation).__name__)
