"""Tests for the freezable container state machine."""

from __future__ import annotations

import copy

import pytest

from packages.arctic_fox.errors import (
    Forbidden,
    ServerError,
    Unauthorized,
    ValidationError,
    codes,
    forbidden,
    unauthorized,
)
from packages.arctic_fox.fox import (
    AdoptedCub,
    ArcticFox,
    CubModel,
    Frozen,
    FrozenFoxError,
    Live,
    adopt,
    bond,
)


class Counter(CubModel):
    """Minimal cub used to observe chained updates."""

    count: int = 0
    tags: list[str] = []


def _increment(counter: Counter) -> Counter:
    counter.count += 1
    return counter


def _deny(counter: Counter) -> Counter:
    raise forbidden("counter %d is locked", counter.count)


def test_bond_starts_live_with_the_value() -> None:
    """A bonded container should be live and extract its value without error."""
    fox = bond(Counter(count=3))

    value, error = fox.extract()
    assert fox.is_success() is True
    assert fox.is_failure() is False
    assert value == Counter(count=3)
    assert error is None


def test_successful_operations_replace_the_value() -> None:
    """Each returned value should become the new live value."""
    fox = bond(Counter()).run(_increment).run(_increment).run(_increment)

    assert fox.successful().count == 3
    assert isinstance(fox.state, Live)


def test_first_failure_freezes_with_pre_call_value() -> None:
    """The raising operation's input value and error should be retained."""
    fox = bond(Counter()).run(_increment).run(_deny)

    value, error = fox.extract()
    assert fox.is_failure() is True
    assert value.count == 1
    assert isinstance(error, Forbidden)
    assert error.message == "counter 1 is locked"


def test_frozen_container_skips_later_operations() -> None:
    """Operations after the freeze should never be called."""
    calls: list[int] = []

    def _record(counter: Counter) -> Counter:
        calls.append(counter.count)
        return counter

    fox = bond(Counter()).run(_deny).run(_record).run(_increment)

    assert calls == []
    assert fox.extract()[0].count == 0


def test_first_error_wins_over_later_failures() -> None:
    """A later failing operation should not replace the freezing error."""

    def _expire(counter: Counter) -> Counter:
        raise unauthorized("expired")

    fox = bond(Counter()).run(_deny).run(_expire)
    assert isinstance(fox.extract()[1], Forbidden)


def test_extract_is_idempotent_and_returns_copies() -> None:
    """Repeated extraction should agree and never expose the stored value."""
    fox = bond(Counter(tags=["a"]))

    first, _ = fox.extract()
    first.tags.append("mutated")
    second, _ = fox.extract()

    assert second.tags == ["a"]
    assert fox.extract() == fox.extract()


def test_operation_receives_a_copy_of_the_value() -> None:
    """Mutating the input and then raising should not alter the frozen value."""

    def _mutate_then_fail(counter: Counter) -> Counter:
        counter.tags.append("partial")
        raise ValueError("half done")

    fox = bond(Counter(tags=["a"])).run(_mutate_then_fail)

    value, error = fox.extract()
    assert value.tags == ["a"]
    assert isinstance(error, ValidationError)


def test_frozen_error_is_a_copy_of_the_raised_error() -> None:
    """The stored error should equal but not be the raised instance."""
    raised = unauthorized("who")

    def _raise(counter: Counter) -> Counter:
        raise raised

    _, error = bond(Counter()).run(_raise).extract()
    assert error == raised
    assert error is not raised


def test_non_taxonomy_exceptions_are_normalized() -> None:
    """Unexpected exceptions should freeze as a generic server error."""

    def _crash(counter: Counter) -> Counter:
        raise RuntimeError("socket closed")

    _, error = bond(Counter()).run(_crash).extract()
    assert isinstance(error, ServerError)
    assert error.message == codes.UNEXPECTED_ERROR
    assert error.status_hint() == 500


def test_returning_a_non_cub_freezes_with_server_error() -> None:
    """An operation returning a plain value should freeze the container."""
    fox = bond(Counter(count=2)).run(lambda counter: counter.count)  # type: ignore[arg-type, return-value]

    value, error = fox.extract()
    assert value.count == 2
    assert isinstance(error, ServerError)


def test_successful_raises_when_frozen() -> None:
    """Live-only access on a frozen container should raise with the error attached."""
    fox = bond(Counter()).run(_deny)

    with pytest.raises(FrozenFoxError) as exc_info:
        fox.successful()
    assert isinstance(exc_info.value.error, Forbidden)


def test_clone_is_independent_of_the_original() -> None:
    """Advancing a clone should not affect the source container."""
    original = bond(Counter())
    cloned = original.clone().run(_increment)

    assert original.successful().count == 0
    assert cloned.successful().count == 1
    assert copy.copy(original).successful() == original.successful()
    assert copy.deepcopy(original).successful() == original.successful()


def test_clone_preserves_frozen_state() -> None:
    """Cloning a frozen container should keep the value and error."""
    original = bond(Counter(count=5)).run(_deny)
    cloned = original.clone()

    assert cloned.is_failure() is True
    assert cloned.extract() == original.extract()


def test_frozen_constructor_builds_a_failed_container() -> None:
    """frozen() should build a container that skips operations immediately."""
    fox = ArcticFox.frozen(Counter(count=4), Unauthorized("nope")).run(_increment)

    assert isinstance(fox.state, Frozen)
    assert fox.extract()[0].count == 4


def test_constructor_rejects_values_without_the_cub_capability() -> None:
    """Plain values must be adopted before they can be bonded."""
    with pytest.raises(TypeError):
        ArcticFox(Live(42))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ArcticFox("live")  # type: ignore[arg-type]


def test_adopt_wraps_plain_values() -> None:
    """adopt should carry a plain value through chained operations."""

    def _double(cub: AdoptedCub[int]) -> AdoptedCub[int]:
        return AdoptedCub(data=cub.data * 2)

    fox = adopt(21).run(_double)

    value = fox.successful()
    assert value.unstore() == 42
    assert value.serialized() == 42


def test_adopted_cub_unstore_returns_a_copy() -> None:
    """unstore should not expose the wrapped container."""
    cub = AdoptedCub(data={"items": [1, 2]})
    unstored = cub.unstore()
    unstored["items"].append(3)

    assert cub.data == {"items": [1, 2]}


def test_cub_model_size_matches_compact_json() -> None:
    """size should report the UTF-8 length of the compact JSON form."""
    counter = Counter(count=7, tags=["é"])
    assert counter.size() == len(counter.model_dump_json().encode("utf-8"))
    assert Counter.new() == Counter()


def test_new_fills_an_id_field_when_the_model_has_one() -> None:
    """new should honour ``id`` on models that declare the field."""

    class Ticket(CubModel):
        id: str = "unset"

    assert Ticket.new().id == "unset"
    assert Ticket.new("t-9").id == "t-9"


def test_new_rejects_an_id_for_models_without_the_field() -> None:
    """new should refuse an ``id`` it cannot store rather than drop it."""
    with pytest.raises(TypeError):
        Counter.new("c-1")
