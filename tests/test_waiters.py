import pytest

from fakes import NOT_FOUND, ScriptedAdapter, failed, found
from glueops.core.errors import RemoteServiceError, VisibilityTimeoutError
from glueops.core.waiters import wait_for_database


def test_returns_first_attempt_when_already_visible():
    sleeps: list[float] = []
    adapter = ScriptedAdapter([found()])

    assert wait_for_database(adapter, "sales", sleep=sleeps.append) == 1
    assert sleeps == []


def test_exhaustion_performs_exactly_max_attempts_lookups():
    sleeps: list[float] = []
    waits: list[tuple[int, int, int]] = []
    adapter = ScriptedAdapter([NOT_FOUND] * 4)

    with pytest.raises(VisibilityTimeoutError) as excinfo:
        wait_for_database(
            adapter,
            "sales",
            max_attempts=4,
            delay_ms=1000,
            sleep=sleeps.append,
            on_wait=lambda *args: waits.append(args),
        )

    assert len(adapter.lookup_calls) == 4
    assert sleeps == [1.0, 1.0, 1.0]
    assert waits == [(1, 4, 1000), (2, 4, 1000), (3, 4, 1000)]
    assert excinfo.value.attempts == 4
    assert "sales" in str(excinfo.value)
    assert "4 attempts" in str(excinfo.value)


def test_other_failure_aborts_without_using_remaining_attempts():
    sleeps: list[float] = []
    adapter = ScriptedAdapter([NOT_FOUND, failed("ThrottlingException")])

    with pytest.raises(RemoteServiceError) as excinfo:
        wait_for_database(adapter, "sales", max_attempts=10, sleep=sleeps.append)

    assert excinfo.value.code == "ThrottlingException"
    assert len(adapter.lookup_calls) == 2
    assert len(sleeps) == 1


def test_passes_catalog_id_to_lookup():
    adapter = ScriptedAdapter([found()])

    wait_for_database(adapter, "sales", catalog_id="123456789012")

    assert adapter.lookup_calls == [("sales", "123456789012")]


@pytest.mark.parametrize("kwargs", [{"max_attempts": 0}, {"delay_ms": -1}])
def test_rejects_invalid_bounds(kwargs):
    with pytest.raises(ValueError):
        wait_for_database(ScriptedAdapter([]), "sales", **kwargs)
