"""Tests for tagsweep.core.result module."""

from tagsweep.core.result import Err, Ok, Result


class TestOk:
    """Tests for Ok type."""

    def test_map_err_is_noop(self) -> None:
        assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)

    def test_flat_map(self) -> None:
        result: Result[int, str] = Ok(21)
        assert result.flat_map(lambda x: Ok(x * 2)) == Ok(42)
        assert result.flat_map(lambda _: Err("nope")) == Err("nope")

    def test_repr(self) -> None:
        assert repr(Ok("tmp_1h")) == "Ok('tmp_1h')"


class TestErr:
    """Tests for Err type."""

    def test_map_err(self) -> None:
        assert Err("boom").map_err(str.upper) == Err("BOOM")

    def test_flat_map_short_circuits(self) -> None:
        calls: list[int] = []

        def step(x: int) -> Result[int, str]:
            calls.append(x)
            return Ok(x)

        result: Result[int, str] = Err("boom")
        assert result.flat_map(step) == Err("boom")
        assert calls == []

    def test_map_err_then_flat_map_keeps_first_error(self) -> None:
        result: Result[int, str] = Err("404")
        chained = result.map_err(lambda e: f"HTTP {e}").flat_map(lambda x: Ok(x + 1))
        assert chained == Err("HTTP 404")


def test_pattern_matching() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f"ok {value}"
            case Err(error):
                return f"err {error}"

    assert describe(Ok(3)) == "ok 3"
    assert describe(Err("gone")) == "err gone"
