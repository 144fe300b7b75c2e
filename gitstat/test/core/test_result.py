"""Tests for gitstat.core.result module."""

from gitstat.core.result import Err, Ok, Result


class TestOk:
    """Tests for Ok type."""

    def test_ok_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_ok_map_err_is_noop(self) -> None:
        assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)

    def test_ok_flat_map(self) -> None:
        result: Result[int, str] = Ok(21)
        assert result.flat_map(lambda x: Ok(x * 2)) == Ok(42)
        assert result.flat_map(lambda _: Err("nope")) == Err("nope")

    def test_repr(self) -> None:
        assert repr(Ok("main")) == "Ok('main')"


class TestErr:
    """Tests for Err type."""

    def test_err_map_is_noop(self) -> None:
        assert Err("boom").map(lambda x: x * 2) == Err("boom")

    def test_err_map_err(self) -> None:
        assert Err(3).map_err(lambda e: e + 1) == Err(4)

    def test_err_flat_map_is_noop(self) -> None:
        assert Err("boom").flat_map(lambda x: Ok(x)) == Err("boom")

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


class TestPatternMatching:
    def test_match(self) -> None:
        def describe(result: Result[int, str]) -> str:
            match result:
                case Ok(value):
                    return f"ok {value}"
                case Err(error):
                    return f"err {error}"

        assert describe(Ok(1)) == "ok 1"
        assert describe(Err("x")) == "err x"
