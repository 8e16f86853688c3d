"""Unit tests for Ok/Err chaining."""

import pytest

from depends.core.resolver import ResolutionError, ResolutionErrorKind
from depends.core.result import Err, Ok, UnwrapError, and_then, map_ok


class TestChaining:
    def test_and_then_feeds_ok_value(self):
        result = and_then(Ok(["App.sln"]), lambda files: Ok(files[0]))

        assert result == Ok("App.sln")

    def test_and_then_short_circuits_on_err(self, tmp_path):
        failure = Err(ResolutionError(ResolutionErrorKind.UNREADABLE, tmp_path, reason="denied"))
        calls = []

        result = and_then(failure, calls.append)

        assert result is failure
        assert calls == []

    def test_map_ok_skips_err(self):
        failure = Err("boom")

        assert map_ok(failure, str.upper) is failure
        assert map_ok(Ok("app"), str.upper) == Ok("APP")

    def test_unwrap_err_names_the_error(self, tmp_path):
        failure = Err(ResolutionError(ResolutionErrorKind.NO_TARGET_FOUND, tmp_path))

        with pytest.raises(UnwrapError, match="Unable to find any solution"):
            failure.unwrap()
