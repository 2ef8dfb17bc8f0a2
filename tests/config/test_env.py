from __future__ import annotations

import pytest

from ngmeta.config import InvalidConfigurationError, env_flag, optional_env_var


def test_optional_env_var_returns_stripped_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value ")

    assert optional_env_var("EXAMPLE_VAR") == "value"


def test_optional_env_var_treats_blank_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    assert optional_env_var("EXAMPLE_VAR") is None
    assert optional_env_var("MISSING_VAR") is None


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("YES", True), ("off", False)])
def test_env_flag_parses_values(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected: bool,  # noqa: FBT001
) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", raw)

    assert env_flag("EXAMPLE_FLAG", default=not expected) is expected


def test_env_flag_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_FLAG", raising=False)

    assert env_flag("EXAMPLE_FLAG", default=True) is True


def test_env_flag_rejects_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "maybe")

    with pytest.raises(InvalidConfigurationError) as exc:
        env_flag("EXAMPLE_FLAG", default=True)

    assert "EXAMPLE_FLAG" in str(exc.value)
