from __future__ import annotations

import pytest

from typezero.config import GenerationOptions
from typezero.errors import ConfigError


def test_defaults_match_engine_caps() -> None:
    options = GenerationOptions().validate()
    assert options.sample_size == 50
    assert options.stats_array_sample_size == 25
    assert (options.enum_min_values, options.enum_max_values) == (2, 8)
    assert options.root_name == "Root"
    assert options.table_name is None


def test_from_env_reads_prefixed_variables() -> None:
    env = {
        "TYPEZERO_SAMPLE_SIZE": "100",
        "TYPEZERO_READONLY_ARRAYS": "yes",
        "TYPEZERO_TABLE_NAME": "events",
        "TYPEZERO_ROOT_NAME": "Payload",
        "UNRELATED": "1",
    }
    options = GenerationOptions.from_env(env)
    assert options.sample_size == 100
    assert options.readonly_arrays is True
    assert options.table_name == "events"
    assert options.root_name == "Payload"
    assert options.pydantic_optional_fields is False


def test_from_env_rejects_bad_values() -> None:
    with pytest.raises(ConfigError):
        GenerationOptions.from_env({"TYPEZERO_SAMPLE_SIZE": "many"})
    with pytest.raises(ConfigError):
        GenerationOptions.from_env({"TYPEZERO_READONLY_ARRAYS": "maybe"})
    with pytest.raises(ConfigError):
        GenerationOptions.from_env({"TYPEZERO_MAX_DEPTH": "0"})


def test_validate_rejects_inverted_enum_range() -> None:
    with pytest.raises(ConfigError):
        GenerationOptions(enum_min_values=5, enum_max_values=3).validate()


def test_with_overrides_skips_none() -> None:
    options = GenerationOptions(table_name="t").with_overrides(table_name=None, readonly_arrays=True)
    assert options.table_name == "t"
    assert options.readonly_arrays is True
