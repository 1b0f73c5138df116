from dataclasses import dataclass
from typing import Optional

import pytest

from genai_bridge.core.configs import (
    BaseParams,
    GenerationParams,
    GoogleAIParams,
    merge_params,
)


@dataclass
class _InnerParams(BaseParams):
    value: int = 0

    def __validate__(self):
        if self.value < 0:
            raise ValueError("value must be non-negative.")


@dataclass
class _OuterParams(BaseParams):
    inner: Optional[_InnerParams] = None
    items: Optional[list] = None


def test_generation_params_defaults_are_unset():
    params = GenerationParams()

    assert params.model_name is None
    assert params.max_new_tokens is None
    assert params.temperature is None
    assert params.streaming_func is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"temperature": -0.1},
        {"max_new_tokens": 0},
        {"streaming_func": "not callable"},
    ],
)
def test_generation_params_validation(kwargs):
    with pytest.raises(ValueError):
        GenerationParams(**kwargs)


def test_google_ai_params_defaults():
    params = GoogleAIParams()

    assert params.default_model == "gemini-pro"
    assert params.default_embedding_model == "embedding-001"
    assert params.default_max_tokens == 256
    assert params.default_temperature == 0.5
    assert params.api_key_env_varname == "GOOGLE_API_KEY"
    assert params.embedding_num_workers == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"default_model": ""},
        {"default_embedding_model": ""},
        {"default_max_tokens": 0},
        {"default_temperature": -1.0},
        {"connection_timeout": -1.0},
        {"connection_timeout": float("inf")},
        {"embedding_num_workers": 0},
    ],
)
def test_google_ai_params_validation(kwargs):
    with pytest.raises(ValueError):
        GoogleAIParams(**kwargs)


def test_google_ai_params_are_frozen():
    params = GoogleAIParams()
    with pytest.raises(AttributeError):
        params.default_model = "other"  # type: ignore[misc]


def test_get_api_key_prefers_explicit_key(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "from-env")

    assert GoogleAIParams(api_key="explicit").get_api_key() == "explicit"
    assert GoogleAIParams().get_api_key() == "from-env"


def test_get_api_key_custom_env_var(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setenv("MY_GEMINI_KEY", "custom")

    assert GoogleAIParams(api_key_env_varname="MY_GEMINI_KEY").get_api_key() == (
        "custom"
    )
    assert GoogleAIParams().get_api_key() is None
    assert GoogleAIParams(api_key_env_varname=None).get_api_key() is None


def test_nested_params_are_validated():
    with pytest.raises(ValueError):
        _OuterParams(inner=_InnerParams(value=-1))

    inner = _InnerParams(value=1)
    inner.value = -1
    with pytest.raises(ValueError):
        _OuterParams(items=[inner])


def test_iter_yields_fields():
    assert dict(_InnerParams(value=3)) == {"value": 3}


def test_merge_params_priority():
    config = GenerationParams(model_name="config-model", temperature=0.2)

    merged = merge_params(
        GenerationParams,
        config,
        {"model_name": "flat-model", "max_new_tokens": None, "temperature": None},
    )

    assert merged.model_name == "flat-model"
    assert merged.temperature == 0.2
    assert merged.max_new_tokens is None


def test_merge_params_without_config_uses_defaults():
    merged = merge_params(GoogleAIParams, None, {"default_max_tokens": 64})

    assert merged.default_max_tokens == 64
    assert merged.default_model == "gemini-pro"


def test_merge_params_validates_result():
    with pytest.raises(ValueError):
        merge_params(GenerationParams, None, {"temperature": -1.0})
