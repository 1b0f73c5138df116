# Copyright 2025 - Oumi
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import math
import os
from dataclasses import dataclass
from typing import Optional

from genai_bridge.core.configs.params.base_params import BaseParams

DEFAULT_MODEL: str = "gemini-pro"
DEFAULT_EMBEDDING_MODEL: str = "embedding-001"
DEFAULT_MAX_TOKENS: int = 256
DEFAULT_TEMPERATURE: float = 0.5


@dataclass(frozen=True)
class GoogleAIParams(BaseParams):
    """Construction-time configuration of the Google AI provider.

    The object is immutable: per-call options never modify it, they are merged
    over it for the duration of a single call.
    """

    api_key: Optional[str] = None
    """API key to use for authentication."""

    api_key_env_varname: Optional[str] = "GOOGLE_API_KEY"
    """Name of the environment variable read when `api_key` is not set."""

    default_model: str = DEFAULT_MODEL
    """Generation model used when a call doesn't name one."""

    default_max_tokens: int = DEFAULT_MAX_TOKENS
    """Cap on generated tokens used when a call doesn't set one."""

    default_temperature: float = DEFAULT_TEMPERATURE
    """Sampling temperature used when a call doesn't set one."""

    default_embedding_model: str = DEFAULT_EMBEDDING_MODEL
    """Model used by `create_embedding`."""

    connection_timeout: float = 300.0
    """Timeout in seconds for a request to the API or an image download."""

    embedding_num_workers: int = 1
    """Maximum number of embedding calls in flight.

    With the default of 1, texts are embedded strictly one after another and
    nothing after a failing text is ever sent.
    """

    def get_api_key(self) -> Optional[str]:
        """Returns the API key, falling back to the environment."""
        if self.api_key:
            return self.api_key

        if self.api_key_env_varname:
            return os.environ.get(self.api_key_env_varname) or None

        return None

    def __validate__(self) -> None:
        """Validates the provider parameters."""
        if not self.default_model:
            raise ValueError("default_model must not be empty.")
        if not self.default_embedding_model:
            raise ValueError("default_embedding_model must not be empty.")
        if self.default_max_tokens < 1:
            raise ValueError(
                "default_max_tokens must be greater than or equal to 1."
            )
        if self.default_temperature < 0:
            raise ValueError("default_temperature must be non-negative.")
        if self.connection_timeout < 0:
            raise ValueError("Connection timeout must be greater than or equal to 0.")
        if not math.isfinite(self.connection_timeout):
            raise ValueError("Connection timeout must be finite.")
        if self.embedding_num_workers < 1:
            raise ValueError(
                "embedding_num_workers must be greater than or equal to 1."
            )
