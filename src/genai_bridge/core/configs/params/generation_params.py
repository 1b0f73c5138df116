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


from dataclasses import dataclass
from typing import Optional

from genai_bridge.core.configs.params.base_params import BaseParams
from genai_bridge.core.types.streaming import StreamingFunc


@dataclass
class GenerationParams(BaseParams):
    """Per-call options for a generate-content request.

    Every field is optional; `None` means "use the provider's default".
    """

    model_name: Optional[str] = None
    """Identifier of the generation model, e.g. ``gemini-pro``."""

    max_new_tokens: Optional[int] = None
    """Maximum number of tokens to generate."""

    temperature: Optional[float] = None
    """Controls randomness in the output.

    Higher values (e.g., 1.0) make output more random, while lower values (e.g., 0.2)
    make it more focused and deterministic.
    """

    streaming_func: Optional[StreamingFunc] = None
    """If set, the response is streamed and each text chunk is passed to it."""

    def __validate__(self) -> None:
        """Validates generation-specific parameters."""
        if self.temperature is not None and self.temperature < 0:
            raise ValueError("Temperature must be non-negative.")
        if self.max_new_tokens is not None and self.max_new_tokens < 1:
            raise ValueError("max_new_tokens must be greater than or equal to 1.")
        if self.streaming_func is not None and not callable(self.streaming_func):
            raise ValueError("streaming_func must be callable.")
