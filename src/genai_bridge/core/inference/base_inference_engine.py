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


from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Optional

from genai_bridge.core.async_utils import safe_asyncio_run
from genai_bridge.core.configs import GenerationParams, merge_params
from genai_bridge.core.types.content_response import ContentResponse
from genai_bridge.core.types.conversation import ChatMessageType, MessageContent
from genai_bridge.core.types.streaming import StreamingFunc


class BaseInferenceEngine(ABC):
    """Uniform interface implemented by every generation provider.

    Subclasses implement the two coroutines `_generate_content` and
    `acreate_embedding`. The blocking variants run them via `safe_asyncio_run`.
    """

    async def agenerate_content(
        self,
        messages: Sequence[MessageContent],
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        streaming_func: Optional[StreamingFunc] = None,
        generation_params: Optional[GenerationParams] = None,
    ) -> ContentResponse:
        """Generates content from a list of messages.

        The precedence for options is: flat params > `generation_params` >
        provider defaults.

        Args:
            messages: The conversation so far; the last message is the request.
            model: Model override for this call.
            max_tokens: Max output tokens override for this call.
            temperature: Temperature override for this call.
            streaming_func: If set, the response is streamed into this callback.
            generation_params: Full per-call options object. Flat params override.

        Returns:
            ContentResponse: The generated choices.
        """
        params = merge_params(
            GenerationParams,
            generation_params,
            {
                "model_name": model,
                "max_new_tokens": max_tokens,
                "temperature": temperature,
                "streaming_func": streaming_func,
            },
        )
        return await self._generate_content(list(messages), params)

    def generate_content(
        self,
        messages: Sequence[MessageContent],
        **kwargs: Any,
    ) -> ContentResponse:
        """Blocking variant of `agenerate_content`."""
        return safe_asyncio_run(self.agenerate_content(messages, **kwargs))

    async def acall(self, prompt: str, **kwargs: Any) -> str:
        """Generates a completion for a single human prompt.

        Args:
            prompt: The prompt text.
            kwargs: Options forwarded to `agenerate_content`.

        Returns:
            str: The text of the first choice.
        """
        response = await self.agenerate_content(
            [MessageContent.from_text(ChatMessageType.HUMAN, prompt)], **kwargs
        )
        choice = response.first_choice
        return choice.content if choice is not None else ""

    def call(self, prompt: str, **kwargs: Any) -> str:
        """Blocking variant of `acall`."""
        return safe_asyncio_run(self.acall(prompt, **kwargs))

    def create_embedding(self, texts: Sequence[str]) -> list[list[float]]:
        """Blocking variant of `acreate_embedding`."""
        return safe_asyncio_run(self.acreate_embedding(texts))

    @abstractmethod
    async def _generate_content(
        self,
        messages: list[MessageContent],
        generation_params: GenerationParams,
    ) -> ContentResponse:
        """Generates content with the merged per-call options.

        Args:
            messages: The conversation so far; the last message is the request.
            generation_params: Per-call options. Unset fields fall back to the
                provider defaults.

        Returns:
            ContentResponse: The generated choices.
        """
        raise NotImplementedError

    @abstractmethod
    async def acreate_embedding(self, texts: Sequence[str]) -> list[list[float]]:
        """Creates one embedding vector per input text, in input order.

        Args:
            texts: The texts to embed.

        Returns:
            list[list[float]]: Vectors aligned with `texts`.
        """
        raise NotImplementedError
