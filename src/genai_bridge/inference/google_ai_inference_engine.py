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


"""Inference engine for the Google AI (Gemini) API."""

from collections.abc import Awaitable, Sequence
from typing import Optional, TypeVar

from google import genai
from google.genai import errors, types
from typing_extensions import override

from genai_bridge.core.async_utils import bounded_map
from genai_bridge.core.configs import GenerationParams, GoogleAIParams, merge_params
from genai_bridge.core.converters.content_converter import (
    ROLE_USER,
    convert_content,
    convert_parts,
)
from genai_bridge.core.converters.response_converter import convert_candidates
from genai_bridge.core.inference import BaseInferenceEngine
from genai_bridge.core.types.content_response import ContentResponse
from genai_bridge.core.types.conversation import ChatMessageType, MessageContent
from genai_bridge.core.types.exceptions import (
    APIResponseError,
    ConfigurationError,
    EmbeddingError,
    NoContentInResponseError,
    UnsupportedRoleError,
)
from genai_bridge.core.types.streaming import StreamingFunc
from genai_bridge.inference.stream_aggregator import aggregate_stream
from genai_bridge.utils.logging import logger

T = TypeVar("T")


class GoogleAIInferenceEngine(BaseInferenceEngine):
    """Engine for running inference against the Google AI API.

    It converts the library's messages into the `google-genai` request types,
    calls either the one-shot generation endpoint (single message) or a chat
    session seeded with the earlier messages (several messages), and converts
    the returned candidates back into a `ContentResponse`.

    The engine only holds read-only state after construction, so one instance
    can serve concurrent calls.

    Example:
        >>> engine = GoogleAIInferenceEngine(api_key="...", default_model="gemini-pro")
        >>> engine.call("Why is the sky blue?")
    """

    def __init__(
        self,
        params: Optional[GoogleAIParams] = None,
        *,
        api_key: Optional[str] = None,
        default_model: Optional[str] = None,
        default_max_tokens: Optional[int] = None,
        default_temperature: Optional[float] = None,
        default_embedding_model: Optional[str] = None,
        client: Optional[genai.Client] = None,
    ):
        """Initializes the engine and its authenticated client.

        Flat params override the matching fields of `params`.

        Args:
            params: Full provider configuration. Flat params override.
            api_key: API key. Falls back to the `GOOGLE_API_KEY` env variable.
            default_model: Generation model used when a call doesn't set one.
            default_max_tokens: Max output tokens used when a call doesn't set one.
            default_temperature: Temperature used when a call doesn't set one.
            default_embedding_model: Model used for embeddings.
            client: A pre-built `genai.Client`. If None, one is created.

        Raises:
            ConfigurationError: If no API key is available or the client can't be
                created. No engine is returned in that case.
        """
        self._params = merge_params(
            GoogleAIParams,
            params,
            {
                "api_key": api_key,
                "default_model": default_model,
                "default_max_tokens": default_max_tokens,
                "default_temperature": default_temperature,
                "default_embedding_model": default_embedding_model,
            },
        )
        self._client = client if client is not None else self._create_client()

    @property
    def params(self) -> GoogleAIParams:
        """The immutable provider configuration."""
        return self._params

    def _create_client(self) -> genai.Client:
        api_key = self._params.get_api_key()
        if not api_key:
            raise ConfigurationError(
                "No API key provided. Pass `api_key` or set the "
                f"{self._params.api_key_env_varname} environment variable."
            )
        http_options = types.HttpOptions(
            timeout=int(self._params.connection_timeout * 1000)
        )
        try:
            return genai.Client(api_key=api_key, http_options=http_options)
        except Exception as e:
            raise ConfigurationError(f"Failed to create Google AI client: {e}") from e

    def _build_generation_config(
        self, generation_params: GenerationParams
    ) -> types.GenerateContentConfig:
        max_tokens = generation_params.max_new_tokens
        temperature = generation_params.temperature
        return types.GenerateContentConfig(
            max_output_tokens=(
                max_tokens
                if max_tokens is not None
                else self._params.default_max_tokens
            ),
            temperature=(
                temperature
                if temperature is not None
                else self._params.default_temperature
            ),
        )

    async def _call_api(self, request: Awaitable[T]) -> T:
        try:
            return await request
        except errors.APIError as e:
            raise APIResponseError(f"Google AI API error: {e}") from e

    @staticmethod
    def _convert_response(response: types.GenerateContentResponse) -> ContentResponse:
        if not response.candidates:
            raise NoContentInResponseError()
        return convert_candidates(response.candidates)

    @override
    async def _generate_content(
        self,
        messages: list[MessageContent],
        generation_params: GenerationParams,
    ) -> ContentResponse:
        """Generates content from the messages.

        A single message must come from a human and is sent as a one-shot
        request. Several messages are sent as a chat: all but the last one become
        the session history, and the last one, which must come from the user, is
        the live request.

        Args:
            messages: The conversation so far.
            generation_params: Per-call options.

        Returns:
            ContentResponse: The generated choices.

        Raises:
            UnsupportedRoleError: If a role is unsupported or misplaced.
            NoContentInResponseError: If a blocking call returns no candidates.
            APIResponseError: If the API call fails.
        """
        if not messages:
            raise ValueError("At least one message is required.")

        model = generation_params.model_name or self._params.default_model
        config = self._build_generation_config(generation_params)

        if len(messages) == 1:
            message = messages[0]
            if message.role != ChatMessageType.HUMAN:
                raise UnsupportedRoleError(
                    f"got {message.role} message role, want human"
                )
            return await self._generate_from_single_message(
                message, model, config, generation_params.streaming_func
            )
        return await self._generate_from_messages(
            messages, model, config, generation_params.streaming_func
        )

    async def _generate_from_single_message(
        self,
        message: MessageContent,
        model: str,
        config: types.GenerateContentConfig,
        streaming_func: Optional[StreamingFunc],
    ) -> ContentResponse:
        parts = await convert_parts(
            message.parts, timeout=self._params.connection_timeout
        )
        logger.debug(
            f"Generating content with {model} from a single message "
            f"({len(parts)} parts, streaming={streaming_func is not None})."
        )

        if streaming_func is None:
            response = await self._call_api(
                self._client.aio.models.generate_content(
                    model=model, contents=parts, config=config
                )
            )
            return self._convert_response(response)

        stream = await self._call_api(
            self._client.aio.models.generate_content_stream(
                model=model, contents=parts, config=config
            )
        )
        return await aggregate_stream(stream, streaming_func)

    async def _generate_from_messages(
        self,
        messages: list[MessageContent],
        model: str,
        config: types.GenerateContentConfig,
        streaming_func: Optional[StreamingFunc],
    ) -> ContentResponse:
        contents: list[types.Content] = []
        for message in messages:
            contents.append(
                await convert_content(message, timeout=self._params.connection_timeout)
            )

        # Chat sessions take the first N-1 messages as history and the last one
        # as the actual request.
        history = contents[:-1]
        request = contents[-1]
        if request.role != ROLE_USER:
            raise UnsupportedRoleError(
                f"got {request.role} message role, want user/human"
            )

        logger.debug(
            f"Generating content with {model} from a chat of {len(history)} "
            f"history messages (streaming={streaming_func is not None})."
        )
        chat = self._client.aio.chats.create(
            model=model, config=config, history=history
        )
        request_parts = request.parts or []

        if streaming_func is None:
            response = await self._call_api(chat.send_message(request_parts))
            return self._convert_response(response)

        stream = await self._call_api(chat.send_message_stream(request_parts))
        return await aggregate_stream(stream, streaming_func)

    async def _embed_text(self, text: str) -> list[float]:
        response = await self._call_api(
            self._client.aio.models.embed_content(
                model=self._params.default_embedding_model, contents=text
            )
        )
        if not response.embeddings or response.embeddings[0].values is None:
            raise NoContentInResponseError("no embedding in response")
        return list(response.embeddings[0].values)

    @override
    async def acreate_embedding(self, texts: Sequence[str]) -> list[list[float]]:
        """Creates one embedding per text, with one API call per text.

        The first failure aborts the operation. The raised `EmbeddingError` holds
        the embeddings computed before the failure: with a single worker, those of
        the texts preceding the failing one, and no later text is ever sent.

        Args:
            texts: The texts to embed.

        Returns:
            list[list[float]]: Vectors aligned with `texts`.

        Raises:
            EmbeddingError: If any embedding call fails.
        """
        if self._params.embedding_num_workers > 1:
            return await self._create_embedding_concurrently(texts)

        embeddings: list[list[float]] = []
        for text in texts:
            try:
                embeddings.append(await self._embed_text(text))
            except Exception as e:
                raise EmbeddingError(
                    f"Failed to embed text #{len(embeddings)}: {e}", embeddings
                ) from e
        return embeddings

    async def _create_embedding_concurrently(
        self, texts: Sequence[str]
    ) -> list[list[float]]:
        results = await bounded_map(
            self._embed_text, texts, self._params.embedding_num_workers
        )
        embeddings: list[list[float]] = []
        for index, result in enumerate(results):
            if isinstance(result, Exception):
                raise EmbeddingError(
                    f"Failed to embed text #{index}: {result}", embeddings
                ) from result
            embeddings.append(result)
        return embeddings

    def __repr__(self) -> str:
        """Return a string representation of the engine."""
        return (
            f"GoogleAIInferenceEngine(default_model={self._params.default_model!r}, "
            f"default_embedding_model={self._params.default_embedding_model!r})"
        )

