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


"""Converts messages and content parts into Google AI SDK request types."""

from collections.abc import Sequence
from typing import NoReturn, Optional

import aiohttp
from google.genai import types
from typing_extensions import Never

from genai_bridge.core.types.conversation import (
    BinaryContent,
    ChatMessageType,
    ContentPart,
    ImageURLContent,
    MessageContent,
    TextContent,
)
from genai_bridge.core.types.exceptions import (
    SystemRoleNotSupportedError,
    UnsupportedContentError,
    UnsupportedRoleError,
)
from genai_bridge.utils.image_utils import download_image_blob

ROLE_MODEL: str = "model"
ROLE_USER: str = "user"


def _raise_unsupported_part(part: Never) -> NoReturn:
    # Only reachable for a part kind missing from the branches of `convert_part`.
    raise UnsupportedContentError(
        f"Unsupported content part type: {type(part).__name__}"
    )


def convert_role(role: ChatMessageType) -> str:
    """Maps a message role to one of the two roles the vendor accepts.

    Args:
        role: The role of the message.

    Returns:
        str: `ROLE_USER` for human and generic messages, `ROLE_MODEL` for AI ones.

    Raises:
        SystemRoleNotSupportedError: For system messages.
        UnsupportedRoleError: For function messages and any unknown role.
    """
    if role == ChatMessageType.SYSTEM:
        raise SystemRoleNotSupportedError()
    if role == ChatMessageType.AI:
        return ROLE_MODEL
    if role in (ChatMessageType.HUMAN, ChatMessageType.GENERIC):
        return ROLE_USER
    raise UnsupportedRoleError(f"role {role} not supported")


async def convert_part(
    part: ContentPart,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: Optional[float] = None,
) -> types.Part:
    """Converts one content part into a vendor part.

    Text and binary parts are copied verbatim; image URLs are downloaded.

    Raises:
        ImageDownloadError: If an image URL can't be fetched.
        InvalidMimeTypeError: If a downloaded image has a malformed MIME type.
        UnsupportedContentError: If the part kind is unknown.
    """
    if isinstance(part, TextContent):
        return types.Part(text=part.text)
    elif isinstance(part, BinaryContent):
        return types.Part(
            inline_data=types.Blob(mime_type=part.mime_type, data=part.data)
        )
    elif isinstance(part, ImageURLContent):
        blob = await download_image_blob(part.url, session=session, timeout=timeout)
        return types.Part(inline_data=blob)
    else:
        _raise_unsupported_part(part)


async def convert_parts(
    parts: Sequence[ContentPart],
    timeout: Optional[float] = None,
) -> list[types.Part]:
    """Converts content parts into vendor parts, preserving length and order.

    A single HTTP session is shared by all image downloads of the call and closed
    before returning.

    Args:
        parts: The parts to convert.
        timeout: Total timeout in seconds for the image downloads.

    Returns:
        list[types.Part]: One vendor part per input part.
    """
    if not any(isinstance(part, ImageURLContent) for part in parts):
        return [await convert_part(part) for part in parts]

    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        return [await convert_part(part, session=session) for part in parts]


async def convert_content(
    message: MessageContent,
    timeout: Optional[float] = None,
) -> types.Content:
    """Converts a message into vendor content.

    The role is checked before any part is converted, so an unsupported message
    never triggers a download.

    Args:
        message: The message to convert.
        timeout: Total timeout in seconds for the image downloads.

    Returns:
        types.Content: Content whose role is either "user" or "model".
    """
    role = convert_role(message.role)
    parts = await convert_parts(message.parts, timeout=timeout)
    return types.Content(role=role, parts=parts)
