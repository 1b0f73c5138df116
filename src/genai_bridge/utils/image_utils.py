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


import asyncio
from typing import Optional

import aiohttp
from google.genai import types

from genai_bridge.core.types.exceptions import (
    ImageDownloadError,
    InvalidMimeTypeError,
)
from genai_bridge.utils.http import get_failure_reason, is_success_status_code
from genai_bridge.utils.logging import logger

_CONTENT_TYPE_HEADER: str = "Content-Type"


def parse_image_subtype(mime_type: Optional[str]) -> str:
    """Returns the subtype of a `type/subtype` MIME type, e.g. "png".

    Parameters (anything after ";") are ignored.

    Raises:
        InvalidMimeTypeError: If the MIME type doesn't have exactly two non-empty
            segments.
    """
    essence = (mime_type or "").split(";", 1)[0].strip()
    segments = essence.split("/")
    if len(segments) != 2 or not all(segments):
        raise InvalidMimeTypeError(mime_type)
    return segments[1]


def create_image_blob(image_format: str, data: bytes) -> types.Blob:
    """Creates an inline image blob, e.g. `create_image_blob("png", data)`."""
    return types.Blob(mime_type=f"image/{image_format}", data=data)


async def _fetch_image_blob(url: str, session: aiohttp.ClientSession) -> types.Blob:
    try:
        async with session.get(url) as response:
            if not is_success_status_code(response.status):
                raise ImageDownloadError(
                    f"failed to fetch image from url {url}: "
                    f"{get_failure_reason(response)}"
                )
            data = await response.read()
            mime_type = response.headers.get(_CONTENT_TYPE_HEADER)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Failed to download an image from url: {url}")
        raise ImageDownloadError(f"failed to fetch image from url {url}: {e}") from e

    # The blob only takes the format part of the mime type, e.g. "png".
    return create_image_blob(parse_image_subtype(mime_type), data)


async def download_image_blob(
    url: str,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: Optional[float] = None,
) -> types.Blob:
    """Downloads an image and returns it as an inline vendor blob.

    The download runs on the calling task, so cancelling the task cancels it.

    Args:
        url: The image URL.
        session: The aiohttp session to use. A short-lived one is created if None.
        timeout: Total timeout in seconds, used only when a session is created.

    Returns:
        types.Blob: The image bytes tagged with ``image/<subtype>``, where the
        subtype comes from the response's `Content-Type` header.

    Raises:
        ImageDownloadError: If the image can't be fetched or read.
        InvalidMimeTypeError: If the `Content-Type` header isn't `type/subtype`.
    """
    if session is not None:
        return await _fetch_image_blob(url, session)

    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as new_session:
        return await _fetch_image_blob(url, new_session)
