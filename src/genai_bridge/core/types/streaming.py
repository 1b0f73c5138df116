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


"""Types for streaming generation responses."""

from collections.abc import Awaitable
from typing import Callable, Union

StreamingFunc = Callable[[bytes], Union[None, Awaitable[None]]]
r"""Callback receiving each newly generated chunk of text, UTF-8 encoded.

The callback may be a plain function or a coroutine function. It is called once
per text part, in arrival order, and never concurrently with the stream read.
To stop consuming the stream it raises
:class:`~genai_bridge.core.types.exceptions.StopStreaming`; the call then
returns what was accumulated so far.

Example:
    >>> chunks = []
    >>> def on_chunk(chunk: bytes) -> None:
    ...     chunks.append(chunk.decode("utf-8"))
    ...     print(chunk.decode("utf-8"), end="", flush=True)
"""
