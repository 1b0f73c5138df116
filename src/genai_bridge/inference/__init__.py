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


"""Inference engines for the genai_bridge library.

This module provides the provider implementations of
:class:`~genai_bridge.core.inference.BaseInferenceEngine`:

- :class:`GoogleAIInferenceEngine`: generation and embeddings against the
  Google AI (Gemini) API.
"""

from genai_bridge.inference.google_ai_inference_engine import GoogleAIInferenceEngine
from genai_bridge.inference.stream_aggregator import aggregate_stream

__all__ = [
    "GoogleAIInferenceEngine",
    "aggregate_stream",
]
