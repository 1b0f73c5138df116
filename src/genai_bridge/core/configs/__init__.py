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


"""Configuration module for the genai_bridge library.

- Generation:
    - :class:`~genai_bridge.core.configs.params.generation_params.GenerationParams`
- Provider:
    - :class:`~genai_bridge.core.configs.params.google_ai_params.GoogleAIParams`
"""

from genai_bridge.core.configs.params.base_params import BaseParams, merge_params
from genai_bridge.core.configs.params.generation_params import GenerationParams
from genai_bridge.core.configs.params.google_ai_params import GoogleAIParams

__all__ = [
    "BaseParams",
    "GenerationParams",
    "GoogleAIParams",
    "merge_params",
]
