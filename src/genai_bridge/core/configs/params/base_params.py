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


import dataclasses
from collections.abc import Iterator
from typing import Any, Optional, TypeVar

T = TypeVar("T", bound="BaseParams")


class BaseParams:
    """Base class for the dataclass-based parameter objects of this library.

    Subclasses are dataclasses. Validation runs right after construction, so an
    invalid params object can never be observed.
    """

    def __post_init__(self) -> None:
        """Validates the parameters once the dataclass is initialized."""
        self.validate()

    def validate(self, validated: Optional[set[int]] = None) -> None:
        """Recursively validates the parameters."""
        if validated is None:
            validated = set()

        # If this object has already been validated, return immediately
        if id(self) in validated:
            return
        validated.add(id(self))

        # Only one level of nesting is supported, e.g. `list[BaseParams]` but not
        # `list[list[BaseParams]]`.
        for _attr_name, attr_value in self:
            if isinstance(attr_value, BaseParams):
                attr_value.validate(validated)
            elif isinstance(attr_value, (list, tuple)):
                for item in attr_value:
                    if isinstance(item, BaseParams):
                        item.validate(validated)

        self.__validate__()

    def __validate__(self) -> None:
        """Validates the parameters of this object.

        This method can be overridden by subclasses to implement custom
        validation logic.

        In case of validation errors, this method should raise a `ValueError`
        or other appropriate exception.
        """

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        """Returns an iterator over field names and values.

        Note: for an attribute to be a field, it must be declared in the
        dataclass definition and have a type annotation.
        """
        for param in dataclasses.fields(self):  # type: ignore[arg-type]
            yield param.name, getattr(self, param.name)


def merge_params(
    config_class: type[T],
    config_obj: Optional[T],
    flat_overrides: dict[str, Any],
) -> T:
    """Merge flat params over config object, using dataclass defaults for missing.

    Priority order: flat_overrides > config_obj > dataclass defaults

    Args:
        config_class: The dataclass type to create (e.g., GenerationParams)
        config_obj: Optional existing config object to use as base
        flat_overrides: Dict of flat param names to values (None values ignored)

    Returns:
        New instance of config_class with merged values
    """
    kwargs: dict[str, Any] = {}

    for field in dataclasses.fields(config_class):  # type: ignore[arg-type]
        field_name = field.name
        flat_value = flat_overrides.get(field_name)

        if flat_value is not None:
            kwargs[field_name] = flat_value
        elif config_obj is not None:
            kwargs[field_name] = getattr(config_obj, field_name)
        # else: let dataclass use its default

    return config_class(**kwargs)
