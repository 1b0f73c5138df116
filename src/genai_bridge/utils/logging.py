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


import logging
from typing import Union

_LOG_FORMAT: str = (
    "[%(asctime)s][%(name)s][%(levelname)s][%(pathname)s:%(lineno)s] %(message)s"
)


def get_logger(name: str, level: str = "info") -> logging.Logger:
    """Get a logger instance with the specified name and log level.

    A console handler is attached the first time a given logger is requested.

    Args:
        name (str): The name of the logger.
        level (str, optional): The log level to set for the logger. Defaults to "info".

    Returns:
        logging.Logger: The logger instance.
    """
    if name not in logging.Logger.manager.loggerDict:
        configure_logger(name, level=level)

    return logging.getLogger(name)


def configure_logger(name: str, level: str = "info") -> None:
    """Configures a logger with a console handler and the default format.

    Args:
        name: The name of the logger.
        level: The log level, e.g. "info" or "debug".
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    formatter = logging.Formatter(_LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level.upper())

    logger.addHandler(console_handler)
    logger.propagate = False


def update_logger_level(name: str, level: Union[str, int] = "info") -> None:
    """Updates the log level of the logger and all of its handlers.

    Args:
        name: The logger instance to update.
        level: The log level to set for the logger.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = get_logger(name)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


# Default logger for the library
logger = get_logger("genai_bridge")
