"""
Copyright (c) v-connection-string contributors.
Licensed under the MIT license.
This module initializes the v_connection_string package.
"""

__version__ = "1.0.0"

# Exceptions
from .exceptions import (
    Error,
    InterfaceError,
    ConnectionStringParseError,
)

# Connection String Handling
from .connection_string_parser import parse, _ConnectionStringParser
from .connection_string_builder import _ConnectionStringBuilder
from .connection_string_fields import RECOGNIZED_KEYS, TLS_MODES, DEFAULT_TLS_MODE

# Logging Configuration
from .logging import logger, setup_logging
