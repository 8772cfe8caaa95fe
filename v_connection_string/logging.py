"""
Copyright (c) v-connection-string contributors.
Licensed under the MIT license.

Logging module for v_connection_string.
Diagnostics are off by default and cost a single level check while disabled.
"""

import logging
from logging.handlers import RotatingFileHandler
import os
import sys
import threading
import datetime
from typing import Optional

from v_connection_string.helpers import sanitize_connection_string


DEBUG = logging.DEBUG

# Output destination constants
STDOUT = 'stdout'
FILE = 'file'
BOTH = 'both'

LOG_DIR_NAME = "v_connection_string_logs"


class VConnectionStringLogger:
    """
    Singleton logger for v_connection_string.

    Connection descriptors routinely carry credentials, so every message is
    passed through sanitize_connection_string() before it reaches a handler.
    Handlers are only created once setup_logging() is called; until then the
    underlying logger sits at CRITICAL and nothing is formatted.
    """

    _instance: Optional['VConnectionStringLogger'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'VConnectionStringLogger':
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(VConnectionStringLogger, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._initialized = True

        self._logger = logging.getLogger('v_connection_string')
        self._logger.setLevel(logging.CRITICAL)  # Disabled by default
        self._logger.propagate = False

        self._output_mode = FILE
        self._file_handler = None
        self._stdout_handler = None
        self._log_file = None
        self._custom_log_path = None
        self._handlers_initialized = False

    def _setup_handlers(self):
        """
        Setup handlers based on output mode.
        Creates file handler and/or stdout handler as needed.
        """
        for handler in self._logger.handlers[:]:
            handler.close()
            self._logger.removeHandler(handler)

        self._file_handler = None
        self._stdout_handler = None

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
        )

        if self._output_mode in (FILE, BOTH):
            if self._custom_log_path:
                self._log_file = self._custom_log_path
                log_dir = os.path.dirname(self._custom_log_path)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
            else:
                log_dir = os.path.join(os.getcwd(), LOG_DIR_NAME)
                os.makedirs(log_dir, exist_ok=True)

                timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
                self._log_file = os.path.join(
                    log_dir,
                    f"v_connection_string_trace_{timestamp}_{os.getpid()}.log"
                )

            # 512MB, 5 backups
            self._file_handler = RotatingFileHandler(
                self._log_file,
                maxBytes=512 * 1024 * 1024,
                backupCount=5
            )
            self._file_handler.setFormatter(formatter)
            self._logger.addHandler(self._file_handler)
        else:
            self._log_file = None

        if self._output_mode in (STDOUT, BOTH):
            self._stdout_handler = logging.StreamHandler(sys.stdout)
            self._stdout_handler.setFormatter(formatter)
            self._logger.addHandler(self._stdout_handler)

    @staticmethod
    def _sanitize_message(msg: str) -> str:
        """
        Mask credentials in a log message.

        Args:
            msg: The message to sanitize

        Returns:
            str: Message with passwords and access tokens replaced by ***
        """
        return sanitize_connection_string(msg)

    def _log(self, level: int, msg: str, *args, **kwargs):
        """
        Internal logging method with sanitization.

        Args:
            level: Log level
            msg: Message format string
            *args: Arguments for message formatting
            **kwargs: Additional keyword arguments
        """
        if not self._logger.isEnabledFor(level):
            return

        if args:
            msg = msg % args

        # stacklevel points %(filename)s at the caller of debug()/warning()
        kwargs.setdefault('stacklevel', 3)
        self._logger.log(level, self._sanitize_message(msg), **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        """Log at DEBUG level"""
        self._log(logging.DEBUG, f"[Python] {msg}", *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log at WARNING level"""
        self._log(logging.WARNING, f"[Python] {msg}", *args, **kwargs)

    def _setLevel(self, level: int, output: Optional[str] = None, log_file_path: Optional[str] = None):
        """
        Internal method to set logging level (use setup_logging() instead).

        Args:
            level: Logging level (typically DEBUG)
            output: Optional output mode (FILE, STDOUT, BOTH)
            log_file_path: Optional custom path for log file

        Raises:
            ValueError: If output mode is invalid
        """
        if output is not None:
            if output not in (FILE, STDOUT, BOTH):
                raise ValueError(
                    f"Invalid output mode: {output}. "
                    f"Must be one of: {FILE}, {STDOUT}, {BOTH}"
                )
            self._output_mode = output

        if log_file_path is not None:
            self._custom_log_path = log_file_path

        if not self._handlers_initialized or output is not None or log_file_path is not None:
            self._setup_handlers()
            self._handlers_initialized = True

        self._logger.setLevel(level)

    def isEnabledFor(self, level: int) -> bool:
        """Check if a given log level is enabled."""
        return self._logger.isEnabledFor(level)

    def addHandler(self, handler: logging.Handler):
        """Add a handler to the logger"""
        self._logger.addHandler(handler)

    def removeHandler(self, handler: logging.Handler):
        """Remove a handler from the logger"""
        self._logger.removeHandler(handler)

    @property
    def handlers(self) -> list:
        """Get list of handlers attached to the logger"""
        return self._logger.handlers

    @property
    def output(self) -> str:
        """Get the current output mode"""
        return self._output_mode

    @output.setter
    def output(self, mode: str):
        if mode not in (FILE, STDOUT, BOTH):
            raise ValueError(
                f"Invalid output mode: {mode}. "
                f"Must be one of: {FILE}, {STDOUT}, {BOTH}"
            )
        self._output_mode = mode

        if self._handlers_initialized:
            self._setup_handlers()

    @property
    def log_file(self) -> Optional[str]:
        """Get the current log file path (None if file output is disabled)"""
        return self._log_file

    @property
    def level(self) -> int:
        """Get the current logging level"""
        return self._logger.level


logger = VConnectionStringLogger()


def setup_logging(output: str = 'file', log_file_path: Optional[str] = None):
    """
    Enable DEBUG logging for troubleshooting descriptor parsing.

    Args:
        output: Where to send logs (default: 'file')
                Options: 'file', 'stdout', 'both'
        log_file_path: Optional custom path for log file
                      If not specified, auto-generates in ./v_connection_string_logs/

    Examples:
        import v_connection_string

        # Stdout only (for CI/CD)
        v_connection_string.setup_logging(output='stdout')

        # Custom path with both outputs
        v_connection_string.setup_logging(output='both', log_file_path="/tmp/debug.log")
    """
    logger._setLevel(logging.DEBUG, output, log_file_path)
    return logger
