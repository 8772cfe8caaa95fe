"""
Copyright (c) v-connection-string contributors.
Licensed under the MIT license.

Connection descriptor fields for v_connection_string.

Defines the recognized configuration keys, the TLS mode enumeration and the
precedence tables that decide which source wins when a field is supplied
more than once.
"""

from collections import namedtuple
from typing import Optional

from v_connection_string.helpers import sanitize_user_input
from v_connection_string.logging import logger


# Descriptor shapes
VERTICA = 'vertica'
SOCKET = 'socket'
BARE_PATH = 'path'

# Fields with parser-defined handling. Any other key is passed through as-is.
RECOGNIZED_KEYS = (
    'user',
    'password',
    'host',
    'port',
    'database',
    'client_encoding',
    'options',
    'tls_mode',
    'tls_trusted_certs',
    'oauth_access_token',
    'workload',
    'client_label',
)

TLS_MODES = ('disable', 'prefer', 'require', 'verify-ca', 'verify-full')
DEFAULT_TLS_MODE = 'prefer'


# A field taken from the URL itself. ``overridable_by`` names the query key that
# wins over the URL component, or None when the URL component always wins.
FieldPrecedence = namedtuple('FieldPrecedence', ['source', 'field', 'overridable_by'])

# A query key renamed onto another field. Aliases win over the target field's own
# query key but never over a value the caller supplied in the base mapping.
QueryAlias = namedtuple('QueryAlias', ['query_key', 'field'])


PRECEDENCE = {
    VERTICA: (
        FieldPrecedence('userinfo', 'user', None),
        FieldPrecedence('userinfo', 'password', None),
        FieldPrecedence('authority', 'host', 'host'),
        FieldPrecedence('authority', 'port', None),
        FieldPrecedence('path', 'database', None),
    ),
    SOCKET: (
        FieldPrecedence('userinfo', 'user', None),
        FieldPrecedence('userinfo', 'password', None),
        FieldPrecedence('path', 'host', None),
    ),
    BARE_PATH: (
        FieldPrecedence('path', 'host', None),
        FieldPrecedence('path', 'database', None),
    ),
}

ALIASES = {
    VERTICA: (),
    SOCKET: (
        QueryAlias('db', 'database'),
        QueryAlias('encoding', 'client_encoding'),
    ),
    BARE_PATH: (),
}


def alias_keys(shape: str) -> frozenset:
    """Return the query keys that are renamed for the given descriptor shape."""
    return frozenset(alias.query_key for alias in ALIASES[shape])


def is_recognized_key(key: str) -> bool:
    """
    Check whether a key has parser-defined handling.

    Examples:
        >>> is_recognized_key('tls_mode')
        True
        >>> is_recognized_key('keepalives')
        False
    """
    return key in RECOGNIZED_KEYS


def normalize_tls_mode(value: Optional[str]) -> Optional[str]:
    """
    Validate a tls_mode value against TLS_MODES.

    Unsupported values are replaced by DEFAULT_TLS_MODE rather than rejected.
    None is returned unchanged so callers can apply their own default.

    Examples:
        >>> normalize_tls_mode('verify-full')
        'verify-full'
        >>> normalize_tls_mode('no-verify')
        'prefer'
    """
    if value is None or value in TLS_MODES:
        return value

    logger.warning(
        "Unsupported tls_mode '%s' replaced with '%s'",
        sanitize_user_input(value),
        DEFAULT_TLS_MODE,
    )
    return DEFAULT_TLS_MODE
