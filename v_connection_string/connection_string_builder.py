"""
Copyright (c) v-connection-string contributors.
Licensed under the MIT license.

Connection string builder for v_connection_string.

Renders a configuration dictionary back into a vertica:// URL with the
escaping that parse() expects.
"""

from typing import Dict, Optional
from urllib.parse import quote, urlencode


# Fields rendered into the URL itself rather than the query string
URL_FIELDS = ('user', 'password', 'host', 'port', 'database')

# Left unescaped in the path; parse() keeps escapes of these characters encoded
_PATH_SAFE = "/;:@&=+$,"


class _ConnectionStringBuilder:
    """
    Internal builder for vertica:// URLs. Not part of public API.

    Database names containing '?' or '#' are escaped, and parse() leaves those
    escapes encoded, so such names do not survive a build/parse round trip.
    """

    def __init__(self, initial_params: Optional[Dict[str, Optional[str]]] = None):
        """
        Initialize the builder with optional initial parameters.

        Args:
            initial_params: Dictionary of initial connection parameters
        """
        self._params: Dict[str, str] = {}
        for key, value in (initial_params or {}).items():
            if value is not None:
                self.add_param(key, value)

    def add_param(self, key: str, value: str) -> '_ConnectionStringBuilder':
        """
        Add or update a connection parameter.

        Args:
            key: Field name
            value: Field value

        Returns:
            Self for method chaining
        """
        self._params[key] = str(value)
        return self

    def has_param(self, key: str) -> bool:
        """Check if a parameter exists."""
        return key in self._params

    def build(self) -> str:
        """
        Build the final connection URL.

        Returns:
            vertica:// URL. Fields other than user, password, host, port and
            database become query parameters sorted by name.

        Examples:
            >>> _ConnectionStringBuilder({'host': 'localhost', 'database': 'VMart'}).build()
            'vertica://localhost/VMart'
            >>> _ConnectionStringBuilder({'host': '/var/run', 'tls_mode': 'require'}).build()
            'vertica://%2Fvar%2Frun?tls_mode=require'
        """
        parts = ['vertica://']

        user = self._params.get('user')
        password = self._params.get('password')
        if user is not None or password is not None:
            parts.append(quote(user or '', safe=''))
            if password is not None:
                parts.append(':' + quote(password, safe=''))
            parts.append('@')

        parts.append(self._escape_host(self._params.get('host', '')))

        if 'port' in self._params:
            parts.append(':' + self._params['port'])

        if self._params.get('database'):
            parts.append('/' + quote(self._params['database'], safe=_PATH_SAFE))

        query = sorted(
            (key, value) for key, value in self._params.items() if key not in URL_FIELDS
        )
        if query:
            parts.append('?' + urlencode(query))

        return ''.join(parts)

    @staticmethod
    def _escape_host(host: str) -> str:
        """
        Escape a host for the URL authority.

        Socket directories are fully percent-encoded; IPv6 literals are bracketed.

        Examples:
            >>> _ConnectionStringBuilder._escape_host('/tmp')
            '%2Ftmp'
            >>> _ConnectionStringBuilder._escape_host('::1')
            '[::1]'
        """
        if ':' in host and '/' not in host:
            return f'[{host}]'
        return quote(host, safe='')
