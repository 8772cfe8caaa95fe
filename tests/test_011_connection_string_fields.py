"""
Copyright (c) v-connection-string contributors.
Licensed under the MIT license.

Unit tests for connection_string_fields.
"""

import pytest
from v_connection_string.connection_string_fields import (
    ALIASES,
    BARE_PATH,
    DEFAULT_TLS_MODE,
    PRECEDENCE,
    RECOGNIZED_KEYS,
    SOCKET,
    TLS_MODES,
    VERTICA,
    alias_keys,
    is_recognized_key,
    normalize_tls_mode,
)


class TestConnectionStringFields:
    """Unit tests for recognized keys and tls_mode validation."""

    def test_recognized_keys(self):
        """Test that the identity keys are recognized."""
        for key in ('user', 'password', 'host', 'port', 'database', 'client_encoding',
                    'options', 'tls_mode', 'tls_trusted_certs', 'oauth_access_token',
                    'workload', 'client_label'):
            assert is_recognized_key(key)
        assert len(RECOGNIZED_KEYS) == 12

    def test_unrecognized_keys(self):
        """Test keys that are only passed through."""
        assert not is_recognized_key('keepalives')
        assert not is_recognized_key('db')
        assert not is_recognized_key('TLS_MODE')

    def test_tls_modes(self):
        """Test the supported tls_mode enumeration."""
        assert TLS_MODES == ('disable', 'prefer', 'require', 'verify-ca', 'verify-full')
        assert DEFAULT_TLS_MODE == 'prefer'

    @pytest.mark.parametrize('mode', TLS_MODES)
    def test_normalize_valid_tls_mode(self, mode):
        """Test that supported values are unchanged."""
        assert normalize_tls_mode(mode) == mode

    @pytest.mark.parametrize('mode', ['no-verify', 'REQUIRE', '', 'verify_full', 'true'])
    def test_normalize_invalid_tls_mode(self, mode):
        """Test that unsupported values fall back to prefer."""
        assert normalize_tls_mode(mode) == 'prefer'

    def test_normalize_none(self):
        """Test that None is left for the caller to default."""
        assert normalize_tls_mode(None) is None


class TestPrecedenceTables:
    """Unit tests for the precedence and alias tables."""

    def test_every_shape_has_tables(self):
        """Test that each descriptor shape has both tables."""
        for shape in (VERTICA, SOCKET, BARE_PATH):
            assert shape in PRECEDENCE
            assert shape in ALIASES

    def test_query_host_overrides_vertica_authority(self):
        """Test that host from the authority yields to the host query key."""
        rules = {rule.field: rule for rule in PRECEDENCE[VERTICA]}
        assert rules['host'].source == 'authority'
        assert rules['host'].overridable_by == 'host'

    def test_path_database_is_not_overridable(self):
        """Test that the URL path always names the database."""
        rules = {rule.field: rule for rule in PRECEDENCE[VERTICA]}
        assert rules['database'].overridable_by is None

    def test_userinfo_and_port_are_not_overridable(self):
        """Test that query user, password and port never replace URL values."""
        for shape in (VERTICA, SOCKET):
            for rule in PRECEDENCE[shape]:
                if rule.field in ('user', 'password', 'port'):
                    assert rule.overridable_by is None

    def test_socket_path_is_host(self):
        """Test that socket URLs take the host from the path."""
        rules = {rule.field: rule for rule in PRECEDENCE[SOCKET]}
        assert rules['host'].source == 'path'
        assert rules['host'].overridable_by is None

    def test_alias_keys(self):
        """Test that only socket URLs rename query keys."""
        assert alias_keys(SOCKET) == frozenset({'db', 'encoding'})
        assert alias_keys(VERTICA) == frozenset()
        assert alias_keys(BARE_PATH) == frozenset()
