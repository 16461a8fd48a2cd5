"""
Tests for session utilities.

This module tests session creation and configuration.
"""

from unittest.mock import patch

import httpx

from release_mirror.utils import create_session


class TestSessionUtilities:
    """Test session utility functions."""

    def test_create_session(self):
        """Test create_session defaults."""
        session = create_session()

        assert isinstance(session, httpx.Client)
        assert session.timeout.connect == 10.0
        assert session.timeout.read == 30.0
        assert session.follow_redirects is True
        assert not session.is_closed
        session.close()

    def test_create_session_headers_and_base_url(self):
        """Test that headers and base URL are applied."""
        session = create_session(headers={"Accept": "application/json"}, base_url="https://api.github.com")

        assert session.headers["Accept"] == "application/json"
        assert session.base_url == httpx.URL("https://api.github.com")
        session.close()

    def test_create_session_timeout(self):
        """Test custom timeout."""
        session = create_session(timeout=300.0)

        assert session.timeout.read == 300.0
        session.close()

    def test_create_session_without_http2(self):
        """Test that sessions work when h2 is not installed."""
        with patch("importlib.util.find_spec", return_value=None):
            session = create_session()

        assert isinstance(session, httpx.Client)
        session.close()

    def test_no_retries(self, httpx_mock):
        """Test that a failed request is attempted once."""
        route = httpx_mock.get("https://api.github.com/").mock(return_value=httpx.Response(503))
        session = create_session()

        response = session.get("https://api.github.com/")

        assert response.status_code == 503
        assert route.call_count == 1
        session.close()
