"""
Tests for the chat command handler (no Discord connection involved).
"""
import pytest

from shortlink_app.bot.handler import ShortenCommandHandler
from shortlink_app.exceptions import PersistenceError


@pytest.fixture
def handler(url_service):
    return ShortenCommandHandler(url_service)


class TestShortenCommandHandler:
    """Test message parsing and replies"""

    @pytest.mark.parametrize("content", ["hello", "!shortenhttps://x", "please !shorten https://x", ""])
    def test_ignores_other_messages(self, handler, content):
        assert handler.handle(content) is None

    @pytest.mark.parametrize("content", ["!shorten", "!shorten ", "!shorten    ", "  !shorten", "\n!shorten  "])
    def test_missing_url_gets_usage(self, handler, content):
        reply = handler.handle(content)

        assert reply == "Please provide a URL to shorten. Usage: `!shorten <URL>`"

    def test_shortens_url(self, handler, url_service):
        reply = handler.handle("!shorten   https://example.com/a  ")

        assert reply.startswith("🔗 Short URL: http://localhost:8080/")
        code = reply.rsplit("/", 1)[1]
        assert url_service.resolve(code) == "https://example.com/a"

    def test_bare_command_with_whitespace_stores_nothing(self, handler, url_service):
        handler.handle("  !shorten")

        assert len(url_service.store) == 0

    def test_leading_whitespace_before_command(self, handler, url_service):
        reply = handler.handle("  !shorten https://example.com/a")

        code = reply.rsplit("/", 1)[1]
        assert url_service.resolve(code) == "https://example.com/a"

    def test_unexpected_error_becomes_message(self, handler, url_service, monkeypatch):
        """Test that any failure still gets a reply instead of escaping"""
        def broken(target):
            raise RuntimeError("unexpected")

        monkeypatch.setattr(url_service, "shorten", broken)

        assert handler.handle("!shorten https://example.com/a") == "❌ Failed to shorten URL."

    def test_failure_becomes_message(self, handler, url_service, monkeypatch):
        """Test that store errors are reported to the user, not raised"""
        def disk_full(mapping):
            raise PersistenceError("No space left on device")

        monkeypatch.setattr(url_service.store.storage, "write", disk_full)

        assert handler.handle("!shorten https://example.com/a") == "❌ Failed to shorten URL."

    def test_custom_prefix(self, url_service):
        handler = ShortenCommandHandler(url_service, prefix="/short ")

        assert handler.handle("!shorten https://example.com/a") is None
        assert handler.handle("/short https://example.com/a").startswith("🔗 Short URL: ")
