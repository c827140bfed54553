"""Interface contract tests for completion clients.

These tests ensure every client implements the CompletionClient
capability consistently so test doubles can stand in for it.
"""

import inspect

import pytest

from finflow_ai import CompletionClient, GeminiClient, OpenRouterClient

from .conftest import StubCompletionClient

CLIENT_CLASSES = [OpenRouterClient, GeminiClient, StubCompletionClient]


class TestCommonInterface:
    """Tests that all clients implement the required interface."""

    @pytest.mark.parametrize("client_class", CLIENT_CLASSES)
    def test_is_completion_client(self, client_class):
        """All clients must subclass CompletionClient."""
        assert issubclass(client_class, CompletionClient)

    @pytest.mark.parametrize("client_class", CLIENT_CLASSES)
    def test_send_completion_is_async(self, client_class):
        """send_completion() must be an async method."""
        assert inspect.iscoroutinefunction(client_class.send_completion)

    @pytest.mark.parametrize("client_class", CLIENT_CLASSES)
    def test_send_completion_signature(self, client_class):
        """send_completion() takes only the request."""
        sig = inspect.signature(client_class.send_completion)
        assert list(sig.parameters) == ["self", "request"]

    def test_capability_is_abstract(self):
        """The capability itself cannot be instantiated."""
        with pytest.raises(TypeError):
            CompletionClient()
