"""
Tests for auth_handler.py
"""
import pytest

from upstash_qstash.auth.auth_handler import AuthHandler, BearerAuthHandler
from upstash_qstash.errors import InitError
from upstash_qstash.types import RequestContext


class TestBearerAuthHandler:
    """Tests for BearerAuthHandler class."""

    @pytest.fixture
    def context(self):
        return RequestContext(method="POST", path="/v1/publish/topic")

    def test_is_auth_handler(self):
        assert isinstance(BearerAuthHandler("tok"), AuthHandler)

    # Happy Path: header rendered
    def test_get_header(self, context):
        handler = BearerAuthHandler("my-secret-token")
        assert handler.get_header(context) == {"Authorization": "Bearer my-secret-token"}

    # Path: token kept verbatim, including surrounding spaces
    def test_token_not_altered(self, context):
        assert BearerAuthHandler(" tok ").token == " tok "

    # Error Path: blank tokens rejected at construction
    @pytest.mark.parametrize("token", ["", "   "])
    def test_blank_token(self, token):
        with pytest.raises(InitError):
            BearerAuthHandler(token)

    def test_repr_masks_token(self):
        token = "my-secret-token-abcdef"
        assert token not in repr(BearerAuthHandler(token))
