"""Tests for RedactionTokens."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dualview import DualView, RedactionTokens


def test_tokens_deterministic():
    tokens = RedactionTokens()
    t1 = tokens("password")
    t2 = tokens("password")
    assert t1 == t2 == "«REDACTED_001»"


def test_tokens_different_keys():
    tokens = RedactionTokens()
    assert tokens("password") == "«REDACTED_001»"
    assert tokens("api_key") == "«REDACTED_002»"
    assert tokens.size == 2


def test_tokens_custom_prefix():
    tokens = RedactionTokens("SECRET")
    assert tokens("password") == "«SECRET_001»"
    assert tokens.prefix == "SECRET"


def test_tokens_lookup():
    tokens = RedactionTokens()
    token = tokens.get_or_create_token("api_key")
    assert tokens.lookup(token) == "api_key"
    assert tokens.lookup("«REDACTED_999»") is None
    assert tokens.dump() == {token: "api_key"}


def test_tokens_clear():
    tokens = RedactionTokens()
    tokens("a")
    tokens.clear()
    assert tokens.size == 0
    assert tokens("b") == "«REDACTED_001»"


def test_tokens_as_replacement_func():
    tokens = RedactionTokens()
    dv = DualView(tokens, ["password", "api_key"])
    dv["user"] = "alice"
    dv["password"] = "hunter2"
    dv["api_key"] = "xk_live_123"
    view = dv.redacting_view()
    assert list(view.values()) == ["alice", "«REDACTED_001»", "«REDACTED_002»"]
    # Re-reading reuses the tokens already issued
    assert view["password"] == "«REDACTED_001»"
    assert tokens.size == 2
