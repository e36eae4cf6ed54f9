"""RedactionTokens — a replacement function that hands out stable tokens.

Instead of showing the same constant for every sensitive key, each key gets
its own token, e.g. ``«REDACTED_001»``.  The same key always maps to the same
token, so redacted output can still be correlated without revealing values.

Usage:
    tokens = RedactionTokens()
    dv = DualView(tokens, ["password", "api_key"])
    ...
    dv.redacting_view()["api_key"]    # "«REDACTED_002»"
    tokens.lookup("«REDACTED_002»")   # "api_key"
"""

from __future__ import annotations
from collections.abc import Hashable

# Token format: «PREFIX_NNN» — guillemets keep tokens apart from normal text
_TOKEN_FMT = "«{prefix}_{idx:03d}»"


class RedactionTokens:
    """Callable key → token mapping, assigned in first-seen order."""

    __slots__ = ("_prefix", "_key_to_token", "_token_to_key")

    def __init__(self, prefix: str = "REDACTED") -> None:
        self._prefix = prefix
        self._key_to_token: dict[Hashable, str] = {}   # "password" → «REDACTED_001»
        self._token_to_key: dict[str, Hashable] = {}   # «REDACTED_001» → "password"

    def __call__(self, key: Hashable) -> str:
        return self.get_or_create_token(key)

    def get_or_create_token(self, key: Hashable) -> str:
        """Return the existing token for ``key`` or mint the next one."""
        if key in self._key_to_token:
            return self._key_to_token[key]

        token = _TOKEN_FMT.format(prefix=self._prefix, idx=len(self._key_to_token) + 1)
        self._key_to_token[key] = token
        self._token_to_key[token] = key
        return token

    def lookup(self, token: str) -> Hashable | None:
        """Look up the key a token was issued for."""
        return self._token_to_key.get(token)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def size(self) -> int:
        return len(self._token_to_key)

    def dump(self) -> dict[str, Hashable]:
        """Return a copy of the token→key mapping."""
        return dict(self._token_to_key)

    def clear(self) -> None:
        self._key_to_token.clear()
        self._token_to_key.clear()
