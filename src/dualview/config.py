"""YAML/dict config loader for dualview.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    dualview:
      sensitive_keys:
        - password
        - api_key
      replacement:
        mode: value            # "value" or "token"
        value: "***"           # constant shown for sensitive keys (null allowed)
        token_prefix: REDACTED # used when mode is "token"
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

from .dualview import DualView
from .errors import InvalidArgumentError
from .tokens import RedactionTokens

logger = logging.getLogger(__name__)

DEFAULT_REPLACEMENT = "***"
DEFAULT_TOKEN_PREFIX = "REDACTED"
REPLACEMENT_MODES = ("value", "token")


def _require_mapping(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidArgumentError(
            name, f"{name} must be a mapping, got {type(value).__name__}",
        )
    return value


def _sensitive_key_set(value: Any) -> set:
    """Accept a list of keys, or a single key written as a scalar."""
    if value is None:
        return set()
    if isinstance(value, (str, bytes, int, float, bool)):
        return {value}
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise InvalidArgumentError(
            "sensitive_keys",
            f"sensitive_keys must be a list of keys, got {type(value).__name__}",
        )
    return set(value)


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = _require_mapping(data, "config")
    # Support nested under "dualview" key or flat
    if "dualview" in data:
        data = _require_mapping(data["dualview"], "dualview")

    replacement = _require_mapping(data.get("replacement"), "replacement")
    mode = replacement.get("mode", "value")
    if mode not in REPLACEMENT_MODES:
        raise InvalidArgumentError(
            "replacement.mode",
            f"replacement.mode must be one of {', '.join(REPLACEMENT_MODES)}, got {mode!r}",
        )

    cfg = {
        "sensitive_keys": _sensitive_key_set(data.get("sensitive_keys")),
        "replacement_mode": mode,
        "replacement_value": replacement.get("value", DEFAULT_REPLACEMENT),
        "token_prefix": replacement.get("token_prefix", DEFAULT_TOKEN_PREFIX),
    }
    logger.debug(
        "dualview config: mode=%s sensitive_keys=%d",
        cfg["replacement_mode"], len(cfg["sensitive_keys"]),
    )
    return cfg


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    path = Path(path).expanduser()
    logger.debug("loading dualview config from %s", path)
    with open(path) as f:
        return load_config(yaml.safe_load(f))


def create_dual_view(config: dict[str, Any]) -> DualView:
    """Create a configured DualView from a raw or normalized config dict."""
    cfg = config if "replacement_mode" in config else load_config(config)

    if cfg["replacement_mode"] == "token":
        return DualView(RedactionTokens(cfg["token_prefix"]), cfg["sensitive_keys"])
    return DualView.with_value(cfg["replacement_value"], cfg["sensitive_keys"])
