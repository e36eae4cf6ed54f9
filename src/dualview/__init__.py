"""dualview — one key/value store, an exposed and a redacted read path."""

from .dualview import DualView
from .view import SensitiveMappingView
from .tokens import RedactionTokens
from .errors import InvalidArgumentError
from .preconditions import check_not_none
from .config import create_dual_view, load_config, load_from_yaml

__all__ = [
    "DualView", "SensitiveMappingView",
    "RedactionTokens",
    "InvalidArgumentError", "check_not_none",
    "create_dual_view", "load_config", "load_from_yaml",
]
__version__ = "0.1.0"
