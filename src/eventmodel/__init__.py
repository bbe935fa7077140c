"""
eventmodel - parser for a line-oriented event modeling notation.

Turns text like

    t:Shop:"Online Shop"
    e:OrderPlaced:"Order placed"
    e:OrderShipped
    OrderPlaced->OrderShipped

into an ordered, immutable syntax tree for a diagram renderer.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ConfigError, EventModelError, ParseError
from .core.parser_impl import parse_model

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_model",
    "EventModelError",
    "ParseError",
    "ConfigError",
]
