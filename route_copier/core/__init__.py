"""Core trimming, classification, and step reassembly.

WHY: The core package is the stable heart of the extractor: the only
part with a real algorithm. Everything that touches pages, HTTP, or the
desktop lives outside it and feeds it plain lines.

HOW: options.py holds the configuration data, classify.py the line
predicates, trimmer.py the region cut, reassembler.py the step state
machine, and pipeline.py ties them into normalize_route().

RULES:
- Pure functions only: no I/O, no module-level mutable state
- Nothing in here raises on any sequence of strings
"""

from route_copier.core.options import RouteOptions
from route_copier.core.pipeline import NO_ROUTE_MESSAGE, format_steps, normalize_route
from route_copier.core.reassembler import reassemble
from route_copier.core.trimmer import trim

__all__ = [
    "NO_ROUTE_MESSAGE",
    "RouteOptions",
    "format_steps",
    "normalize_route",
    "reassemble",
    "trim",
]
