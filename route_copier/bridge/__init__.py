"""Request/response bridge between a UI surface and the map page.

WHY: The route text is requested from outside the page that shows it.
This package holds the typed messages, the handler that answers them,
and the HTTP app that exposes the handler.

RULES:
- models.py is the wire contract: change with care
- handler.py holds no module-level mutable state
"""
