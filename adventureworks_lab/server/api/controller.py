"""
Controller routing convention.

A controller is a router whose prefix is the controller name, with a logger
named after it. Two route templates are supported:

- ``[controller]``: actions are served at ``/{controller}``
- ``[controller]/[action]``: each action is served at ``/{controller}/{action}``
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import APIRouter

from adventureworks_lab.core.logging_config import get_logger

CONTROLLER_ROUTE = "[controller]"
ACTION_ROUTE = "[controller]/[action]"


class ControllerRouter(APIRouter):
    """APIRouter carrying a controller's route prefix and logger."""

    def __init__(self, controller: str, route: str = CONTROLLER_ROUTE, **kwargs: Any) -> None:
        if route not in (CONTROLLER_ROUTE, ACTION_ROUTE):
            raise ValueError(f"Unsupported route template: '{route}'")
        kwargs.setdefault("tags", [controller])
        super().__init__(prefix=f"/{controller}", **kwargs)
        self.controller = controller
        self.route = route
        self.logger: logging.Logger = get_logger(f"{__package__}.{controller}")

    def action_path(self, action: str) -> str:
        return f"/{action}" if self.route == ACTION_ROUTE else ""

    def action(self, action: str, **kwargs: Any) -> Callable:
        """Register a GET action, routed according to the controller's template."""
        kwargs.setdefault("name", action)
        return self.get(self.action_path(action), **kwargs)
