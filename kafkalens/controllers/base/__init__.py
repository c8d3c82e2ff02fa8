"""Base controller classes."""

from kafkalens.controllers.base.base_controller import BaseController, matches_prefix

__all__ = ["BaseController", "matches_prefix"]
