"""DashScope HTTP provider and its wire codec."""

from .client import DashScopeHttpProvider

__all__ = ["DashScopeHttpProvider"]
