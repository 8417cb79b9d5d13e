"""Utilities for rendering markdown and writing the static site bundle."""

from .renderer import HtmlContentRenderer
from .site_builder import CODEHILITE_CSS, SiteBuilder

__all__ = ["CODEHILITE_CSS", "HtmlContentRenderer", "SiteBuilder"]
