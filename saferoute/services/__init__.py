"""
Application services for SafeRoute.

Services wire the pure core to ports and observability.
"""

from .analyzer import RouteAnalyzer

__all__ = ["RouteAnalyzer"]
