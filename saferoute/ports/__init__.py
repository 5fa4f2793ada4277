"""
Port interfaces for SafeRoute hexagonal architecture.

This module defines the port interfaces (Protocols) that define
the contracts between the core domain and external adapters.
"""

from .incidents import IncidentSourcePort

__all__ = ["IncidentSourcePort"]
