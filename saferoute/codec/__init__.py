"""
Wire codecs for SafeRoute.

This package holds the encoded polyline codec used to turn
directions-provider geometry into coordinate lists.
"""

from .polyline import decode_polyline, encode_polyline

__all__ = ["decode_polyline", "encode_polyline"]
