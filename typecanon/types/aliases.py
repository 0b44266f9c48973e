"""
Type aliases for typecanon.

This module defines type aliases used throughout the library
for better type safety and code clarity.
"""

from typing import NewType

CanonicalKey = NewType('CanonicalKey', str)
ElementTypeName = NewType('ElementTypeName', str)
