"""Test utilities for lizard applications.

    from lizard.testing import TestClient
"""

from lizard.testing.client import TestClient

__all__ = ["TestClient"]
