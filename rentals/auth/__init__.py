"""
Auth System

Session tokens travel in a request header; the gate turns them into the
authenticated user ID for private routes.
"""

from rentals.auth.gate import AuthGate

__all__ = [
    "AuthGate",
]
