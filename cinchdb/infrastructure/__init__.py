"""
Infrastructure package for the CinchDB client.

Centralizes network I/O. Keep this layer focused on transport and resource
management, decoupled from request building and parsing.
"""

from cinchdb.infrastructure.transport import CallableTransport, HttpxTransport, Transport

__all__ = [
    "CallableTransport",
    "HttpxTransport",
    "Transport",
]
