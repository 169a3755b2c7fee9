"""
Middleware layer for Blog application.

This package contains middleware components for request processing:
correlation IDs, security headers and unhandled-exception handling.
"""
