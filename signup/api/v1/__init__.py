"""
API v1 package.

Contains versioned API routes for the signup API.
"""

from signup.api.v1.routes import router

__all__ = ["router"]
