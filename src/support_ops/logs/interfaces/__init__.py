"""
Service Log Interfaces Layer
============================

FastAPI route handlers for the log report endpoints.
"""

from support_ops.logs.interfaces.controllers import logs_router

__all__ = ["logs_router"]
