"""
Overview Interfaces Layer
=========================

FastAPI route handlers for the overview reports.
"""

from support_ops.overview.interfaces.controllers import overview_router

__all__ = ["overview_router"]
