"""
Ticket Interfaces Layer
=======================

FastAPI route handlers for the ticket endpoints.
"""

from support_ops.tickets.interfaces.controllers import tickets_router

__all__ = ["tickets_router"]
