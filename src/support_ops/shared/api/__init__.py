"""
Shared API Layer
================

Middleware, response envelope and error handlers for the FastAPI app.
"""
