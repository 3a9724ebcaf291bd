"""
Infrastructure Layer
=====================

Database engine, session lifecycle and query execution.
"""
