"""
Support Ops Reporting API
=========================

Read-only reporting over support tickets and service log events.
"""

__version__ = "1.0.0"
