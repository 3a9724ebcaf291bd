"""
Service Logs Module
===================

Bounded context for reports over the service log stream.

Responsibilities:
- Top error signatures within a window
- Hourly latency trend per service and endpoint
"""
