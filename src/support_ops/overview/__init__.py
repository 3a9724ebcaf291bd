"""
Overview Module
===============

Bounded context for the dashboard reports.

Responsibilities:
- Summary of ticket volume, SLA breaches and error events
- Daily support trend (tickets)
- Daily service trend (log events and latency)
"""
