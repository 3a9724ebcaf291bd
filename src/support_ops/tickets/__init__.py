"""
Tickets Module
==============

Bounded context for browsing support tickets.

Responsibilities:
- Filtered, paginated ticket listing (trailing 30-day default window)
- Single ticket lookup with derived SLA facts
- Ticket event history and message history
"""
