"""
Shared Kernel Module
====================

Shared infrastructure used across all reporting modules (tickets,
overview, logs): logging, request normalization, response envelope and
error classification.

DO NOT add report-specific queries to the shared kernel.
"""
