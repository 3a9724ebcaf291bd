"""
Core Module
============

Shared core utilities and abstractions used across the application.

This module contains framework-agnostic code that defines the fundamental
building blocks of the system.
"""

from support_ops.core.exceptions import (
    ApplicationException,
    ValidationException,
    MissingParameterException,
    InvalidDateException,
    InvalidRangeException,
    ResourceNotFoundException,
    RepositoryException,
    DatabaseUnavailableException,
    QueryTimeoutException,
)

__all__ = [
    "ApplicationException",
    "ValidationException",
    "MissingParameterException",
    "InvalidDateException",
    "InvalidRangeException",
    "ResourceNotFoundException",
    "RepositoryException",
    "DatabaseUnavailableException",
    "QueryTimeoutException",
]
