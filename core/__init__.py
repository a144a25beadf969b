"""
Core module for shared service infrastructure.

This module contains:
- Domain events, exceptions and value objects
- The in-memory event bus and its audit/metrics handlers
- Request middleware (client address, observability)
- Health, metrics and status views
"""
