"""
Licenses module - the license record store.

This module handles:
- LicenseRecord entity and key generation
- LicenseRecordRepository port and its Django ORM adapter
- License lifecycle events (created, status changed, reset, deleted)
"""
