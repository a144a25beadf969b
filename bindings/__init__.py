"""
Bindings module - Session binding of license keys to network addresses.

This module handles:
- The session binding engine (validate and heartbeat)
- Validation and heartbeat commands and handlers
- Binding domain events
"""
