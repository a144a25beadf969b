"""
Administration module - Operator commands over license records.

This module handles:
- Admin command parsing and dispatch
- The authorized-operator check
- Operator channels (Telegram bot webhook, management command)
"""
