"""
License Server Django project.

License key validation with single-session-per-key binding,
heartbeats, and operator administration over a Telegram bot.
"""
