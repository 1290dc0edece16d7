"""
Notification system for the news aggregator.

This module handles:
- Matching fetched articles against user notification preferences
- Rendering new-article alerts (in-app notification + email)
- Sending alert emails in bulk via Resend
"""

from .preference_matcher import load_enabled_preferences, match_articles_to_preferences
from .email_dispatcher import BulkEmailDispatcher

__all__ = [
    'match_articles_to_preferences',
    'load_enabled_preferences',
    'BulkEmailDispatcher',
]
