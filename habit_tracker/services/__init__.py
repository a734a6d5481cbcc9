# services/__init__.py

"""
Фоновые сервисы Habit Tracker
"""

from .reminder import ReminderService

__all__ = ['ReminderService']
