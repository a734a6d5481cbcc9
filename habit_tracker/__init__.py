"""
Habit Tracker - трекер еженедельных привычек с хранением в JSON
"""

__version__ = "1.0.0"
