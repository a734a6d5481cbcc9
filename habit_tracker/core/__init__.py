"""
Habit Tracker - Core Package
Модели, хранилище и агрегат трекера
"""

from .models import (
    HabitStatus,
    InvalidArgumentError,
    HabitNotFoundError,
    Habit,
    UserProfile,
    TrackerState,
    HabitStats,
    ProfileSummary
)

from .storage import (
    StorageError,
    ParseError,
    PersistenceStore
)

from .tracker import HabitTracker

__all__ = [
    # Models
    'HabitStatus',
    'Habit',
    'UserProfile',
    'TrackerState',
    'HabitStats',
    'ProfileSummary',

    # Errors
    'InvalidArgumentError',
    'HabitNotFoundError',
    'StorageError',
    'ParseError',

    # Services
    'PersistenceStore',
    'HabitTracker'
]
