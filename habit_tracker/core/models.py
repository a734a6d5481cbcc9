#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Habit Tracker - Core Data Models
Модели привычек и профиля, расчёт недельного прогресса

Версия: 1.0.0
"""

from datetime import datetime, timedelta
from fractions import Fraction
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from enum import Enum
import math

from habit_tracker.utils.datetime_utils import (
    DEFAULT_TZ, Timestamp, days_between, format_timestamp, now_in, parse_timestamp
)

WINDOW = timedelta(days=7)
DEFAULT_HABIT_NAME = "Без названия"
DEFAULT_PROFILE_NAME = "Без имени"

# ===== ENUMS =====

class HabitStatus(Enum):
    """Статус привычки в текущем окне"""
    COMPLETED = "completed"
    NOT_COMPLETED = "not_completed"

    @property
    def label(self) -> str:
        return "completed" if self is HabitStatus.COMPLETED else "not completed"

# ===== VALIDATION HELPERS =====

class InvalidArgumentError(Exception):
    """Недопустимые входные данные для операции"""
    pass

class HabitNotFoundError(InvalidArgumentError):
    """Привычка с таким индексом или id не найдена"""
    pass

def validate_frequency(frequency: Any) -> int:
    """Целевая частота: неотрицательное целое"""
    if isinstance(frequency, bool) or not isinstance(frequency, int):
        raise InvalidArgumentError(f"Частота должна быть целым числом, получено: {frequency!r}")
    if frequency < 0:
        raise InvalidArgumentError(f"Частота не может быть отрицательной: {frequency}")
    return frequency

def name_or_default(name: Optional[str], default: str) -> str:
    if name is None or not str(name).strip():
        return default
    return str(name).strip()

def round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))

def optional_int(value: Any, field_name: str) -> Optional[int]:
    """Целое поле из файла: int или null"""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{field_name}' must be an integer or null, got {value!r}")
    return value

# ===== CORE MODELS =====

@dataclass
class Habit:
    """Привычка с историей выполнений"""
    id: int
    name: str
    target_frequency: int
    created_at: datetime
    completions: List[Timestamp] = field(default_factory=list)

    def record_completion(self, at: Optional[datetime] = None) -> None:
        """Добавить отметку о выполнении (без проверок и дедупликации)"""
        self.completions.append(at if at is not None else now_in())

    def completions_in_window(self, now: datetime) -> List[datetime]:
        """Выполнения за скользящие 7 дней до now"""
        cutoff = now - WINDOW
        # история не обязана быть отсортированной
        return [ts for ts in (parse_timestamp(c, now.tzinfo) for c in self.completions) if ts >= cutoff]

    def window_count(self, now: datetime) -> int:
        return len(self.completions_in_window(now))

    def is_window_satisfied(self, now: datetime) -> bool:
        return self.window_count(now) >= (self.target_frequency or 0)

    def progress_percentage(self, now: datetime) -> int:
        """Процент выполнения цели за окно, 0..100"""
        if not self.target_frequency or self.target_frequency <= 0:
            return 0
        percent = round_half_up(Fraction(100 * self.window_count(now), self.target_frequency))
        return max(0, min(100, percent))

    def status(self, now: datetime) -> HabitStatus:
        return HabitStatus.COMPLETED if self.is_window_satisfied(now) else HabitStatus.NOT_COMPLETED

    def status_label(self, now: datetime) -> str:
        return self.status(now).label

    @property
    def total_completions(self) -> int:
        return len(self.completions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'targetFrequency': self.target_frequency,
            'completions': [
                c if isinstance(c, str) else format_timestamp(c) for c in self.completions
            ],
            'createdAt': format_timestamp(self.created_at)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], tz=DEFAULT_TZ) -> "Habit":
        return cls(
            id=optional_int(data.get('id'), 'id'),
            name=name_or_default(data.get('name'), DEFAULT_HABIT_NAME),
            target_frequency=optional_int(data.get('targetFrequency'), 'targetFrequency'),
            created_at=parse_timestamp(data['createdAt'], tz),
            completions=[parse_timestamp(c, tz) for c in (data.get('completions') or [])]
        )

    @classmethod
    def create(cls, habit_id: int, name: Optional[str], target_frequency: int,
               now: datetime) -> "Habit":
        """Создание новой привычки"""
        return cls(
            id=habit_id,
            name=name_or_default(name, DEFAULT_HABIT_NAME),
            target_frequency=target_frequency,
            created_at=now
        )

@dataclass
class UserProfile:
    """Профиль пользователя"""
    name: str
    joined_at: datetime

    def days_joined(self, now: datetime) -> int:
        return days_between(self.joined_at, now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'joinedAt': format_timestamp(self.joined_at)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], tz=DEFAULT_TZ) -> "UserProfile":
        return cls(
            name=name_or_default(data.get('name'), DEFAULT_PROFILE_NAME),
            joined_at=parse_timestamp(data['joinedAt'], tz)
        )

    @classmethod
    def create(cls, name: Optional[str], now: datetime) -> "UserProfile":
        return cls(name=name_or_default(name, DEFAULT_PROFILE_NAME), joined_at=now)

@dataclass
class TrackerState:
    """Полный снимок состояния для сохранения"""
    habits: List[Habit] = field(default_factory=list)
    user_profile: Optional[UserProfile] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'habits': [habit.to_dict() for habit in self.habits],
            'userProfile': self.user_profile.to_dict() if self.user_profile else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], tz=DEFAULT_TZ) -> "TrackerState":
        habits = data.get('habits') or []
        if not isinstance(habits, list):
            raise ValueError("'habits' must be a list")
        profile = data.get('userProfile')
        if profile is not None and not isinstance(profile, dict):
            raise ValueError("'userProfile' must be an object or null")
        return cls(
            habits=[Habit.from_dict(h, tz) for h in habits],
            # неполный профиль считаем отсутствующим
            user_profile=UserProfile.from_dict(profile, tz) if profile and profile.get('joinedAt') else None
        )

# ===== DERIVED VIEWS =====

@dataclass(frozen=True)
class HabitStats:
    """Статистика привычки за текущее окно"""
    name: str
    window_count: int
    target_frequency: int
    percentage: int

@dataclass(frozen=True)
class ProfileSummary:
    """Сводка по профилю"""
    name: str
    joined_at: datetime
    total_habits: int
    total_completions: int
    days_joined: int
