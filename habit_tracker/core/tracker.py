#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Habit Tracker - Aggregate Root
Профиль и список привычек; каждая мутация сохраняется целиком

Версия: 1.0.0
"""

import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional
import logging

from habit_tracker.core.models import (
    Habit, HabitNotFoundError, HabitStats, InvalidArgumentError, ProfileSummary, TrackerState, UserProfile,
    validate_frequency
)
from habit_tracker.core.storage import PersistenceStore
from habit_tracker.utils.datetime_utils import now_in

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
HabitPredicate = Callable[[Habit], bool]

class HabitTracker:
    """
    Корень агрегата: профиль пользователя и привычки

    Мутации работают как транзакции: новое состояние сначала
    сохраняется, и только после успешной записи становится текущим.
    При ошибке записи исключение пробрасывается, прежнее состояние остаётся.
    """

    def __init__(self, store: PersistenceStore, clock: Optional[Clock] = None):
        self.store = store
        self.clock = clock or (lambda: now_in(store.tz))
        self._habits: List[Habit] = []
        self._user_profile: Optional[UserProfile] = None
        self._lock = threading.RLock()

    # ===== LIFECYCLE =====

    def load(self) -> "HabitTracker":
        """Загрузка состояния из хранилища (один раз при старте)"""
        state = self.store.load()
        with self._lock:
            self._habits = list(state.habits)
            self._user_profile = state.user_profile
        logger.info(f"Tracker loaded: {len(state.habits)} habits, profile={'yes' if state.user_profile else 'no'}")
        return self

    def _commit(self, habits: List[Habit], user_profile: Optional[UserProfile]) -> None:
        self.store.save(TrackerState(habits=habits, user_profile=user_profile))
        self._habits = habits
        self._user_profile = user_profile

    def _now(self, now: Optional[datetime]) -> datetime:
        return now if now is not None else self.clock()

    def _resolve_index(self, index) -> int:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._habits):
            logger.warning(f"Habit index {index!r} is out of range (0..{len(self._habits) - 1})")
            raise HabitNotFoundError(f"Привычка с индексом {index} не найдена")
        return index

    # ===== READ ACCESSORS =====

    @property
    def habits(self) -> List[Habit]:
        with self._lock:
            return list(self._habits)

    @property
    def user_profile(self) -> Optional[UserProfile]:
        with self._lock:
            return self._user_profile

    @property
    def has_profile(self) -> bool:
        return self.user_profile is not None

    @property
    def state(self) -> TrackerState:
        with self._lock:
            return TrackerState(habits=list(self._habits), user_profile=self._user_profile)

    # ===== MUTATIONS =====

    def set_profile(self, name: Optional[str], now: Optional[datetime] = None) -> UserProfile:
        """Создать или заменить профиль (дата вступления обновляется)"""
        with self._lock:
            profile = UserProfile.create(name, self._now(now))
            self._commit(list(self._habits), profile)
        logger.info(f"Profile set: {profile.name}")
        return profile

    def add_habit(self, name: Optional[str], frequency: int, now: Optional[datetime] = None) -> Habit:
        """Добавить привычку с целевой частотой в неделю"""
        try:
            frequency = validate_frequency(frequency)
        except InvalidArgumentError:
            logger.warning(f"Rejected habit {name!r}: invalid frequency {frequency!r}")
            raise

        with self._lock:
            next_id = max((h.id for h in self._habits if isinstance(h.id, int)), default=0) + 1
            habit = Habit.create(next_id, name, frequency, self._now(now))
            self._commit(self._habits + [habit], self._user_profile)
        logger.info(f"Habit #{habit.id} added: {habit.name} ({habit.target_frequency}x/week)")
        return habit

    def complete_habit(self, index: int, now: Optional[datetime] = None) -> Habit:
        """Отметить выполнение привычки по позиции в списке"""
        with self._lock:
            index = self._resolve_index(index)
            current = self._habits[index]
            habit = replace(current, completions=list(current.completions))
            habit.record_completion(self._now(now))
            habits = list(self._habits)
            habits[index] = habit
            self._commit(habits, self._user_profile)
        logger.info(f"Habit #{habit.id} completed ({habit.total_completions} total)")
        return habit

    def delete_habit(self, index: int) -> Habit:
        """Удалить привычку по позиции; последующие индексы сдвигаются"""
        with self._lock:
            index = self._resolve_index(index)
            habits = list(self._habits)
            removed = habits.pop(index)
            self._commit(habits, self._user_profile)
        logger.info(f"Habit #{removed.id} deleted: {removed.name}")
        return removed

    def delete_profile(self) -> bool:
        """Удалить профиль вместе со всеми привычками"""
        with self._lock:
            if self._user_profile is None:
                logger.info("No profile to delete")
                return False
            self._commit([], None)
        logger.info("Profile and all habits deleted")
        return True

    def clear_all_data(self) -> None:
        """Удалить все привычки, профиль не трогаем"""
        with self._lock:
            self._commit([], self._user_profile)
        logger.info("All habits cleared")

    # ===== QUERIES =====

    def get_habit(self, habit_id: int) -> Habit:
        with self._lock:
            for habit in self._habits:
                if habit.id == habit_id:
                    return habit
        raise HabitNotFoundError(f"Привычка с id {habit_id} не найдена")

    def list_habits(self, predicate: Optional[HabitPredicate] = None) -> List[Habit]:
        habits = self.habits
        return [h for h in habits if predicate(h)] if predicate else habits

    def active_habits(self, now: Optional[datetime] = None) -> List[Habit]:
        now = self._now(now)
        return self.list_habits(lambda h: not h.is_window_satisfied(now))

    def completed_habits(self, now: Optional[datetime] = None) -> List[Habit]:
        now = self._now(now)
        return self.list_habits(lambda h: h.is_window_satisfied(now))

    def compute_stats(self, now: Optional[datetime] = None) -> List[HabitStats]:
        now = self._now(now)
        return [
            HabitStats(
                name=h.name,
                window_count=h.window_count(now),
                target_frequency=h.target_frequency,
                percentage=h.progress_percentage(now)
            )
            for h in self.habits
        ]

    def profile_summary(self, now: Optional[datetime] = None) -> Optional[ProfileSummary]:
        with self._lock:
            profile = self._user_profile
            habits = list(self._habits)
        if profile is None:
            return None
        return ProfileSummary(
            name=profile.name,
            joined_at=profile.joined_at,
            total_habits=len(habits),
            total_completions=sum(h.total_completions for h in habits),
            days_joined=profile.days_joined(self._now(now))
        )
