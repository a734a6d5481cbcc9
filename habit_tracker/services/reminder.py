"""
Сервис напоминаний
"""

import logging
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
import pytz

from habit_tracker.core.tracker import HabitTracker
from habit_tracker.ui.messages import reminder_message

logger = logging.getLogger(__name__)

JOB_ID = 'habit_reminder'

class ReminderService:
    """Периодические напоминания; трекер только читается"""

    def __init__(self, tracker: HabitTracker, interval_seconds: int = 10,
                 notify: Callable[[str], None] = print, timezone=pytz.utc):
        self.tracker = tracker
        self.interval_seconds = interval_seconds
        self.notify = notify
        self.timezone = timezone
        self.scheduler: Optional[BackgroundScheduler] = None

    @property
    def is_running(self) -> bool:
        return self.scheduler is not None and self.scheduler.running

    def start(self) -> bool:
        """Запуск напоминаний"""
        if self.is_running:
            logger.debug("⏰ Напоминания уже запущены")
            return False

        self.scheduler = BackgroundScheduler(timezone=self.timezone)
        self.scheduler.add_job(
            self.remind,
            IntervalTrigger(seconds=self.interval_seconds, timezone=self.timezone),
            id=JOB_ID,
            replace_existing=True
        )
        self.scheduler.start()
        logger.info(f"⏰ Напоминания запущены (каждые {self.interval_seconds} с)")
        return True

    def stop(self) -> bool:
        """Остановка напоминаний"""
        if not self.is_running:
            return False
        self.scheduler.shutdown(wait=False)
        self.scheduler = None
        logger.info("⏹️ Напоминания остановлены")
        return True

    def remind(self) -> str:
        """Одно напоминание"""
        habits = self.tracker.habits
        now = self.tracker.clock()
        pending = sum(1 for h in habits if not h.is_window_satisfied(now))
        message = reminder_message(pending, len(habits))
        logger.info(f"🔔 Напоминание: {pending}/{len(habits)} привычек ждут выполнения")
        self.notify(message)
        return message
