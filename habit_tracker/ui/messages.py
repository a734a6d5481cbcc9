# ui/messages.py

from datetime import datetime
from typing import List, Optional

from habit_tracker.core.models import Habit, HabitStats, ProfileSummary
from habit_tracker.ui.progress import progress_bar, status_tag
from habit_tracker.utils.datetime_utils import format_date

MENU = """
📋 МЕНЮ:

0. Создать профиль
1. Посмотреть профиль
2. Все привычки
3. Активные привычки
4. Выполненные привычки
5. Добавить привычку
6. Отметить выполнение
7. Удалить привычку
8. Статистика
9. Напоминания ВКЛ
10. Напоминания ВЫКЛ
11. Очистить все привычки
12. Удалить профиль и все данные
13. Выход
"""

def welcome_message():
    return "\n🌟 Добро пожаловать в Habit Tracker CLI 🌟\n"

def habit_message(index: int, habit: Habit, now: datetime):
    count = habit.window_count(now)
    percentage = habit.progress_percentage(now)
    target = habit.target_frequency if habit.target_frequency is not None else 1
    return (
        f"{index}. {status_tag(habit.is_window_satisfied(now))} {habit.name}\n"
        f"   Цель: {target}x/неделю\n"
        f"   Прогресс: {count}/{target} ({percentage}%)\n"
        f"   {progress_bar(percentage)}\n"
    )

def habits_list_message(habits: List[Habit], now: datetime):
    if not habits:
        return "\nНет сохранённых привычек.\n"
    return "\n" + "\n".join(habit_message(idx, habit, now) for idx, habit in enumerate(habits))

def profile_message(summary: Optional[ProfileSummary]):
    if summary is None:
        return "\n📭 Профиль ещё не создан. Сначала заполните профиль.\n"
    return (
        "\n👤 Профиль пользователя:\n"
        f"- Имя: {summary.name}\n"
        f"- С нами с: {format_date(summary.joined_at)}\n"
        f"- Всего привычек: {summary.total_habits}\n"
        f"- Всего выполнений: {summary.total_completions}\n"
        f"- Дней с нами: {summary.days_joined}\n"
    )

def stats_message(stats: List[HabitStats]):
    if not stats:
        return "\n📭 Пока нет привычек для анализа.\n"
    lines = [f"{s.name}: {s.window_count}/{s.target_frequency}" for s in stats]
    return "\n📊 Статистика за 7 дней:\n" + "\n".join(lines) + "\n"

def reminder_message(pending: int, total: int):
    if total and pending:
        return f"\n🔔 Не забудьте отметить привычки сегодня! Осталось: {pending} из {total}\n"
    return "\n🔔 Не забудьте отметить свои привычки сегодня!\n"

def success_message(text: str):
    return f"\n✅ {text}\n"

def error_message(text: str):
    return f"\n❌ {text}\n"
