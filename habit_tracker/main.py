#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Habit Tracker CLI
Интерактивное меню для отслеживания еженедельных привычек

Версия: 1.0.0
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from habit_tracker import __version__
from habit_tracker.config import TrackerConfig, LogLevel
from habit_tracker.core import (
    HabitTracker, PersistenceStore, InvalidArgumentError, HabitNotFoundError, ParseError
)
from habit_tracker.services import ReminderService
from habit_tracker.ui import messages
from habit_tracker.utils.logger import setup_logging
from habit_tracker.utils.validators import parse_int, is_confirmation

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

EXIT_CHOICE = '13'

# ===== MENU ACTIONS =====

def _create_profile(tracker: HabitTracker, ask: InputFn, say: OutputFn) -> None:
    name = ask("Введите ваше имя: ")
    tracker.set_profile(name)
    say(messages.success_message("Профиль сохранён!"))

def _add_habit(tracker: HabitTracker, ask: InputFn, say: OutputFn) -> None:
    if not tracker.has_profile:
        say("\n📭 Сначала создайте профиль.\n")
        return
    name = ask("Название привычки: ")
    frequency = parse_int(ask("Цель (раз в неделю): "))
    if frequency is None:
        say(messages.error_message("Частота должна быть целым числом."))
        return
    try:
        habit = tracker.add_habit(name, frequency)
    except InvalidArgumentError as e:
        say(messages.error_message(str(e)))
        return
    say(messages.success_message(f"Привычка «{habit.name}» добавлена!"))

def _pick_habit(tracker: HabitTracker, ask: InputFn, say: OutputFn, prompt: str) -> Optional[int]:
    if not tracker.habits:
        say("\n📭 Пока нет привычек. Сначала добавьте привычку.\n")
        return None
    say(messages.habits_list_message(tracker.habits, tracker.clock()))
    index = parse_int(ask(prompt))
    if index is None:
        say(messages.error_message("Индекс должен быть целым числом."))
    return index

def _complete_habit(tracker: HabitTracker, ask: InputFn, say: OutputFn) -> None:
    index = _pick_habit(tracker, ask, say, "Индекс привычки для отметки: ")
    if index is None:
        return
    try:
        habit = tracker.complete_habit(index)
    except HabitNotFoundError as e:
        say(messages.error_message(str(e)))
        return
    say(messages.success_message(f"«{habit.name}» отмечена!"))

def _delete_habit(tracker: HabitTracker, ask: InputFn, say: OutputFn) -> None:
    index = _pick_habit(tracker, ask, say, "Индекс привычки для удаления: ")
    if index is None:
        return
    try:
        habit = tracker.delete_habit(index)
    except HabitNotFoundError as e:
        say(messages.error_message(str(e)))
        return
    say(messages.success_message(f"«{habit.name}» удалена."))

def _delete_profile(tracker: HabitTracker, ask: InputFn, say: OutputFn) -> None:
    answer = ask("Удалить профиль и все привычки? (да/нет): ")
    if not is_confirmation(answer):
        say("\n❎ Удаление отменено.\n")
        return
    if tracker.delete_profile():
        say("\n🗑️ Профиль и все привычки удалены.\n")
    else:
        say("\n📭 Нет профиля для удаления.\n")

def _toggle_reminder(reminder: ReminderService, enable: bool, say: OutputFn) -> None:
    if enable:
        started = reminder.start()
        say("\n⏰ Напоминания включены.\n" if started else "\n⏰ Напоминания уже включены.\n")
    else:
        stopped = reminder.stop()
        say("\n⏹️ Напоминания выключены.\n" if stopped else "\n⏹️ Напоминания не были включены.\n")

# ===== MENU LOOP =====

def run_menu(tracker: HabitTracker, reminder: ReminderService,
             input_fn: InputFn = input, output: OutputFn = print) -> None:
    """Главный цикл меню; по одной команде за раз"""
    ask, say = input_fn, output
    try:
        while True:
            say(messages.MENU)
            choice = ask("Выберите пункт: ").strip()

            if choice == '0':
                _create_profile(tracker, ask, say)
            elif choice == '1':
                say(messages.profile_message(tracker.profile_summary()))
            elif choice == '2':
                say(messages.habits_list_message(tracker.list_habits(), tracker.clock()))
            elif choice == '3':
                say(messages.habits_list_message(tracker.active_habits(), tracker.clock()))
            elif choice == '4':
                say(messages.habits_list_message(tracker.completed_habits(), tracker.clock()))
            elif choice == '5':
                _add_habit(tracker, ask, say)
            elif choice == '6':
                _complete_habit(tracker, ask, say)
            elif choice == '7':
                _delete_habit(tracker, ask, say)
            elif choice == '8':
                say(messages.stats_message(tracker.compute_stats()))
            elif choice == '9':
                _toggle_reminder(reminder, True, say)
            elif choice == '10':
                _toggle_reminder(reminder, False, say)
            elif choice == '11':
                tracker.clear_all_data()
                say("\n🧹 Все привычки удалены.\n")
            elif choice == '12':
                _delete_profile(tracker, ask, say)
            elif choice == EXIT_CHOICE:
                break
            else:
                say(messages.error_message("Неверный пункт меню."))
    except EOFError:
        pass
    finally:
        reminder.stop()
    say("\n👋 До встречи!\n")

# ===== ENTRY POINT =====

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="habit-tracker", description="Habit Tracker CLI")
    parser.add_argument("--data-file", help="путь к JSON-файлу с данными")
    parser.add_argument("--log-level", choices=[level.value for level in LogLevel], type=str.upper,
                        help="уровень логирования")
    parser.add_argument("--reminder-interval", type=int, help="интервал напоминаний в секундах")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser

def main(argv: Optional[List[str]] = None, input_fn: InputFn = input, output: OutputFn = print) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = TrackerConfig.from_env().with_overrides(
            data_file=args.data_file,
            log_level=args.log_level,
            reminder_interval=args.reminder_interval
        )
    except ValueError as e:
        output(messages.error_message(str(e)))
        return 2

    setup_logging(config)
    logger.info(f"🚀 Habit Tracker {__version__}: {config.to_dict()}")

    tz = config.get_tz()
    store = PersistenceStore(config.data_path, tz=tz)
    tracker = HabitTracker(store)
    try:
        tracker.load()
    except ParseError as e:
        logger.error(f"❌ Не удалось прочитать данные: {e}")
        output(messages.error_message(f"Файл данных повреждён: {e.path}"))
        return 1

    reminder = ReminderService(tracker, config.reminder.interval_seconds, notify=output, timezone=tz)
    output(messages.welcome_message())
    run_menu(tracker, reminder, input_fn=input_fn, output=output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
