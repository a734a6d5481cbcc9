#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Habit Tracker - Configuration
Конфигурация из переменных окружения с валидацией

Версия: 1.0.0
"""

import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any, Mapping
from dataclasses import dataclass, replace
from enum import Enum

import pytz

class Environment(Enum):
    """Среды выполнения"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Уровни логирования"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class StorageConfig:
    """Конфигурация хранилища"""
    data_dir: Path
    data_file: str = "habits-data.json"

    @property
    def path(self) -> Path:
        return self.data_dir / self.data_file

@dataclass
class LoggingConfig:
    """Конфигурация логирования"""
    level: LogLevel = LogLevel.INFO
    to_file: bool = False
    log_dir: Path = Path("logs")
    format: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5

@dataclass
class ReminderConfig:
    """Конфигурация напоминаний"""
    interval_seconds: int = 10

@dataclass
class TrackerConfig:
    """Главный класс конфигурации"""
    environment: Environment
    storage: StorageConfig
    logging: LoggingConfig
    reminder: ReminderConfig
    timezone: str = "UTC"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrackerConfig":
        """Загрузка конфигурации из переменных окружения"""
        env = os.environ if environ is None else environ
        errors = []

        def _enum(enum_class, key: str, default: str):
            raw = env.get(key, default)
            try:
                return enum_class(raw)
            except ValueError:
                errors.append(f"{key}={raw!r}: ожидается одно из {[e.value for e in enum_class]}")
                return enum_class(default)

        def _int(key: str, default: int) -> int:
            raw = env.get(key, str(default))
            try:
                return int(raw)
            except ValueError:
                errors.append(f"{key}={raw!r}: ожидается целое число")
                return default

        config = cls(
            environment=_enum(Environment, 'ENVIRONMENT', 'development'),
            storage=StorageConfig(
                data_dir=Path(env.get('DATA_DIR', 'data')),
                data_file=env.get('DATA_FILE', 'habits-data.json'),
            ),
            logging=LoggingConfig(
                level=_enum(LogLevel, 'LOG_LEVEL', 'INFO'),
                to_file=env.get('LOG_TO_FILE', 'false').lower() == 'true',
                log_dir=Path(env.get('LOG_DIR', 'logs')),
            ),
            reminder=ReminderConfig(
                interval_seconds=_int('REMINDER_INTERVAL_SECONDS', 10),
            ),
            timezone=env.get('TIMEZONE', 'UTC'),
        )

        errors.extend(config.validate())
        if errors:
            raise ValueError("Ошибки конфигурации:\n" + "\n".join(f"• {error}" for error in errors))
        return config

    def validate(self) -> list:
        """Список ошибок конфигурации (пустой, если всё в порядке)"""
        errors = []
        if self.reminder.interval_seconds <= 0:
            errors.append("REMINDER_INTERVAL_SECONDS должен быть положительным числом")
        if self.timezone not in pytz.all_timezones_set:
            errors.append(f"Неизвестная временная зона: {self.timezone}")
        if not self.storage.data_file:
            errors.append("DATA_FILE не может быть пустым")
        return errors

    def with_overrides(self, data_file: Optional[str] = None, log_level: Optional[str] = None,
                       reminder_interval: Optional[int] = None) -> "TrackerConfig":
        """Копия конфигурации с параметрами командной строки"""
        config = self
        if data_file:
            path = Path(data_file)
            config = replace(config, storage=StorageConfig(data_dir=path.parent, data_file=path.name))
        if log_level:
            config = replace(config, logging=replace(config.logging, level=LogLevel(log_level.upper())))
        if reminder_interval is not None:
            config = replace(config, reminder=ReminderConfig(interval_seconds=reminder_interval))
        errors = config.validate()
        if errors:
            raise ValueError("Ошибки конфигурации:\n" + "\n".join(f"• {error}" for error in errors))
        return config

    @property
    def data_path(self) -> Path:
        return self.storage.path

    def get_tz(self):
        return pytz.timezone(self.timezone)

    def get_logging_config(self) -> Dict[str, Any]:
        """Получение конфигурации логирования"""
        handlers = ['console']
        if self.logging.to_file:
            handlers.append('file')

        config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.logging.format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': self.logging.level.value,
                    'formatter': 'default',
                    'stream': sys.stderr
                }
            },
            'loggers': {
                '': {
                    'level': self.logging.level.value,
                    'handlers': handlers,
                },
                'apscheduler': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }
        if self.logging.to_file:
            config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.logging.level.value,
                'formatter': 'default',
                'filename': str(self.logging.log_dir / f"habit_tracker_{self.environment.value}.log"),
                'maxBytes': self.logging.max_bytes,
                'backupCount': self.logging.backup_count,
                'encoding': 'utf-8'
            }
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация конфигурации в словарь"""
        return {
            'environment': self.environment.value,
            'data_path': str(self.data_path),
            'log_level': self.logging.level.value,
            'log_to_file': self.logging.to_file,
            'reminder_interval_seconds': self.reminder.interval_seconds,
            'timezone': self.timezone
        }

__all__ = [
    'TrackerConfig',
    'Environment',
    'LogLevel',
    'StorageConfig',
    'LoggingConfig',
    'ReminderConfig'
]
