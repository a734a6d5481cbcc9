#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Habit Tracker - Persistence Store
Сохранение и загрузка состояния трекера в JSON-файл

Версия: 1.0.0
"""

import os
import json
import threading
from datetime import tzinfo
from pathlib import Path
from typing import Union
import logging

from habit_tracker.core.models import TrackerState
from habit_tracker.utils.datetime_utils import DEFAULT_TZ

logger = logging.getLogger(__name__)

# ===== EXCEPTIONS =====

class StorageError(Exception):
    """Базовое исключение для ошибок хранилища"""
    pass

class ParseError(StorageError):
    """Содержимое файла данных повреждено"""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")

# ===== STORE =====

class PersistenceStore:
    """JSON-хранилище полного состояния трекера"""

    def __init__(self, data_file: Union[str, Path], tz: tzinfo = DEFAULT_TZ):
        self.data_file = Path(data_file)
        self.tz = tz
        self.file_lock = threading.RLock()

    def load(self) -> TrackerState:
        """Загрузка состояния; отсутствующий или пустой файл - пустое состояние"""
        with self.file_lock:
            if not self.data_file.exists():
                logger.info(f"Data file {self.data_file} does not exist, starting with empty state")
                return TrackerState()

            raw = self.data_file.read_text(encoding='utf-8')
            if not raw.strip():
                logger.info(f"Data file {self.data_file} is empty, starting with empty state")
                return TrackerState()

            try:
                data = json.loads(raw)
            except json.JSONDecodeError as e:
                logger.error(f"Data file is corrupted: {e}")
                raise ParseError(self.data_file, str(e)) from e

            if not isinstance(data, dict):
                logger.error(f"Data file root is {type(data).__name__}, expected object")
                raise ParseError(self.data_file, "root must be a JSON object")

            try:
                state = TrackerState.from_dict(data, self.tz)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.error(f"Failed to reconstruct tracker state: {e!r}")
                raise ParseError(self.data_file, f"invalid tracker state: {e!r}") from e

            logger.info(f"Loaded {len(state.habits)} habits from {self.data_file}")
            return state

    def save(self, state: TrackerState) -> None:
        """Полная перезапись файла через временный файл"""
        payload = json.dumps(state.to_dict(), ensure_ascii=False, indent=2)

        with self.file_lock:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            # Атомарное сохранение через временный файл
            temp_file = self.data_file.with_name(self.data_file.name + '.tmp')
            try:
                with open(temp_file, 'w', encoding='utf-8') as f:
                    f.write(payload)
                    f.write('\n')
                    f.flush()
                    os.fsync(f.fileno())
                temp_file.replace(self.data_file)
            except Exception:
                # Очищаем временный файл в случае ошибки
                if temp_file.exists():
                    temp_file.unlink()
                raise

            logger.debug(f"Saved {len(state.habits)} habits to {self.data_file}")
