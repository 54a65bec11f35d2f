"""
Хранилище пройденных игр (in-memory).
Состояние живёт, пока живёт приложение; после перезапуска ничего не сохраняется.
"""
import logging
import math
import uuid
from dataclasses import dataclass
from typing import Any

from .constants import (
    MSG_INVALID_CREATE,
    MSG_INVALID_UPDATE,
    MSG_NOT_FOUND,
    MSG_NOT_FOUND_DELETE,
    MSG_NOTHING_TO_UPDATE,
    SEED_GAMES,
)

logger = logging.getLogger(__name__)

Hours = int | float


class GameStoreError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GameStoreError):
    """Payload не прошёл проверку полей."""


class NotFoundError(GameStoreError):
    """Записи с таким id нет."""


@dataclass
class GameRecord:
    id: str
    title: str
    hours: Hours


def game_payload(g: GameRecord) -> dict:
    """Собрать JSON-представление записи для клиента."""
    return {"id": g.id, "title": g.title, "hours": g.hours}


def _is_title(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_positive_number(value: Any) -> bool:
    # bool — подкласс int, но числом в JSON не является
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        # у int нет inf/nan, а math.isfinite падает на очень больших значениях
        return value > 0
    return math.isfinite(value) and value > 0


def _normalize_hours(value: Hours) -> Hours:
    """20.0 хранится и отдаётся как 20."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _coerce_hours(value: Any) -> Hours | None:
    """
    Привести hours к числу. Строки вида "12" и "7.5" допускаются.
    Возвращает None, если значение не приводится к положительному числу.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return None
    return value if _is_positive_number(value) else None


class GameStore:
    def __init__(self):
        self._games: dict[str, GameRecord] = {}

    def __len__(self) -> int:
        return len(self._games)

    def seed(self) -> None:
        """Добавить стартовые записи."""
        for item in SEED_GAMES:
            self._add(item["title"], item["hours"])
        logger.info("Store seeded with %d games", len(SEED_GAMES))

    def get(self, game_id: str) -> GameRecord | None:
        return self._games.get(game_id)

    def list_games(self) -> list[GameRecord]:
        """Все записи в порядке добавления."""
        return list(self._games.values())

    def create(self, payload: dict[str, Any]) -> GameRecord:
        title = payload.get("title")
        hours = payload.get("hours")
        if not _is_title(title) or not _is_positive_number(hours):
            raise ValidationError(MSG_INVALID_CREATE)
        return self._add(title, hours)

    def update(self, game_id: str, payload: dict[str, Any]) -> GameRecord:
        """
        Частичное обновление: меняются только переданные поля.
        Сначала проверяется id, затем содержимое payload.
        """
        g = self._games.get(game_id)
        if g is None:
            raise NotFoundError(MSG_NOT_FOUND)
        title = payload.get("title")
        hours = payload.get("hours")
        if title is None and hours is None:
            raise ValidationError(MSG_NOTHING_TO_UPDATE)
        if title is not None and not _is_title(title):
            raise ValidationError(MSG_INVALID_UPDATE)
        if hours is not None:
            hours = _coerce_hours(hours)
            if hours is None:
                raise ValidationError(MSG_INVALID_UPDATE)
        if title is not None:
            g.title = title
        if hours is not None:
            g.hours = _normalize_hours(hours)
        return g

    def delete(self, game_id: str) -> None:
        if self._games.pop(game_id, None) is None:
            raise NotFoundError(MSG_NOT_FOUND_DELETE)

    def _add(self, title: str, hours: Hours) -> GameRecord:
        g = GameRecord(id=str(uuid.uuid4()), title=title, hours=_normalize_hours(hours))
        self._games[g.id] = g
        return g
