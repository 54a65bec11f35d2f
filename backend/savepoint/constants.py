"""Начальные записи и сообщения для клиента."""
from typing import TypedDict


class SeedGame(TypedDict):
    title: str
    hours: int


SEED_GAMES: list[SeedGame] = [
    {"title": "Elden Ring", "hours": 180},
    {"title": "Hades", "hours": 45},
    {"title": "God of War", "hours": 32},
]

# Тексты ответов остаются на португальском: их показывает мобильный клиент.
MSG_INVALID_CREATE = "Título e Horas (número positivo) são obrigatórios e devem ser válidos."
MSG_NOTHING_TO_UPDATE = "Nenhum campo para atualizar fornecido."
MSG_INVALID_UPDATE = "Título deve ser texto não vazio e Horas um número positivo."
MSG_NOT_FOUND = "Jogo não encontrado."
MSG_NOT_FOUND_DELETE = "Jogo não encontrado para exclusão."
