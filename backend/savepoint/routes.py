"""
HTTP-маршруты CRUD для пройденных игр: /api/games.
Ошибки хранилища переводятся в ответ {"message": ...} прямо в обработчике.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from .store import GameStore, GameStoreError, NotFoundError, game_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/games", tags=["games"])


async def get_store(request: Request) -> GameStore:
    return request.app.state.store


async def read_payload(request: Request) -> dict[str, Any]:
    """
    Тело запроса как dict. Пустое тело, битый JSON и не-объект
    считаются пустым payload.
    """
    if not await request.body():
        return {}
    try:
        data = await request.json()
    except ValueError as e:
        logger.warning("CRUD: invalid JSON body on %s %s: %s", request.method, request.url.path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _error_response(e: GameStoreError) -> JSONResponse:
    code = status.HTTP_404_NOT_FOUND if isinstance(e, NotFoundError) else status.HTTP_400_BAD_REQUEST
    return JSONResponse({"message": e.message}, status_code=code)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_game(request: Request, store: GameStore = Depends(get_store)):
    payload = await read_payload(request)
    try:
        g = store.create(payload)
    except GameStoreError as e:
        logger.warning("CRUD POST: rejected: %s", e.message)
        return _error_response(e)
    logger.info("CRUD POST: game %s created: %s", g.id, g.title)
    return game_payload(g)


@router.get("")
async def list_games(store: GameStore = Depends(get_store)):
    logger.info("CRUD GET: list requested (%d games)", len(store))
    return [game_payload(g) for g in store.list_games()]


@router.put("/{game_id}")
async def update_game(game_id: str, request: Request, store: GameStore = Depends(get_store)):
    payload = await read_payload(request)
    try:
        g = store.update(game_id, payload)
    except GameStoreError as e:
        logger.warning("CRUD PUT: game %s rejected: %s", game_id, e.message)
        return _error_response(e)
    logger.info("CRUD PUT: game %s updated", game_id)
    return game_payload(g)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(game_id: str, store: GameStore = Depends(get_store)):
    try:
        store.delete(game_id)
    except GameStoreError as e:
        logger.warning("CRUD DELETE: game %s rejected: %s", game_id, e.message)
        return _error_response(e)
    logger.info("CRUD DELETE: game %s deleted", game_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
