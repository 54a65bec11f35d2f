"""
Save Point API: список пройденных игр.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import router
from .store import GameStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def create_app(store: GameStore | None = None) -> FastAPI:
    """
    Собрать приложение. Без явного store создаётся новое хранилище,
    заполненное стартовыми записями, если это не отключено в конфиге.
    """
    config = get_config()
    logging.getLogger("savepoint").setLevel(logging.DEBUG if config.debug else logging.INFO)

    if store is None:
        store = GameStore()
        if config.seed_games:
            store.seed()

    app = FastAPI(title="Save Point API")
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(router)
    return app


app = create_app()
