import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from aidchaos import storage
from aidchaos.config import Options
from aidchaos.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def create_app(data_dir: Path | None = None, options: Options | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage.init_storage(resolved)

    options = options or Options.from_env()
    if options.debug:
        logging.basicConfig(level=logging.DEBUG)

    app = FastAPI(title="AidChaos")
    app.state.options = options
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()
