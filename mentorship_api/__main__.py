"""Run the API with uvicorn: ``python -m mentorship_api``."""
import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .core.config import get_settings


def main() -> None:
    # PORT and HOST may come from .env, so load it before reading settings
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("mentorship_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
