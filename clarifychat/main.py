"""
Uvicorn entrypoint for the ClarifyChat API.

Run with:
    clarifychat-api
    # or
    uvicorn clarifychat.main:app --reload
"""

from __future__ import annotations

import uvicorn

from clarifychat.api.server import create_app
from clarifychat.config import Config

app = create_app()


def run() -> None:
    uvicorn.run("clarifychat.main:app", host=Config.API_HOST, port=Config.API_PORT)


if __name__ == "__main__":
    run()
