"""Matchday entry point."""
import uvicorn

from matchday.api.app import app
from matchday.config import Config

if __name__ == "__main__":
    uvicorn.run(app, host=Config.API_HOST, port=Config.API_PORT)
