"""Entrypoint: `uvicorn main:app` or `python main.py`."""

import os

import uvicorn

from food_analyzer.main import app

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
