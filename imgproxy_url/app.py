from __future__ import annotations

from fastapi import FastAPI

from .routes.urls import router as urls_router

app = FastAPI(title="imgproxy-url")
app.include_router(urls_router)

__all__ = ["app"]
