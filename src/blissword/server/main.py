"""
Blissword API Server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from blissword.config import get_settings
from blissword.core.tables import SymbolTables, load_tables_from_settings
from blissword.server.routes import buffer, symbols


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("Blissword API Routes")
    print("=" * 60)

    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        print(f"  {methods:8} {path:40} → {name}")

    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    # tables must be in place before any codec or buffer call
    app.state.tables = await load_tables_from_settings(settings)
    print_routes(app)
    yield


app = FastAPI(title="Blissword API", lifespan=lifespan)
app.state.tables = SymbolTables()

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(symbols.router)
app.include_router(buffer.router)


@app.get("/")
async def root():
    return {"name": "Blissword API", "version": "0.1.0"}
