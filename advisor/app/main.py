"""FastAPI application for the Catan move advisor."""

import common.app

from .routers import moves

app = common.app.create_app(title='Catan Advisor')

app.include_router(moves.router)
