from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import config, db
from core.errors import register_error_handlers
from core.logging import configure_logging
from courses import router as courses_router
from health import router as health_router
from tutors import router as tutors_router

config.load_env()


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="tutor-catalog", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health_router.router, tags=["health"])
app.include_router(tutors_router.router, tags=["tutors"])
app.include_router(courses_router.router, tags=["courses"])


def run() -> None:
    configure_logging()
    host, port = config.listen_address()
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
