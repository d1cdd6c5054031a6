# main.py

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from resulthub.api.errors import register_error_handlers
from resulthub.api.routes import static as static_route
from resulthub.api.routes import students as students_route
from resulthub.api.routes import system as system_route
from resulthub.config.settings import Settings
from resulthub.data.connection import MongoConnection
from resulthub.data.repositories.student import (STUDENTS_COLLECTION,
                                                 StudentRepository)
from resulthub.utils.logger import logger

def create_app(
	connection: MongoConnection,
	settings: Settings | None = None,
	repository: StudentRepository | None = None
) -> FastAPI:
	"""
	Builds the application around an already opened connection.

	The connection is closed when the application shuts down, which is what
	uvicorn does on SIGINT and SIGTERM.
	"""
	settings = settings or Settings()
	if repository is None:
		repository = StudentRepository(connection.get_collection(STUDENTS_COLLECTION))

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		logger(tag="startup").info(f"{settings.SERVICE_NAME} ready")
		yield
		logger(tag="shutdown").info(f"Shutting down {settings.SERVICE_NAME}...")
		connection.close()

	app = FastAPI(
		lifespan=lifespan,
		title=settings.SERVICE_NAME,
		description="Student results stored in MongoDB, looked up by roll number",
		version=settings.VERSION
	)
	app.state.settings = settings
	app.state.connection = connection
	app.state.repository = repository

	app.add_middleware(
		CORSMiddleware,
		allow_origins=["*"],
		allow_methods=["*"],
		allow_headers=["*"],
	)

	if os.path.isdir(settings.STATIC_DIR):
		app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")
	else:
		logger(tag="startup").warning(f"Static directory '{settings.STATIC_DIR}' not found, pages will 404")

	app.include_router(students_route.router)
	app.include_router(system_route.router)
	app.include_router(static_route.router)
	register_error_handlers(app)
	return app
