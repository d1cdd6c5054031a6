# core/startup.py

import os
from dataclasses import dataclass
from enum import Enum

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from resulthub.config.settings import ConfigError, Settings
from resulthub.data.connection import ActionFailed, MongoConnection
from resulthub.data.repositories.student import (STUDENT_VALIDATOR,
                                                 STUDENTS_COLLECTION,
                                                 StudentRepository)
from resulthub.main import create_app
from resulthub.utils.logger import logger

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

class StartupState(str, Enum):
	STARTING = "starting"
	CONNECTING_DB = "connecting-db"
	LISTENING = "listening"
	FAILED = "failed"

@dataclass
class StartupResult:
	state: StartupState
	app: FastAPI | None = None
	connection: MongoConnection | None = None
	settings: Settings | None = None
	error: str | None = None

	@property
	def ok(self) -> bool:
		return self.state is StartupState.LISTENING

def bootstrap(settings: Settings | None = None) -> StartupResult:
	"""
	Loads configuration, opens MongoDB and builds the app.

	Never exits the process: a failure comes back as a FAILED result and the
	caller decides what to do with it. A LISTENING result means the app may
	start accepting connections.
	"""
	log = logger(tag="startup")
	log.info(f"State: {StartupState.STARTING.value}")
	if settings is None:
		try:
			settings = Settings.from_env()
		except ConfigError as e:
			log.error(f"Invalid configuration: {e}")
			return StartupResult(StartupState.FAILED, error=str(e))

	log.info(f"State: {StartupState.CONNECTING_DB.value}")
	connection = MongoConnection(
		settings.MONGODB_URI,
		settings.MONGODB_DB,
		timeout_ms=settings.MONGODB_TIMEOUT_MS
	)
	try:
		connection.connect()
		connection.ensure_collection(
			STUDENTS_COLLECTION,
			os.path.join(_PACKAGE_DIR, STUDENT_VALIDATOR)
		)
		repository = StudentRepository(connection.get_collection(STUDENTS_COLLECTION))
		repository.ensure_indexes()
	except (PyMongoError, ActionFailed, OSError) as e:
		log.error(f"Could not prepare MongoDB: {e}")
		connection.close()
		return StartupResult(StartupState.FAILED, settings=settings, error=str(e))

	app = create_app(connection, settings, repository)
	log.info(f"State: {StartupState.LISTENING.value}")
	return StartupResult(StartupState.LISTENING, app, connection, settings)
