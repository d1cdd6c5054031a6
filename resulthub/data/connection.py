# data/connection.py

import json

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from resulthub.utils.logger import logger

class ActionFailed(Exception):
	"""Raised when a database action fails."""

class StudentNotFound(Exception):
	"""Raised when no student has the requested roll number."""
	def __init__(self, roll_number: str):
		super().__init__(f"Student with roll number {roll_number} not found")
		self.roll_number = roll_number

class DuplicateStudent(Exception):
	"""Raised when a student with the same roll number already exists."""
	def __init__(self, roll_number: str):
		super().__init__(f"Student with roll number {roll_number} already exists")
		self.roll_number = roll_number

class MongoConnection:
	"""
	Owns the single MongoClient of the process.

	Built once at startup and handed to the application; every request shares
	it through pymongo's own connection pool.
	"""
	def __init__(self, uri: str, db_name: str, *, timeout_ms: int = 10000):
		self.uri = uri
		self.db_name = db_name
		self.timeout_ms = timeout_ms
		self._client: MongoClient | None = None

	def connect(self) -> None:
		"""Opens the client and pings the server. PyMongoError is passed to the caller."""
		logger(tag="connect").info(f"Connecting to MongoDB database '{self.db_name}'")
		client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
		try:
			client.admin.command("ping")
		except PyMongoError as e:
			logger(tag="connect").error(f"Failed to connect to MongoDB: {e}")
			client.close()
			raise
		self._client = client
		logger(tag="connect").info("MongoDB connected")

	def is_connected(self) -> bool:
		if self._client is None:
			return False
		try:
			self._client.admin.command("ping")
			return True
		except PyMongoError as e:
			logger(tag="health").warning(f"MongoDB ping failed: {e}")
			return False

	@property
	def database(self) -> Database:
		if self._client is None:
			raise ActionFailed("MongoDB connection is not open")
		return self._client[self.db_name]

	def get_collection(self, name: str) -> Collection:
		return self.database.get_collection(name)

	def ensure_collection(
		self,
		name: str,
		validator_path: str | None = None,
		validation_level: str = "moderate"
	) -> bool:
		"""Creates `name` with the JSON schema validator if it is missing. Returns True if created."""
		if name in self.database.list_collection_names():
			return False

		options = {}
		if validator_path:
			with open(validator_path, "r", encoding="utf-8") as f:
				options["validator"] = json.load(f)
			options["validationLevel"] = validation_level
		self.database.create_collection(name, **options)
		logger(tag="create_collection").info(f"Created '{name}' collection")
		return True

	def close(self) -> None:
		if self._client is not None:
			logger(tag="shutdown").info("Closing MongoDB connection")
			self._client.close()
			self._client = None
