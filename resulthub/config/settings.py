# config/settings.py

import os

class ConfigError(Exception):
	"""Raised when the environment does not describe a usable configuration."""

def _int_from_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	try:
		return int(raw)
	except ValueError:
		raise ConfigError(f"{name} must be an integer, got '{raw}'")

class Settings:
	# Service
	SERVICE_NAME: str = "LX Result System API"
	VERSION: str = "1.0.0"
	HOST: str = "0.0.0.0"
	PORT: int = 5000
	STATIC_DIR: str = "static"
	LOG_LEVEL: str = "INFO"

	# Database
	MONGODB_URI: str = ""
	MONGODB_DB: str = "resulthub"
	MONGODB_TIMEOUT_MS: int = 10000

	def __init__(self, **overrides):
		for key, value in overrides.items():
			if not hasattr(Settings, key):
				raise ConfigError(f"Unknown setting '{key}'")
			setattr(self, key, value)

	@classmethod
	def from_env(cls) -> "Settings":
		"""Reads settings from the process environment. MONGODB_URI is required."""
		uri = os.getenv("MONGODB_URI", "").strip()
		if not uri:
			raise ConfigError("MONGODB_URI is not defined")
		return cls(
			MONGODB_URI=uri,
			MONGODB_DB=os.getenv("MONGODB_DB", cls.MONGODB_DB),
			MONGODB_TIMEOUT_MS=_int_from_env("MONGODB_TIMEOUT_MS", cls.MONGODB_TIMEOUT_MS),
			HOST=os.getenv("HOST", cls.HOST),
			PORT=_int_from_env("PORT", cls.PORT),
			STATIC_DIR=os.getenv("STATIC_DIR", cls.STATIC_DIR),
			LOG_LEVEL=os.getenv("LOG_LEVEL", cls.LOG_LEVEL),
		)
