#!/usr/bin/env python3
"""
ResultHub - Startup Script

Reads configuration from the environment (or a .env file), connects to
MongoDB and only then starts serving. Exits with status 1 when MongoDB is
not configured or cannot be reached.
"""

import os
import sys

import uvicorn
from dotenv import load_dotenv

from resulthub.core.startup import bootstrap
from resulthub.utils.logger import logger, setup_logging

def main():
	load_dotenv()
	setup_logging(os.getenv("LOG_LEVEL", "INFO"))

	result = bootstrap()
	if not result.ok:
		logger(tag="startup").critical(f"Failed to start server: {result.error}")
		sys.exit(1)

	settings = result.settings
	logger(tag="startup").info(f"{settings.SERVICE_NAME} running on port {settings.PORT}")
	# uvicorn turns SIGINT/SIGTERM into a lifespan shutdown, which closes MongoDB
	uvicorn.run(
		result.app,
		host=settings.HOST,
		port=settings.PORT,
		log_level=settings.LOG_LEVEL.lower()
	)

if __name__ == "__main__":
	main()
