# utils/logger.py

import inspect
import logging
import sys

_LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s%(tag)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

class TaggedFormatter(logging.Formatter):
	"""
	Formatter that tolerates records without a 'tag' attribute.

	Records coming from third-party loggers (uvicorn, pymongo) never pass
	through the adapter returned by `logger()`, so they get an empty tag.
	"""
	def __init__(self, fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT, **kwargs):
		super().__init__(fmt, datefmt, **kwargs)

	def format(self, record: logging.LogRecord) -> str:
		if not hasattr(record, "tag"):
			record.tag = ""
		return super().format(record)

def setup_logging(
	level: int | str = logging.INFO,
	stream=sys.stdout
) -> None:
	"""
	Configures the root logger once for the whole process.

	Args:
		level: Minimum level, either a logging constant or its name ("DEBUG").
		stream: Where log lines are written.
	"""
	root_logger = logging.getLogger()
	if root_logger.handlers:
		return

	if isinstance(level, str):
		level = logging.getLevelName(level.upper())
		if not isinstance(level, int):
			level = logging.INFO

	handler = logging.StreamHandler(stream=stream)
	handler.setFormatter(TaggedFormatter())
	root_logger.addHandler(handler)
	root_logger.setLevel(level)

def logger(
	tag: str | None = None,
	*,
	name: str | None = None
) -> logging.LoggerAdapter:
	"""
	Returns a logger adapter that stamps every record with `tag`.

	The logger name defaults to the calling module, so
	`logger(tag="students").info("GET /api/students")` from
	`resulthub.api.routes.students` prints
	`[resulthub.api.routes.students:students] GET /api/students`.
	"""
	logger_name = name
	if logger_name is None:
		module = inspect.getmodule(inspect.stack()[1][0])
		logger_name = module.__name__ if module else "resulthub"
	return logging.LoggerAdapter(
		logging.getLogger(logger_name),
		{"tag": f":{tag}" if tag is not None else ""}
	)
