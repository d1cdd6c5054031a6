# models/student.py

from typing import Annotated, Any

from pydantic import (BaseModel, ConfigDict, Field, StrictFloat, StrictInt,
                      field_validator, model_validator)

# Strict so that JSON true/false is not taken as 1/0
Mark = Annotated[StrictInt, Field(ge=0, le=100)] | Annotated[StrictFloat, Field(ge=0, le=100)]

def _check_keys(data: Any, top_level: bool = True) -> None:
	if isinstance(data, dict):
		for key, value in data.items():
			if isinstance(key, str):
				reserved = (key.startswith(("$", "_")) or "." in key) if top_level else key.startswith("$")
				if reserved:
					raise ValueError(f"Field name '{key}' is not allowed")
			_check_keys(value, top_level=False)
	elif isinstance(data, list):
		for item in data:
			_check_keys(item, top_level=False)

class StudentFields(BaseModel):
	"""Optional result fields shared by create and update payloads."""
	model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

	className: str | None = None
	section: str | None = None
	marks: Mark | None = None
	grade: str | None = None
	subjects: dict[str, Mark] | None = None

	@field_validator("rollNumber", mode="before", check_fields=False)
	@classmethod
	def normalise_roll_number(cls, value: Any) -> Any:
		# Forms send strings, scripts often send numbers
		if isinstance(value, bool):
			raise ValueError("rollNumber must be a string or a number")
		if isinstance(value, int):
			return str(value)
		return value

	@model_validator(mode="before")
	@classmethod
	def check_field_names(cls, data: Any) -> Any:
		# Keys become Mongo field names as they are, at every depth
		_check_keys(data)
		return data

	def to_document(self) -> dict[str, Any]:
		return self.model_dump(exclude_none=True)

class StudentCreateRequest(StudentFields):
	rollNumber: str = Field(min_length=1, max_length=32)
	name: str = Field(min_length=1, max_length=100)

class StudentUpdateRequest(StudentFields):
	rollNumber: str | None = Field(default=None, min_length=1, max_length=32)
	name: str | None = Field(default=None, min_length=1, max_length=100)
