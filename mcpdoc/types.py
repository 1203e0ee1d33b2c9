"""Type definitions for mcpdoc.

This module contains:
- Exception hierarchy for structured error handling
- Domain models shared across layers
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Exceptions
# =============================================================================


class McpdocError(Exception):
	"""Base for all mcpdoc errors."""

	pass


class ConfigError(McpdocError):
	"""Startup configuration error - the server cannot start (e.g., missing local source)."""

	pass


class FetchError(McpdocError):
	"""A single fetch_docs call failed. Rendered as text for the caller."""

	pass


class InvalidInput(FetchError):
	"""The fetch target was missing or blank."""

	def __init__(self, message: str = "URL parameter is required"):
		super().__init__(message)


class AccessDenied(FetchError):
	"""Target is outside the allowed origins or local files.

	Carries the denied value and the allow-set so the caller can see
	what would have been accepted.
	"""

	def __init__(self, message: str, target: str, allowed: list[str]):
		super().__init__(message)
		self.target = target
		self.allowed = allowed


class RetrievalError(FetchError):
	"""Retrieval was attempted and failed - a new call may succeed."""

	pass


class HttpError(RetrievalError):
	"""Remote server answered with a non-2xx status."""

	def __init__(self, status: int, status_text: str):
		super().__init__(f"Encountered an HTTP error: {status} {status_text}".rstrip())
		self.status = status
		self.status_text = status_text


class FetchTimeout(RetrievalError):
	"""The request deadline passed before a response arrived."""

	pass


class NetworkError(RetrievalError):
	"""Connection-level failure with no HTTP status (DNS, refused, TLS)."""

	pass


class ReadError(RetrievalError):
	"""Reading an allowed local file failed. The cause is chained."""

	pass


# =============================================================================
# Domain Models
# =============================================================================


class SourceKind(Enum):
	"""Which gate applies to a location."""

	REMOTE = "remote"
	LOCAL = "local"


class DocSource(BaseModel):
	"""A configured documentation source.

	Loaded from config files or --urls tokens at startup and never
	modified afterwards.
	"""

	model_config = ConfigDict(frozen=True, extra="ignore")

	llms_txt: str = Field(..., description="URL or file path of the llms.txt file")
	name: str | None = Field(default=None, description="Human-readable label")
	description: str | None = Field(default=None, description="Optional notes about the source")

	@property
	def location(self) -> str:
		return self.llms_txt
