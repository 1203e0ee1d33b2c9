"""Loading doc sources from config files and --urls tokens."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from mcpdoc.types import ConfigError, DocSource

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("yaml", "json")
_SCHEME_PREFIXES = ("http:", "https:", "file:")


def load_config_file(path: str | Path, file_format: str) -> list[DocSource]:
	"""Load doc sources from a YAML or JSON file.

	The file must contain a list of mappings, each with at least an
	`llms_txt` key:

	    - name: LangGraph
	      llms_txt: https://langchain-ai.github.io/langgraph/llms.txt
	      description: optional

	Raises:
	    ConfigError: unsupported format, unreadable file, bad syntax or shape
	"""
	file_format = file_format.lower()
	if file_format not in SUPPORTED_FORMATS:
		raise ConfigError(f"Unsupported file format: {file_format}")

	resolved = Path(path).resolve()
	try:
		content = resolved.read_text(encoding="utf-8")
	except OSError as e:
		raise ConfigError(f"Error loading config file {resolved}: {e}") from e

	try:
		data = yaml.safe_load(content) if file_format == "yaml" else json.loads(content)
	except (yaml.YAMLError, json.JSONDecodeError) as e:
		raise ConfigError(f"Error parsing {file_format} config file {resolved}: {e}") from e

	if not isinstance(data, list):
		raise ConfigError("Config file must contain a list of doc sources")

	sources: list[DocSource] = []
	for index, entry in enumerate(data):
		try:
			sources.append(DocSource.model_validate(entry))
		except ValidationError as e:
			raise ConfigError(f"Invalid doc source at index {index} in {resolved}: {e}") from e

	logger.debug(f"Loaded {len(sources)} doc sources from {resolved}")
	return sources


def create_doc_sources_from_urls(urls: list[str]) -> list[DocSource]:
	"""Create doc sources from "location" or "name:location" tokens.

	A token is split on its first colon unless it starts with a scheme
	(http:, https:, file:), so "LangGraph:https://x/llms.txt" is named
	and "https://x/llms.txt" is not. Blank tokens are skipped.
	"""
	sources: list[DocSource] = []
	for entry in urls:
		if not entry.strip():
			continue
		name, sep, location = entry.partition(":")
		if sep and name and not entry.startswith(_SCHEME_PREFIXES):
			sources.append(DocSource(name=name, llms_txt=location))
		else:
			sources.append(DocSource(llms_txt=entry))
	return sources
