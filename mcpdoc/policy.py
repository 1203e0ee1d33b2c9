"""Allow-lists that gate which URLs and files fetch_docs may read.

Both lists are derived once from the configured doc sources and never
change while the server runs:

- DomainRegistry: origins of remote sources plus extra allowed domains,
  or a wildcard that admits every remote URL.
- LocalAllowlist: canonical paths of local sources, matched exactly.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from mcpdoc.sources import canonicalize_local, origin, partition
from mcpdoc.types import ConfigError, DocSource

WILDCARD = "*"


def _source_origin(source: DocSource) -> str:
	try:
		return origin(source.llms_txt)
	except ValueError as e:
		raise ConfigError(f"Invalid doc source URL: {source.llms_txt} ({e})") from e


@dataclass(frozen=True)
class DomainRegistry:
	"""Origins that remote fetches may start with.

	Either allow_all is set and every URL passes, or a URL passes when it
	starts with one of the origins.

	Extra domains are taken verbatim. They must already look like
	"https://example.com/" to match anything.
	"""

	origins: frozenset[str] = frozenset()
	allow_all: bool = False

	@classmethod
	def build(cls, remote_sources: Iterable[DocSource], extra_domains: Iterable[str] = ()) -> "DomainRegistry":
		"""Derive the registry from remote sources and extra domains.

		Raises:
		    ConfigError: a remote source has no valid origin (e.g. bad port)
		"""
		derived = {_source_origin(source) for source in remote_sources}
		extra = list(extra_domains)
		if WILDCARD in extra:
			return cls(allow_all=True)
		return cls(origins=frozenset(derived | set(extra)))

	def is_allowed(self, url: str) -> bool:
		if self.allow_all:
			return True
		return any(url.startswith(allowed) for allowed in self.origins)

	def allowed(self) -> list[str]:
		"""Sorted allow-set for error messages."""
		if self.allow_all:
			return [WILDCARD]
		return sorted(self.origins)


@dataclass(frozen=True)
class LocalAllowlist:
	"""Canonical absolute paths of local doc sources.

	Membership is exact. A wildcard in the domain registry does not widen it.
	"""

	paths: frozenset[str] = frozenset()

	@classmethod
	def build(cls, local_sources: Iterable[DocSource]) -> "LocalAllowlist":
		return cls(paths=frozenset(canonicalize_local(source.llms_txt) for source in local_sources))

	def is_allowed(self, path: str) -> bool:
		return canonicalize_local(path) in self.paths

	def allowed(self) -> list[str]:
		return sorted(self.paths)


@dataclass(frozen=True)
class FetchPolicy:
	"""Everything the fetch gate needs, computed once from configuration."""

	domains: DomainRegistry
	local_files: LocalAllowlist

	@classmethod
	def from_sources(cls, sources: Iterable[DocSource], extra_domains: Iterable[str] = ()) -> "FetchPolicy":
		remote, local = partition(list(sources))
		return cls(
			domains=DomainRegistry.build(remote, extra_domains),
			local_files=LocalAllowlist.build(local),
		)
