from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from starlette.datastructures import URL
from starlette.routing import NoMatchFound, Router

from pulse_prototype.errors import UrlGenerationError

logger = logging.getLogger(__name__)

# Characters allowed unescaped in a path segment (RFC 3986 pchar)
_PATH_SAFE = "!$&'()*+,;=:@"

_PATH_KEYS = ("controller", "action", "id")

UrlOptions = str | URL | Mapping[str, Any] | None


@dataclass
class UrlBuilder:
	"""url_for-style URL construction.

	`url` options come in four shapes:
	- a string, used as is (`'update'`, `'/books/1'`, `'http://...'`)
	- a starlette `URL`
	- a mapping describing the URL (see `from_mapping`)
	- `None`, the application root
	"""

	base_url: str
	router: Router | None = None
	controller: str | None = None

	def url_for(self, url: UrlOptions = None) -> str:
		if url is None:
			return f"{self.base_url}/"
		if isinstance(url, URL):
			return str(url)
		if isinstance(url, str):
			return url
		if isinstance(url, Mapping):
			resolved = self.from_mapping(url)
			logger.debug("Resolved url options %r to %s", dict(url), resolved)
			return resolved
		raise UrlGenerationError(
			f"Unsupported url option of type {type(url).__name__}: {url!r}"
		)

	def from_mapping(self, options: Mapping[str, Any]) -> str:
		"""Build a URL from a mapping.

		Recognized keys:
		- `name` (+ `path_params`): a named route on `router`
		- `controller`, `action`, `id`: path segments, in that order
		- `only_path`: omit the base URL
		- `anchor`: URL fragment
		Any other key becomes a query parameter, in insertion order.
		"""
		params = dict(options)
		only_path = bool(params.pop("only_path", False))
		anchor = params.pop("anchor", None)
		name = params.pop("name", None)

		if name is not None:
			path = self._route_path(str(name), params.pop("path_params", None) or {})
		else:
			if self.controller is not None:
				params.setdefault("controller", self.controller)
			segments = [params.pop(key) for key in _PATH_KEYS if key in params]
			path = "/" + "/".join(
				quote(str(s), safe=_PATH_SAFE) for s in segments if s is not None
			)

		url = URL(path if only_path else self.base_url + path)
		query = {str(k): str(v) for k, v in params.items() if v is not None}
		if query:
			url = url.include_query_params(**query)
		if anchor is not None:
			url = url.replace(fragment=str(anchor))
		return str(url)

	def _route_path(self, name: str, path_params: Mapping[str, Any]) -> str:
		if self.router is None:
			raise UrlGenerationError(
				f"Cannot resolve route {name!r}: no router configured"
			)
		try:
			return str(self.router.url_path_for(name, **path_params))
		except NoMatchFound as e:
			raise UrlGenerationError(
				f"No route named {name!r} matches {dict(path_params)!r}"
			) from e


__all__ = ["UrlBuilder", "UrlOptions"]
