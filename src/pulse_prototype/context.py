from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from types import TracebackType
from typing import Literal

from starlette.routing import Router

from pulse_prototype import env
from pulse_prototype.urls import UrlBuilder


def _default_urls() -> UrlBuilder:
	return UrlBuilder(base_url=env.base_url())


@dataclass
class PrototypeContext:
	"""Configuration used by the helpers while rendering.

	- urls: builds the URLs of remote calls
	- cdata: wrap script tag content in `//<![CDATA[ ... //]]>`
	- script_type: `type` attribute of generated script tags
	"""

	urls: UrlBuilder = field(default_factory=_default_urls)
	cdata: bool = field(default_factory=env.cdata_enabled)
	script_type: str = "text/javascript"
	_token: "Token[PrototypeContext | None] | None" = field(
		default=None, repr=False, compare=False
	)

	@classmethod
	def get(cls) -> "PrototypeContext":
		ctx = PROTOTYPE_CONTEXT.get()
		if ctx is None:
			return cls()
		return ctx

	@classmethod
	def for_router(cls, router: Router, base_url: str | None = None):
		"""Context resolving named routes through a starlette router
		(`app.router` for a Starlette or FastAPI application)."""
		return cls(urls=UrlBuilder(base_url=base_url or env.base_url(), router=router))

	def __enter__(self):
		self._token = PROTOTYPE_CONTEXT.set(self)
		return self

	def __exit__(
		self,
		exc_type: type[BaseException] | None = None,
		exc_val: BaseException | None = None,
		exc_tb: TracebackType | None = None,
	) -> Literal[False]:
		if self._token is not None:
			PROTOTYPE_CONTEXT.reset(self._token)
			self._token = None
		return False


PROTOTYPE_CONTEXT: ContextVar["PrototypeContext | None"] = ContextVar(
	"prototype_context", default=None
)


__all__ = ["PROTOTYPE_CONTEXT", "PrototypeContext"]
