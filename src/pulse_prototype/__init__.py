from .context import PrototypeContext
from .errors import PrototypeHelperError, UrlGenerationError
from .observers import (
	build_observer,
	observe_field,
	observe_form,
	periodically_call_remote,
)
from .options import LiteralCode, ObserveOptions, RemoteCall
from .remote import escape_javascript, options_for_ajax, remote_function
from .tags import content_tag, javascript_tag, link_to_function, link_to_remote
from .urls import UrlBuilder

__all__ = [
	"LiteralCode",
	"ObserveOptions",
	"PrototypeContext",
	"PrototypeHelperError",
	"RemoteCall",
	"UrlBuilder",
	"UrlGenerationError",
	"build_observer",
	"content_tag",
	"escape_javascript",
	"javascript_tag",
	"link_to_function",
	"link_to_remote",
	"observe_field",
	"observe_form",
	"options_for_ajax",
	"periodically_call_remote",
	"remote_function",
]
