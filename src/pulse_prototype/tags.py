"""Markup helpers: inline script tags and JavaScript-driven links."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mako.template import Template
from markupsafe import Markup, escape

from pulse_prototype.context import PrototypeContext
from pulse_prototype.options import RemoteCall
from pulse_prototype.remote import as_remote_call, remote_function

# Mako template for inline scripts
SCRIPT_TEMPLATE = Template(
	"""<script type="${script_type | h}">
% if cdata:
//<![CDATA[
% endif
${content}
% if cdata:
//]]>
% endif
</script>"""
)


def javascript_tag(content: str) -> Markup:
	"""Wrap JavaScript in an inline script tag.

	The content is trusted code and is not escaped.
	"""
	ctx = PrototypeContext.get()
	return Markup(
		SCRIPT_TEMPLATE.render(
			content=content, cdata=ctx.cdata, script_type=ctx.script_type
		)
	)


def _attr_name(name: str) -> str:
	# class_ -> class, for_ -> for
	return name[:-1] if name.endswith("_") else name


def tag_options(attrs: Mapping[str, Any]) -> Markup:
	out = Markup()
	for name, value in attrs.items():
		if value is None or value is False:
			continue
		name = _attr_name(name)
		if value is True:
			value = name
		out += Markup(' {}="{}"').format(name, value)
	return out


def content_tag(
	name: str, content: Any = "", attrs: Mapping[str, Any] | None = None
) -> Markup:
	return Markup("<{0}{1}>{2}</{0}>").format(
		Markup(name), tag_options(attrs or {}), escape(content)
	)


def _js_text(code: Any) -> str:
	# Markup input (remote calls) is already escaped once; decode so the
	# attribute value is escaped exactly once
	return code.unescape() if isinstance(code, Markup) else str(code)


def link_to_function(
	name: Any,
	function: str = "",
	html_options: Mapping[str, Any] | None = None,
	**kwargs: Any,
) -> Markup:
	"""A link that runs `function` when clicked, then cancels navigation.

	An existing `onclick` is kept and runs first. `href` defaults to `#`.

	Example:
		link_to_function("Greeting", "alert('Hello world!')")
		# <a href="#" onclick="alert(&#39;Hello world!&#39;); return false;">Greeting</a>
	"""
	attrs = {_attr_name(k): v for k, v in {**(html_options or {}), **kwargs}.items()}
	code = f"{_js_text(function)}; return false;"
	onclick = attrs.get("onclick")
	if onclick:
		code = f"{_js_text(onclick)}; {code}"
	# Caller attributes keep their position, new ones are appended
	attrs.update(href=attrs.get("href") or "#", onclick=escape(code))
	return content_tag("a", name, attrs)


def link_to_remote(
	name: Any,
	options: RemoteCall | Mapping[str, Any] | None = None,
	html_options: Mapping[str, Any] | None = None,
	**kwargs: Any,
) -> Markup:
	"""A link that performs an Ajax call when clicked.

	`options` are those of `remote_function`. Link attributes come from
	`html_options`, or from the `html` option when it is not given.

	Example:
		link_to_remote("Delete", url={"action": "destroy", "id": 3}, update="posts")
	"""
	call = as_remote_call(options, kwargs)
	attrs = html_options if html_options is not None else (call.html or {})
	return link_to_function(name, remote_function(call), attrs)


__all__ = [
	"SCRIPT_TEMPLATE",
	"content_tag",
	"javascript_tag",
	"link_to_function",
	"link_to_remote",
	"tag_options",
]
