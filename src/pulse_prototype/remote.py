"""Rendering of Prototype `Ajax.Request` / `Ajax.Updater` calls."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from markupsafe import Markup, escape

from pulse_prototype.context import PrototypeContext
from pulse_prototype.nodes import (
	JSBoolean,
	JSCall,
	JSExpr,
	JSFunctionDef,
	JSIdentifier,
	JSIf,
	JSMultiStmt,
	JSNew,
	JSNode,
	JSObjectExpr,
	JSProp,
	JSRaw,
	JSString,
	js_path,
)
from pulse_prototype.options import RemoteCall, UpdateTarget

JS_ESCAPE_MAP = {
	"\\": "\\\\",
	"</": "<\\/",
	"\r\n": "\\n",
	"\n": "\\n",
	"\r": "\\n",
	'"': '\\"',
	"'": "\\'",
}
_JS_ESCAPE_RE = re.compile(r"\\|</|\r\n|[\n\r\"']")


def escape_javascript(text: str | None) -> str:
	"""Escape carriage returns and quotes for use inside JavaScript strings."""
	if not text:
		return ""
	return _JS_ESCAPE_RE.sub(lambda m: JS_ESCAPE_MAP[m.group(0)], text)


def as_remote_call(
	options: RemoteCall | Mapping[str, Any] | None, extra: Mapping[str, Any]
) -> RemoteCall:
	if isinstance(options, RemoteCall):
		if extra:
			raise TypeError(
				"Keyword options cannot be combined with a RemoteCall instance"
			)
		return options
	merged = {**(options or {}), **extra}
	return RemoteCall.from_options(merged)


def _callback_name(event: str | int) -> str:
	if isinstance(event, int):
		return f"on{event}"
	return "on" + event.capitalize()


def build_callbacks(call: RemoteCall) -> dict[str, JSExpr]:
	return {
		_callback_name(event): JSFunctionDef(["request"], JSRaw(code), compact=True)
		for event, code in call.callbacks.items()
	}


def _method_option(method: Any) -> JSExpr:
	method = str(method)
	# Already a JavaScript expression such as "'put'"
	if "'" in method:
		return JSRaw(method)
	return JSString(method)


def options_for_ajax(call: RemoteCall) -> JSObjectExpr:
	"""Second argument of the Ajax constructor, with keys sorted."""
	js_options = build_callbacks(call)
	js_options["asynchronous"] = JSBoolean(not call.synchronous)
	if call.method:
		js_options["method"] = _method_option(call.method)
	if call.position:
		js_options["insertion"] = JSString(str(call.position).lower())
	js_options["evalScripts"] = JSBoolean(call.script is None or bool(call.script))

	if call.form:
		js_options["parameters"] = JSRaw("Form.serialize(this)")
	elif call.submit:
		js_options["parameters"] = JSCall(
			js_path("Form.serialize"), [JSString(call.submit)]
		)
	elif call.with_:
		js_options["parameters"] = JSRaw(call.with_)

	return JSObjectExpr([JSProp(key, js_options[key]) for key in sorted(js_options)])


def _update_target(update: UpdateTarget) -> JSExpr:
	if isinstance(update, Mapping):
		props = [
			JSProp(key, JSString(str(update[key])))
			for key in ("success", "failure")
			if update.get(key)
		]
		return JSObjectExpr(props, separator=",")
	return JSString(str(update))


def compile_remote_call(call: RemoteCall) -> JSNode:
	ctx = PrototypeContext.get()
	url = escape(escape_javascript(ctx.urls.url_for(call.url)))
	args: list[JSExpr] = [JSString(str(url)), options_for_ajax(call)]

	if call.update is not None and call.update is not False:
		function: JSNode = JSNew(
			js_path("Ajax.Updater"), [_update_target(call.update), *args]
		)
	else:
		function = JSNew(js_path("Ajax.Request"), args)

	if call.before:
		function = JSMultiStmt([JSRaw(call.before), function])
	if call.after:
		function = JSMultiStmt([function, JSRaw(call.after)])
	if call.condition:
		function = JSIf(JSRaw(call.condition), function)
	if call.confirm:
		question = JSString(escape_javascript(call.confirm))
		function = JSIf(JSCall(JSIdentifier("confirm"), [question]), function)
	return function


def remote_function(
	options: RemoteCall | Mapping[str, Any] | None = None, **kwargs: Any
) -> Markup:
	"""JavaScript that performs an Ajax call to `url`.

	With `update`, an `Ajax.Updater` replaces the target element's content
	with the response: `update="results"` or
	`update={"success": "results", "failure": "errors"}`. Without it an
	`Ajax.Request` is issued.

	Example:
		remote_function(url={"action": "list"}, update="items")
		# new Ajax.Updater('items', 'http://www.example.com/list',
		#     {asynchronous:true, evalScripts:true})
	"""
	call = as_remote_call(options, kwargs)
	return Markup(compile_remote_call(call).emit())


__all__ = [
	"JS_ESCAPE_MAP",
	"as_remote_call",
	"build_callbacks",
	"compile_remote_call",
	"escape_javascript",
	"options_for_ajax",
	"remote_function",
]
