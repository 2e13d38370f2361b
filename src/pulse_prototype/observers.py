"""Prototype form observers and periodical remote calls.

Every helper returns an inline script tag (see `javascript_tag`) whose body
is one of:

	new Form.Element.Observer('<id>', <frequency>, function(element, value) {<callback>})
	new Form.Element.EventObserver('<id>', function(element, value) {<callback>})
	new Form.Observer('<id>', <frequency>, function(element, value) {<callback>})
	new Form.EventObserver('<id>', function(element, value) {<callback>})
	new PeriodicalExecuter(function() {<remote call>}, <frequency>)

The callback is either literal JavaScript (`function=`) or a remote call
rendered by `remote_function` from the remaining options.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from markupsafe import Markup

from pulse_prototype.nodes import (
	JSBinary,
	JSCall,
	JSExpr,
	JSFunctionDef,
	JSIdentifier,
	JSNew,
	JSNode,
	JSRaw,
	JSString,
	js_path,
	to_js_expr,
)
from pulse_prototype.options import (
	Frequency,
	LiteralCode,
	ObserveOptions,
	RemoteCall,
	frequency_is_positive,
	frequency_is_set,
)
from pulse_prototype.remote import as_remote_call, compile_remote_call
from pulse_prototype.tags import javascript_tag

logger = logging.getLogger(__name__)

# A `with` option containing any of these is an expression, otherwise it's a key
_WITH_EXPRESSION = re.compile(r"[{=(.]")

DEFAULT_PERIOD = 10

ObserveArg = ObserveOptions | Mapping[str, Any] | None


def _as_observe_options(options: ObserveArg, extra: Mapping[str, Any]):
	if isinstance(options, ObserveOptions):
		if extra:
			raise TypeError(
				"Keyword options cannot be combined with an ObserveOptions instance"
			)
		return options
	return ObserveOptions.from_options({**(options or {}), **extra})


def observe_field(field_id: str, options: ObserveArg = None, **kwargs: Any) -> Markup:
	"""Observe the field `field_id` and run a callback when its value changes.

	By default the callback is an Ajax call sending the field value as a
	parameter. Options:

	- `frequency`: polling interval in seconds. Unset, zero or negative means
	  event based observation (`Form.Element.EventObserver`).
	- `function`: JavaScript used as the callback body instead of an Ajax
	  call. `element` and `value` are in scope.
	- `with_` (or `with`): parameters expression. A bare key such as `'q'` is
	  shorthand for `"'q=' + encodeURIComponent(value)"`.
	- `url`, `update` and the other `remote_function` options.

	Example:
		observe_field("suggest", url={"action": "find_suggestion"},
		              frequency=0.25, update="suggest", with_="q")
	"""
	opts = _as_observe_options(options, kwargs)
	if frequency_is_positive(opts.frequency):
		return build_observer("Form.Element.Observer", field_id, opts)
	return build_observer("Form.Element.EventObserver", field_id, opts)


def observe_form(form_id: str, options: ObserveArg = None, **kwargs: Any) -> Markup:
	"""Observe every field of the form `form_id`.

	Options are those of `observe_field`, except that any `frequency` value,
	zero included, selects time based observation. `value` holds the
	serialized form.
	"""
	opts = _as_observe_options(options, kwargs)
	if opts.has_frequency:
		return build_observer("Form.Observer", form_id, opts)
	return build_observer("Form.EventObserver", form_id, opts)


def _with_key_expression(key: str) -> str:
	encoded = JSCall(JSIdentifier("encodeURIComponent"), [JSIdentifier("value")])
	return JSBinary(JSString(f"{key}="), "+", encoded).emit()


def normalize_with(callback: LiteralCode | RemoteCall) -> LiteralCode | RemoteCall:
	if isinstance(callback, LiteralCode):
		return callback
	with_ = callback.with_
	if with_ is None:
		return replace(callback, with_="value")
	if not _WITH_EXPRESSION.search(with_):
		return replace(callback, with_=_with_key_expression(with_))
	return callback


def build_observer(
	klass: str, name: str, options: ObserveArg = None, **kwargs: Any
) -> Markup:
	opts = _as_observe_options(options, kwargs)
	callback = normalize_with(opts.callback)
	body: JSNode = (
		JSRaw(callback.code)
		if isinstance(callback, LiteralCode)
		else compile_remote_call(callback)
	)

	args: list[JSExpr] = [JSString(str(name))]
	if opts.has_frequency:
		args.append(to_js_expr(opts.frequency))
	args.append(JSFunctionDef(["element", "value"], body))

	logger.debug("Building %s for %r (frequency=%r)", klass, name, opts.frequency)
	return javascript_tag(JSNew(js_path(klass), args).emit())


def periodically_call_remote(
	options: RemoteCall | Mapping[str, Any] | None = None,
	frequency: Frequency | None = None,
	**kwargs: Any,
) -> Markup:
	"""Call `url` every `frequency` seconds (10 by default).

	Options are those of `remote_function`; usually `update` names the
	element refreshed with the response.

	Example:
		periodically_call_remote(url={"action": "get_averages"}, update="avg")
		# new PeriodicalExecuter(function() {new Ajax.Updater('avg',
		#     'http://www.example.com/get_averages',
		#     {asynchronous:true, evalScripts:true})}, 10)
	"""
	if isinstance(options, Mapping):
		options = dict(options)
		from_options = options.pop("frequency", None)
		if frequency is None:
			frequency = from_options
	if not frequency_is_set(frequency):
		frequency = DEFAULT_PERIOD

	call = as_remote_call(options, kwargs)
	function = JSFunctionDef([], compile_remote_call(call))
	return javascript_tag(
		JSNew(js_path("PeriodicalExecuter"), [function, to_js_expr(frequency)]).emit()
	)


__all__ = [
	"DEFAULT_PERIOD",
	"build_observer",
	"normalize_with",
	"observe_field",
	"observe_form",
	"periodically_call_remote",
]
