"""Typed option model for the observer and remote-call helpers.

Helpers accept either these dataclasses or plain keyword options
(`url=`, `update=`, `with_=`, `success=`...), which `from_options` turns
into the typed form.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from pulse_prototype.urls import UrlOptions

# Prototype Ajax events accepted as callback options, rendered as on<Event>
CALLBACKS = frozenset(
	{
		"create",
		"uninitialized",
		"loading",
		"loaded",
		"interactive",
		"complete",
		"failure",
		"success",
	}
)
STATUS_CODES = range(100, 600)

Frequency = int | float | Decimal | str
UpdateTarget = str | Mapping[str, str]


def _callback_key(key: object) -> str | int | None:
	if isinstance(key, bool):
		return None
	if isinstance(key, int):
		return key if key in STATUS_CODES else None
	if isinstance(key, str):
		if key in CALLBACKS:
			return key
		if key.isdigit() and int(key) in STATUS_CODES:
			return int(key)
	return None


@dataclass(frozen=True)
class LiteralCode:
	"""JavaScript used verbatim as the body of the generated callback."""

	code: str


@dataclass(frozen=True)
class RemoteCall:
	"""Description of an Ajax call rendered by `remote_function`."""

	url: UrlOptions = None
	update: UpdateTarget | None = None
	with_: str | None = None
	method: str | None = None
	position: str | None = None
	synchronous: bool = False
	script: bool | None = None
	form: bool = False
	submit: str | None = None
	before: str | None = None
	after: str | None = None
	condition: str | None = None
	confirm: str | None = None
	callbacks: Mapping[str | int, str] = field(default_factory=dict)
	html: Mapping[str, Any] | None = None

	@classmethod
	def from_options(cls, options: Mapping[str, Any]) -> RemoteCall:
		callbacks: dict[str | int, str] = {}
		for key, code in options.items():
			name = _callback_key(key)
			if name is not None:
				callbacks[name] = code
		with_ = options.get("with_", options.get("with"))
		synchronous = bool(options.get("synchronous")) or (
			str(options.get("type", "")) == "synchronous"
		)
		return cls(
			url=options.get("url"),
			update=options.get("update"),
			with_=with_,
			method=options.get("method"),
			position=options.get("position"),
			synchronous=synchronous,
			script=options.get("script"),
			form=bool(options.get("form")),
			submit=options.get("submit"),
			before=options.get("before"),
			after=options.get("after"),
			condition=options.get("condition"),
			confirm=options.get("confirm"),
			callbacks=callbacks,
			html=options.get("html"),
		)


@dataclass(frozen=True)
class ObserveOptions:
	"""Options of `observe_field` / `observe_form`.

	`callback` is either literal code (the `function` option) or a remote
	call; never both.
	"""

	callback: LiteralCode | RemoteCall = field(default_factory=RemoteCall)
	frequency: Frequency | None = None

	@classmethod
	def from_options(cls, options: Mapping[str, Any]) -> ObserveOptions:
		function = options.get("function")
		callback = (
			LiteralCode(function)
			if function is not None and function is not False
			else RemoteCall.from_options(options)
		)
		return cls(callback=callback, frequency=options.get("frequency"))

	@property
	def has_frequency(self) -> bool:
		return frequency_is_set(self.frequency)


def frequency_is_set(frequency: Frequency | bool | None) -> bool:
	# Any value counts, zero included; only None and False mean "absent"
	return frequency is not None and frequency is not False


def frequency_is_positive(frequency: Frequency | bool | None) -> bool:
	if frequency is None or isinstance(frequency, bool):
		return False
	if isinstance(frequency, str):
		try:
			return float(frequency) > 0
		except ValueError:
			return False
	return frequency > 0


__all__ = [
	"CALLBACKS",
	"Frequency",
	"LiteralCode",
	"ObserveOptions",
	"RemoteCall",
	"UpdateTarget",
	"frequency_is_positive",
	"frequency_is_set",
]
