class PrototypeHelperError(Exception):
	"""Base class for errors raised by pulse_prototype helpers."""


class UrlGenerationError(PrototypeHelperError, ValueError):
	"""Raised when `url` options cannot be turned into a URL."""


__all__ = ["PrototypeHelperError", "UrlGenerationError"]
