import pytest
from pulse_prototype.options import (
	LiteralCode,
	ObserveOptions,
	RemoteCall,
	frequency_is_positive,
	frequency_is_set,
)


class TestRemoteCallFromOptions:
	def test_with_aliases(self):
		assert RemoteCall.from_options({"with": "q"}).with_ == "q"
		assert RemoteCall.from_options({"with_": "q"}).with_ == "q"

	def test_synchronous(self):
		assert RemoteCall.from_options({"type": "synchronous"}).synchronous
		assert RemoteCall.from_options({"synchronous": True}).synchronous
		assert not RemoteCall.from_options({"type": "asynchronous"}).synchronous

	def test_callbacks(self):
		call = RemoteCall.from_options(
			{"success": "a()", 404: "b()", "500": "c()", 700: "d()", "url": "/x"}
		)
		assert call.callbacks == {"success": "a()", 404: "b()", 500: "c()"}
		assert call.url == "/x"

	def test_unknown_keys_are_ignored(self):
		assert RemoteCall.from_options({"bogus": 1}) == RemoteCall()


class TestObserveOptionsFromOptions:
	def test_function(self):
		opts = ObserveOptions.from_options({"function": "f()", "url": "/x"})
		assert opts.callback == LiteralCode("f()")

	def test_false_function_is_absent(self):
		opts = ObserveOptions.from_options({"function": False, "url": "/x"})
		assert opts.callback == RemoteCall(url="/x")

	def test_remote(self):
		opts = ObserveOptions.from_options({"url": "/x", "frequency": 2})
		assert opts.callback == RemoteCall(url="/x")
		assert opts.frequency == 2
		assert opts.has_frequency

	def test_defaults(self):
		opts = ObserveOptions.from_options({})
		assert opts.callback == RemoteCall()
		assert not opts.has_frequency


@pytest.mark.parametrize(
	"frequency,expected",
	[(None, False), (False, False), (0, True), (-1, True), ("", True), (2, True)],
)
def test_frequency_is_set(frequency: object, expected: bool):
	assert frequency_is_set(frequency) is expected  # pyright: ignore[reportArgumentType]


@pytest.mark.parametrize(
	"frequency,expected",
	[
		(None, False),
		(True, False),
		(0, False),
		(-1, False),
		(0.25, True),
		(300, True),
		("5", True),
		("0", False),
		("soon", False),
	],
)
def test_frequency_is_positive(frequency: object, expected: bool):
	assert frequency_is_positive(frequency) is expected  # pyright: ignore[reportArgumentType]
