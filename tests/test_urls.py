import pytest
from starlette.datastructures import URL
from starlette.responses import PlainTextResponse
from starlette.routing import Route, Router
from pulse_prototype.errors import UrlGenerationError
from pulse_prototype.urls import UrlBuilder


def book(request):
	return PlainTextResponse("book")


@pytest.fixture
def urls() -> UrlBuilder:
	return UrlBuilder(base_url="http://www.example.com")


def test_none_is_root(urls: UrlBuilder):
	assert urls.url_for(None) == "http://www.example.com/"


def test_strings_are_used_as_is(urls: UrlBuilder):
	assert urls.url_for("update") == "update"
	assert urls.url_for("http://example.com/books/edit/1") == (
		"http://example.com/books/edit/1"
	)


def test_starlette_url(urls: UrlBuilder):
	assert urls.url_for(URL("https://api.test/x?y=1")) == "https://api.test/x?y=1"


def test_action(urls: UrlBuilder):
	assert urls.url_for({"action": "cart_changed"}) == (
		"http://www.example.com/cart_changed"
	)


def test_controller_action_id(urls: UrlBuilder):
	url = {"id": 16, "action": "invoice", "controller": "testing"}
	assert urls.url_for(url) == "http://www.example.com/testing/invoice/16"


def test_default_controller():
	urls = UrlBuilder(base_url="http://www.example.com", controller="testing")
	assert urls.url_for({"action": "invoice"}) == (
		"http://www.example.com/testing/invoice"
	)


def test_empty_mapping(urls: UrlBuilder):
	assert urls.url_for({}) == "http://www.example.com/"


def test_query_parameters_keep_order(urls: UrlBuilder):
	url = {"action": "whatnot", "b": "20", "a": 10, "skip": None}
	assert urls.url_for(url) == "http://www.example.com/whatnot?b=20&a=10"


def test_only_path_and_anchor(urls: UrlBuilder):
	assert urls.url_for({"action": "show", "only_path": True}) == "/show"
	assert urls.url_for({"action": "show", "anchor": "top"}) == (
		"http://www.example.com/show#top"
	)


def test_path_segments_are_encoded(urls: UrlBuilder):
	assert urls.url_for({"action": "what not's"}) == (
		"http://www.example.com/what%20not's"
	)


def test_named_route():
	router = Router([Route("/books/{id}", book, name="book")])
	urls = UrlBuilder(base_url="http://www.example.com", router=router)
	url = {"name": "book", "path_params": {"id": 1}, "page": 2}
	assert urls.url_for(url) == "http://www.example.com/books/1?page=2"


def test_unknown_route():
	urls = UrlBuilder(base_url="http://www.example.com", router=Router([]))
	with pytest.raises(UrlGenerationError, match="missing"):
		urls.url_for({"name": "missing"})


def test_named_route_without_router(urls: UrlBuilder):
	with pytest.raises(UrlGenerationError, match="no router"):
		urls.url_for({"name": "book"})


def test_unsupported_type(urls: UrlBuilder):
	with pytest.raises(UrlGenerationError):
		urls.url_for(42)  # pyright: ignore[reportArgumentType]
	with pytest.raises(ValueError):
		urls.url_for(42)  # pyright: ignore[reportArgumentType]
