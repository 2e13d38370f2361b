import pytest
from pulse_prototype.context import PrototypeContext
from pulse_prototype.urls import UrlBuilder


@pytest.fixture(autouse=True)
def _prototype_context():  # pyright: ignore[reportUnusedFunction]
	ctx = PrototypeContext(urls=UrlBuilder(base_url="http://www.example.com"), cdata=True)
	with ctx:
		yield ctx


def script(js: str) -> str:
	return f'<script type="text/javascript">\n//<![CDATA[\n{js}\n//]]>\n</script>'
