"""Environment-driven defaults for the helpers."""

import os

ENV_BASE_URL = "PULSE_PROTOTYPE_BASE_URL"
ENV_CDATA = "PULSE_PROTOTYPE_CDATA"

DEFAULT_BASE_URL = "http://www.example.com"


def base_url() -> str:
	return os.environ.get(ENV_BASE_URL, DEFAULT_BASE_URL).rstrip("/")


def cdata_enabled() -> bool:
	return os.environ.get(ENV_CDATA, "1").lower() not in ("0", "false", "no", "off")
