# lumivahti/api/http.py
import logging
from typing import Any

import requests

from lumivahti.config import HTTP_TIMEOUT_S, USER_AGENT
from lumivahti.utils import report_error

logger = logging.getLogger("lumivahti")

_HEADERS = {"User-Agent": USER_AGENT}


def _get(url: str, params: dict[str, Any] | None, timeout: float) -> requests.Response:
    resp = requests.get(url, params=params, timeout=timeout, headers=_HEADERS)
    resp.raise_for_status()
    return resp


def http_get_json(
    url: str, params: dict[str, Any] | None = None, timeout: float = HTTP_TIMEOUT_S
) -> Any:
    """GET ja JSON-purku. Ei uudelleenyrityksiä: virhe nousee kutsujalle."""
    try:
        return _get(url, params, timeout).json()
    except Exception as e:
        report_error(f"http_get_json: {url}", e)
        raise


def http_get_text(
    url: str, params: dict[str, Any] | None = None, timeout: float = HTTP_TIMEOUT_S
) -> str:
    """GET ja vastaus tekstinä (FMI:n WFS-XML)."""
    try:
        return _get(url, params, timeout).text
    except Exception as e:
        report_error(f"http_get_text: {url}", e)
        raise
