from __future__ import annotations

from typing import Mapping, Optional

import requests
from loguru import logger

from .base import BaseTransport, TransportResponse
from .errors import TransportError


class RequestsTransport(BaseTransport):
    """Synchronous form POST over a pooled ``requests.Session``."""

    def __init__(self, *, proxy: str | None = None, session: Optional[requests.Session] = None) -> None:
        self.proxy = proxy
        self._session = session

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            if self.proxy:
                self._session.proxies.update({"http": self.proxy, "https": self.proxy})
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def post(self, url: str, fields: Mapping[str, str], timeout: float) -> TransportResponse:
        session = self._get_session()
        try:
            resp = session.post(
                url,
                data=dict(fields),
                timeout=timeout,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except requests.RequestException as exc:
            logger.debug("POST {} failed: {}", url, exc)
            raise TransportError(str(exc)) from exc
        return TransportResponse(status_code=resp.status_code, body=resp.text)
