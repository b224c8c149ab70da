"""HTTP-transport mot ShipEngine API.

Ett anrop = ett HTTP-utbyte. Omförsök (429/5xx) sköts av urllib3:s Retry
på sessionen enligt config.retries; denna modul lägger inte till egna.

Fel:
  - Status utanför 2xx → ShipEngineAPIError (status + otolkad body)
  - Nätverksfel/timeout → requests-undantaget kastas vidare oförändrat
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import ShipEngineConfig
from .errors import ShipEngineAPIError

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

RETRY_STATUS_CODES = [429, 502, 503, 504]
# Etikettköp och nya sändningar
POST_RETRY_STATUS_CODES = [429]
RETRY_METHODS = ["GET", "POST", "PUT", "DELETE"]

# Metoder där params skickas som JSON-body i stället för query string
BODY_METHODS = {"POST", "PUT"}


class ShipEngineClient:
    """Statslös HTTP-klient; all inställning kommer från ShipEngineConfig."""

    @classmethod
    def get(cls, path: str, config: ShipEngineConfig,
            params: Optional[dict] = None) -> Any:
        return cls.request("GET", path, config, params)

    @classmethod
    def post(cls, path: str, config: ShipEngineConfig,
             params: Optional[dict] = None) -> Any:
        return cls.request("POST", path, config, params)

    @classmethod
    def put(cls, path: str, config: ShipEngineConfig,
            params: Optional[dict] = None) -> Any:
        return cls.request("PUT", path, config, params)

    @classmethod
    def delete(cls, path: str, config: ShipEngineConfig,
               params: Optional[dict] = None) -> Any:
        return cls.request("DELETE", path, config, params)

    @classmethod
    def request(cls, method: str, path: str, config: ShipEngineConfig,
                params: Optional[dict] = None) -> Any:
        """Utför ett anrop och returnerar det tolkade JSON-svaret.

        Args:
            method: HTTP-metod.
            path: Sökväg relativt base_url, t.ex. "labels/se-123/void".
            config: Upplöst konfiguration för anropet.
            params: Query-parametrar (GET/DELETE) eller JSON-body (POST/PUT).

        Returns:
            Svaret som dict/list, {} för tomt svar.
        """
        url = f"{config.base_url.rstrip('/')}/{path}"
        kwargs: dict = {"headers": cls._headers(config), "timeout": config.timeout}
        if params is not None:
            if method in BODY_METHODS:
                kwargs["json"] = params
            else:
                kwargs["params"] = params

        logger.info(f"ShipEngine: {method} {path}")
        if params is not None:
            logger.debug(f"ShipEngine: Payload: {params}")

        if config.client is not None:
            response = config.client.request(method, url, **kwargs)
        else:
            with cls._create_session(config, method) as session:
                response = session.request(method, url, **kwargs)

        return cls._handle_response(response, method, url)

    @staticmethod
    def _headers(config: ShipEngineConfig) -> dict:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "API-Key": config.api_key,
            "User-Agent": f"shipengine-python/{VERSION}",
        }

    @staticmethod
    def _create_session(config: ShipEngineConfig,
                        method: str = "GET") -> requests.Session:
        """Session med omförsök enligt config.retries.

        POST: inga omförsök vid läsfel, statusomförsök endast vid 429.
        """
        is_post = method == "POST"
        session = requests.Session()
        retries = Retry(
            total=config.retries,
            read=False if is_post else None,
            backoff_factor=1,
            status_forcelist=POST_RETRY_STATUS_CODES if is_post else RETRY_STATUS_CODES,
            allowed_methods=RETRY_METHODS,
            respect_retry_after_header=True,
            raise_on_status=False,
        )
        session.mount("https://", HTTPAdapter(max_retries=retries))
        session.mount("http://", HTTPAdapter(max_retries=retries))
        return session

    @staticmethod
    def _handle_response(response: requests.Response, method: str,
                         url: str) -> Any:
        if not 200 <= response.status_code < 300:
            body = _parse_body(response)
            logger.error(
                f"ShipEngine: {method} {url} misslyckades "
                f"({response.status_code}): {body}"
            )
            raise ShipEngineAPIError(
                response.status_code, body, method, url, response=response
            )

        if response.status_code == 204 or not response.content:
            return {}
        return response.json()


def _parse_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
