"""Undantag för ShipEngine-klienten.

Transportfel (anslutning, timeout, TLS) kastas som requests-undantag
och wrappas aldrig här.
"""

from __future__ import annotations

from typing import Any, Optional

import requests


class ShipEngineError(Exception):
    """Basklass för alla fel som klienten själv kastar."""


class ShipEngineConfigError(ShipEngineError):
    """Ogiltig eller ofullständig konfiguration (t.ex. saknad API-nyckel)."""


class ShipEngineAPIError(ShipEngineError, requests.HTTPError):
    """API:t svarade med en statuskod utanför 2xx.

    Svarskroppen lämnas otolkad i `body` (dict om den var JSON, annars text).
    """

    def __init__(
        self,
        status_code: int,
        body: Any,
        method: str = "",
        url: str = "",
        response: Optional[requests.Response] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        self.request_id = body.get("request_id") if isinstance(body, dict) else None
        super().__init__(
            f"ShipEngine svarade {status_code} på {method} {url}",
            response=response,
        )


class ShipEngineConversionError(ShipEngineError, ValueError):
    """Svaret har inte den form som DTO:n förväntar sig."""

    def __init__(self, model: str, message: str, field: str = ""):
        self.model = model
        self.field = field
        where = f"{model}.{field}" if field else model
        super().__init__(f"{where}: {message}")
