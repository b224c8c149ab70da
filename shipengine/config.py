"""Konfiguration för ShipEngine-klienten.

En långlivad ShipEngineConfig skapas när klienten konstrueras. Varje
metodanrop kan ge en partiell override (dict) eller en hel
ShipEngineConfig; merge() returnerar då ett nytt värde och ändrar aldrig
standardkonfigurationen.

Okända nycklar ignoreras (med en varning i loggen) både vid konstruktion
och vid merge, så att äldre klientversioner tål nya inställningar.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, fields, replace
from datetime import timedelta
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import requests
import yaml

from .errors import ShipEngineConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.shipengine.com/v1"
DEFAULT_PAGE_SIZE = 50
DEFAULT_RETRIES = 1
DEFAULT_TIMEOUT_SECONDS = 60.0

# camelCase-namn som övriga ShipEngine-SDK:er använder
KEY_ALIASES = {
    "apiKey": "api_key",
    "baseUrl": "base_url",
    "pageSize": "page_size",
    "asObject": "as_object",
    "timeout_seconds": "timeout",
    "retry_attempts": "retries",
}


@dataclass(frozen=True)
class ShipEngineConfig:
    """Effektiva inställningar för ett anrop mot ShipEngine.

    Attribut:
        api_key: ShipEngine API-nyckel (sandbox-nycklar börjar med "TEST_").
        base_url: API:ts bas-URL.
        page_size: Antal poster per sida vid listningar.
        retries: Antal omförsök som transporten gör (429/5xx).
        timeout: Timeout i sekunder per anrop.
        client: Injicerad requests.Session, annars skapas en per anrop.
        as_object: True = sändningar returneras som Shipment-objekt.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    retries: int = DEFAULT_RETRIES
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    client: Optional[requests.Session] = None
    as_object: bool = False

    @classmethod
    def from_api_key(cls, api_key: str) -> "ShipEngineConfig":
        return cls(api_key=api_key)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "ShipEngineConfig":
        """Skapar konfiguration från en dict; saknade fält får standardvärden."""
        return cls().merge(options)

    def merge(
        self, override: Union[None, Mapping[str, Any], "ShipEngineConfig"] = None
    ) -> "ShipEngineConfig":
        """Lägger override ovanpå denna konfiguration och returnerar en ny.

        Args:
            override: None (ger en likadan konfiguration), en partiell dict
                      eller en komplett ShipEngineConfig som ersätter allt.
        """
        if override is None:
            return replace(self)
        if isinstance(override, ShipEngineConfig):
            return replace(override)
        return replace(self, **_normalize_options(override))

    def validate(self) -> "ShipEngineConfig":
        """Kontrollerar att konfigurationen går att använda vid ett anrop."""
        if not self.api_key:
            raise ShipEngineConfigError("API-nyckel saknas (api_key)")
        if not self.base_url:
            raise ShipEngineConfigError("base_url får inte vara tom")
        if self.page_size < 1:
            raise ShipEngineConfigError(
                f"page_size måste vara minst 1, fick {self.page_size}"
            )
        if self.retries < 0:
            raise ShipEngineConfigError(
                f"retries får inte vara negativ, fick {self.retries}"
            )
        if self.timeout <= 0:
            raise ShipEngineConfigError(
                f"timeout måste vara större än 0, fick {self.timeout}"
            )
        return self

    def __repr__(self) -> str:
        masked = f"{self.api_key[:5]}..." if self.api_key else ""
        return (
            f"ShipEngineConfig(api_key={masked!r}, base_url={self.base_url!r}, "
            f"page_size={self.page_size}, retries={self.retries}, "
            f"timeout={self.timeout}, client={self.client!r}, "
            f"as_object={self.as_object})"
        )


_FIELD_NAMES = {f.name for f in fields(ShipEngineConfig)}


def _normalize_options(options: Mapping[str, Any]) -> dict:
    """Översätter alias, konverterar timedelta och filtrerar okända nycklar."""
    normalized = {}
    for key, value in options.items():
        name = KEY_ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            logger.warning(f"Okänd konfigurationsnyckel ignoreras: {key}")
            continue
        if name == "timeout" and isinstance(value, timedelta):
            value = value.total_seconds()
        normalized[name] = value
    return normalized


def load_config(path: Union[str, Path]) -> dict:
    """Laddar YAML-konfiguration med miljövariabelersättning.

    ${ENV_VAR} ersätts med miljövariabelns värde; okända variabler lämnas
    orörda.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()

    def replace_env(match):
        var_name = match.group(1)
        return os.environ.get(var_name, match.group(0))

    resolved = re.sub(r"\$\{(\w+)\}", replace_env, raw)
    return yaml.safe_load(resolved) or {}


def config_from_file(path: Union[str, Path]) -> ShipEngineConfig:
    """Skapar ShipEngineConfig från `shipengine:`-sektionen i en YAML-fil."""
    data = load_config(path)
    section = data.get("shipengine") if isinstance(data, dict) else None
    if not isinstance(section, dict):
        raise ShipEngineConfigError(f"Sektionen 'shipengine' saknas i {path}")
    return ShipEngineConfig.from_options(section)
