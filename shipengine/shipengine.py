"""ShipEngine API-klient.

Varje metod motsvarar en endpoint i ShipEngine API:
- Transportörskonton
- Adressvalidering
- Etiketter (skapa, makulera)
- Fraktpriser
- Spårning
- Sändningar (lista, skapa, hämta, uppdatera, avbryta, taggar)

Flöde per anrop:
  1. Per-anrop-konfiguration läggs ovanpå standardkonfigurationen (merge)
  2. Ett HTTP-anrop via ShipEngineClient
  3. För sändningsendpoints: ev. konvertering till Shipment-objekt
     (om as_object är satt)

Referens: https://shipengine.github.io/shipengine-openapi/
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .config import ShipEngineConfig
from .errors import ShipEngineConversionError
from .http_client import VERSION, ShipEngineClient
from .models.base import to_objects
from .models.dto import Shipment

logger = logging.getLogger(__name__)

ConfigOverride = Union[None, Mapping[str, Any], ShipEngineConfig]


class ShipEngine:
    """Klient för ShipEngine API.

    Konfigurationen kan anges som en API-nyckel (str), en dict med
    inställningar eller en färdig ShipEngineConfig. Alla metoder tar en
    valfri config-override som bara gäller det anropet.
    """

    VERSION = VERSION

    def __init__(self, config: Union[None, str, Mapping[str, Any], ShipEngineConfig] = None):
        if isinstance(config, ShipEngineConfig):
            self.config = config
        elif isinstance(config, str):
            self.config = ShipEngineConfig.from_api_key(config)
        else:
            self.config = ShipEngineConfig.from_options(config)

    def _resolve(self, config: ConfigOverride) -> ShipEngineConfig:
        return self.config.merge(config).validate()

    # ------------------------------------------------------------------
    # Transportörer
    # ------------------------------------------------------------------

    def list_carriers(self, config: ConfigOverride = None) -> dict:
        """Hämtar transportörskonton kopplade till ShipEngine-kontot."""
        return ShipEngineClient.get("carriers", self._resolve(config))

    # ------------------------------------------------------------------
    # Adresser
    # ------------------------------------------------------------------

    def validate_addresses(self, params: list, config: ConfigOverride = None) -> list:
        """Validerar en lista med adresser.

        https://shipengine.github.io/shipengine-openapi/#operation/validate_address
        """
        return ShipEngineClient.post(
            "addresses/validate", self._resolve(config), params
        )

    # ------------------------------------------------------------------
    # Etiketter
    # ------------------------------------------------------------------

    def create_label_from_rate(self, rate_id: str, params: dict,
                               config: ConfigOverride = None) -> dict:
        """Köper en etikett utifrån ett rate_id från /rates."""
        return ShipEngineClient.post(
            f"labels/rates/{rate_id}", self._resolve(config), params
        )

    def create_label_from_shipment_details(self, params: dict,
                                           config: ConfigOverride = None) -> dict:
        return ShipEngineClient.post("labels", self._resolve(config), params)

    def void_label_with_label_id(self, label_id: str,
                                 config: ConfigOverride = None) -> dict:
        """Makulerar en etikett. Svaret innehåller approved + message."""
        return ShipEngineClient.put(
            f"labels/{label_id}/void", self._resolve(config)
        )

    # ------------------------------------------------------------------
    # Fraktpriser och spårning
    # ------------------------------------------------------------------

    def get_rates_with_shipment_details(self, params: dict,
                                        config: ConfigOverride = None) -> dict:
        return ShipEngineClient.post("rates", self._resolve(config), params)

    def track_using_label_id(self, label_id: str,
                             config: ConfigOverride = None) -> dict:
        return ShipEngineClient.get(
            f"labels/{label_id}/track", self._resolve(config)
        )

    def track_using_carrier_code_and_tracking_number(
        self, carrier_code: str, tracking_number: str,
        config: ConfigOverride = None,
    ) -> dict:
        return ShipEngineClient.get(
            "tracking",
            self._resolve(config),
            {"carrier_code": carrier_code, "tracking_number": tracking_number},
        )

    # ------------------------------------------------------------------
    # Sändningar
    # ------------------------------------------------------------------

    def list_shipments(self, params: Optional[dict] = None,
                       config: ConfigOverride = None) -> dict:
        """Listar sändningar (en sida).

        page_size hämtas från konfigurationen om params saknar den.

        Returns:
            Svaret; med as_object är "shipments" en lista av Shipment.
        """
        resolved = self._resolve(config)
        query = {"page_size": resolved.page_size}
        query.update(params or {})

        response = ShipEngineClient.get("shipments", resolved, query)

        if resolved.as_object and response.get("shipments"):
            response["shipments"] = to_objects(response["shipments"], Shipment)
        return response

    def create_shipment(self, params: Optional[dict] = None,
                        config: ConfigOverride = None) -> dict:
        """Skapar en eller flera sändningar.

        Om svaret har has_errors lämnas det orört (även med as_object) så
        att felen per sändning kan läsas.
        """
        resolved = self._resolve(config)
        response = ShipEngineClient.post("shipments", resolved, params)

        if response.get("has_errors"):
            logger.warning("ShipEngine: create_shipment returnerade has_errors")
            return response

        if resolved.as_object:
            response["shipments"] = to_objects(response.get("shipments"), Shipment)
        return response

    def get_shipment_by_external_id(
        self, external_id: str, config: ConfigOverride = None,
    ) -> Union[dict, Shipment]:
        resolved = self._resolve(config)
        response = ShipEngineClient.get(
            f"shipments/external_shipment_id/{external_id}", resolved
        )
        return self._single_shipment(response, resolved)

    def parse_shipment(self, params: Optional[dict] = None,
                       config: ConfigOverride = None) -> dict:
        """Tolkar fri text (t.ex. ett mail) till sändningsdata."""
        return ShipEngineClient.put(
            "shipments/recognize", self._resolve(config), params
        )

    def get_shipment_by_id(self, shipment_id: str,
                           config: ConfigOverride = None) -> Union[dict, Shipment]:
        resolved = self._resolve(config)
        response = ShipEngineClient.get(f"shipments/{shipment_id}", resolved)
        return self._single_shipment(response, resolved)

    def update_shipment_by_id(self, shipment_id: str, params: dict,
                              config: ConfigOverride = None) -> Union[dict, Shipment]:
        resolved = self._resolve(config)
        response = ShipEngineClient.put(
            f"shipments/{shipment_id}", resolved, params
        )
        return self._single_shipment(response, resolved)

    def cancel_shipment(self, shipment_id: str,
                        config: ConfigOverride = None) -> dict:
        return ShipEngineClient.put(
            f"shipments/{shipment_id}/cancel", self._resolve(config)
        )

    def get_shipment_rates(self, shipment_id: str, params: Optional[dict] = None,
                           config: ConfigOverride = None) -> dict:
        return ShipEngineClient.get(
            f"shipments/{shipment_id}/rates", self._resolve(config), params
        )

    def add_tag_to_shipment(self, shipment_id: str, tag_name: str,
                            config: ConfigOverride = None) -> dict:
        return ShipEngineClient.post(
            f"shipments/{shipment_id}/tags/{tag_name}", self._resolve(config)
        )

    def remove_tag_from_shipment(self, shipment_id: str, tag_name: str,
                                 config: ConfigOverride = None) -> dict:
        return ShipEngineClient.delete(
            f"shipments/{shipment_id}/tags/{tag_name}", self._resolve(config)
        )

    @staticmethod
    def _single_shipment(response: Any,
                         config: ShipEngineConfig) -> Union[dict, Shipment]:
        """Konverterar ett enskilt sändningssvar om as_object är satt.

        Svaret kan vara posten själv eller {"shipments": [post]}.
        """
        if not config.as_object:
            return response

        if isinstance(response, Mapping) and "shipments" in response:
            records = response["shipments"]
            if not isinstance(records, list) or len(records) != 1:
                raise ShipEngineConversionError(
                    "Shipment", "förväntade exakt en sändning i svaret"
                )
            return Shipment.from_dict(records[0])
        return Shipment.from_dict(response)
