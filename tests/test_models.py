"""Tester för DTO-konvertering från råa JSON-poster."""

import pytest

from shipengine.errors import ShipEngineConversionError
from shipengine.models.base import to_objects
from shipengine.models.dto import (
    Address,
    AddressValidationResult,
    CarrierAccount,
    Label,
    Package,
    Rate,
    Shipment,
    TrackingInfo,
    Weight,
)


@pytest.fixture
def shipment_record():
    return {
        "shipment_id": "se-28529731",
        "carrier_id": "se-28529731",
        "service_code": "usps_first_class_mail",
        "external_shipment_id": "ext-1",
        "ship_date": "2026-10-18T00:00:00Z",
        "shipment_status": "pending",
        "ship_to": {
            "name": "Amanda Miller",
            "address_line1": "525 S Winchester Blvd",
            "city_locality": "San Jose",
            "state_province": "CA",
            "postal_code": "95128",
            "country_code": "US",
            "address_residential_indicator": "yes",
        },
        "packages": [
            {
                "package_code": "package",
                "weight": {"value": 17, "unit": "pound"},
                "dimensions": {"unit": "inch", "length": 36, "width": 12, "height": 24},
            }
        ],
        "total_weight": {"value": 17.0, "unit": "pound"},
        "tags": [{"name": "rush"}],
        "is_return": False,
    }


class TestShipmentFromDict:

    def test_nested_fields(self, shipment_record):
        shipment = Shipment.from_dict(shipment_record)

        assert shipment.shipment_id == "se-28529731"
        assert shipment.shipment_status == "pending"
        assert isinstance(shipment.ship_to, Address)
        assert shipment.ship_to.city_locality == "San Jose"
        assert shipment.ship_from is None
        assert isinstance(shipment.packages[0], Package)
        assert shipment.packages[0].weight == Weight(value=17.0, unit="pound")
        assert shipment.packages[0].dimensions.height == 24
        assert shipment.tags == [{"name": "rush"}]
        assert shipment.is_return is False

    def test_minimal_record(self):
        shipment = Shipment.from_dict({"shipment_id": "se-1", "status": "pending"})
        assert shipment.shipment_id == "se-1"
        assert shipment.status == "pending"
        assert shipment.packages == []

    def test_to_dict_gives_back_record_fields(self, shipment_record):
        shipment = Shipment.from_dict(shipment_record)
        data = shipment.to_dict()

        assert data["shipment_id"] == shipment_record["shipment_id"]
        assert data["tags"] == shipment_record["tags"]
        assert data["ship_to"]["postal_code"] == "95128"
        assert data["packages"][0]["weight"] == {"value": 17.0, "unit": "pound"}
        assert Shipment.from_dict(data) == shipment


class TestFullShipmentRecord:
    """Komplett post i samma form som GET /v1/shipments/{id} returnerar."""

    def test_documented_record(self):
        address = {
            "name": "John Doe",
            "phone": "+1 204-253-9411 ext. 123",
            "email": None,
            "company_name": "The Home Depot",
            "address_line1": "1999 Bishop Grandin Blvd.",
            "address_line2": "Unit 408",
            "address_line3": None,
            "city_locality": "Winnipeg",
            "state_province": "Manitoba",
            "postal_code": "78756-3717",
            "country_code": "CA",
            "address_residential_indicator": "no",
        }
        record = {
            "shipment_id": "se-28529731",
            "carrier_id": "se-28529731",
            "service_code": "usps_first_class_mail",
            "shipping_rule_id": None,
            "external_order_id": None,
            "items": [],
            "tax_identifiers": None,
            "external_shipment_id": None,
            "shipment_number": None,
            "ship_date": "2018-09-23T00:00:00.000Z",
            "created_at": "2018-09-23T15:00:00.000Z",
            "modified_at": "2018-09-23T15:00:00.000Z",
            "shipment_status": "pending",
            "ship_to": address,
            "ship_from": address,
            "warehouse_id": None,
            "return_to": address,
            "is_return": False,
            "confirmation": "none",
            "customs": None,
            "advanced_options": {
                "bill_to_account": None,
                "contains_alcohol": False,
                "non_machinable": False,
                "saturday_delivery": False,
            },
            "origin_type": "pickup",
            "insurance_provider": "none",
            "tags": [],
            "order_source_code": "amazon_ca",
            "is_gift": False,
            "notes_for_gift": None,
            "notes_from_buyer": None,
            "amount_paid": {"currency": "usd", "amount": 12.5},
            "shipping_paid": {"currency": "usd", "amount": 4.0},
            "tax_paid": {"currency": "usd", "amount": 1.1},
            "zone": 6,
            "display_scheme": "label",
            "comparison_rate_type": None,
            "packages": [
                {
                    "package_id": 1,
                    "package_code": "package",
                    "weight": {"value": 6, "unit": "ounce"},
                    "dimensions": {"unit": "inch", "length": 12, "width": 8, "height": 4},
                    "insured_value": {"currency": "usd", "amount": 0},
                    "label_messages": {"reference1": None, "reference2": None, "reference3": None},
                    "external_package_id": None,
                    "content_description": None,
                    "products": [],
                }
            ],
            "total_weight": {"value": 6, "unit": "ounce"},
        }

        shipment = Shipment.from_dict(record)

        assert shipment.ship_from.company_name == "The Home Depot"
        assert shipment.is_gift is False
        assert shipment.amount_paid == {"currency": "usd", "amount": 12.5}
        assert shipment.zone == 6
        assert shipment.display_scheme == "label"
        assert shipment.packages[0].dimensions.length == 12.0
        assert shipment.total_weight == Weight(value=6.0, unit="ounce")


class TestStrictConversion:

    def test_not_a_mapping(self):
        with pytest.raises(ShipEngineConversionError, match="förväntade ett objekt"):
            Shipment.from_dict(["se-1"])

    def test_unknown_field_rejected(self):
        with pytest.raises(ShipEngineConversionError, match="okända fält: colour"):
            Shipment.from_dict({"shipment_id": "se-1", "colour": "red"})

    def test_missing_required_field(self):
        with pytest.raises(ShipEngineConversionError) as exc_info:
            Shipment.from_dict({"status": "pending"})
        assert exc_info.value.model == "Shipment"
        assert exc_info.value.field == "shipment_id"

    def test_wrong_type(self):
        with pytest.raises(ShipEngineConversionError, match="sträng"):
            Shipment.from_dict({"shipment_id": 42})

    def test_bool_is_not_a_number(self):
        with pytest.raises(ShipEngineConversionError, match="tal"):
            Weight.from_dict({"value": True, "unit": "pound"})

    def test_weight_without_value(self):
        with pytest.raises(ShipEngineConversionError) as exc_info:
            Shipment.from_dict({"shipment_id": "se-1", "total_weight": {"unit": "ounce"}})
        assert exc_info.value.model == "Weight"
        assert exc_info.value.field == "value"

    def test_empty_dimensions(self):
        with pytest.raises(ShipEngineConversionError) as exc_info:
            Shipment.from_dict({"shipment_id": "se-1", "packages": [{"dimensions": {}}]})
        assert exc_info.value.model == "Dimensions"

    def test_null_for_required_list(self):
        with pytest.raises(ShipEngineConversionError, match="null"):
            Shipment.from_dict({"shipment_id": "se-1", "packages": None})

    def test_error_in_nested_model(self):
        with pytest.raises(ShipEngineConversionError) as exc_info:
            Shipment.from_dict({
                "shipment_id": "se-1",
                "ship_to": {"postal_code": 95128},
            })
        assert exc_info.value.model == "Address"
        assert exc_info.value.field == "postal_code"

    def test_conversion_error_is_value_error(self):
        with pytest.raises(ValueError):
            Shipment.from_dict(None)


class TestToObjects:

    def test_order_preserved(self):
        records = [{"shipment_id": f"se-{i}"} for i in range(5)]
        shipments = to_objects(records, Shipment)
        assert [s.shipment_id for s in shipments] == [r["shipment_id"] for r in records]

    def test_empty_list(self):
        assert to_objects([], Shipment) == []

    def test_not_a_list(self):
        with pytest.raises(ShipEngineConversionError, match="lista"):
            to_objects({"shipment_id": "se-1"}, Shipment)


class TestSiblingModels:

    def test_label(self):
        label = Label.from_dict({
            "label_id": "se-lbl-1",
            "status": "completed",
            "tracking_number": "9400111899223197428490",
            "shipment_cost": {"currency": "usd", "amount": 3.2},
            "voided": False,
            "label_download": {"pdf": "https://api.shipengine.com/v1/downloads/1.pdf"},
        })
        assert label.label_id == "se-lbl-1"
        assert label.shipment_cost["amount"] == 3.2
        assert label.voided is False

    def test_rate(self):
        rate = Rate.from_dict({
            "rate_id": "se-rate-1",
            "carrier_code": "stamps_com",
            "delivery_days": 3,
            "zone": 6,
            "warning_messages": ["Adressen kunde inte verifieras"],
        })
        assert rate.delivery_days == 3
        assert rate.warning_messages == ["Adressen kunde inte verifieras"]
        assert rate.error_messages == []

    def test_tracking_info_events(self):
        info = TrackingInfo.from_dict({
            "tracking_number": "1Z932R800392060079",
            "status_code": "DE",
            "events": [
                {"occurred_at": "2026-10-16T08:00:00Z", "description": "Picked up",
                 "latitude": 59, "longitude": 18.06},
                {"occurred_at": "2026-10-17T14:12:00Z", "description": "Delivered"},
            ],
        })
        assert [e.description for e in info.events] == ["Picked up", "Delivered"]
        assert info.events[0].latitude == 59.0

    def test_carrier_account(self):
        account = CarrierAccount.from_dict({
            "carrier_id": "se-123890",
            "carrier_code": "stamps_com",
            "balance": 3799.52,
            "primary": True,
            "services": [{"service_code": "usps_priority_mail"}],
        })
        assert account.carrier_id == "se-123890"
        assert account.services[0]["service_code"] == "usps_priority_mail"

    def test_address_validation_result(self):
        result = AddressValidationResult.from_dict({
            "status": "verified",
            "original_address": {"address_line1": "525 s winchester blvd"},
            "matched_address": {"address_line1": "525 S WINCHESTER BLVD"},
            "messages": [],
        })
        assert result.matched_address.address_line1 == "525 S WINCHESTER BLVD"
