"""Datamodeller för ShipEngines svar.

Fältnamnen följer API:ts JSON (snake_case) så att from_dict/to_dict
kan mappa posterna rakt av.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .base import Model


@dataclass
class Address(Model):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    company_name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    city_locality: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None
    address_residential_indicator: Optional[str] = None
    geolocation: Optional[list[dict]] = None
    instructions: Optional[str] = None


@dataclass
class Weight(Model):
    value: float
    unit: str


@dataclass
class Dimensions(Model):
    unit: str
    length: float
    width: float
    height: float


@dataclass
class Package(Model):
    package_id: Optional[int] = None
    package_code: Optional[str] = None
    package_name: Optional[str] = None
    shipment_package_id: Optional[str] = None
    weight: Optional[Weight] = None
    dimensions: Optional[Dimensions] = None
    insured_value: Optional[dict] = None
    tracking_number: Optional[str] = None
    label_messages: Optional[dict] = None
    external_package_id: Optional[str] = None
    content_description: Optional[str] = None
    sequence: Optional[int] = None
    products: Optional[list[dict]] = None


@dataclass
class Shipment(Model):
    """En sändning hos ShipEngine.

    Endast shipment_id är obligatoriskt; övriga fält är valfria eftersom
    API:t utelämnar dem beroende på endpoint.
    """
    shipment_id: str
    carrier_id: Optional[str] = None
    service_code: Optional[str] = None
    requested_shipment_service: Optional[str] = None
    shipping_rule_id: Optional[str] = None
    external_order_id: Optional[str] = None
    external_shipment_id: Optional[str] = None
    shipment_number: Optional[str] = None
    ship_date: Optional[str] = None
    created_at: Optional[str] = None
    modified_at: Optional[str] = None
    shipment_status: Optional[str] = None
    status: Optional[str] = None
    ship_to: Optional[Address] = None
    ship_from: Optional[Address] = None
    return_to: Optional[Address] = None
    warehouse_id: Optional[str] = None
    is_return: Optional[bool] = None
    confirmation: Optional[str] = None
    customs: Optional[dict] = None
    advanced_options: Optional[dict] = None
    origin_type: Optional[str] = None
    insurance_provider: Optional[str] = None
    order_source_code: Optional[str] = None
    comparison_rate_type: Optional[str] = None
    ship_from_service_point_id: Optional[str] = None
    ship_to_service_point_id: Optional[str] = None
    is_gift: Optional[bool] = None
    notes_for_gift: Optional[str] = None
    notes_from_buyer: Optional[str] = None
    amount_paid: Optional[dict] = None
    shipping_paid: Optional[dict] = None
    tax_paid: Optional[dict] = None
    zone: Optional[int] = None
    display_scheme: Optional[str] = None
    items: list[dict] = field(default_factory=list)
    tax_identifiers: Optional[list[dict]] = None
    tags: list[dict] = field(default_factory=list)
    packages: list[Package] = field(default_factory=list)
    total_weight: Optional[Weight] = None
    errors: Optional[list] = None
    address_validation: Optional[dict] = None


@dataclass
class Label(Model):
    label_id: str
    status: Optional[str] = None
    shipment_id: Optional[str] = None
    external_shipment_id: Optional[str] = None
    ship_date: Optional[str] = None
    created_at: Optional[str] = None
    shipment_cost: Optional[dict] = None
    insurance_cost: Optional[dict] = None
    requested_comparison_amount: Optional[dict] = None
    tracking_number: Optional[str] = None
    is_return_label: Optional[bool] = None
    rma_number: Optional[str] = None
    is_international: Optional[bool] = None
    batch_id: Optional[str] = None
    carrier_id: Optional[str] = None
    carrier_code: Optional[str] = None
    service_code: Optional[str] = None
    package_code: Optional[str] = None
    voided: Optional[bool] = None
    voided_at: Optional[str] = None
    label_format: Optional[str] = None
    display_scheme: Optional[str] = None
    label_layout: Optional[str] = None
    trackable: Optional[bool] = None
    label_image_id: Optional[str] = None
    tracking_status: Optional[str] = None
    label_download: Optional[dict] = None
    form_download: Optional[dict] = None
    paperless_download: Optional[dict] = None
    insurance_claim: Optional[dict] = None
    charge_event: Optional[str] = None
    packages: list[Package] = field(default_factory=list)
    alternative_identifiers: Optional[list[dict]] = None


@dataclass
class Rate(Model):
    rate_id: str
    rate_type: Optional[str] = None
    carrier_id: Optional[str] = None
    carrier_code: Optional[str] = None
    carrier_nickname: Optional[str] = None
    carrier_friendly_name: Optional[str] = None
    shipping_amount: Optional[dict] = None
    insurance_amount: Optional[dict] = None
    confirmation_amount: Optional[dict] = None
    other_amount: Optional[dict] = None
    tax_amount: Optional[dict] = None
    requested_comparison_amount: Optional[dict] = None
    rate_details: Optional[list[dict]] = None
    zone: Optional[int] = None
    package_type: Optional[str] = None
    delivery_days: Optional[int] = None
    guaranteed_service: Optional[bool] = None
    estimated_delivery_date: Optional[str] = None
    carrier_delivery_days: Optional[str] = None
    ship_date: Optional[str] = None
    negotiated_rate: Optional[bool] = None
    service_type: Optional[str] = None
    service_code: Optional[str] = None
    trackable: Optional[bool] = None
    validation_status: Optional[str] = None
    warning_messages: list[str] = field(default_factory=list)
    error_messages: list[str] = field(default_factory=list)


@dataclass
class TrackingEvent(Model):
    occurred_at: Optional[str] = None
    carrier_occurred_at: Optional[str] = None
    description: Optional[str] = None
    city_locality: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None
    company_name: Optional[str] = None
    signer: Optional[str] = None
    event_code: Optional[str] = None
    carrier_detail_code: Optional[str] = None
    carrier_status_code: Optional[str] = None
    carrier_status_description: Optional[str] = None
    status_code: Optional[str] = None
    status_detail_code: Optional[str] = None
    status_description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class TrackingInfo(Model):
    tracking_number: Optional[str] = None
    tracking_url: Optional[str] = None
    status_code: Optional[str] = None
    status_detail_code: Optional[str] = None
    status_description: Optional[str] = None
    status_detail_description: Optional[str] = None
    carrier_code: Optional[str] = None
    carrier_id: Optional[int] = None
    carrier_detail_code: Optional[str] = None
    carrier_status_code: Optional[str] = None
    carrier_status_description: Optional[str] = None
    ship_date: Optional[str] = None
    estimated_delivery_date: Optional[str] = None
    actual_delivery_date: Optional[str] = None
    exception_description: Optional[str] = None
    events: list[TrackingEvent] = field(default_factory=list)


@dataclass
class CarrierAccount(Model):
    carrier_id: str
    carrier_code: Optional[str] = None
    account_number: Optional[str] = None
    requires_funded_amount: Optional[bool] = None
    balance: Optional[float] = None
    nickname: Optional[str] = None
    friendly_name: Optional[str] = None
    primary: Optional[bool] = None
    disabled_by_billing_plan: Optional[bool] = None
    funding_source_id: Optional[str] = None
    has_multi_package_supporting_services: Optional[bool] = None
    allows_returns: Optional[bool] = None
    supports_label_messages: Optional[bool] = None
    supports_user_managed_rates: Optional[bool] = None
    services: list[dict] = field(default_factory=list)
    packages: list[dict] = field(default_factory=list)
    options: list[dict] = field(default_factory=list)


@dataclass
class AddressValidationResult(Model):
    status: str
    original_address: Optional[Address] = None
    matched_address: Optional[Address] = None
    messages: list[dict] = field(default_factory=list)
