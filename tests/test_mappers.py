"""Tests for API payload mappers."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from freightbooks.domain.entities import (
    CargoItem,
    CompanyConfig,
    Currency,
    Expense,
    ExpenseStatus,
    Invoice,
    InvoiceStatus,
    PaymentMode,
    PaymentStatus,
    ShippingManifest,
    ShippingStatus,
)
from freightbooks.domain.errors import ValidationError
from freightbooks.sources.mappers import (
    cargo_item_to_domain,
    company_config_to_domain,
    expense_to_domain,
    invoice_to_domain,
    manifest_to_domain,
    payment_method_to_domain,
)


class TestCargoItemMapper:
    """Tests for cargo item mapper."""

    def test_cargo_item_to_domain(self):
        item = cargo_item_to_domain(
            {"quantity": 2, "weight": "5.5", "length": 10, "width": 20, "height": 30,
             "categoryId": 4, "description": "Tyres"}
        )

        assert isinstance(item, CargoItem)
        assert item.quantity == 2
        assert item.real_weight == Decimal("5.5")
        assert item.length == Decimal("10")
        assert item.category_id == "4"
        assert item.description == "Tyres"

    def test_malformed_fields_degrade(self):
        item = cargo_item_to_domain({"quantity": "", "weight": "heavy"})

        assert item.quantity == 1
        assert item.real_weight == Decimal("0")
        assert item.height == Decimal("0")
        assert item.category_id is None
        assert item.description == ""


class TestManifestMapper:
    """Tests for shipping guide mapper."""

    def test_manifest_to_domain(self, snapshot_payload):
        manifest = manifest_to_domain(snapshot_payload["invoices"][0]["guide"])

        assert isinstance(manifest, ShippingManifest)
        assert len(manifest.items) == 1
        assert manifest.payment_mode == PaymentMode.PREPAID
        assert manifest.currency == Currency.FOREIGN
        assert manifest.has_insurance is True
        assert manifest.declared_value == Decimal("1000")
        assert manifest.insurance_percent == Decimal("2")
        assert manifest.has_discount is True
        assert manifest.discount_percent == Decimal("10")
        assert manifest.payment_method_id == "pm-1"

    @pytest.mark.parametrize("payload", [None, {}])
    def test_missing_guide_is_empty_manifest(self, payload):
        assert manifest_to_domain(payload) == ShippingManifest()

    @pytest.mark.parametrize(
        "raw,expected",
        [("flete-destino", PaymentMode.COLLECT), ("FLETE-PAGADO", PaymentMode.PREPAID), ("collect", PaymentMode.COLLECT)],
    )
    def test_payment_modes(self, raw, expected):
        assert manifest_to_domain({"paymentType": raw}).payment_mode == expected

    def test_malformed_merchandise_entries_are_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="freightbooks.sources.mappers"):
            manifest = manifest_to_domain({"merchandise": [None, {"weight": 5}, "box", 3]})

        assert len(manifest.items) == 1
        assert manifest.items[0].real_weight == Decimal("5")
        assert "Skipping malformed merchandise entry" in caplog.text

    def test_non_object_guide_is_empty_manifest(self):
        assert manifest_to_domain(["not", "a", "guide"]) == ShippingManifest()

    def test_unknown_literal_falls_back_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="freightbooks.sources.mappers"):
            manifest = manifest_to_domain({"paymentCurrency": "EUR"})

        assert manifest.currency == Currency.LOCAL
        assert "Unknown currency" in caplog.text

    @pytest.mark.parametrize("raw,expected", [("true", True), ("Sí", True), ("false", False), (0, False), (1, True)])
    def test_boolean_flags(self, raw, expected):
        assert manifest_to_domain({"hasInsurance": raw}).has_insurance is expected


class TestInvoiceMapper:
    """Tests for invoice mapper."""

    def test_invoice_to_domain(self, snapshot_payload):
        invoice = invoice_to_domain(snapshot_payload["invoices"][0])

        assert isinstance(invoice, Invoice)
        assert invoice.id == "inv-1"
        assert invoice.date == date(2024, 3, 1)
        assert invoice.status == InvoiceStatus.ACTIVE
        assert invoice.payment_status == PaymentStatus.PAID
        assert invoice.shipping_status == ShippingStatus.DELIVERED
        assert invoice.total_amount == Decimal("90.228")
        assert invoice.client_name == "ACME"
        assert invoice.invoice_number == "0001"
        assert invoice.control_number == "00-0001"
        assert invoice.client_id_number == "J-111"

    def test_spanish_status_literals(self, snapshot_payload):
        voided = invoice_to_domain(snapshot_payload["invoices"][2])
        in_transit = invoice_to_domain(snapshot_payload["invoices"][1])

        assert voided.status == InvoiceStatus.VOIDED
        assert voided.shipping_status == ShippingStatus.PENDING
        assert in_transit.payment_status == PaymentStatus.PENDING
        assert in_transit.shipping_status == ShippingStatus.IN_TRANSIT

    def test_timestamp_date(self):
        invoice = invoice_to_domain({"id": 5, "date": "2024-03-05T14:00:00.000Z"})

        assert invoice.id == "5"
        assert invoice.date == date(2024, 3, 5)
        assert invoice.guide == ShippingManifest()

    @pytest.mark.parametrize("raw_date", [None, "someday"])
    def test_invalid_date_raises(self, raw_date):
        with pytest.raises(ValidationError, match="invalid date"):
            invoice_to_domain({"id": "inv-9", "date": raw_date})


class TestExpenseMapper:
    """Tests for expense mapper."""

    def test_expense_to_domain(self, snapshot_payload):
        expense = expense_to_domain(snapshot_payload["expenses"][0])

        assert isinstance(expense, Expense)
        assert expense.id == "exp-1"
        assert expense.date == date(2024, 3, 2)
        assert expense.status == ExpenseStatus.PAID
        assert expense.amount == Decimal("116")
        assert expense.taxable_base == Decimal("100")
        assert expense.vat_amount == Decimal("16")
        assert expense.category == "Fuel"
        assert expense.supplier_name == "Gas Station"
        assert expense.supplier_rif == "J-999"
        assert expense.payment_method_id == "pm-2"

    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing_taxable_base_is_none(self, raw):
        expense = expense_to_domain({"id": "e", "date": "2024-03-02", "amount": 40, "taxableBase": raw})
        assert expense.taxable_base is None

    def test_pending_status(self, snapshot_payload):
        expense = expense_to_domain(snapshot_payload["expenses"][1])
        assert expense.status == ExpenseStatus.PENDING
        assert expense.payment_method_id is None


class TestConfigMapper:
    """Tests for company configuration and payment method mappers."""

    def test_company_config_to_domain(self, snapshot_payload):
        config = company_config_to_domain(snapshot_payload["companyInfo"])

        assert isinstance(config, CompanyConfig)
        assert config.cost_per_kg == Decimal("12")
        assert config.bcv_rate == Decimal("36.58")
        assert config.name == "Coop"
        assert config.rif == "J-506936488"

    def test_missing_config(self):
        assert company_config_to_domain(None).cost_per_kg == Decimal("0")

    def test_payment_method_to_domain(self):
        method = payment_method_to_domain({"id": 3, "name": "Zelle"})
        assert method.id == "3"
        assert method.name == "Zelle"
