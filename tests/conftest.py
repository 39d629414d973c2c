"""Shared pytest fixtures for freightbooks tests."""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path
import pytest

from freightbooks.domain.entities import (
    CargoItem,
    CompanyConfig,
    Currency,
    Expense,
    ExpenseStatus,
    Invoice,
    InvoiceStatus,
    PaymentMethod,
    PaymentMode,
    PaymentStatus,
    ShippingManifest,
)
from freightbooks.domain.reports import AccountingService
from freightbooks.sources.factories import create_json_source


@pytest.fixture
def config():
    """Company configuration charging 12 per kg."""
    return CompanyConfig(cost_per_kg=Decimal("12"), bcv_rate=Decimal("36.58"), name="Coop", rif="J-1")


@pytest.fixture
def payment_methods():
    return [
        PaymentMethod(id="pm-1", name="Banesco Checking"),
        PaymentMethod(id="pm-2", name="Petty Cash"),
    ]


@pytest.fixture
def make_item():
    """Factory for cargo items; dimensions default to zero."""

    def _make(weight="0", length="0", width="0", height="0", quantity=1, description="Box"):
        return CargoItem(
            quantity=quantity,
            real_weight=Decimal(weight),
            length=Decimal(length),
            width=Decimal(width),
            height=Decimal(height),
            description=description,
        )

    return _make


@pytest.fixture
def sample_manifest(make_item):
    """Manifest of the reference shipment: 5 kg box, insured, discounted, paid in USD."""
    return ShippingManifest(
        items=(make_item(weight="5", length="10", width="10", height="10"),),
        payment_mode=PaymentMode.PREPAID,
        currency=Currency.FOREIGN,
        has_insurance=True,
        declared_value=Decimal("1000"),
        insurance_percent=Decimal("2"),
        has_discount=True,
        discount_percent=Decimal("10"),
        payment_method_id="pm-1",
    )


@pytest.fixture
def make_invoice(make_item):
    """Factory for invoices with a single 10 kg item in local currency."""

    def _make(
        invoice_id="1",
        day=date(2024, 3, 10),
        status=InvoiceStatus.ACTIVE,
        payment_status=PaymentStatus.PAID,
        payment_mode=PaymentMode.PREPAID,
        client_name="ACME",
        guide=None,
        total_amount=None,
    ):
        if guide is None:
            guide = ShippingManifest(
                items=(make_item(weight="10"),),
                payment_mode=payment_mode,
                payment_method_id="pm-1",
            )
        return Invoice(
            id=invoice_id,
            date=day,
            status=status,
            payment_status=payment_status,
            total_amount=Decimal("137.2") if total_amount is None else total_amount,
            client_name=client_name,
            guide=guide,
            invoice_number=f"F-{invoice_id}",
            control_number=f"C-{invoice_id}",
            client_id_number="V-123",
        )

    return _make


@pytest.fixture
def make_expense():
    """Factory for expenses: base 100 plus 16 VAT."""

    def _make(
        expense_id="1",
        day=date(2024, 3, 12),
        status=ExpenseStatus.PAID,
        amount="116",
        taxable_base="100",
        vat_amount="16",
        category="Fuel",
        supplier_name="Gas Station",
        supplier_rif="J-999",
        invoice_number="A-77",
        payment_method_id="pm-2",
    ):
        return Expense(
            id=expense_id,
            date=day,
            status=status,
            amount=Decimal(amount),
            category=category,
            supplier_name=supplier_name,
            taxable_base=None if taxable_base is None else Decimal(taxable_base),
            vat_amount=Decimal(vat_amount),
            supplier_rif=supplier_rif,
            invoice_number=invoice_number,
            control_number="00-1",
            description=f"{category} purchase",
            payment_method_id=payment_method_id,
        )

    return _make


@pytest.fixture
def snapshot_payload():
    """Raw API payloads as served by the back-office backend."""
    return {
        "companyInfo": {"name": "Coop", "rif": "J-506936488", "costPerKg": 12, "bcvRate": 36.58},
        "paymentMethods": [
            {"id": "pm-1", "name": "Banesco Checking"},
            {"id": "pm-2", "name": "Petty Cash"},
        ],
        "invoices": [
            {
                "id": "inv-1",
                "invoiceNumber": "0001",
                "controlNumber": "00-0001",
                "date": "2024-03-01",
                "clientName": "ACME",
                "clientIdNumber": "J-111",
                "totalAmount": 90.228,
                "status": "Activa",
                "paymentStatus": "Pagada",
                "shippingStatus": "Entregada",
                "guide": {
                    "merchandise": [
                        {"quantity": 1, "weight": 5, "length": 10, "width": 10, "height": 10,
                         "description": "Box", "categoryId": "cat-1"}
                    ],
                    "paymentMethodId": "pm-1",
                    "hasInsurance": True,
                    "declaredValue": 1000,
                    "insurancePercentage": 2,
                    "paymentType": "flete-pagado",
                    "paymentCurrency": "USD",
                    "hasDiscount": True,
                    "discountPercentage": 10,
                },
            },
            {
                "id": "inv-2",
                "invoiceNumber": "0002",
                "controlNumber": "00-0002",
                "date": "2024-03-05",
                "clientName": "Globex",
                "clientIdNumber": "J-222",
                "totalAmount": 137.2,
                "status": "Activa",
                "paymentStatus": "Pendiente",
                "shippingStatus": "En Tránsito",
                "guide": {
                    "merchandise": [{"quantity": 2, "weight": 5, "length": 0, "width": 0, "height": 0}],
                    "paymentMethodId": "pm-1",
                    "paymentType": "flete-destino",
                    "paymentCurrency": "VES",
                },
            },
            {
                "id": "inv-3",
                "invoiceNumber": "0003",
                "controlNumber": "00-0003",
                "date": "2024-03-07",
                "clientName": "Initech",
                "clientIdNumber": "J-333",
                "totalAmount": 50,
                "status": "Anulada",
                "paymentStatus": "Pendiente",
                "shippingStatus": "Pendiente para Despacho",
                "guide": {
                    "merchandise": [{"quantity": 1, "weight": 3}],
                    "paymentType": "flete-pagado",
                    "paymentCurrency": "VES",
                },
            },
        ],
        "expenses": [
            {
                "id": "exp-1",
                "date": "2024-03-02",
                "description": "Diesel",
                "category": "Fuel",
                "amount": 116,
                "status": "Pagado",
                "supplierRif": "J-999",
                "supplierName": "Gas Station",
                "invoiceNumber": "A-77",
                "controlNumber": "00-77",
                "taxableBase": 100,
                "vatAmount": 16,
                "paymentMethodId": "pm-2",
            },
            {
                "id": "exp-2",
                "date": "2024-03-06",
                "description": "Tyre repair",
                "category": "Maintenance",
                "amount": 40,
                "status": "Pendiente",
                "supplierRif": "J-555",
                "supplierName": "Tyre Shop",
                "invoiceNumber": "",
                "taxableBase": 40,
                "vatAmount": 0,
            },
        ],
    }


@pytest.fixture
def data_path(tmp_path, snapshot_payload) -> Path:
    """Write the sample snapshot to a temporary JSON file."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(snapshot_payload), encoding="utf-8")
    return path


@pytest.fixture
def json_source(data_path):
    """Create a JSON record source over the sample snapshot."""
    source = create_json_source(data_path=str(data_path))
    source.connect()
    yield source
    source.disconnect()


@pytest.fixture
def accounting_service(json_source):
    """Create an AccountingService over the sample snapshot."""
    return AccountingService(json_source)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
