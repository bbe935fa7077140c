"""Shared pytest fixtures for eventmodel tests."""

from pathlib import Path

import pytest

SHOP_MODEL = """\
t:Shop:"Online Shop"
u:Customer:"Customer"
c:PlaceOrder:"Place order"
a:Order
e:OrderPlaced:"Order placed"
p:ShipWhenPaid
r:OrderSummary:"Order summary"
Customer->PlaceOrder
PlaceOrder->Order
Order->OrderPlaced:"emits"
OrderPlaced--OrderSummary:"projected into"
"""


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def models_dir(fixtures_dir: Path) -> Path:
    """Return path to model fixtures directory."""
    return fixtures_dir / "models"


@pytest.fixture
def shop_model() -> str:
    """Return a model using every record kind and both relationship kinds."""
    return SHOP_MODEL


@pytest.fixture
def test_project(tmp_path: Path) -> Path:
    """Create a temporary project with a manifest and two model files."""
    models = tmp_path / "models"
    models.mkdir()
    (models / "shop.evm").write_text(SHOP_MODEL, encoding="utf-8")
    (models / "shipping.evm").write_text(
        'e:Ordered:"注文された"\ne:Shipped:"出荷された"\nOrdered->Shipped\n',
        encoding="utf-8",
    )
    (tmp_path / "eventmodel.toml").write_text(
        """
[project]
name = "shop"
version = "0.1.0"

[models]
paths = ["models/"]
""",
        encoding="utf-8",
    )
    return tmp_path
