"""
Pytest fixtures for the point-of-sale API tests.
"""

import json

import pytest

from pos.models import InventoryItem, MenuItem


@pytest.fixture
def send_json(client):
    """POST/PUT a JSON body through the Django test client."""
    def _send(method, path, payload):
        body = payload if isinstance(payload, str) else json.dumps(payload)
        return getattr(client, method)(path, data=body, content_type="application/json")
    return _send


@pytest.fixture
def rice(db):
    return InventoryItem.objects.create(name="Rice", amount=40, unit="lbs")


@pytest.fixture
def chicken(db):
    return InventoryItem.objects.create(name="chicken thigh", amount=25.5, unit="lbs")


@pytest.fixture
def menu(db, rice, chicken):
    """Two sides, four entrées, an appetizer and a drink."""
    fried_rice = MenuItem.objects.create(item_type="side", name="Fried Rice", price="4.40")
    fried_rice.ingredients.set([rice])
    chow_mein = MenuItem.objects.create(item_type="side", name="Chow Mein", price="4.40")

    orange = MenuItem.objects.create(item_type="entree", name="Orange Chicken", price="5.20")
    orange.ingredients.set([chicken])
    beijing = MenuItem.objects.create(item_type="entree", name="Beijing Beef", price="5.20")
    broccoli = MenuItem.objects.create(item_type="entree", name="Broccoli Beef", price="5.20")
    shrimp = MenuItem.objects.create(
        item_type="entree", name="Honey Walnut Shrimp", price="6.70", premium=True
    )

    rangoon = MenuItem.objects.create(item_type="appetizer", name="Cream Cheese Rangoon", price="2.00")
    soda = MenuItem.objects.create(item_type="drink", name="Fountain Drink", price="2.10")

    return {
        "fried_rice": fried_rice,
        "chow_mein": chow_mein,
        "orange": orange,
        "beijing": beijing,
        "broccoli": broccoli,
        "shrimp": shrimp,
        "rangoon": rangoon,
        "soda": soda,
    }
