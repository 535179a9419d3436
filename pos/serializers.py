"""Plain-dict renderings of the models for the JSON API."""

# Transaction keys are camelCase on the wire.
TRANSACTION_FIELD_NAMES = {
    "customerName": "customer_name",
    "cashierName": "cashier_name",
    "salePrice": "sale_price",
    "items": "items",
    "meals": "meals",
    "appetizers": "appetizers",
    "drinks": "drinks",
}


def inventory_to_dict(item):
    return {
        "id": item.pk,
        "name": item.name,
        "amount": item.amount,
        "unit": item.unit,
        "reorder": item.reorder,
    }


def menu_item_to_dict(item):
    return {
        "id": item.pk,
        "item_type": item.item_type,
        "name": item.name,
        "price": float(item.price),
        "premium": item.premium,
        "ingredients": [
            {"id": ingredient.pk, "name": ingredient.name}
            for ingredient in sorted(item.ingredients.all(), key=lambda i: i.name.lower())
        ],
    }


def meal_component_to_dict(item):
    return {"id": item.pk, "name": item.name, "price": float(item.price)}


def transaction_to_dict(transaction):
    return {
        "id": transaction.pk,
        "customerName": transaction.customer_name,
        "cashierName": transaction.cashier_name,
        "salePrice": float(transaction.sale_price),
        "items": transaction.items,
        "meals": transaction.meals,
        "appetizers": transaction.appetizers,
        "drinks": transaction.drinks,
        "createdAt": transaction.created_at.isoformat() if transaction.created_at else None,
    }


def transaction_from_body(body):
    """Translate a camelCase request body into TransactionForm field names."""
    return {
        field: body[key]
        for key, field in TRANSACTION_FIELD_NAMES.items()
        if key in body
    }
