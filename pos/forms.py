from decimal import ROUND_HALF_UP, Decimal

from django import forms

from .models import InventoryItem, MenuItem, Transaction

CENT = Decimal("0.01")


class PriceField(forms.DecimalField):
    """
    DecimalField that rounds to whole cents before the digit checks run,
    so float totals such as 9.600000000000001 are stored as 9.60.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("decimal_places", 2)
        kwargs.setdefault("min_value", 0)
        super().__init__(**kwargs)

    def to_python(self, value):
        value = super().to_python(value)
        if value is not None and value.is_finite():
            value = value.quantize(CENT, rounding=ROUND_HALF_UP)
        return value


class InventoryForm(forms.ModelForm):
    """
    Form used for adding or editing inventory items.
    """
    amount = forms.FloatField(min_value=0)

    class Meta:
        model = InventoryItem
        fields = ["name", "amount", "unit", "reorder"]


class MenuItemForm(forms.ModelForm):
    """
    Form used for creating or editing a menu item and its ingredient links.

    Ingredients arrive as a list of inventory item ids.
    """
    price = PriceField(max_digits=8)

    class Meta:
        model = MenuItem
        fields = ["item_type", "name", "price", "premium", "ingredients"]


class TransactionForm(forms.ModelForm):
    """
    Form used to record a sale at the register.
    """
    sale_price = PriceField(max_digits=10)

    class Meta:
        model = Transaction
        fields = [
            "customer_name",
            "cashier_name",
            "sale_price",
            "items",
            "meals",
            "appetizers",
            "drinks",
        ]


def instance_data(form_class, instance):
    """
    Current values of an instance keyed by form field name.

    Used as the base that a partial PUT body is laid over, so fields the
    client leaves out keep their stored values.
    """
    data = {}
    for name in form_class._meta.fields:
        value = getattr(instance, name)
        if hasattr(value, "values_list"):
            value = list(value.values_list("pk", flat=True))
        data[name] = value
    return data
