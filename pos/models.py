from django.db import models


class InventoryItem(models.Model): # A stock line in the restaurant store room.
    name = models.CharField(max_length=255)
    amount = models.FloatField()
    unit = models.CharField(max_length=50)
    reorder = models.BooleanField(default=False) # set by hand, never computed

    class Meta:
        db_table = "inventory"

    def __str__(self):
        return f"{self.name} ({self.amount:g} {self.unit})"


class MenuItem(models.Model): # Anything the cashier can ring up.
    SIDE = "side"
    ENTREE = "entree"
    APPETIZER = "appetizer"
    DRINK = "drink"
    ITEM_TYPES = [
        (SIDE, "Side"),
        (ENTREE, "Entrée"),
        (APPETIZER, "Appetizer"),
        (DRINK, "Drink"),
    ]

    item_type = models.CharField(max_length=20, choices=ITEM_TYPES)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=8, decimal_places=2)
    premium = models.BooleanField(default=False)
    ingredients = models.ManyToManyField(
        InventoryItem,
        related_name="menu_items",
        blank=True,
        db_table="menu_item_ingredients",
    )

    class Meta:
        db_table = "menu_items"

    def __str__(self):
        return self.name


class Transaction(models.Model): # A completed sale at the register.
    customer_name = models.CharField(max_length=255)
    cashier_name = models.CharField(max_length=255)
    sale_price = models.DecimalField(max_digits=10, decimal_places=2)
    items = models.PositiveIntegerField(default=0)
    meals = models.PositiveIntegerField(default=0)
    appetizers = models.PositiveIntegerField(default=0)
    drinks = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "transactions"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"#{self.pk} {self.customer_name}"
