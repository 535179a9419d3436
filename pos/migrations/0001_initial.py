from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="InventoryItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("amount", models.FloatField()),
                ("unit", models.CharField(max_length=50)),
                ("reorder", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "inventory",
            },
        ),
        migrations.CreateModel(
            name="Transaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_name", models.CharField(max_length=255)),
                ("cashier_name", models.CharField(max_length=255)),
                ("sale_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("items", models.PositiveIntegerField(default=0)),
                ("meals", models.PositiveIntegerField(default=0)),
                ("appetizers", models.PositiveIntegerField(default=0)),
                ("drinks", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "transactions",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "item_type",
                    models.CharField(
                        choices=[
                            ("side", "Side"),
                            ("entree", "Entrée"),
                            ("appetizer", "Appetizer"),
                            ("drink", "Drink"),
                        ],
                        max_length=20,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("price", models.DecimalField(decimal_places=2, max_digits=8)),
                ("premium", models.BooleanField(default=False)),
                (
                    "ingredients",
                    models.ManyToManyField(
                        blank=True,
                        db_table="menu_item_ingredients",
                        related_name="menu_items",
                        to="pos.inventoryitem",
                    ),
                ),
            ],
            options={
                "db_table": "menu_items",
            },
        ),
    ]
