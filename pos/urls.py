from django.urls import path

from . import views

urlpatterns = [
    # Inventory
    path("inventory", views.inventory_api, name="inventory_api"),

    # Menu
    path("menu", views.menu_api, name="menu_api"),

    # Transactions
    path("transactions", views.transactions_api, name="transactions_api"),

    # Meal builder
    path("meals", views.meals_api, name="meals_api"),
]
