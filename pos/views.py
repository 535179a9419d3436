import logging

from django.db import transaction as db_transaction
from django.db.models.functions import Lower
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from .alerts import notify_reorder
from .api import (
    BadRequest,
    error_response,
    handle_errors,
    invalid_form,
    json_body,
    parse_id,
    require_fields,
)
from .forms import InventoryForm, MenuItemForm, TransactionForm, instance_data
from .meal_builder import (
    ENTREE,
    MEAL_REQUIREMENTS,
    SIDE,
    MealBuilder,
    MealSelectionError,
)
from .models import InventoryItem, MenuItem, Transaction
from .serializers import (
    inventory_to_dict,
    meal_component_to_dict,
    menu_item_to_dict,
    transaction_from_body,
    transaction_to_dict,
)

logger = logging.getLogger(__name__)

CRUD_METHODS = ["GET", "POST", "PUT", "DELETE"]


def merged_form(form_class, instance, updates):
    """Bind a form to an instance's stored values overlaid with the updates."""
    data = instance_data(form_class, instance)
    data.update({k: v for k, v in updates.items() if k in data})
    return form_class(data, instance=instance)


def dispatch(request, handlers):
    return handlers[request.method](request)


# inventory api
@handle_errors("fetch inventory")
def get_inventory(request):
    """All items sorted by name, or one item when ?id= is given."""
    if request.GET.get("id"):
        item = InventoryItem.objects.filter(pk=parse_id(request.GET["id"], "inventory item")).first()
        if item is None:
            return error_response("Inventory item not found.", 404)
        return JsonResponse(inventory_to_dict(item))

    items = InventoryItem.objects.order_by(Lower("name"), "pk")
    return JsonResponse([inventory_to_dict(i) for i in items], safe=False)


@handle_errors("add inventory item")
def add_inventory(request):
    body = json_body(request)
    require_fields(body, ["name", "amount", "unit"], "All fields are required.")

    form = InventoryForm(body)
    if not form.is_valid():
        raise invalid_form(form)

    item = form.save()
    logger.info("Added inventory item %s (%s)", item.pk, item.name)

    if item.reorder:
        notify_reorder(item)

    return JsonResponse(inventory_to_dict(item))


@handle_errors("update inventory item")
def update_inventory(request):
    body = json_body(request)
    item = InventoryItem.objects.filter(pk=parse_id(body.get("id"), "inventory item")).first()
    if item is None:
        return error_response("Inventory item not found.", 404)

    already_flagged = item.reorder
    form = merged_form(InventoryForm, item, body)
    if not form.is_valid():
        raise invalid_form(form)

    item = form.save()
    logger.info("Updated inventory item %s", item.pk)

    # Alert only when the flag is switched on, not on every edit afterwards
    if item.reorder and not already_flagged:
        notify_reorder(item)

    return JsonResponse(inventory_to_dict(item))


@handle_errors("delete inventory item")
def delete_inventory(request):
    pk = parse_id(request.GET.get("id"), "inventory item")
    InventoryItem.objects.filter(pk=pk).delete()
    logger.info("Deleted inventory item %s", pk)
    return JsonResponse({"message": "Inventory item deleted successfully."})


@csrf_exempt
@require_http_methods(CRUD_METHODS)
def inventory_api(request):
    return dispatch(request, {
        "GET": get_inventory,
        "POST": add_inventory,
        "PUT": update_inventory,
        "DELETE": delete_inventory,
    })


# menu api
def menu_queryset():
    return MenuItem.objects.prefetch_related("ingredients").order_by("pk")


@handle_errors("fetch menu items")
def get_menu(request):
    if request.GET.get("id"):
        item = menu_queryset().filter(pk=parse_id(request.GET["id"], "menu item")).first()
        if item is None:
            return error_response("Menu item not found.", 404)
        return JsonResponse(menu_item_to_dict(item))

    return JsonResponse([menu_item_to_dict(i) for i in menu_queryset()], safe=False)


@handle_errors("add menu item")
def add_menu_item(request):
    """Creates a menu item together with its ingredient links."""
    body = json_body(request)
    require_fields(
        body,
        ["item_type", "name", "price", "premium"],
        "Invalid input. All fields are required.",
    )
    body.setdefault("ingredients", [])

    form = MenuItemForm(body)
    if not form.is_valid():
        raise invalid_form(form)

    with db_transaction.atomic():
        item = form.save()

    logger.info("Added menu item %s (%s)", item.pk, item.name)
    return JsonResponse(menu_item_to_dict(item), status=201)


@handle_errors("update menu item")
def update_menu_item(request):
    """
    Updates a menu item. The ingredient set is replaced only when the body
    carries an ``ingredients`` list.
    """
    body = json_body(request)
    if body.get("id") in (None, ""):
        raise BadRequest("ID is required to update the menu item.")

    item = MenuItem.objects.filter(pk=parse_id(body["id"], "menu item")).first()
    if item is None:
        return error_response("Menu item not found.", 404)

    form = merged_form(MenuItemForm, item, body)
    if not form.is_valid():
        raise invalid_form(form)

    with db_transaction.atomic():
        item = form.save()

    logger.info("Updated menu item %s", item.pk)
    return JsonResponse(menu_item_to_dict(item))


@handle_errors("delete menu item")
def delete_menu_item(request):
    pk = parse_id(request.GET.get("id"), "menu item")
    MenuItem.objects.filter(pk=pk).delete()
    logger.info("Deleted menu item %s", pk)
    return JsonResponse({"message": "Menu item deleted successfully."})


@csrf_exempt
@require_http_methods(CRUD_METHODS)
def menu_api(request):
    return dispatch(request, {
        "GET": get_menu,
        "POST": add_menu_item,
        "PUT": update_menu_item,
        "DELETE": delete_menu_item,
    })


# transactions api
@handle_errors("fetch transactions")
def get_transactions(request):
    """Newest transactions first, or one transaction's details with ?id=."""
    if request.GET.get("id"):
        sale = Transaction.objects.filter(pk=parse_id(request.GET["id"], "transaction")).first()
        if sale is None:
            return error_response("Transaction not found.", 404)
        return JsonResponse(transaction_to_dict(sale))

    return JsonResponse([transaction_to_dict(t) for t in Transaction.objects.all()], safe=False)


@handle_errors("create transaction")
def add_transaction(request):
    body = json_body(request)
    require_fields(body, ["customerName", "cashierName", "salePrice"], "Missing required fields.")

    data = {"items": 0, "meals": 0, "appetizers": 0, "drinks": 0}
    data.update(transaction_from_body(body))

    form = TransactionForm(data)
    if not form.is_valid():
        raise invalid_form(form)

    sale = form.save()
    logger.info("Recorded transaction %s for %s", sale.pk, sale.customer_name)
    return JsonResponse(transaction_to_dict(sale))


@handle_errors("update transaction")
def update_transaction(request):
    body = json_body(request)
    sale = Transaction.objects.filter(pk=parse_id(body.get("id"), "transaction")).first()
    if sale is None:
        return error_response("Transaction not found.", 404)

    form = merged_form(TransactionForm, sale, transaction_from_body(body))
    if not form.is_valid():
        raise invalid_form(form)

    sale = form.save()
    logger.info("Updated transaction %s", sale.pk)
    return JsonResponse(transaction_to_dict(sale))


@handle_errors("delete transaction")
def delete_transaction(request):
    pk = parse_id(request.GET.get("id"), "transaction")
    Transaction.objects.filter(pk=pk).delete()
    logger.info("Deleted transaction %s", pk)
    return JsonResponse({"message": "Transaction deleted successfully."})


@csrf_exempt
@require_http_methods(CRUD_METHODS)
def transactions_api(request):
    return dispatch(request, {
        "GET": get_transactions,
        "POST": add_transaction,
        "PUT": update_transaction,
        "DELETE": delete_transaction,
    })


# meal builder api
@handle_errors("fetch meal sizes")
def get_meal_sizes(request):
    sizes = [
        {"size": size.value, "sides": req.sides, "entrees": req.entrees}
        for size, req in MEAL_REQUIREMENTS.items()
    ]
    return JsonResponse(sizes, safe=False)


@handle_errors("build meal")
def build_meal(request):
    """
    Replays the clicked menu items, in order, through a MealBuilder and
    reports where the meal stands.
    """
    body = json_body(request)
    try:
        builder = MealBuilder(body.get("size"))
    except ValueError:
        raise BadRequest("Invalid meal size.", {"sizes": [s.value for s in MEAL_REQUIREMENTS]})

    selections = body.get("selections", [])
    if not isinstance(selections, list):
        raise BadRequest("Selections must be a list of menu item IDs.")
    ids = [parse_id(value, "menu item") for value in selections]

    found = MenuItem.objects.in_bulk(ids)
    unknown = sorted({pk for pk in ids if pk not in found})
    if unknown:
        raise BadRequest("Unknown menu item ID.", {"unknown": unknown})

    try:
        for pk in ids:
            builder.select(found[pk])
    except MealSelectionError as exc:
        raise BadRequest(str(exc))

    components = MenuItem.objects.filter(item_type__in=[SIDE, ENTREE]).order_by("pk")
    return JsonResponse({
        "size": builder.size.value,
        "description": builder.description(),
        "requirements": {
            "sides": builder.requirements.sides,
            "entrees": builder.requirements.entrees,
        },
        "sides": [meal_component_to_dict(i) for i in builder.sides],
        "entrees": [meal_component_to_dict(i) for i in builder.entrees],
        "progress": builder.progress(),
        "remaining": builder.remaining(),
        "complete": builder.is_complete(),
        "disabled": [i.pk for i in components if builder.is_disabled(i)],
    })


@csrf_exempt
@require_http_methods(["GET", "POST"])
def meals_api(request):
    return dispatch(request, {
        "GET": get_meal_sizes,
        "POST": build_meal,
    })
