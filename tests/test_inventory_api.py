"""
Tests for the inventory CRUD endpoints.
"""

from unittest import mock

import pytest

from pos.models import InventoryItem

URL = "/api/inventory"


@pytest.mark.django_db
class TestInventoryRead:

    def test_list_sorted_case_insensitively(self, client, rice, chicken):
        InventoryItem.objects.create(name="Broccoli", amount=10, unit="lbs")

        response = client.get(URL)

        assert response.status_code == 200
        assert [i["name"] for i in response.json()] == ["Broccoli", "chicken thigh", "Rice"]

    def test_get_by_id(self, client, chicken):
        response = client.get(URL, {"id": chicken.pk})

        assert response.status_code == 200
        assert response.json() == {
            "id": chicken.pk,
            "name": "chicken thigh",
            "amount": 25.5,
            "unit": "lbs",
            "reorder": False,
        }

    def test_get_missing_id_is_404(self, client):
        response = client.get(URL, {"id": 9999})
        assert response.status_code == 404
        assert response.json()["error"] == "Inventory item not found."

    def test_get_non_numeric_id_is_400(self, client):
        response = client.get(URL, {"id": "abc"})
        assert response.status_code == 400


@pytest.mark.django_db
class TestInventoryWrite:

    def test_create(self, send_json):
        response = send_json("post", URL, {"name": "Soy Sauce", "amount": 3, "unit": "gal"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Soy Sauce"
        assert data["reorder"] is False
        assert InventoryItem.objects.filter(pk=data["id"], unit="gal").exists()

    def test_create_missing_fields_is_400(self, send_json):
        response = send_json("post", URL, {"name": "Soy Sauce"})

        assert response.status_code == 400
        assert response.json()["details"]["missing"] == ["amount", "unit"]
        assert not InventoryItem.objects.exists()

    def test_create_negative_amount_is_400(self, send_json):
        response = send_json("post", URL, {"name": "Soy Sauce", "amount": -1, "unit": "gal"})

        assert response.status_code == 400
        assert "amount" in response.json()["details"]

    def test_invalid_json_is_400(self, send_json):
        response = send_json("post", URL, "{not json")
        assert response.status_code == 400

    def test_partial_update_keeps_other_fields(self, send_json, rice):
        response = send_json("put", URL, {"id": rice.pk, "amount": 12})

        assert response.status_code == 200
        rice.refresh_from_db()
        assert rice.amount == 12
        assert rice.name == "Rice"
        assert rice.unit == "lbs"

    def test_update_missing_item_is_404(self, send_json):
        response = send_json("put", URL, {"id": 4242, "amount": 1})
        assert response.status_code == 404

    def test_update_without_id_is_400(self, send_json):
        response = send_json("put", URL, {"amount": 1})
        assert response.status_code == 400

    def test_delete(self, client, rice):
        response = client.delete(f"{URL}?id={rice.pk}")

        assert response.status_code == 200
        assert response.json()["message"] == "Inventory item deleted successfully."
        assert not InventoryItem.objects.filter(pk=rice.pk).exists()

    @pytest.mark.parametrize("query", ["", "?id=", "?id=abc"])
    def test_delete_invalid_id_is_400(self, client, query):
        response = client.delete(f"{URL}{query}")
        assert response.status_code == 400

    def test_unsupported_method_is_405(self, client):
        assert client.patch(URL).status_code == 405


@pytest.mark.django_db
class TestReorderAlerts:

    def test_alert_on_create_with_flag(self, send_json):
        with mock.patch("pos.views.notify_reorder") as notify:
            send_json("post", URL, {"name": "Napkins", "amount": 1, "unit": "box", "reorder": True})

        notify.assert_called_once()
        assert notify.call_args.args[0].name == "Napkins"

    def test_no_alert_without_flag(self, send_json):
        with mock.patch("pos.views.notify_reorder") as notify:
            send_json("post", URL, {"name": "Napkins", "amount": 30, "unit": "box"})

        notify.assert_not_called()

    def test_alert_only_when_flag_switches_on(self, send_json, rice):
        with mock.patch("pos.views.notify_reorder") as notify:
            send_json("put", URL, {"id": rice.pk, "reorder": True})
            send_json("put", URL, {"id": rice.pk, "amount": 2})

        assert notify.call_count == 1
        rice.refresh_from_db()
        assert rice.reorder is True


@pytest.mark.django_db
class TestUnexpectedErrors:

    def test_unexpected_error_is_generic_500(self, client, rice, settings):
        settings.DEBUG = False
        with mock.patch("pos.views.inventory_to_dict", side_effect=RuntimeError("db exploded")):
            response = client.get(URL)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch inventory."}

    def test_debug_includes_details(self, client, rice, settings):
        settings.DEBUG = True
        with mock.patch("pos.views.inventory_to_dict", side_effect=RuntimeError("db exploded")):
            response = client.get(URL)

        assert response.status_code == 500
        assert response.json()["details"] == "db exploded"


@pytest.mark.django_db
class TestInventoryIdQuery:

    def test_empty_id_returns_full_list(self, client, rice, chicken):
        response = client.get(f"{URL}?id=")

        assert response.status_code == 200
        assert [i["name"] for i in response.json()] == ["chicken thigh", "Rice"]

    def test_superscript_digit_id_is_400(self, client, db):
        assert client.delete(f"{URL}?id=%C2%B2").status_code == 400
