"""
Tests for dish and order services
"""
import json
import threading
import pytest
from unittest.mock import patch

from src.business import ErrorKind, NotFoundError, OrderLifecycle, ServiceError, ValidationResult
from src.services.seed import load_records

def lock_taken_elsewhere(lock) -> bool:
    """Занята ли блокировка для другого потока"""
    acquired = []

    def worker():
        got = lock.acquire(blocking=False)
        if got:
            lock.release()
        acquired.append(got)

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()
    return not acquired[0]

class TestDishService:
    """Тесты для DishService"""

    def test_create_and_read(self, dish_service, dish_payload):
        """Тест создания и чтения блюда"""
        created = dish_service.create_dish(dish_payload)

        assert created["id"] == "1"
        assert created["price"] == dish_payload["price"]
        assert dish_service.get_dish(created["id"]) == created

    def test_create_keeps_only_dish_fields(self, dish_service, dish_payload):
        created = dish_service.create_dish({**dish_payload, "id": "77", "secret": 1})

        assert created["id"] == "1"
        assert "secret" not in created

    @pytest.mark.parametrize("field", ["name", "description", "price", "image_url"])
    def test_create_rejected_leaves_store_untouched(self, dish_service, dish_payload, field):
        del dish_payload[field]

        with pytest.raises(ServiceError) as exc_info:
            dish_service.create_dish(dish_payload)

        assert field in exc_info.value.message
        assert dish_service.list_dishes() == []

    def test_update_merges_submitted_fields(self, dish_service, dish_payload):
        """Тест слияния при обновлении"""
        created = dish_service.create_dish(dish_payload)
        dish_service.store.replace(created["id"], {"rating": 5})
        changes = {**dish_payload, "name": "Renamed", "price": 25}

        updated = dish_service.update_dish(created["id"], changes)

        assert updated["name"] == "Renamed"
        assert updated["price"] == 25
        assert updated["rating"] == 5
        assert updated["id"] == created["id"]

    def test_update_id_mismatch(self, dish_service, dish_payload):
        created = dish_service.create_dish(dish_payload)

        with pytest.raises(ServiceError) as exc_info:
            dish_service.update_dish(created["id"], {**dish_payload, "id": "2", "name": "x"})

        assert exc_info.value.kind == ErrorKind.ID_MISMATCH
        assert dish_service.get_dish(created["id"])["name"] == dish_payload["name"]

    def test_update_missing(self, dish_service, dish_payload):
        with pytest.raises(NotFoundError):
            dish_service.update_dish("3", dish_payload)

    def test_update_invalid_price_not_applied(self, dish_service, dish_payload):
        created = dish_service.create_dish(dish_payload)

        with pytest.raises(ServiceError) as exc_info:
            dish_service.update_dish(created["id"], {**dish_payload, "price": "25"})

        assert exc_info.value.kind == ErrorKind.INVALID_NUMBER
        assert dish_service.get_dish(created["id"])["price"] == dish_payload["price"]

    def test_integral_float_price_stored_as_int(self, dish_service, dish_payload):
        dish_payload["price"] = 1e20

        created = dish_service.create_dish(dish_payload)

        assert created["price"] == 10 ** 20
        assert type(dish_service.get_dish(created["id"])["price"]) is int

    def test_update_holds_lock_during_checks(self, dish_service, dish_payload):
        created = dish_service.create_dish(dish_payload)
        seen = []

        def step(record):
            seen.append(lock_taken_elsewhere(dish_service.store.lock))
            return ValidationResult.success()

        with patch("src.services.dish_service.fields_step", return_value=step):
            dish_service.update_dish(created["id"], dish_payload)

        assert seen == [True]

    def test_create_logs_event(self, dish_service, dish_payload):
        with patch('src.services.dish_service.logger') as mock_logger:
            dish_service.create_dish(dish_payload)

            assert mock_logger.resource_event.called
            assert mock_logger.resource_event.call_args[0][:2] == ("Dish", "created")

class TestOrderService:
    """Тесты для OrderService"""

    def test_create_order(self, order_service, order_payload):
        created = order_service.create_order(order_payload)

        assert created["id"] == "1"
        assert created["status"] == "pending"
        assert created["dishes"] == order_payload["dishes"]

    def test_create_forces_pending(self, order_service, order_payload):
        """Новый заказ всегда pending"""
        order_payload["status"] = "delivered"

        with patch('src.services.order_service.logger') as mock_logger:
            created = order_service.create_order(order_payload)

            assert mock_logger.warning.called

        assert created["status"] == "pending"

    def test_create_without_status(self, order_service, order_payload):
        del order_payload["status"]

        assert order_service.create_order(order_payload)["status"] == "pending"

    def test_create_bad_line_reports_index(self, order_service, order_payload):
        order_payload["dishes"].append({"id": "3", "quantity": 0})

        with pytest.raises(ServiceError) as exc_info:
            order_service.create_order(order_payload)

        assert exc_info.value.kind == ErrorKind.INVALID_LINE_QUANTITY
        assert exc_info.value.index == 2
        assert "Dish 2" in exc_info.value.message
        assert order_service.list_orders() == []

    def test_update_transitions(self, order_service, order_payload):
        """Тест смены статусов"""
        order = order_service.create_order(order_payload)

        for status in ("out-for-delivery", "preparing", "delivered"):
            order = order_service.update_order(order["id"], {**order_payload, "status": status})
            assert order["status"] == status

    def test_update_merges_fields(self, order_service, order_payload):
        order = order_service.create_order(order_payload)
        order_service.store.replace(order["id"], {"note": "ring twice"})

        updated = order_service.update_order(order["id"], {
            **order_payload, "id": order["id"], "deliverTo": "10 Downing St", "status": "preparing"
        })

        assert updated["deliverTo"] == "10 Downing St"
        assert updated["note"] == "ring twice"
        assert updated["mobileNumber"] == order_payload["mobileNumber"]

    @pytest.mark.parametrize("changes", [
        {},
        {"status": "pending"},
        {"deliverTo": "", "status": "bogus"},
    ])
    def test_delivered_order_is_immutable(self, order_service, order_payload, changes):
        """delivered - терминальный статус, любые изменения отклоняются"""
        order = order_service.create_order(order_payload)
        order_service.update_order(order["id"], {**order_payload, "status": "delivered"})
        record = {**order_payload, **changes} if changes.get("status") == "pending" else changes

        with pytest.raises(ServiceError) as exc_info:
            order_service.update_order(order["id"], record)

        assert exc_info.value.kind == ErrorKind.IMMUTABLE_ORDER
        assert order_service.get_order(order["id"])["status"] == "delivered"

    def test_id_mismatch_checked_first(self, order_service, order_payload):
        order = order_service.create_order(order_payload)
        order_service.update_order(order["id"], {**order_payload, "status": "delivered"})

        with pytest.raises(ServiceError) as exc_info:
            order_service.update_order(order["id"], {"id": "999"})

        assert exc_info.value.kind == ErrorKind.ID_MISMATCH

    @pytest.mark.parametrize("status,kind", [
        (None, ErrorKind.MISSING_STATUS),
        ("", ErrorKind.MISSING_STATUS),
        ("invalid", ErrorKind.INVALID_STATUS),
    ])
    def test_update_status_required(self, order_service, order_payload, status, kind):
        order = order_service.create_order(order_payload)
        order_payload["status"] = status

        with pytest.raises(ServiceError) as exc_info:
            order_service.update_order(order["id"], order_payload)

        assert exc_info.value.kind == kind

    def test_update_field_errors(self, order_service, order_payload):
        order = order_service.create_order(order_payload)

        with pytest.raises(ServiceError) as exc_info:
            order_service.update_order(order["id"], {**order_payload, "dishes": []})

        assert exc_info.value.kind == ErrorKind.EMPTY_SEQUENCE

    def test_integral_float_quantities_stored_as_int(self, order_service, order_payload):
        order_payload["dishes"][0]["quantity"] = 1e19
        order_payload["dishes"][1]["quantity"] = 3.0

        created = order_service.create_order(order_payload)
        stored = order_service.get_order(created["id"])["dishes"]

        assert [line["quantity"] for line in stored] == [10 ** 19, 3]
        assert all(type(line["quantity"]) is int for line in stored)

    def test_update_holds_lock_during_checks(self, order_service, order_payload):
        """Проверка статуса и запись выполняются под одной блокировкой"""
        order = order_service.create_order(order_payload)
        seen = []

        def step(record):
            seen.append(lock_taken_elsewhere(order_service.store.lock))
            return ValidationResult.success()

        with patch.object(OrderLifecycle, "transition_step", return_value=step):
            order_service.update_order(order["id"], {**order_payload, "status": "preparing"})

        assert seen == [True]
        assert not lock_taken_elsewhere(order_service.store.lock)

    def test_delete_holds_lock_during_checks(self, order_service, order_payload):
        order = order_service.create_order(order_payload)
        seen = []

        def deletable(status):
            seen.append(lock_taken_elsewhere(order_service.store.lock))
            return ValidationResult.success()

        with patch.object(OrderLifecycle, "check_deletable", side_effect=deletable):
            order_service.delete_order(order["id"])

        assert seen == [True]

    def test_delete_pending(self, order_service, order_payload):
        order = order_service.create_order(order_payload)

        order_service.delete_order(order["id"])

        with pytest.raises(NotFoundError):
            order_service.get_order(order["id"])

    @pytest.mark.parametrize("status", ["preparing", "out-for-delivery", "delivered"])
    def test_delete_non_pending(self, order_service, order_payload, status):
        order = order_service.create_order(order_payload)
        order_service.update_order(order["id"], {**order_payload, "status": status})

        with pytest.raises(ServiceError) as exc_info:
            order_service.delete_order(order["id"])

        assert exc_info.value.kind == ErrorKind.ORDER_NOT_DELETABLE
        assert order_service.get_order(order["id"])["status"] == status

    def test_delete_missing(self, order_service):
        with pytest.raises(NotFoundError) as exc_info:
            order_service.delete_order("4")

        assert exc_info.value.message == "Order does not exist: 4"

class TestSeedData:
    """Тесты загрузки начальных данных"""

    def test_load_records_array(self, tmp_path, dish_payload):
        path = tmp_path / "dishes.json"
        path.write_text(json.dumps([{**dish_payload, "id": "3c637d011d844ebab1205fef8a7e36ea"}]))

        assert load_records(str(path))[0]["name"] == dish_payload["name"]

    def test_load_records_envelope(self, tmp_path, order_payload):
        path = tmp_path / "orders.json"
        path.write_text(json.dumps({"data": [order_payload]}))

        assert load_records(str(path)) == [order_payload]

    def test_load_records_missing_file(self, tmp_path):
        assert load_records(str(tmp_path / "absent.json")) == []
        assert load_records(None) == []

    def test_load_records_bad_shape(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"data": "nope"}))

        with pytest.raises(ValueError):
            load_records(str(path))

    def test_seed_dishes(self, dish_service, dish_payload):
        loaded = dish_service.seed([{**dish_payload, "id": "abc"}, dish_payload])

        assert loaded == 2
        assert dish_service.get_dish("abc")["name"] == dish_payload["name"]
        assert len(dish_service.list_dishes()) == 2

    def test_seed_orders_keep_status(self, order_service, order_payload):
        order_service.seed([{**order_payload, "id": "1", "status": "delivered"}])

        assert order_service.get_order("1")["status"] == "delivered"
        assert order_service.create_order(order_payload)["id"] == "2"

    def test_seed_rejects_invalid_record(self, order_service, order_payload):
        order_payload["dishes"] = []

        with pytest.raises(ServiceError):
            order_service.seed([order_payload])
