"""
Shared fixtures for the API and service tests
"""
import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.services.dish_service import DishService
from src.services.order_service import OrderService
from src.services.store import ResourceStore

@pytest.fixture
def dish_payload():
    return {
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
        "price": 19,
        "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg"
    }

@pytest.fixture
def order_payload():
    return {
        "deliverTo": "221B Baker Street, London",
        "mobileNumber": "(202) 456-1111",
        "status": "pending",
        "dishes": [
            {"id": "1", "name": "Spaghetti", "price": 19, "quantity": 2},
            {"id": "2", "name": "Falafel", "price": 12, "quantity": 1}
        ]
    }

@pytest.fixture
def dish_service():
    return DishService(ResourceStore("Dish"))

@pytest.fixture
def order_service():
    return OrderService(ResourceStore("Order"))

@pytest.fixture
def app():
    return create_app(load_seed=False)

@pytest.fixture
def client(app):
    return TestClient(app)
