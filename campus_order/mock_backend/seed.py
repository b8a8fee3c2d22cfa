# campus_order/mock_backend/seed.py
from copy import deepcopy

DISHES = [
    {
        "id": "1",
        "name": "Croque-monsieur",
        "description": "Ham and cheese toastie",
        "price": 10.99,
        "image": "croque.jpg",
        "allergens": ["gluten", "lactose"],
    },
    {
        "id": "2",
        "name": "Salade niçoise",
        "description": "Tuna, egg, olives and green beans",
        "price": 8.99,
        "image": "nicoise.jpg",
        "allergens": ["egg", "fish"],
    },
    {
        "id": "3",
        "name": "Ratatouille",
        "description": "Slow-cooked summer vegetables",
        "price": 7.50,
        "image": "ratatouille.jpg",
        "allergens": [],
    },
]

UNIVERSITIES = [
    {"id": "uni1", "name": "Campus Nord"},
    {"id": "uni2", "name": "Campus Sud"},
]

ROOMS = [
    {"id": "room1", "name": "Salle TD1", "building": "Building A", "universityId": "uni1"},
    {"id": "room2", "name": "Salle TD2", "building": "Building A", "universityId": "uni1"},
    {"id": "room3", "name": "Salle TP1", "building": "Building B", "universityId": "uni2"},
    {"id": "room4", "name": "Salle TP2", "building": "Building B", "universityId": "uni2"},
]

USERS = [
    {"id": "1", "email": "student@campus.test", "password": "password123", "name": "Student"},
]


def seed(db: dict) -> None:
    #seed tylko gdy pusto, nic nie nadpisujemy
    if db.get("dishes"):
        return

    db["dishes"] = deepcopy(DISHES)
    db["universities"] = deepcopy(UNIVERSITIES)
    db["rooms"] = deepcopy(ROOMS)
    db["users"] = deepcopy(USERS)
    db.setdefault("favorites", [])
    db.setdefault("orders", [])
