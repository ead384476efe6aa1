"""Tests de l'API produits."""

from conftest import auth_headers

CREAM = {
    "name": "Cream",
    "manufacturer": "Acme",
    "category": "skin_care",
    "ingredients": ["water", "glycerin"],
}


def test_example_scenario_register_login_create_product(client):
    register = client.post(
        "/api/users/register",
        json={"name": "Alice", "email": "alice@example.com", "password": "password123"},
    )
    assert register.status_code == 200

    login = client.post(
        "/api/users/login",
        json={"email": "alice@example.com", "password": "password123"},
    )
    assert login.status_code == 200
    token = login.json()["token"]

    response = client.post("/api/products", json=CREAM, headers=auth_headers(token))

    assert response.status_code == 200
    product = response.json()["product"]
    assert response.json()["message"] == "Product created"
    assert product["ingredients"] == ["water", "glycerin"]
    assert product["category"] == "skin_care"
    assert product["createdAt"]


def test_create_product_requires_token(client):
    assert client.post("/api/products", json=CREAM).status_code == 401


def test_create_product_with_undefined_category_returns_400(client, make_user_token):
    token = make_user_token()

    response = client.post(
        "/api/products",
        json={**CREAM, "category": "nail_care"},
        headers=auth_headers(token),
    )

    assert response.status_code == 400
    assert response.json()["error"]["name"] == "UndefinedCategoryError"
    assert client.get("/api/products").json() == []


def test_create_product_missing_field_returns_400(client, make_user_token):
    token = make_user_token()
    payload = {k: v for k, v in CREAM.items() if k != "ingredients"}

    response = client.post("/api/products", json=payload, headers=auth_headers(token))

    assert response.status_code == 400
    assert response.json()["error"]["issues"][0]["path"] == ["ingredients"]


def test_list_products(client, product_id):
    response = client.get("/api/products")

    assert response.status_code == 200
    products = response.json()
    assert len(products) == 1
    assert set(products[0]) == {"id", "name", "manufacturer", "category", "ingredients", "createdAt"}
    assert products[0]["id"] == product_id


def test_empty_ingredients_round_trip(client, make_user_token):
    token = make_user_token()

    created = client.post(
        "/api/products", json={**CREAM, "ingredients": []}, headers=auth_headers(token)
    ).json()["product"]

    assert client.get(f"/api/products/{created['id']}").json()["ingredients"] == []


def test_get_product_by_id(client, product_id):
    response = client.get(f"/api/products/{product_id}")

    assert response.status_code == 200
    assert response.json()["name"] == "Cream"


def test_get_product_non_numeric_id_returns_400(client):
    assert client.get("/api/products/abc").status_code == 400


def test_get_missing_product_returns_404(client, db_tables):
    response = client.get("/api/products/9999")

    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


def test_get_product_out_of_range_id_returns_400(client, db_tables):
    response = client.get("/api/products/99999999999999999999")

    assert response.status_code == 400
    assert "error" in response.json()


def test_create_product_with_blank_name_returns_400(client, make_user_token):
    token = make_user_token()

    for field in ("name", "manufacturer"):
        payload = {
            "name": "Cream",
            "manufacturer": "Acme",
            "category": "skin_care",
            "ingredients": [],
        }
        payload[field] = "   "
        response = client.post("/api/products", json=payload, headers=auth_headers(token))
        assert response.status_code == 400
        assert response.json()["error"]["issues"][0]["path"] == [field]

    assert client.get("/api/products").json() == []
