"""Tests de l'API utilisateurs (inscription, connexion, liste)."""

from conftest import auth_headers, login, register


def test_register_user(client):
    response = register(client)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "User registered"
    assert data["user"]["name"] == "Alice"
    assert data["user"]["email"] == "alice@example.com"
    assert isinstance(data["user"]["id"], int)
    assert "password" not in str(data)


def test_register_duplicate_email_returns_400(client):
    assert register(client).status_code == 200

    response = register(client, name="Alice Bis")

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Email already exists"
    assert body["error"]["issues"][0]["path"] == ["email"]


def test_register_invalid_input_returns_400_with_issues(client):
    response = client.post(
        "/api/users/register",
        json={"name": "", "email": "not-an-email", "password": "short"},
    )

    assert response.status_code == 400
    paths = {tuple(issue["path"]) for issue in response.json()["error"]["issues"]}
    assert {("name",), ("email",), ("password",)} <= paths


def test_register_malformed_json_returns_400(client):
    response = client.post(
        "/api/users/register",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_login_success_returns_token(client):
    register(client)

    response = login(client)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["token"]


def test_login_wrong_password_returns_401(client):
    register(client)

    response = login(client, password="wrong-password")

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_login_unknown_email_returns_401(client):
    assert login(client, email="nobody@example.com").status_code == 401


def test_login_invalid_body_returns_400(client):
    response = client.post("/api/users/login", json={"email": "alice@example.com"})

    assert response.status_code == 400


def test_list_users_requires_token(client):
    response = client.get("/api/users")

    assert response.status_code == 401
    assert response.json()["message"] == "Missing bearer token"


def test_list_users_rejects_invalid_token(client):
    response = client.get("/api/users", headers=auth_headers("not.a.token"))

    assert response.status_code == 401


def test_list_users_with_token(client, make_user_token):
    token = make_user_token()
    register(client, name="Bob", email="bob@example.com")

    response = client.get("/api/users", headers=auth_headers(token))

    assert response.status_code == 200
    users = response.json()["users"]
    assert [u["email"] for u in users] == ["alice@example.com", "bob@example.com"]
    assert set(users[0]) == {"id", "name", "email"}


def test_register_blank_name_returns_400(client):
    response = register(client, name="   ")

    assert response.status_code == 400
    assert response.json()["error"]["issues"][0]["path"] == ["name"]
