async def test_register_returns_token_and_avatar(client, make_user):
    user = await make_user("Alice", "alice@example.com")
    response = await client.get("/api/auth", headers=user.headers)
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Alice"
    assert body["email"] == "alice@example.com"
    assert body["avatar"].startswith("https://www.gravatar.com/avatar/")
    assert "password_hash" not in body


async def test_register_duplicate_email(client, alice):
    response = await client.post(
        "/api/users",
        json={"name": "Other", "email": "alice@example.com", "password": "secret123"},
    )
    assert response.status_code == 400
    assert response.json() == {"errors": [{"field": "email", "message": "User already exists"}]}


async def test_register_validation_errors(client):
    response = await client.post(
        "/api/users", json={"name": "", "email": "not-an-email", "password": "123"}
    )
    assert response.status_code == 400
    fields = {error["field"]: error["message"] for error in response.json()["errors"]}
    assert fields["name"] == "Name is required"
    assert "email" in fields
    assert fields["password"] == "Please enter a password with 6 or more characters"


async def test_login_with_json(client, alice):
    response = await client.post(
        "/api/auth", json={"email": "alice@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    token = response.json()["token"]

    me = await client.get("/api/auth", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["user_id"] == alice.user_id


async def test_login_with_wrong_password(client, alice):
    response = await client.post(
        "/api/auth", json={"email": "alice@example.com", "password": "wrong-one"}
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["message"] == "Invalid credentials"


async def test_login_with_unknown_email(client):
    response = await client.post(
        "/api/auth", json={"email": "nobody@example.com", "password": "secret123"}
    )
    assert response.status_code == 400


async def test_oauth2_form_login(client, alice):
    response = await client.post(
        "/api/auth/token", data={"username": "alice@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"

    bad = await client.post(
        "/api/auth/token", data={"username": "alice@example.com", "password": "nope"}
    )
    assert bad.status_code == 401
    assert bad.json() == {"msg": "Incorrect email or password"}


async def test_missing_token_is_rejected(client):
    response = await client.get("/api/auth")
    assert response.status_code == 401
    assert response.json() == {"msg": "No token, authorization denied"}


async def test_invalid_token_is_rejected(client):
    response = await client.get("/api/posts", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json() == {"msg": "Token is not valid"}


async def test_root(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "success"
