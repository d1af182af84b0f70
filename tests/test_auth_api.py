# /tests/test_auth_api.py


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "Classroom backend is running!"


# --- /register ---

def test_register_returns_token_and_account(client, payloads):
    response = client.post("/register", json=payloads["Student"])

    assert response.status_code == 201
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["token"]
    account = body["account"]
    assert account["role"] == "Student"
    assert account["username"] == "student1"
    assert account["studentId"] == "S-1001"
    assert "password" not in account
    assert "password_hash" not in account


def test_register_student_without_student_id(client, payloads):
    payload = payloads["Student"]
    payload.pop("studentId")

    response = client.post("/register", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Student ID is required"}


def test_register_invalid_role(client, payloads):
    response = client.post("/register", json=dict(payloads["Admin"], role="Janitor"))
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid role specified"}


def test_register_duplicate_username(client, admin, payloads):
    response = client.post("/register", json=dict(payloads["Student"], username="admin1"))
    assert response.status_code == 400
    assert response.json() == {"message": "Username is already taken"}


def test_register_duplicate_student_id(client, student, payloads):
    response = client.post("/register", json=dict(payloads["Student"], username="student2"))
    assert response.status_code == 400
    assert response.json() == {"message": "Student ID is already taken"}


def test_register_rejects_non_object_body(client):
    response = client.post("/register", content="not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "message" in response.json()


# --- /login ---

def test_login_with_valid_credentials(client, admin):
    response = client.post("/login", json={"username": "admin1", "password": "pass123"})

    assert response.status_code == 200
    body = response.json()
    assert body["account"]["id"] == admin["account"]["id"]
    assert body["account"]["role"] == "Admin"

    me = client.get("/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert me.status_code == 200
    assert me.json()["username"] == "admin1"


def test_login_wrong_password_and_unknown_user_look_the_same(client, admin):
    wrong_password = client.post("/login", json={"username": "admin1", "password": "nope123"})
    unknown_user = client.post("/login", json={"username": "nobody", "password": "pass123"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {"message": "Incorrect username or password"}


def test_login_requires_both_fields(client):
    response = client.post("/login", json={"username": "admin1"})
    assert response.status_code == 400
    assert response.json() == {"message": "Please provide username and password"}


# --- /me ---

def test_me_returns_role_specific_fields(client, faculty):
    response = client.get("/me", headers=faculty["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["role"] == "Faculty"
    assert body["facultyId"] == "F-2001"
    assert body["faculty"] == "Engineering"
    assert "password_hash" not in body


def test_me_without_token(client):
    response = client.get("/me")

    assert response.status_code == 401
    assert response.json() == {"message": "You are not logged in. Please log in to get access."}
    assert response.headers["www-authenticate"] == "Bearer"


def test_me_with_invalid_token(client):
    response = client.get("/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid token. Please log in again."}


def test_unknown_route_uses_message_body(client):
    response = client.get("/no-such-route")
    assert response.status_code == 404
    assert "message" in response.json()


def test_register_rejects_boolean_year(client, payloads):
    response = client.post("/register", json=dict(payloads["Student"], year=True))
    assert response.status_code == 400
    assert response.json() == {"message": "Year must be one of 1, 2, 3, 4"}
