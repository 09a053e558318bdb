"""Registration, login and the admin gate."""

from tests.conftest import PASSWORD


class TestRegisterAndLogin:

    def test_register_creates_plain_user(self, client, repo):
        res = client.post("/auth/register", json={"username": "ravi", "password": "physics1"})
        assert res.status_code == 201
        body = res.json()
        assert body["username"] == "ravi"
        assert body["isAdmin"] is False
        assert "password" not in body
        assert repo.get_user_by_username("ravi").password != "physics1"

    def test_register_taken_username(self, client, plain_user):
        res = client.post("/auth/register", json={"username": plain_user.username, "password": "another1"})
        assert res.status_code == 409
        assert res.json() == {"detail": "Username already taken"}

    def test_register_short_password(self, client):
        res = client.post("/auth/register", json={"username": "ravi", "password": "123"})
        assert res.status_code == 400
        assert "password" in res.json()["detail"]

    def test_login_and_me(self, client, admin_user):
        res = client.post("/admin/login", json={"username": admin_user.username, "password": PASSWORD})
        assert res.status_code == 200
        body = res.json()
        assert body["tokenType"] == "bearer"
        assert body["isAdmin"] is True

        me = client.get("/admin/me", headers={"Authorization": f"Bearer {body['accessToken']}"})
        assert me.json() == {"id": admin_user.id, "username": admin_user.username, "isAdmin": True}

    def test_login_wrong_password(self, client, admin_user):
        res = client.post("/admin/login", json={"username": admin_user.username, "password": "wrong-one"})
        assert res.status_code == 401
        assert res.json() == {"detail": "Invalid username or password"}

    def test_login_unknown_user(self, client):
        res = client.post("/admin/login", json={"username": "ghost", "password": PASSWORD})
        assert res.status_code == 401


class TestAdminGate:
    """401 without a principal, 403 without isAdmin, pass otherwise."""

    def test_no_token(self, client):
        res = client.get("/admin/resources")
        assert res.status_code == 401
        assert res.headers["www-authenticate"] == "Bearer"
        assert client.get("/admin/me").status_code == 401

    def test_garbage_token(self, client):
        res = client.get("/admin/resources", headers={"Authorization": "Bearer not-a-jwt"})
        assert res.status_code == 401

    def test_token_for_deleted_or_unknown_user(self, client):
        from notesphere.security import create_access_token
        headers = {"Authorization": f"Bearer {create_access_token(subject='nobody')}"}
        assert client.get("/admin/resources", headers=headers).status_code == 401

    def test_plain_user_forbidden(self, client, user_headers):
        res = client.get("/admin/resources", headers=user_headers)
        assert res.status_code == 403
        assert res.json() == {"detail": "Admin privileges required"}
        assert client.get("/admin/me", headers=user_headers).status_code == 200

    def test_admin_passes(self, client, admin_headers):
        assert client.get("/admin/resources", headers=admin_headers).json() == []

    def test_catalog_writes_need_admin(self, client, user_headers):
        body = {"name": "JEE", "icon": "fa-award", "order": 4}
        assert client.post("/classes", json=body).status_code == 401
        assert client.post("/classes", json=body, headers=user_headers).status_code == 403
        assert client.delete("/books/1", headers=user_headers).status_code == 403
        assert client.post("/admin/resources", headers=user_headers).status_code == 403

    def test_reads_are_public(self, client):
        for path in ("/classes", "/subjects", "/chapters", "/books", "/resources", "/categories"):
            assert client.get(path).status_code == 200
