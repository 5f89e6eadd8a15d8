"""User endpoint tests."""


class TestCreateUser:
    def test_create_then_get_returns_same_fields(self, client):
        response = client.post('/user/create', data={
            "name": "Alice", "email": "a@x.com", "gender": "F", "age": "30"
        })
        assert response.status_code == 200
        body = response.get_json()
        assert body["message"] == "user created successfully"
        assert body["error"] is None
        created = body["data"]
        assert created["id"] is not None
        assert created["age"] == 30

        response = client.get(f'/user/get/{created["id"]}')
        assert response.status_code == 200
        assert response.get_json() == {"data": created, "message": "user found", "error": None}

    def test_invalid_age(self, client):
        response = client.post('/user/create', data={"name": "Bob", "age": "thirty"})
        assert response.status_code == 400
        assert response.get_json() == {"data": None, "message": None, "error": "invalid age format"}

    def test_oversized_age(self, client):
        response = client.post('/user/create', data={"name": "Bob", "age": "99999999999999999999"})
        assert response.status_code == 400
        assert response.get_json()["error"] == "invalid age format"

    def test_missing_age(self, client):
        response = client.post('/user/create', data={"name": "Bob"})
        assert response.status_code == 400
        assert client.get('/user/list').get_json()["totalCount"] == 0


class TestGetUser:
    def test_missing_user(self, client):
        response = client.get('/user/get/42')
        assert response.status_code == 404
        assert response.get_json() == {"data": None, "message": None, "error": "user not found"}

    def test_oversized_id_is_not_found(self, client):
        response = client.get('/user/get/99999999999999999999')
        assert response.status_code == 404
        assert response.get_json()["error"] == "user not found"

    def test_non_numeric_id_is_not_found(self, client):
        response = client.get('/user/get/abc')
        assert response.status_code == 404
        assert response.get_json()["error"] == "user not found"


class TestListUsers:
    def test_empty(self, client):
        response = client.get('/user/list')
        assert response.status_code == 200
        assert response.get_json() == {
            "data": [], "totalCount": 0, "message": "no record found", "error": None
        }

    def test_lists_all(self, client, make_user):
        alice = make_user()
        bob = make_user(name="Bob", email="b@x.com", gender="M", age="25")

        body = client.get('/user/list').get_json()
        assert body["data"] == [alice, bob]
        assert body["totalCount"] == 2
        assert body["message"] == "users found"


class TestUpdateUser:
    def test_sparse_patch(self, client, make_user):
        user = make_user()

        response = client.patch(f'/user/update/{user["id"]}', data={"name": "X"})
        assert response.status_code == 200
        body = response.get_json()
        assert body["message"] == "user updated successfully"
        assert body["data"] == dict(user, name="X")

        fetched = client.get(f'/user/get/{user["id"]}').get_json()["data"]
        assert fetched == dict(user, name="X")

    def test_empty_fields_are_ignored(self, client, make_user):
        user = make_user()
        response = client.patch(f'/user/update/{user["id"]}', data={"email": "", "age": "31"})
        assert response.get_json()["data"] == dict(user, age=31)

    def test_invalid_age(self, client, make_user):
        user = make_user()
        response = client.patch(f'/user/update/{user["id"]}', data={"name": "X", "age": "old"})
        assert response.status_code == 400
        assert response.get_json()["error"] == "invalid age format"
        assert client.get(f'/user/get/{user["id"]}').get_json()["data"] == user

    def test_missing_user(self, client):
        response = client.patch('/user/update/9', data={"name": "X"})
        assert response.status_code == 404
        assert response.get_json()["error"] == "user not found"


class TestDeleteUser:
    def test_delete(self, client, make_user):
        user = make_user()
        response = client.delete(f'/user/delete/{user["id"]}')
        assert response.status_code == 200
        assert response.get_json() == {
            "data": None, "message": "user deleted successfully", "error": None
        }
        assert client.get(f'/user/get/{user["id"]}').status_code == 404

    def test_missing_user(self, client):
        response = client.delete('/user/delete/3')
        assert response.status_code == 404
        assert response.get_json()["error"] == "user not found"
