import pytest

pytestmark = pytest.mark.integration


def test_hello(client):
    response = client.get("/hello")
    assert response.status_code == 200
    assert response.json() == {"text": "Hello World"}
