import base64
from typing import cast

from fastapi.testclient import TestClient


def register_and_login(client: TestClient, username: str, password: str, name: str = "Test User", email: str = "user@example.com") -> str:
    """Register a user and return their access token."""
    reg_response = client.post("/user", json={"username": username, "password": password, "name": name, "email": email})
    assert reg_response.status_code == 200

    login_response = client.post("/auth/login", json={"username": username, "password": password})
    assert login_response.status_code == 200
    return cast(str, login_response.json()["access_token"])


def image_payload(image_name: str, content: bytes, force=None) -> dict:
    payload = {"imageName": image_name, "imageContent": base64.b64encode(content).decode("ascii")}
    if force is not None:
        payload["force"] = force
    return payload
