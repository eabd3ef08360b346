from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from app.core.exceptions import (
    ConflictError, ErrorKind, NotFoundError, STATUS_BY_KIND, UnauthorizedError,
    ValidationError, format_validation_errors, register_exception_handlers,
)


class Payload(BaseModel):
    text: str


def build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("Thing not found")

    @app.get("/unauthorized")
    async def unauthorized():
        raise UnauthorizedError("User not authorized")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Post already liked")

    @app.get("/invalid")
    async def invalid():
        raise ValidationError("User already exists", field="email")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database is down")

    @app.post("/payload")
    async def payload(body: Payload):
        return body

    return app


async def request(method: str, path: str, **kwargs):
    transport = ASGITransport(app=build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, path, **kwargs)


def test_every_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(ErrorKind)
    assert STATUS_BY_KIND[ErrorKind.CONFLICT] == 400


async def test_not_found_maps_to_404():
    response = await request("GET", "/not-found")
    assert response.status_code == 404
    assert response.json() == {"msg": "Thing not found"}


async def test_unauthorized_maps_to_401():
    response = await request("GET", "/unauthorized")
    assert response.status_code == 401
    assert response.json() == {"msg": "User not authorized"}


async def test_conflict_maps_to_400():
    response = await request("GET", "/conflict")
    assert response.status_code == 400
    assert response.json() == {"msg": "Post already liked"}


async def test_validation_error_lists_field():
    response = await request("GET", "/invalid")
    assert response.status_code == 400
    assert response.json() == {"errors": [{"field": "email", "message": "User already exists"}]}


async def test_unexpected_error_is_generic_500():
    response = await request("GET", "/boom")
    assert response.status_code == 500
    assert response.text == "Server Error"
    assert "database" not in response.text


async def test_request_validation_is_400_with_fields():
    response = await request("POST", "/payload", json={})
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors[0]["field"] == "text"
    assert errors[0]["message"]


def test_value_error_message_is_unwrapped():
    errors = format_validation_errors([
        {
            "type": "value_error",
            "loc": ("body", "status"),
            "msg": "Value error, Status is required",
            "ctx": {"error": ValueError("Status is required")},
        }
    ])
    assert errors == [{"field": "status", "message": "Status is required"}]


def test_missing_field_names_the_field():
    errors = format_validation_errors([
        {"type": "missing", "loc": ("body", "from"), "msg": "Field required"}
    ])
    assert errors == [{"field": "from", "message": "from is required"}]


async def test_malformed_json_body_is_reported_on_body():
    response = await request(
        "POST", "/payload", content=b'{"text": ', headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors[0]["field"] == "body"
