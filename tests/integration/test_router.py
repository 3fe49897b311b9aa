"""Integration tests for HalRouter and HalErrorMiddleware over ASGI."""

import pytest
from fastapi import Depends, FastAPI
from starlette.responses import PlainTextResponse
from starlette.testclient import TestClient

from fastapi_hal import HalErrorMiddleware, HalRespondable, HalRouter, IntoHal
from fastapi_hal.core.headers import Headers


class WidgetResource(IntoHal):
    def __init__(self, widget_id: int) -> None:
        self.widget_id = widget_id

    def status_code(self) -> int:
        return 201

    def headers(self, headers: Headers) -> None:
        headers.with_header_value("X-Trace", "abc")

    def links(self):
        return [("self", f"/widgets/{self.widget_id}"), ("collection", "/widgets")]

    def payload(self) -> dict:
        return {"id": self.widget_id, "name": "widget"}


class BrokenResource(IntoHal):
    def headers(self, headers: Headers) -> None:
        headers.with_header_value("X-Bad", "line\r\nbreak")

    def payload(self) -> dict:
        return {}


def get_prefix() -> str:
    return "/widgets"


def build_app() -> FastAPI:
    router = HalRouter()

    @router.hal_route("/widgets/{widget_id}", methods=["GET"])
    async def get_widget(widget_id: int):
        return WidgetResource(widget_id)

    @router.hal_route("/listing", methods=["GET"], name="listing")
    def listing(prefix: str = Depends(get_prefix)):
        return (
            HalRespondable({"count": 2})
            .with_link("items", f"{prefix}/1")
            .with_link("items", f"{prefix}/2")
            .with_header_value("Set-Cookie", "a=1")
            .with_header_value("Set-Cookie", "b=2")
        )

    @router.hal_route("/plain", methods=["GET"])
    def plain():
        return PlainTextResponse("plain")

    @router.hal_route("/broken", methods=["GET"])
    def broken():
        return BrokenResource()

    @router.hal_route("/wrong", methods=["GET"])
    def wrong():
        return 42

    app = FastAPI()
    app.add_middleware(HalErrorMiddleware)
    app.include_router(router)
    return app


@pytest.fixture
def client():
    with TestClient(build_app()) as test_client:
        yield test_client


def test_async_endpoint_returning_resource(client):
    response = client.get("/widgets/1")

    assert response.status_code == 201
    assert response.headers["content-type"] == "application/hal+json"
    assert response.headers["x-trace"] == "abc"
    assert response.json() == {
        "_links": {"collection": {"href": "/widgets"}, "self": {"href": "/widgets/1"}},
        "id": 1,
        "name": "widget",
    }


def test_path_parameters_are_validated(client):
    assert client.get("/widgets/not-a-number").status_code == 422


def test_sync_endpoint_returning_respondable(client):
    response = client.get("/listing")

    assert response.status_code == 200
    assert response.headers.get_list("set-cookie") == ["a=1", "b=2"]
    assert response.json() == {
        "_links": {"items": [{"href": "/widgets/1"}, {"href": "/widgets/2"}]},
        "count": 2,
    }


def test_responses_pass_through(client):
    response = client.get("/plain")

    assert response.text == "plain"
    assert response.headers["content-type"].startswith("text/plain")


def test_hal_errors_become_hal_error_documents(client):
    response = client.get("/broken")

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/hal+json"
    assert response.json() == {
        "_links": {},
        "error": "InvalidHeaderValue",
        "message": "The resource representation could not be built.",
    }


def test_error_detail_can_be_exposed(client, monkeypatch):
    from fastapi_hal.config import get_settings

    monkeypatch.setenv("HAL_ERROR_DETAIL", "true")
    get_settings.cache_clear()

    message = client.get("/broken").json()["message"]

    assert message.startswith("Invalid value for header 'X-Bad'")


def test_unsupported_results_are_not_swallowed(client):
    with pytest.raises(TypeError):
        client.get("/wrong")


def test_openapi_advertises_hal(client):
    schema = client.get("/openapi.json").json()
    content = schema["paths"]["/widgets/{widget_id}"]["get"]["responses"]["200"]["content"]

    assert "application/hal+json" in content


def test_openapi_advertises_configured_media_type(monkeypatch):
    from fastapi_hal.config import get_settings

    monkeypatch.setenv("HAL_MEDIA_TYPE", "application/vnd.example+json")
    get_settings.cache_clear()

    with TestClient(build_app()) as test_client:
        schema = test_client.get("/openapi.json").json()
        response = test_client.get("/widgets/1")

    content = schema["paths"]["/widgets/{widget_id}"]["get"]["responses"]["200"]["content"]
    assert list(content) == ["application/vnd.example+json"]
    assert response.headers["content-type"] == "application/vnd.example+json"
