from __future__ import annotations

import httpx
import pytest

from fake_scalr import BASE_URL, HOST, ref
from scalrx import CallContext, DecodeError, NotFoundError, RequestError, ValidationError
from scalrx.models import (
    WorkspaceCreateOptions,
    WorkspaceListOptions,
    WorkspaceRunScheduleOptions,
    WorkspaceUpdateOptions,
)


@pytest.fixture
def environment(fake_scalr):
    return fake_scalr.seed("environments", "env-1", {"name": "production"})


def test_example_workspace_scenario(client, fake_scalr, environment) -> None:
    created = client.workspaces.create(
        WorkspaceCreateOptions(name="example-ws", environment="env-1")
    )

    read = client.workspaces.read(created.id)
    assert read.name == "example-ws"
    assert read.environment is not None and read.environment.id == "env-1"

    client.workspaces.update(
        created.id,
        WorkspaceUpdateOptions(auto_apply=False, terraform_version="0.12.28"),
    )

    read = client.workspaces.read(created.id)
    assert read.auto_apply is False
    assert read.terraform_version == "0.12.28"
    assert read.environment is not None and read.environment.id == "env-1"


def test_create_sends_jsonapi_document(client, fake_scalr, environment) -> None:
    client.workspaces.create(
        WorkspaceCreateOptions(name="app", environment="env-1", working_directory="infra")
    )

    request = fake_scalr.requests[-1]
    assert request.method == "POST"
    assert str(request.url) == f"{BASE_URL}/workspaces"
    assert request.headers["Content-Type"] == "application/vnd.api+json"
    assert request.headers["Prefer"] == "profile=preview"
    assert fake_scalr.bodies("POST")[-1] == {
        "data": {
            "type": "workspaces",
            "attributes": {"name": "app", "working-directory": "infra"},
            "relationships": {"environment": {"data": {"type": "environments", "id": "env-1"}}},
        }
    }


def test_create_then_read_returns_supplied_fields(client, fake_scalr, environment) -> None:
    options = WorkspaceCreateOptions(
        name="billing",
        environment="env-1",
        auto_apply=False,
        terraform_version="1.6.0",
        working_directory="svc/billing",
        var_files=["prod.tfvars"],
    )

    created = client.workspaces.create(options)
    read = client.workspaces.read(created.id)

    assert read.id == created.id
    assert read.name == "billing"
    assert read.auto_apply is False
    assert read.terraform_version == "1.6.0"
    assert read.working_directory == "svc/billing"
    assert read.var_files == ["prod.tfvars"]


def test_partial_update_keeps_unspecified_fields(client, fake_scalr, environment) -> None:
    created = client.workspaces.create(
        WorkspaceCreateOptions(name="app", environment="env-1", auto_apply=True)
    )

    client.workspaces.update(created.id, WorkspaceUpdateOptions(name="app-renamed"))

    assert fake_scalr.bodies("PATCH")[-1]["data"]["attributes"] == {"name": "app-renamed"}
    read = client.workspaces.read(created.id)
    assert read.name == "app-renamed"
    assert read.auto_apply is True
    assert read.environment is not None and read.environment.id == "env-1"


def test_delete_then_read_is_not_found(client, fake_scalr, environment) -> None:
    created = client.workspaces.create(WorkspaceCreateOptions(name="tmp", environment="env-1"))

    client.workspaces.delete(created.id)

    with pytest.raises(NotFoundError) as exc_info:
        client.workspaces.read(created.id)
    assert exc_info.value.status_code == 404
    assert "not found" in exc_info.value.message


def test_duplicate_name_is_rejected_remotely(client, fake_scalr, environment) -> None:
    client.workspaces.create(WorkspaceCreateOptions(name="app", environment="env-1"))

    with pytest.raises(ValidationError) as exc_info:
        client.workspaces.create(WorkspaceCreateOptions(name="app", environment="env-1"))

    assert exc_info.value.status_code == 422
    assert "already exists" in str(exc_info.value)


def test_read_includes_creator(client, fake_scalr, environment) -> None:
    fake_scalr.seed("users", "user-1", {"email": "ops@example.com"})
    fake_scalr.seed(
        "workspaces",
        "ws-7",
        {"name": "app"},
        {"environment": ref("environments", "env-1"), "created-by": ref("users", "user-1")},
    )

    ws = client.workspaces.read("ws-7")

    assert fake_scalr.requests[-1].url.params["include"] == "created-by"
    assert ws.created_by is not None and ws.created_by.email == "ops@example.com"


def test_read_by_name(client, fake_scalr, environment) -> None:
    fake_scalr.seed("environments", "env-2", {"name": "staging"})
    for env_id in ("env-1", "env-2"):
        fake_scalr.seed("workspaces", None, {"name": "app"}, {"environment": ref("environments", env_id)})

    ws = client.workspaces.read_by_name("env-2", "app")

    assert ws.environment is not None and ws.environment.id == "env-2"
    params = fake_scalr.requests[-1].url.params
    assert params["filter[environment]"] == "env-2"
    assert params["filter[name]"] == "app"


def test_read_by_name_without_match_is_not_found(client, fake_scalr, environment) -> None:
    with pytest.raises(NotFoundError, match="not found in environment env-1"):
        client.workspaces.read_by_name("env-1", "ghost")


def test_set_schedule(client, fake_scalr, environment) -> None:
    created = client.workspaces.create(WorkspaceCreateOptions(name="app", environment="env-1"))

    ws = client.workspaces.set_schedule(
        created.id, WorkspaceRunScheduleOptions(apply_schedule="30 3 5 3-5 2")
    )

    request = fake_scalr.requests[-1]
    assert request.url.path.endswith(f"/workspaces/{created.id}/actions/set-schedule")
    assert request.headers["Content-Type"] == "application/json"
    assert fake_scalr.bodies("POST")[-1] == {
        "apply-schedule": "30 3 5 3-5 2",
        "destroy-schedule": None,
    }
    assert ws.apply_schedule == "30 3 5 3-5 2"
    assert ws.destroy_schedule is None


@pytest.mark.parametrize("bad_id", ["", "ws/1", "ws 1", "../env", "ws-1\n"])
def test_invalid_ids_fail_before_any_request(client, fake_scalr, bad_id: str) -> None:
    with pytest.raises(ValidationError, match="invalid value for workspace ID"):
        client.workspaces.read(bad_id)
    with pytest.raises(ValidationError):
        client.workspaces.delete(bad_id)

    assert fake_scalr.requests == []


@pytest.mark.parametrize("name", ["my app!", "app\n"])
def test_invalid_name_fails_before_any_request(client, fake_scalr, name: str) -> None:
    with pytest.raises(ValidationError, match="invalid value for name"):
        client.workspaces.create(WorkspaceCreateOptions(name=name, environment="env-1"))

    assert fake_scalr.requests == []


def test_list_respects_page_size_and_total_count(client, fake_scalr, environment) -> None:
    for index in range(7):
        fake_scalr.seed(
            "workspaces", None, {"name": f"ws{index}"}, {"environment": ref("environments", "env-1")}
        )

    options = WorkspaceListOptions(environment="env-1", page_size=3)
    pages = [client.workspaces.list(options.with_page(n)) for n in (1, 2, 3)]

    assert [len(page) for page in pages] == [3, 3, 1]
    assert all(len(page.items) <= 3 for page in pages)
    assert {page.total_count for page in pages} == {7}
    assert [ws.name for ws in client.workspaces.iter_all(options)] == [
        f"ws{index}" for index in range(7)
    ]


def test_empty_list_is_not_an_error(client, fake_scalr) -> None:
    page = client.workspaces.list(WorkspaceListOptions(environment="env-404"))

    assert page.items == []
    assert page.total_count == 0


def test_cancelled_context_sends_nothing(client, fake_scalr) -> None:
    ctx = CallContext.with_timeout(10)
    ctx.cancel()

    with pytest.raises(RequestError):
        client.workspaces.list(ctx=ctx)

    assert fake_scalr.requests == []


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>proxy</html>"),
        httpx.Response(200, json={"data": []}),
        httpx.Response(200, json=["ws-1"]),
    ],
)
def test_unexpected_success_body_is_decode_error(client, respx_mock, response) -> None:
    respx_mock.get(host=HOST, path="/api/iacp/v3/workspaces/ws-1").mock(return_value=response)

    with pytest.raises(DecodeError):
        client.workspaces.read("ws-1")
