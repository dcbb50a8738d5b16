"""Tests for the endpoint wrappers.

Each service only builds a descriptor, so these tests check what reaches the
transport: method, URL, headers and body.
"""

import json

import pytest
from conftest import StubTransport, json_response

from jiraclient.request import RequestOptions
from jiraclient.services import (
    AppPropertiesService,
    AvatarsService,
    FilterSharingService,
    IssueSearchService,
    IssuesService,
    MyselfService,
    ProjectsService,
    ServerInfoService,
    StatusesService,
    WebhooksService,
)
from jiraclient.transports.base import TransportResponse


class TestProjects:
    """Tests for ProjectsService."""

    @pytest.mark.asyncio
    async def test_get_project(self, dispatcher, stub_transport: StubTransport):
        stub_transport.response = json_response(200, {"id": "10000", "key": "EX"})

        result = await ProjectsService(dispatcher).get_project(
            "EX", expand="description,lead", properties=["a", "b"]
        )

        assert result.data == {"id": "10000", "key": "EX"}
        request = stub_transport.last_request
        assert request.method == "GET"
        assert request.url == (
            "/rest/api/3/project/EX?expand=description%2Clead&properties=a&properties=b"
        )
        assert request.body is None

    @pytest.mark.asyncio
    async def test_search_projects_repeats_ids(self, dispatcher, stub_transport):
        await ProjectsService(dispatcher).search_projects(ids=[1, 2], max_results=10)

        assert stub_transport.last_request.url == (
            "/rest/api/3/project/search?maxResults=10&id=1&id=2"
        )

    @pytest.mark.asyncio
    async def test_delete_project_with_undo(self, dispatcher, stub_transport):
        stub_transport.response = TransportResponse(status=204)

        result = await ProjectsService(dispatcher).delete_project("EX", enable_undo=True)

        assert result.success
        assert result.data is None
        assert stub_transport.last_request.method == "DELETE"
        assert stub_transport.last_request.url == "/rest/api/3/project/EX?enableUndo=true"

    @pytest.mark.asyncio
    async def test_create_project_serializes_body(self, dispatcher, stub_transport):
        project = {"key": "EX", "name": "Example", "leadAccountId": "abc"}

        await ProjectsService(dispatcher).create_project(project)

        request = stub_transport.last_request
        assert request.method == "POST"
        assert json.loads(request.body) == project
        assert request.headers["Content-Type"] == "application/json"


class TestIssues:
    """Tests for IssuesService."""

    @pytest.mark.asyncio
    async def test_get_issue_fields_are_repeated(self, dispatcher, stub_transport):
        await IssuesService(dispatcher).get_issue("EX-1", fields=["summary", "status"])

        assert stub_transport.last_request.url == (
            "/rest/api/3/issue/EX-1?fields=summary&fields=status"
        )

    @pytest.mark.asyncio
    async def test_unassign_sends_null(self, dispatcher, stub_transport):
        stub_transport.response = TransportResponse(status=204)

        await IssuesService(dispatcher).assign_issue("EX-1", None)

        request = stub_transport.last_request
        assert request.method == "PUT"
        assert request.url == "/rest/api/3/issue/EX-1/assignee"
        assert json.loads(request.body) == {"accountId": None}

    @pytest.mark.asyncio
    async def test_do_transition(self, dispatcher, stub_transport):
        stub_transport.response = TransportResponse(status=204)

        result = await IssuesService(dispatcher).do_transition(
            "EX-1", {"transition": {"id": "5"}}
        )

        assert result.success
        assert stub_transport.last_request.url == "/rest/api/3/issue/EX-1/transitions"


@pytest.mark.asyncio
async def test_search_jql_encodes_query(dispatcher, stub_transport):
    await IssueSearchService(dispatcher).search_jql("project = EX", max_results=50)

    assert stub_transport.last_request.url == (
        "/rest/api/3/search/jql?jql=project+%3D+EX&maxResults=50"
    )


@pytest.mark.asyncio
async def test_statuses_bulk_get_repeats_id(dispatcher, stub_transport):
    stub_transport.response = json_response(200, [{"id": "1"}, {"id": "2"}])

    result = await StatusesService(dispatcher).bulk_get(["1", "2"])

    assert result.data == [{"id": "1"}, {"id": "2"}]
    assert stub_transport.last_request.url == "/rest/api/3/statuses?id=1&id=2"


@pytest.mark.asyncio
async def test_statuses_bulk_delete(dispatcher, stub_transport):
    stub_transport.response = TransportResponse(status=204)

    await StatusesService(dispatcher).bulk_delete(["1", "2"])

    assert stub_transport.last_request.method == "DELETE"
    assert stub_transport.last_request.url == "/rest/api/3/statuses?id=1&id=2"


class TestAvatars:
    """Tests for AvatarsService."""

    @pytest.mark.asyncio
    async def test_store_avatar_sends_raw_image(self, dispatcher, stub_transport):
        image = b"\x89PNG\r\n\x1a\n\x00\x00"
        stub_transport.response = json_response(201, {"id": "10100"})

        result = await AvatarsService(dispatcher).store_avatar(
            "project", "10000", image, media_type="image/png", size=48
        )

        assert result.status == 201
        request = stub_transport.last_request
        assert request.method == "POST"
        assert request.url == "/rest/api/3/universal_avatar/type/project/owner/10000?size=48"
        assert request.body is image
        assert request.headers["Content-Type"] == "image/png"
        assert request.headers["X-Atlassian-Token"] == "no-check"

    @pytest.mark.asyncio
    async def test_avatar_image_is_bytes(self, dispatcher, stub_transport):
        stub_transport.response = TransportResponse(status=200, content=b"<svg/>")

        result = await AvatarsService(dispatcher).get_avatar_image_by_type(
            "issuetype", image_format="svg"
        )

        assert result.data == b"<svg/>"
        assert stub_transport.last_request.url == (
            "/rest/api/3/universal_avatar/view/type/issuetype?format=svg"
        )


class TestMyself:
    """Tests for MyselfService."""

    @pytest.mark.asyncio
    async def test_set_preference_sends_raw_value(self, dispatcher, stub_transport):
        stub_transport.response = TransportResponse(status=204)

        await MyselfService(dispatcher).set_preference("user.notify", "false")

        request = stub_transport.last_request
        assert request.method == "PUT"
        assert request.url == "/rest/api/3/mypreferences?key=user.notify"
        assert request.body == "false"
        assert request.headers["Content-Type"] == "text/plain"

    @pytest.mark.asyncio
    async def test_get_preference_is_text(self, dispatcher, stub_transport):
        stub_transport.response = TransportResponse(status=200, content=b"true")

        result = await MyselfService(dispatcher).get_preference("user.notify")

        assert result.data == "true"


@pytest.mark.asyncio
async def test_delete_webhooks_sends_body(dispatcher, stub_transport):
    stub_transport.response = TransportResponse(status=202)

    result = await WebhooksService(dispatcher).delete_webhook_by_id([10, 20])

    assert result.success
    request = stub_transport.last_request
    assert request.method == "DELETE"
    assert request.url == "/rest/api/3/webhook"
    assert json.loads(request.body) == {"webhookIds": [10, 20]}


@pytest.mark.asyncio
async def test_filter_share_permission_not_found(dispatcher, stub_transport):
    stub_transport.response = json_response(
        404, {"errorMessages": ["The filter is not found."]}, reason="Not Found"
    )

    result = await FilterSharingService(dispatcher).get_share_permission(10000, 10010)

    assert not result.success
    assert result.error == {"errorMessages": ["The filter is not found."]}
    assert stub_transport.last_request.url == "/rest/api/3/filter/10000/permission/10010"


@pytest.mark.asyncio
async def test_forge_app_property_as_app(dispatcher, stub_transport):
    await AppPropertiesService(dispatcher).put_forge_app_property(
        "feature-flags", {"beta": True}, opts=RequestOptions(as_="app")
    )

    request = stub_transport.last_request
    assert request.as_ == "app"
    assert request.url == "/rest/forge/1/app/properties/feature-flags"
    assert request.body == '{"beta":true}'


@pytest.mark.asyncio
async def test_server_info(dispatcher, stub_transport):
    stub_transport.response = json_response(200, {"deploymentType": "Cloud"})

    result = await ServerInfoService(dispatcher).get_server_info()

    assert result.data["deploymentType"] == "Cloud"
    assert stub_transport.last_request.url == "/rest/api/3/serverInfo"
