"""Unit tests for the build information service client.

The HTTP session is mocked; no network calls are made.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from pipeline_triggers.build.client import BuildInfoError, BuildServiceClient
from pipeline_triggers.build.service import RemoteBuildInfoService
from pipeline_triggers.model.build_event import Build, BuildEvent, BuildProject


def _session(json_body: object = None, *, status_error: Exception | None = None) -> Mock:
    response = Mock()
    response.json.return_value = json_body
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    session = Mock(spec=requests.Session)
    session.headers = {}
    session.get.return_value = response
    return session


def _client(session: Mock, **kwargs: object) -> BuildServiceClient:
    return BuildServiceClient(
        base_url="https://builds.example.com/", session=session, **kwargs  # type: ignore[arg-type]
    )


def _build_event(number: int | str | None = 42, job: str = "build-1") -> BuildEvent:
    return BuildEvent(
        master="jenkins", project=BuildProject(name=job, last_build=Build(number=number))
    )


def test_client_requires_base_url() -> None:
    with pytest.raises(ValueError):
        BuildServiceClient(base_url="  ")


def test_client_sets_auth_header_only_with_token() -> None:
    anonymous = _session()
    _client(anonymous)
    assert "Authorization" not in anonymous.headers

    authed = _session()
    _client(authed, token="secret")
    assert authed.headers["Authorization"] == "Bearer secret"


def test_build_status_url_keeps_folder_job_slashes() -> None:
    client = _client(_session())

    assert (
        client.build_status_url(build_number=42, master="jenkins", job="team/service build")
        == "https://builds.example.com/builds/status/42/jenkins/team/service%20build"
    )


def test_property_file_url() -> None:
    client = _client(_session())

    assert (
        client.property_file_url(
            build_number=7, file_name="deploy.properties", master="ci master", job="app"
        )
        == "https://builds.example.com/builds/properties/7/deploy.properties/ci%20master/app"
    )


def test_get_build_returns_json_object() -> None:
    session = _session({"result": "SUCCESS", "number": 42})
    client = _client(session, timeout_seconds=5.0)

    assert client.get_build(build_number=42, master="jenkins", job="build-1") == {
        "result": "SUCCESS",
        "number": 42,
    }
    session.get.assert_called_once_with(
        "https://builds.example.com/builds/status/42/jenkins/build-1", timeout=5.0
    )


def test_http_errors_become_build_info_errors() -> None:
    session = _session(status_error=requests.HTTPError("503 Server Error"))

    with pytest.raises(BuildInfoError) as exc_info:
        _client(session).get_build(build_number=42, master="jenkins", job="build-1")

    assert isinstance(exc_info.value.__cause__, requests.HTTPError)


def test_non_object_body_is_rejected() -> None:
    with pytest.raises(BuildInfoError, match="expected an object"):
        _client(_session(["not", "an", "object"])).get_build(
            build_number=42, master="jenkins", job="build-1"
        )


def test_remote_service_fetches_build_info() -> None:
    client = Mock(spec=BuildServiceClient)
    client.get_build.return_value = {"result": "SUCCESS"}

    info = RemoteBuildInfoService(client).get_build_info(_build_event())

    assert info == {"result": "SUCCESS"}
    client.get_build.assert_called_once_with(build_number=42, master="jenkins", job="build-1")


@pytest.mark.parametrize("number", [None, ""])
def test_remote_service_requires_build_number(number: str | None) -> None:
    client = Mock(spec=BuildServiceClient)

    with pytest.raises(BuildInfoError, match="no build number"):
        RemoteBuildInfoService(client).get_build_info(_build_event(number=number))

    client.get_build.assert_not_called()


@pytest.mark.parametrize("property_file", [None, ""])
def test_remote_service_skips_properties_without_file(property_file: str | None) -> None:
    client = Mock(spec=BuildServiceClient)

    assert RemoteBuildInfoService(client).get_properties(_build_event(), property_file) == {}
    client.get_property_file.assert_not_called()


def test_remote_service_fetches_properties() -> None:
    client = Mock(spec=BuildServiceClient)
    client.get_property_file.return_value = {"version": "1.2.3"}

    props = RemoteBuildInfoService(client).get_properties(_build_event(), "deploy.properties")

    assert props == {"version": "1.2.3"}
    client.get_property_file.assert_called_once_with(
        build_number=42, file_name="deploy.properties", master="jenkins", job="build-1"
    )


def test_client_context_manager_closes_session() -> None:
    session = _session()

    with _client(session) as client:
        client.get_build(build_number=42, master="jenkins", job="build-1")

    session.close.assert_called_once_with()
