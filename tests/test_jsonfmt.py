import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import pytest

from reprise.jsonfmt import (
    format_app,
    format_apps,
    format_artifacts,
    format_build,
    format_builds,
    format_json,
    format_pipeline,
    format_pipelines,
)


@dataclass
class Owner:
    account_type: str
    name: str
    slug: str


@dataclass
class App:
    slug: str
    title: str
    project_type: Optional[str]
    provider: Optional[str]
    repo_owner: Optional[str]
    repo_slug: Optional[str]
    repo_url: Optional[str]
    is_disabled: bool
    status: int
    is_public: bool
    owner: Owner


@dataclass
class Build:
    slug: str
    triggered_at: datetime
    status: int
    status_text: str
    branch: str
    build_number: int
    triggered_workflow: str
    started_on_worker_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    abort_reason: Optional[str] = None
    commit_hash: Optional[str] = None


@dataclass
class Pipeline:
    id: str
    app_slug: str
    status: int
    status_text: Optional[str]
    triggered_at: Optional[datetime]
    branch: str
    pipeline_id: str
    workflows: list = field(default_factory=list)


@dataclass
class Artifact:
    title: str
    slug: str
    artifact_type: Optional[str]
    file_size_bytes: Optional[int]
    is_public_page_enabled: bool


NOON = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_test_app(slug, title):
    return App(
        slug=slug,
        title=title,
        project_type="ios",
        provider="github",
        repo_owner="testowner",
        repo_slug="testrepo",
        repo_url="https://example.com/test/repo",
        is_disabled=False,
        status=1,
        is_public=False,
        owner=Owner(account_type="user", name="Test User", slug="user-slug"),
    )


def make_test_build(slug, build_number):
    return Build(
        slug=slug,
        triggered_at=NOON,
        status=1,
        status_text="success",
        branch="main",
        build_number=build_number,
        triggered_workflow="primary",
    )


def make_test_pipeline(pipeline_id):
    return Pipeline(
        id=pipeline_id,
        app_slug="test-app",
        status=1,
        status_text="success",
        triggered_at=NOON,
        branch="main",
        pipeline_id="build-and-test",
    )


def make_test_artifact(slug, title):
    return Artifact(
        title=title,
        slug=slug,
        artifact_type="file",
        file_size_bytes=1024,
        is_public_page_enabled=False,
    )


def test_format_apps_empty():
    assert format_apps([]) == "[]"


def test_format_apps_valid_json():
    parsed = json.loads(format_apps([make_test_app("slug1", "My App")]))
    assert len(parsed) == 1


def test_format_apps_contains_fields():
    result = format_apps([make_test_app("test-slug", "Test App")])
    assert '"slug": "test-slug"' in result
    assert '"title": "Test App"' in result


def test_format_app_valid_json():
    parsed = json.loads(format_app(make_test_app("slug1", "My App")))
    assert parsed["slug"] == "slug1"
    assert parsed["owner"]["name"] == "Test User"


def test_format_app_contains_all_fields():
    result = format_app(make_test_app("test-slug", "Test App"))
    for key in ('"slug"', '"title"', '"owner"', '"is_disabled"'):
        assert key in result


def test_format_builds_empty():
    assert format_builds([]) == "[]"


def test_format_builds_valid_json():
    parsed = json.loads(format_builds([make_test_build("slug1", 123)]))
    assert len(parsed) == 1


def test_format_builds_contains_fields():
    result = format_builds([make_test_build("build-slug", 456)])
    assert '"slug": "build-slug"' in result
    assert '"build_number": 456' in result


def test_format_build_valid_json():
    parsed = json.loads(format_build(make_test_build("slug1", 789)))
    assert parsed["build_number"] == 789


def test_format_build_contains_all_fields():
    result = format_build(make_test_build("test-slug", 1))
    for key in ('"slug"', '"branch"', '"triggered_workflow"', '"status"'):
        assert key in result


def test_format_build_datetime_and_null():
    parsed = json.loads(format_build(make_test_build("s", 1)))
    assert parsed["triggered_at"] == "2024-01-01T12:00:00Z"
    assert parsed["finished_at"] is None


def test_format_pipelines_empty():
    assert format_pipelines([]) == "[]"


def test_format_pipelines_valid_json():
    parsed = json.loads(format_pipelines([make_test_pipeline("pipeline-id")]))
    assert len(parsed) == 1


def test_format_pipeline_valid_json():
    parsed = json.loads(format_pipeline(make_test_pipeline("test-id")))
    assert parsed["id"] == "test-id"
    assert parsed["workflows"] == []


def test_format_artifacts_empty():
    assert format_artifacts([]) == "[]"


def test_format_artifacts_valid_json():
    parsed = json.loads(format_artifacts([make_test_artifact("art-slug", "my-app.ipa")]))
    assert len(parsed) == 1


def test_format_artifacts_contains_fields():
    result = format_artifacts([make_test_artifact("artifact-123", "test.ipa")])
    assert '"slug": "artifact-123"' in result
    assert '"title": "test.ipa"' in result


def test_format_json_simple_struct():
    @dataclass
    class Simple:
        name: str
        count: int

    result = format_json(Simple(name="test", count=42))
    assert '"name": "test"' in result
    assert '"count": 42' in result


def test_format_json_vec():
    assert json.loads(format_json([1, 2, 3])) == [1, 2, 3]


def test_format_json_hashmap():
    assert '"key": "value"' in format_json({"key": "value"})


def test_format_json_unserializable():
    with pytest.raises(TypeError):
        format_json(object())