"""Unit tests for response/request model behavior shared by every endpoint."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from hubkit.models import (
    CheckRunsResponse,
    CheckRunUpdate,
    CheckStatusFilter,
    IssueUpdate,
    ItemState,
    ItemStateFilter,
    Label,
    LockReason,
    NewCheckRun,
    NewCheckRunOutput,
    RepositoryIssueRequest,
    RunnerResponse,
    SecretsCollection,
    Workflow,
    WorkflowRunsRequest,
    WorkflowRunStatus,
    WorkflowState,
)


class TestListResponseCombine:
    def test_total_count_is_max_across_pages(self):
        pages = [
            RunnerResponse(total_count=2, runners=[{"id": 1, "name": "a"}]),
            RunnerResponse(total_count=5, runners=[{"id": 2, "name": "b"}]),
            RunnerResponse(total_count=3, runners=[]),
        ]

        folded = RunnerResponse.combine(pages)

        assert folded.total_count == 5
        assert [runner.name for runner in folded.runners] == ["a", "b"]

    def test_no_pages(self):
        folded = CheckRunsResponse.combine([])

        assert folded.total_count == 0
        assert folded.check_runs == []

    def test_items_property_uses_declared_field(self):
        collection = SecretsCollection(total_count=1, secrets=[{"name": "DEPLOY_KEY"}])

        assert [secret.name for secret in collection.items] == ["DEPLOY_KEY"]

    def test_missing_total_count_defaults_to_zero(self):
        assert RunnerResponse.model_validate({"runners": []}).total_count == 0


class TestResponseModels:
    def test_unknown_fields_are_kept(self):
        label = Label.model_validate(
            {"id": 1, "name": "bug", "color": "d73a4a", "brand_new_field": True}
        )

        assert label.brand_new_field is True

    def test_missing_required_field_raises(self):
        with pytest.raises(ValidationError):
            Label.model_validate({"name": "bug"})

    def test_workflow_state_parsed_as_enum(self):
        workflow = Workflow.model_validate(
            {"id": 161335, "name": "CI", "state": "disabled_inactivity"}
        )

        assert workflow.state is WorkflowState.DISABLED_INACTIVITY


class TestRequestModels:
    def test_to_params_serializes_query_values(self):
        request = RepositoryIssueRequest(
            state=ItemStateFilter.ALL,
            labels=["bug", "ui"],
            since=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
            milestone="*",
        )

        assert request.to_params() == {
            "state": "all",
            "labels": "bug,ui",
            "since": "2024-03-01T12:00:00Z",
            "milestone": "*",
        }

    def test_to_params_booleans_are_lowercase(self):
        request = WorkflowRunsRequest(
            status=WorkflowRunStatus.COMPLETED, exclude_pull_requests=True
        )

        assert request.to_params() == {"status": "completed", "exclude_pull_requests": "true"}

    def test_to_payload_drops_unset_fields(self):
        new_check_run = NewCheckRun(name="lint", head_sha="abc123")

        assert new_check_run.to_payload() == {"name": "lint", "head_sha": "abc123"}

    def test_to_payload_sends_explicit_none_as_null(self):
        assert IssueUpdate(milestone=None).to_payload() == {"milestone": None}

    def test_to_payload_omits_fields_never_set(self):
        payload = IssueUpdate(title="Crash on start", state=ItemState.CLOSED).to_payload()

        assert payload == {"title": "Crash on start", "state": "closed"}
        assert "milestone" not in payload

    def test_to_payload_nested_models_keep_only_set_fields(self):
        update = CheckRunUpdate(output=NewCheckRunOutput(title="Lint", summary="2 warnings"))

        assert update.to_payload() == {"output": {"title": "Lint", "summary": "2 warnings"}}

    def test_enum_values_with_spaces(self):
        assert LockReason.TOO_HEATED.value == "too heated"
        assert CheckStatusFilter("in_progress") is CheckStatusFilter.IN_PROGRESS

    def test_unknown_request_fields_rejected(self):
        with pytest.raises(ValidationError):
            NewCheckRun(name="lint", head_sha="abc123", colour="red")
