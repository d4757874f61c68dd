"""GitHub Actions entry point (``client.actions``)."""

from ..http import ApiConnection
from .base import ApiClient
from .runners import SelfHostedRunnerGroupsClient, SelfHostedRunnersClient
from .workflows import WorkflowsClient


class ActionsClient(ApiClient):
    """Groups the Actions clients.

    Attributes:
        self_hosted_runners: SelfHostedRunnersClient
        self_hosted_runner_groups: SelfHostedRunnerGroupsClient
        workflows: WorkflowsClient (with ``jobs`` and ``runs``)
    """

    def __init__(self, api_connection: ApiConnection) -> None:
        super().__init__(api_connection)
        self.self_hosted_runners = SelfHostedRunnersClient(api_connection)
        self.self_hosted_runner_groups = SelfHostedRunnerGroupsClient(api_connection)
        self.workflows = WorkflowsClient(api_connection)
