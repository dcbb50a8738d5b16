"""The Jira Cloud REST API client."""

from typing import Any

import httpx

from .config import DefaultJiraConfig, JiraConfig, validate_config
from .dispatcher import Dispatcher
from .errors import ConfigError
from .logging import get_logger
from .request import RequestDescriptor, RequestOptions
from .result import JiraResult
from .services import (
    AnnouncementBannerService,
    AppPropertiesService,
    AvatarsService,
    FilterSharingService,
    IssueSearchService,
    IssuesService,
    MyselfService,
    ProjectsService,
    ServerInfoService,
    StatusesService,
    UsersService,
    WebhooksService,
)
from .transports import Transport, create_transport

logger = get_logger("client")


class JiraClient:
    """Entry point exposing each Jira API group as an attribute.

    Usage:
        config = DefaultJiraConfig(
            base_url="https://example.atlassian.net",
            email="me@example.com",
            api_token="...",
        )
        async with JiraClient(config) as jira:
            result = await jira.projects.get_project("EX")
            if result.success:
                print(result.data["name"])

    Several clients with different configurations can live side by side; each
    keeps its own immutable configuration and transport.
    """

    def __init__(
        self,
        config: JiraConfig,
        *,
        transport: Transport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            config: DefaultJiraConfig for direct HTTPS, ForgeJiraConfig for the bridge.
            transport: Custom transport. Overrides the one chosen from ``config``.
            http_client: Shared httpx client for direct mode. Owned by the caller.

        Raises:
            ConfigError: If the configuration is invalid.
        """
        validate_config(config)
        if http_client is not None and not isinstance(config, DefaultJiraConfig):
            raise ConfigError("http_client is only supported with DefaultJiraConfig")

        if transport is None:
            kwargs = {"client": http_client} if http_client is not None else {}
            transport = create_transport(config, **kwargs)

        self.config = config
        self.dispatcher = Dispatcher(config, transport)
        logger.debug(f"Created {config.client_type} Jira client")

        self.announcement_banner = AnnouncementBannerService(self.dispatcher)
        self.app_properties = AppPropertiesService(self.dispatcher)
        self.avatars = AvatarsService(self.dispatcher)
        self.filter_sharing = FilterSharingService(self.dispatcher)
        self.issues = IssuesService(self.dispatcher)
        self.issue_search = IssueSearchService(self.dispatcher)
        self.myself = MyselfService(self.dispatcher)
        self.projects = ProjectsService(self.dispatcher)
        self.server_info = ServerInfoService(self.dispatcher)
        self.statuses = StatusesService(self.dispatcher)
        self.users = UsersService(self.dispatcher)
        self.webhooks = WebhooksService(self.dispatcher)

    async def request(
        self,
        descriptor: RequestDescriptor,
        opts: RequestOptions | None = None,
    ) -> JiraResult[Any]:
        """Dispatch a raw descriptor, for endpoints without a wrapper."""
        return await self.dispatcher.dispatch(descriptor, opts)

    async def aclose(self) -> None:
        await self.dispatcher.aclose()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
