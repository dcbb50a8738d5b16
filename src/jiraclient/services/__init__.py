"""Endpoint wrappers, one class per Jira API group."""

from .announcement_banner import AnnouncementBannerService
from .app_properties import AppPropertiesService
from .avatars import AvatarsService
from .base import Service
from .filter_sharing import FilterSharingService
from .issue_search import IssueSearchService
from .issues import IssuesService
from .myself import MyselfService
from .projects import ProjectsService
from .server_info import ServerInfoService
from .statuses import StatusesService
from .users import UsersService
from .webhooks import WebhooksService

__all__ = [
    "AnnouncementBannerService",
    "AppPropertiesService",
    "AvatarsService",
    "FilterSharingService",
    "IssueSearchService",
    "IssuesService",
    "MyselfService",
    "ProjectsService",
    "ServerInfoService",
    "Service",
    "StatusesService",
    "UsersService",
    "WebhooksService",
]
