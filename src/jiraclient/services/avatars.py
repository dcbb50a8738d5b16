"""System and custom avatars."""

from typing import Literal

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service

AvatarType = Literal["project", "issuetype", "priority"]
AvatarSize = Literal["xsmall", "small", "medium", "large", "xlarge"]
AvatarFormat = Literal["png", "svg"]


class AvatarsService(Service):
    """Obtain, add and remove avatars for projects, issue types and priorities."""

    async def get_all_system_avatars(
        self,
        avatar_type: Literal["issuetype", "project", "user", "priority"],
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Return the system avatars for an avatar type."""
        return await self._request(
            "/rest/api/3/avatar/{type}/system",
            path_params={"type": avatar_type},
            opts=opts,
        )

    async def get_avatars(
        self, avatar_type: AvatarType, entity_id: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Return the system and custom avatars for a project, issue type or priority."""
        return await self._request(
            "/rest/api/3/universal_avatar/type/{type}/owner/{entityId}",
            path_params={"type": avatar_type, "entityId": entity_id},
            opts=opts,
        )

    async def store_avatar(
        self,
        avatar_type: AvatarType,
        entity_id: str,
        image: bytes,
        *,
        media_type: str,
        size: int,
        x: int | None = None,
        y: int | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Upload a custom avatar.

        The image is cropped to a square of ``size`` pixels whose top-left
        corner is at (``x``, ``y``).

        Args:
            avatar_type: Which kind of item the avatar belongs to.
            entity_id: ID of the project, issue type or priority.
            image: Raw image bytes.
            media_type: Image media type, e.g. ``image/png``.
            size: Length of each side of the crop region.
            x: X coordinate of the crop region.
            y: Y coordinate of the crop region.
            opts: Per-call request options.
        """
        return await self._request(
            "/rest/api/3/universal_avatar/type/{type}/owner/{entityId}",
            "POST",
            path_params={"type": avatar_type, "entityId": entity_id},
            query_params={"x": x, "y": y, "size": size},
            body=image,
            headers={"Content-Type": media_type, "X-Atlassian-Token": "no-check"},
            opts=opts,
        )

    async def delete_avatar(
        self,
        avatar_type: AvatarType,
        owning_object_id: str,
        avatar_id: int,
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/api/3/universal_avatar/type/{type}/owner/{owningObjectId}/avatar/{id}",
            "DELETE",
            path_params={"type": avatar_type, "owningObjectId": owning_object_id, "id": avatar_id},
            is_response_available=False,
            opts=opts,
        )

    async def get_avatar_image_by_type(
        self,
        avatar_type: AvatarType,
        *,
        size: AvatarSize | None = None,
        image_format: AvatarFormat | None = None,
        opts: RequestOptions | None = None,
    ) -> JiraResult[bytes]:
        """Return the default avatar image for a type as raw bytes."""
        return await self._request(
            "/rest/api/3/universal_avatar/view/type/{type}",
            path_params={"type": avatar_type},
            query_params={"size": size, "format": image_format},
            headers={"Accept": "image/png, image/svg+xml, application/json"},
            response_format="bytes",
            opts=opts,
        )
