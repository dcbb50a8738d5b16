"""App properties for Connect and Forge apps."""

from typing import Any

from ..request import RequestOptions
from ..result import JiraResult
from .base import JsonObject, Service, to_json

ADDON_PROPERTIES = "/rest/atlassian-connect/1/addons/{addonKey}/properties"
ADDON_PROPERTY = ADDON_PROPERTIES + "/{propertyKey}"
FORGE_APP_PROPERTY = "/rest/forge/1/app/properties/{propertyKey}"


class AppPropertiesService(Service):
    """Store arbitrary data for a Connect or Forge app.

    Connect apps can only access their own properties, so ``addon_key`` must be
    the calling app's key.
    """

    async def get_addon_properties(
        self, addon_key: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Return all properties stored for an app."""
        return await self._request(
            ADDON_PROPERTIES, path_params={"addonKey": addon_key}, opts=opts
        )

    async def get_addon_property(
        self, addon_key: str, property_key: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        return await self._request(
            ADDON_PROPERTY,
            path_params={"addonKey": addon_key, "propertyKey": property_key},
            opts=opts,
        )

    async def put_addon_property(
        self,
        addon_key: str,
        property_key: str,
        value: Any,
        *,
        opts: RequestOptions | None = None,
    ) -> JiraResult[JsonObject]:
        """Set a property. The value must be valid JSON no larger than 32 KB."""
        return await self._request(
            ADDON_PROPERTY,
            "PUT",
            path_params={"addonKey": addon_key, "propertyKey": property_key},
            body=to_json(value),
            opts=opts,
        )

    async def delete_addon_property(
        self, addon_key: str, property_key: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        return await self._request(
            ADDON_PROPERTY,
            "DELETE",
            path_params={"addonKey": addon_key, "propertyKey": property_key},
            is_response_available=False,
            opts=opts,
        )

    async def put_forge_app_property(
        self, property_key: str, value: Any, *, opts: RequestOptions | None = None
    ) -> JiraResult[JsonObject]:
        """Set a Forge app property. Only callable as the app."""
        return await self._request(
            FORGE_APP_PROPERTY,
            "PUT",
            path_params={"propertyKey": property_key},
            body=to_json(value),
            opts=opts,
        )

    async def delete_forge_app_property(
        self, property_key: str, *, opts: RequestOptions | None = None
    ) -> JiraResult[None]:
        return await self._request(
            FORGE_APP_PROPERTY,
            "DELETE",
            path_params={"propertyKey": property_key},
            is_response_available=False,
            opts=opts,
        )
