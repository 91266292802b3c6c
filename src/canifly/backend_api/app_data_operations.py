"""Application snapshot queries."""

from typing import Optional

from canifly.app_data import AppData, normalize_app_data


class AppDataOperations:
    """Fetch the backend's application snapshot, cached or fresh."""

    def __init__(self, request_executor) -> None:
        self._executor = request_executor

    async def get_app_data(self) -> Optional[AppData]:
        payload = await self._executor.execute_request("GET", "/api/app-data")
        return normalize_app_data(payload)

    async def get_app_data_no_cache(self) -> Optional[AppData]:
        payload = await self._executor.execute_request("GET", "/api/app-data-no-cache")
        return normalize_app_data(payload)
