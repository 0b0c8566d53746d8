"""
AdminClient: one session store, one executor and every resource client, wired together.

    async with AdminClient.from_settings() as client:
        await client.auth.login("admin@example.com", "secret")
        categories = await client.categories.list()
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from api import ApplyNowApi, AuthApi, CategoriesApi, CommodityPricesApi, LoansApi
from config import Settings, configure_logging, settings as default_settings
from schemas.apply_now import Region
from services.apply_now import ApplyNowSettings
from services.dashboard import DashboardStats, load_dashboard
from services.request_executor import RequestExecutor
from services.session_store import FileStorage, KeyValueStorage, SessionStore

logger = logging.getLogger(__name__)


class AdminClient:
    def __init__(
        self,
        session: SessionStore,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self.executor = RequestExecutor(session, base_url, timeout=timeout, transport=transport)
        self.auth = AuthApi(self.executor)
        self.categories = CategoriesApi(self.executor)
        self.loans = LoansApi(self.executor)
        self.commodity_prices = CommodityPricesApi(self.executor)
        self.apply_now = ApplyNowApi(self.executor, Region.GLOBAL)
        self.usa_apply_now = ApplyNowApi(self.executor, Region.USA)
        self.india_apply_now = ApplyNowApi(self.executor, Region.INDIA)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        storage: Optional[KeyValueStorage] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AdminClient":
        """Build a client and restore any persisted session before returning it."""
        settings = settings or default_settings
        configure_logging(settings)
        session = SessionStore(storage if storage is not None else FileStorage(settings.session_file))
        session.restore()
        if settings.is_local:
            logger.info("Using local backend at %s", settings.api_base_url)
        return cls(session, settings.api_base_url, timeout=settings.request_timeout, transport=transport)

    def apply_now_for(self, region: Region) -> ApplyNowApi:
        return {
            Region.GLOBAL: self.apply_now,
            Region.USA: self.usa_apply_now,
            Region.INDIA: self.india_apply_now,
        }[Region(region)]

    def apply_now_settings(self, region: Region = Region.GLOBAL) -> ApplyNowSettings:
        return ApplyNowSettings(self.apply_now_for(region))

    async def dashboard(self) -> DashboardStats:
        return await load_dashboard(self.categories, self.loans)

    async def __aenter__(self) -> "AdminClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.executor.aclose()
