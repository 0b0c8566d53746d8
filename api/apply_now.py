from typing import Optional

from schemas.apply_now import ApplyNowCreate, ApplyNowSetting, ApplyNowUpdate, Region
from api.base import parse_response
from services.request_executor import RequestError, RequestExecutor

REGION_PATHS = {
    Region.GLOBAL: "/admin/apply-now",
    Region.USA: "/admin/usa-apply-now",
    Region.INDIA: "/admin/india-apply-now",
}

REGION_LABELS = {
    Region.GLOBAL: "Apply Now",
    Region.USA: "USA Apply Now",
    Region.INDIA: "India Apply Now",
}


class ApplyNowApi:
    """
    The Apply Now setting of one region. It is a singleton: callers create it
    the first time and update it afterwards (see services.apply_now).
    """

    def __init__(self, executor: RequestExecutor, region: Region = Region.GLOBAL):
        self.executor = executor
        self.region = Region(region)
        self.path = REGION_PATHS[self.region]
        self.label = REGION_LABELS[self.region]

    async def get(self) -> Optional[ApplyNowSetting]:
        """The stored setting, or None when the region has never been configured."""
        msg = f"Failed to fetch {self.label} settings"
        data = await self.executor.get(self.path, fallback_message=msg)
        record = data.get("applyNow")
        if record is None:
            return None
        return parse_response(ApplyNowSetting, record, msg, data)

    async def create(self, payload: ApplyNowCreate) -> ApplyNowSetting:
        msg = f"Failed to create {self.label} settings"
        data = await self.executor.post(self.path, body=payload.to_fields(), fallback_message=msg)
        return self._unwrap(data, msg)

    async def update(self, payload: ApplyNowUpdate) -> ApplyNowSetting:
        msg = f"Failed to update {self.label} settings"
        data = await self.executor.put(self.path, body=payload.to_fields(), fallback_message=msg)
        return self._unwrap(data, msg)

    @staticmethod
    def _unwrap(data: dict, fallback: str) -> ApplyNowSetting:
        record = data.get("applyNow")
        if record is None:
            raise RequestError(fallback, payload=data)
        return parse_response(ApplyNowSetting, record, fallback, data)
