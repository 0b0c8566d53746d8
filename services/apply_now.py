"""
Create-or-update protocol for a regional Apply Now setting.

    UNKNOWN --load(), no record--> NOT_CONFIGURED --save()--> CONFIGURED
    UNKNOWN --load(), record-----> CONFIGURED     --save()--> CONFIGURED
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from api.apply_now import ApplyNowApi
from schemas.apply_now import ApplyNowCreate, ApplyNowSetting, ApplyNowUpdate


class SettingState(str, Enum):
    UNKNOWN = "unknown"
    NOT_CONFIGURED = "not_configured"
    CONFIGURED = "configured"


class ApplyNowSettings:
    def __init__(self, api: ApplyNowApi):
        self.api = api
        self.setting: Optional[ApplyNowSetting] = None
        self.state = SettingState.UNKNOWN

    async def load(self) -> Optional[ApplyNowSetting]:
        self.setting = await self.api.get()
        self.state = SettingState.CONFIGURED if self.setting else SettingState.NOT_CONFIGURED
        return self.setting

    async def save(self, is_active: bool, description: Optional[str] = None) -> ApplyNowSetting:
        if self.state is SettingState.UNKNOWN:
            await self.load()
        if self.state is SettingState.CONFIGURED:
            saved = await self.api.update(ApplyNowUpdate(is_active=is_active, description=description))
        else:
            saved = await self.api.create(ApplyNowCreate(is_active=is_active, description=description))
        self.setting = saved
        self.state = SettingState.CONFIGURED
        return saved
