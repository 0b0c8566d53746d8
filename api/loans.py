from __future__ import annotations

from typing import Optional

from schemas.loan import Loan, LoanCreate, LoanUpdate

from api.base import ResourceApi


class LoansApi(ResourceApi[Loan]):
    """
    Loan listings. Writes carrying a bank logo go out as multipart; an update
    without one never mentions `bankLogo`, so the stored logo is kept.
    """

    path = "/admin/loans"
    model = Loan
    list_key = "loans"
    item_key = "loan"
    singular = "loan"
    plural = "loans"

    async def list(self, category_id: Optional[str] = None) -> list[Loan]:
        return await self._list({"category": category_id} if category_id else None)

    async def create(self, payload: LoanCreate) -> Loan:
        return await super().create(payload)

    async def update(self, item_id: str, payload: LoanUpdate) -> Loan:
        return await super().update(item_id, payload)
