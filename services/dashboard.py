from __future__ import annotations

import asyncio
from typing import Sequence

from pydantic import BaseModel, Field

from api.categories import CategoriesApi
from api.loans import LoansApi
from schemas.category import Category
from schemas.loan import Loan

RECENT_LOANS = 5


class DashboardStats(BaseModel):
    total_categories: int = 0
    total_loans: int = 0
    active_loans: int = 0
    pending_loans: int = 0
    approved_loans: int = 0
    rejected_loans: int = 0
    total_loan_amount: float = 0
    recent_loans: list[Loan] = Field(default_factory=list)


def compute_stats(categories: Sequence[Category], loans: Sequence[Loan]) -> DashboardStats:
    return DashboardStats(
        total_categories=len(categories),
        total_loans=len(loans),
        active_loans=sum(1 for l in loans if l.is_active),
        pending_loans=sum(1 for l in loans if l.status == "pending"),
        approved_loans=sum(1 for l in loans if l.status == "approved"),
        rejected_loans=sum(1 for l in loans if l.status == "rejected"),
        total_loan_amount=sum(l.amount or 0 for l in loans),
        recent_loans=list(loans[:RECENT_LOANS]),
    )


async def load_dashboard(categories_api: CategoriesApi, loans_api: LoansApi) -> DashboardStats:
    """Fetch both lists concurrently; either may finish first."""
    categories, loans = await asyncio.gather(categories_api.list(), loans_api.list())
    return compute_stats(categories, loans)
