"""
Admin dashboard view-model: filtering, category list and the detail view state.
All derivations are pure functions of (applications, search_term, category).
"""
from __future__ import annotations

from typing import Optional, Sequence

from schemas.application import ApplicationRecord


def filter_applications(
    applications: Sequence[ApplicationRecord],
    search_term: str = "",
    category: str = "",
) -> list[ApplicationRecord]:
    """
    Case-insensitive substring match on name AND exact (case-sensitive) loan category.
    An empty category means no category filter. Order is preserved.
    """
    term = (search_term or "").lower()
    return [
        a
        for a in applications
        if term in (a.name or "").lower() and (not category or a.loan_category == category)
    ]


def loan_categories(applications: Sequence[ApplicationRecord]) -> list[str]:
    """Distinct loan categories in first-seen order."""
    return list(dict.fromkeys(a.loan_category for a in applications))


class DashboardState:
    def __init__(
        self,
        applications: Sequence[ApplicationRecord] = (),
        search_term: str = "",
        category: str = "",
    ):
        self.applications: list[ApplicationRecord] = list(applications)
        self.search_term = search_term
        self.category = category
        self.selected: Optional[ApplicationRecord] = None

    @property
    def filtered_applications(self) -> list[ApplicationRecord]:
        return filter_applications(self.applications, self.search_term, self.category)

    @property
    def loan_categories(self) -> list[str]:
        return loan_categories(self.applications)

    @property
    def is_detail_open(self) -> bool:
        return self.selected is not None

    def find(self, app_id: str) -> Optional[ApplicationRecord]:
        return next((a for a in self.applications if a.id == app_id), None)

    def view(self, application: ApplicationRecord) -> None:
        self.selected = application

    def close(self) -> None:
        self.selected = None

    def remove(self, app_id: str) -> None:
        """Drop a confirmed-deleted application and close the detail view."""
        self.applications = [a for a in self.applications if a.id != app_id]
        self.close()
