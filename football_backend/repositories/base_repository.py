# base_repository.py
# Shared helpers for the SQLModel-backed repositories.

from typing import List, Tuple, Type

from sqlalchemy import func
from sqlmodel import Session, SQLModel, col, select

from football_backend.core.clock import utc_now
from football_backend.core.pagination import page_offset


def live(model: Type[SQLModel]):
    """WHERE clause hiding soft-deleted rows."""
    return col(model.deleted_at).is_(None)


class SqlRepository:
    model: Type[SQLModel] = None

    def __init__(self, session: Session):
        self.session = session

    def _live_select(self):
        return select(self.model).where(live(self.model))

    def _count(self, *conditions) -> int:
        stmt = select(func.count()).select_from(self.model).where(live(self.model), *conditions)
        return self.session.exec(stmt).one()

    def _paginate(self, stmt, conditions, page: int, limit: int) -> Tuple[List, int]:
        """Run an ordered select for one page and return (items, total)."""
        total = self._count(*conditions)
        items = self.session.exec(stmt.offset(page_offset(page, limit)).limit(limit)).all()
        return list(items), total

    def _find_live(self, row_id: int):
        return self.session.exec(
            self._live_select().where(col(self.model.id) == row_id)
        ).first()

    def _exists(self, row_id: int) -> bool:
        return self._count(col(self.model.id) == row_id) > 0

    def _save(self, row):
        self.session.add(row)
        self.session.flush()
        self.session.refresh(row)
        return row

    def _touch_and_save(self, row):
        row.updated_at = utc_now()
        return self._save(row)

    def _soft_delete(self, row_id: int) -> bool:
        row = self._find_live(row_id)
        if row is None:
            return False
        now = utc_now()
        row.deleted_at = now
        row.updated_at = now
        self.session.add(row)
        self.session.flush()
        return True
