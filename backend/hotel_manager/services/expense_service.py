"""
支出服务
"""
from typing import List, Optional

from sqlalchemy import func

from hotel_manager.models.schema import Expense
from hotel_manager.models.schemas import ExpenseCreate
from hotel_manager.services.base import CrudService


class ExpenseService(CrudService[Expense]):
    """支出服务"""

    model = Expense
    label = "支出"

    def get_expenses(self, hotel_id: Optional[int] = None) -> List[Expense]:
        query = self.db.query(Expense)
        if hotel_id is not None:
            query = query.filter(Expense.hotel_id == hotel_id)
        return query.order_by(Expense.date.desc(), Expense.id.desc()).all()

    def create(self, data: ExpenseCreate) -> Expense:
        # 未给日期时交给数据库默认值 CURRENT_TIMESTAMP
        return self._insert(Expense(**data.model_dump(exclude_none=True)))

    def get_total(self, hotel_id: int) -> dict:
        """酒店支出合计"""
        total, count = (
            self.db.query(func.coalesce(func.sum(Expense.value), 0), func.count(Expense.id))
            .filter(Expense.hotel_id == hotel_id)
            .one()
        )
        return {"hotel_id": hotel_id, "total": float(total), "count": count}
