"""
客户服务
"""
from typing import List, Optional

from hotel_manager.models.schema import Customer
from hotel_manager.services.base import CrudService


class CustomerService(CrudService[Customer]):
    """客户服务"""

    model = Customer
    label = "客户"

    def get_customers(self, search: Optional[str] = None, limit: int = 100) -> List[Customer]:
        """获取客户列表，search 按姓名或 CPF 模糊匹配"""
        query = self.db.query(Customer)
        if search:
            pattern = f"%{search}%"
            query = query.filter(Customer.name.like(pattern) | Customer.cpf.like(pattern))
        return query.order_by(Customer.name).limit(limit).all()
