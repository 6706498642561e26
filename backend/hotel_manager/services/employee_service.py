"""
员工服务
"""
from typing import List, Optional

from hotel_manager.models.schema import Employee
from hotel_manager.services.base import CrudService


class EmployeeService(CrudService[Employee]):
    """员工服务"""

    model = Employee
    label = "员工"

    def get_employees(self, hotel_id: Optional[int] = None) -> List[Employee]:
        query = self.db.query(Employee)
        if hotel_id is not None:
            query = query.filter(Employee.hotel_id == hotel_id)
        return query.order_by(Employee.name).all()

    def get_by_user(self, user_id: int) -> Optional[Employee]:
        """根据登录账号获取员工"""
        return self.db.query(Employee).filter(Employee.user_id == user_id).first()
