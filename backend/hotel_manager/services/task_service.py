"""
任务服务
员工删除后任务保留，employee_id 为空
"""
from typing import List, Optional

from hotel_manager.models.schema import Task
from hotel_manager.services.base import CrudService


class TaskService(CrudService[Task]):
    """任务服务"""

    model = Task
    label = "任务"

    def get_tasks(self, employee_id: Optional[int] = None,
                  unassigned: bool = False) -> List[Task]:
        """获取任务列表

        employee_id 为员工的 user_id；unassigned=True 只返回无人负责的任务
        """
        query = self.db.query(Task)
        if unassigned:
            query = query.filter(Task.employee_id.is_(None))
        elif employee_id is not None:
            query = query.filter(Task.employee_id == employee_id)
        return query.order_by(Task.id).all()
