"""
客房服务单
每条客房服务是一个任务的扩展，同时挂在某个预订上；
任务或预订被删除时一并删除。
"""
from typing import List, Optional

from sqlalchemy import func

from hotel_manager.models.schema import RoomService
from hotel_manager.services.base import CrudService


class RoomServiceOrderService(CrudService[RoomService]):
    """客房服务单"""

    model = RoomService
    label = "客房服务"

    def get_orders(self, reservation_number: Optional[int] = None) -> List[RoomService]:
        query = self.db.query(RoomService)
        if reservation_number is not None:
            query = query.filter(RoomService.reservation_number == reservation_number)
        return query.order_by(RoomService.task_id).all()

    def total_for_reservation(self, reservation_number: int) -> float:
        """预订下所有客房服务的金额合计"""
        total = (
            self.db.query(func.coalesce(func.sum(RoomService.price), 0))
            .filter(RoomService.reservation_number == reservation_number)
            .scalar()
        )
        return float(total)
