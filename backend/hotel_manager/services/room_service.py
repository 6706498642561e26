"""
房间服务
"""
from typing import List, Optional

from hotel_manager.models.schema import Room
from hotel_manager.services.base import CrudService


class RoomService(CrudService[Room]):
    """房间服务"""

    model = Room
    label = "房间"

    def get_rooms(self, hotel_id: Optional[int] = None,
                  available: Optional[bool] = None) -> List[Room]:
        """获取房间列表"""
        query = self.db.query(Room)
        if hotel_id is not None:
            query = query.filter(Room.hotel_id == hotel_id)
        if available is not None:
            query = query.filter(Room.available == available)
        return query.order_by(Room.number).all()
