"""
酒店服务

软删除只是把 deleted 置为 True，默认查询会排除这些酒店；
purge 才是物理删除，房间、员工、支出随之级联删除。
"""
import logging
from typing import List, Optional

from hotel_manager.errors import committing
from hotel_manager.models.schema import Hotel
from hotel_manager.services.base import CrudService

logger = logging.getLogger(__name__)


class HotelService(CrudService[Hotel]):
    """酒店服务"""

    model = Hotel
    label = "酒店"

    def get_hotels(self, include_deleted: bool = False, limit: int = 100) -> List[Hotel]:
        """获取酒店列表"""
        query = self.db.query(Hotel)
        if not include_deleted:
            query = query.filter(Hotel.deleted.is_(False))
        return query.order_by(Hotel.id).limit(limit).all()

    def get_hotel(self, hotel_id: int, include_deleted: bool = False) -> Optional[Hotel]:
        """获取单个酒店，已软删除的默认视为不存在"""
        hotel = self.get(hotel_id)
        if hotel is None or (hotel.deleted and not include_deleted):
            return None
        return hotel

    def _set_deleted(self, hotel_id: int, deleted: bool) -> Hotel:
        hotel = self.get_or_raise(hotel_id)
        with committing(self.db):
            hotel.deleted = deleted
        self.db.refresh(hotel)
        return hotel

    def soft_delete(self, hotel_id: int) -> Hotel:
        """软删除"""
        hotel = self._set_deleted(hotel_id, True)
        logger.info("酒店 %s 已标记删除", hotel_id)
        return hotel

    def restore(self, hotel_id: int) -> Hotel:
        """撤销软删除"""
        return self._set_deleted(hotel_id, False)

    def purge(self, hotel_id: int) -> None:
        """物理删除"""
        self.delete(hotel_id)
