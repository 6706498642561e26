"""
预订服务

预订与客户多对多，通过 customer_reservations 关联。
创建预订和写入关联在同一个事务里完成。
"""
import logging
from typing import List, Optional

from hotel_manager.errors import committing
from hotel_manager.models.schema import Reservation, CustomerReservation
from hotel_manager.models.schemas import ReservationCreate
from hotel_manager.services.base import CrudService

logger = logging.getLogger(__name__)


class ReservationService(CrudService[Reservation]):
    """预订服务"""

    model = Reservation
    label = "预订"

    def get_reservations(self, room_number: Optional[int] = None,
                         customer_cpf: Optional[str] = None,
                         status_paid: Optional[bool] = None) -> List[Reservation]:
        """获取预订列表"""
        query = self.db.query(Reservation)
        if room_number is not None:
            query = query.filter(Reservation.room_number == room_number)
        if customer_cpf is not None:
            query = query.join(
                CustomerReservation,
                CustomerReservation.reservation_number == Reservation.number,
            ).filter(CustomerReservation.customer_cpf == customer_cpf)
        if status_paid is not None:
            query = query.filter(Reservation.status_paid == status_paid)
        return query.order_by(Reservation.number).all()

    def create(self, data: ReservationCreate) -> Reservation:
        """创建预订并关联客户"""
        fields = data.model_dump(exclude_unset=True, exclude={"customer_cpfs"})
        reservation = Reservation(**fields)
        with committing(self.db):
            self.db.add(reservation)
            self.db.flush()
            for cpf in dict.fromkeys(data.customer_cpfs):
                self.db.add(CustomerReservation(
                    customer_cpf=cpf, reservation_number=reservation.number
                ))
        self.db.refresh(reservation)
        logger.info("新建预订 %s, 客户 %s", reservation.number, data.customer_cpfs)
        return reservation

    def mark_paid(self, number: int, paid: bool = True) -> Reservation:
        """更新支付状态"""
        reservation = self.get_or_raise(number)
        with committing(self.db):
            reservation.status_paid = paid
        self.db.refresh(reservation)
        return reservation

    def add_customer(self, number: int, customer_cpf: str) -> Reservation:
        """关联客户，重复关联报 UniqueViolation"""
        reservation = self.get_or_raise(number)
        with committing(self.db):
            self.db.add(CustomerReservation(customer_cpf=customer_cpf, reservation_number=number))
        self.db.refresh(reservation)
        return reservation

    def remove_customer(self, number: int, customer_cpf: str) -> Reservation:
        """取消客户关联"""
        reservation = self.get_or_raise(number)
        link = self.db.get(CustomerReservation, (customer_cpf, number))
        if link is None:
            raise ValueError(f"客户 {customer_cpf} 不在预订 {number} 中")
        with committing(self.db):
            self.db.delete(link)
        self.db.refresh(reservation)
        return reservation
