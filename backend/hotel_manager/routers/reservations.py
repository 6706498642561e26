"""
预订管理路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_manager.database import get_db
from hotel_manager.models.schema import User
from hotel_manager.models.schemas import (
    ReservationCreate, ReservationUpdate, ReservationResponse, RoomServiceResponse,
    RoomServiceTotal
)
from hotel_manager.services.reservation_service import ReservationService
from hotel_manager.services.room_service_orders import RoomServiceOrderService
from hotel_manager.security.auth import get_current_user, require_admin

router = APIRouter(prefix="/reservations", tags=["预订管理"])


@router.get("", response_model=List[ReservationResponse])
def list_reservations(
    room_number: Optional[int] = Query(None),
    customer_cpf: Optional[str] = Query(None),
    status_paid: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取预订列表"""
    return ReservationService(db).get_reservations(
        room_number=room_number, customer_cpf=customer_cpf, status_paid=status_paid
    )


@router.get("/{number}", response_model=ReservationResponse)
def get_reservation(
    number: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取预订详情"""
    reservation = ReservationService(db).get(number)
    if not reservation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="预订不存在")
    return reservation


@router.get("/{number}/room-services", response_model=List[RoomServiceResponse])
def get_reservation_room_services(
    number: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取预订下的客房服务"""
    return RoomServiceOrderService(db).get_orders(reservation_number=number)


@router.get("/{number}/room-services/total", response_model=RoomServiceTotal)
def get_reservation_room_service_total(
    number: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """预订下客房服务的金额合计"""
    try:
        ReservationService(db).get_or_raise(number)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    total = RoomServiceOrderService(db).total_for_reservation(number)
    return {"reservation_number": number, "total": total}


@router.post("", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
def create_reservation(
    data: ReservationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """创建预订"""
    return ReservationService(db).create(data)


@router.put("/{number}", response_model=ReservationResponse)
def update_reservation(
    number: int,
    data: ReservationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """更新预订"""
    try:
        return ReservationService(db).update(number, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{number}/pay", response_model=ReservationResponse)
def pay_reservation(
    number: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """标记为已支付"""
    try:
        return ReservationService(db).mark_paid(number)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{number}/customers/{cpf}", response_model=ReservationResponse)
def add_reservation_customer(
    number: int,
    cpf: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """关联客户"""
    try:
        return ReservationService(db).add_customer(number, cpf)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{number}/customers/{cpf}", response_model=ReservationResponse)
def remove_reservation_customer(
    number: int,
    cpf: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """取消客户关联"""
    try:
        return ReservationService(db).remove_customer(number, cpf)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{number}")
def delete_reservation(
    number: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """删除预订，客户关联与客房服务一并删除"""
    try:
        ReservationService(db).delete(number)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "删除成功"}
