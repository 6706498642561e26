"""
客房服务路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_manager.database import get_db
from hotel_manager.models.schema import User
from hotel_manager.models.schemas import RoomServiceCreate, RoomServiceResponse
from hotel_manager.services.room_service_orders import RoomServiceOrderService
from hotel_manager.security.auth import get_current_user, require_admin

router = APIRouter(prefix="/room-services", tags=["客房服务"])


@router.get("", response_model=List[RoomServiceResponse])
def list_room_services(
    reservation_number: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取客房服务列表"""
    return RoomServiceOrderService(db).get_orders(reservation_number=reservation_number)


@router.get("/{task_id}", response_model=RoomServiceResponse)
def get_room_service(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    order = RoomServiceOrderService(db).get(task_id)
    if not order:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="客房服务不存在")
    return order


@router.post("", response_model=RoomServiceResponse, status_code=status.HTTP_201_CREATED)
def create_room_service(
    data: RoomServiceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """为任务登记客房服务，一个任务只能有一条"""
    return RoomServiceOrderService(db).create(data)


@router.delete("/{task_id}")
def delete_room_service(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        RoomServiceOrderService(db).delete(task_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "删除成功"}
