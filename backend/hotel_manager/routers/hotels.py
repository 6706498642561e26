"""
酒店管理路由
DELETE 为软删除，/purge 为物理删除
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_manager.database import get_db
from hotel_manager.models.schema import User
from hotel_manager.models.schemas import (
    HotelCreate, HotelUpdate, HotelResponse, ExpenseTotal
)
from hotel_manager.services.hotel_service import HotelService
from hotel_manager.services.expense_service import ExpenseService
from hotel_manager.security.auth import get_current_user, require_admin

router = APIRouter(prefix="/hotels", tags=["酒店管理"])


def _hotel_or_404(service: HotelService, hotel_id: int, include_deleted: bool = False):
    hotel = service.get_hotel(hotel_id, include_deleted=include_deleted)
    if not hotel:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="酒店不存在")
    return hotel


@router.get("", response_model=List[HotelResponse])
def list_hotels(
    include_deleted: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取酒店列表"""
    return HotelService(db).get_hotels(include_deleted=include_deleted)


@router.get("/{hotel_id}", response_model=HotelResponse)
def get_hotel(
    hotel_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取酒店详情"""
    return _hotel_or_404(HotelService(db), hotel_id)


@router.post("", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
def create_hotel(
    data: HotelCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """创建酒店"""
    return HotelService(db).create(data)


@router.put("/{hotel_id}", response_model=HotelResponse)
def update_hotel(
    hotel_id: int,
    data: HotelUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """更新酒店"""
    service = HotelService(db)
    _hotel_or_404(service, hotel_id)
    return service.update(hotel_id, data)


@router.delete("/{hotel_id}", response_model=HotelResponse)
def soft_delete_hotel(
    hotel_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """软删除酒店"""
    service = HotelService(db)
    _hotel_or_404(service, hotel_id)
    return service.soft_delete(hotel_id)


@router.post("/{hotel_id}/restore", response_model=HotelResponse)
def restore_hotel(
    hotel_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """恢复已软删除的酒店"""
    service = HotelService(db)
    _hotel_or_404(service, hotel_id, include_deleted=True)
    return service.restore(hotel_id)


@router.delete("/{hotel_id}/purge")
def purge_hotel(
    hotel_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """物理删除酒店，房间、员工、支出级联删除"""
    service = HotelService(db)
    _hotel_or_404(service, hotel_id, include_deleted=True)
    service.purge(hotel_id)
    return {"message": "删除成功"}


@router.get("/{hotel_id}/expenses/total", response_model=ExpenseTotal)
def get_expense_total(
    hotel_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """酒店支出合计"""
    _hotel_or_404(HotelService(db), hotel_id)
    return ExpenseService(db).get_total(hotel_id)
