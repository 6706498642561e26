"""
房间管理路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_manager.database import get_db
from hotel_manager.models.schema import User
from hotel_manager.models.schemas import RoomCreate, RoomUpdate, RoomResponse
from hotel_manager.services.room_service import RoomService
from hotel_manager.security.auth import get_current_user, require_admin

router = APIRouter(prefix="/rooms", tags=["房间管理"])


@router.get("", response_model=List[RoomResponse])
def list_rooms(
    hotel_id: Optional[int] = Query(None),
    available: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取房间列表"""
    return RoomService(db).get_rooms(hotel_id=hotel_id, available=available)


@router.get("/{number}", response_model=RoomResponse)
def get_room(
    number: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取房间详情"""
    room = RoomService(db).get(number)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="房间不存在")
    return room


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    data: RoomCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """创建房间"""
    return RoomService(db).create(data)


@router.put("/{number}", response_model=RoomResponse)
def update_room(
    number: int,
    data: RoomUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """更新房间"""
    try:
        return RoomService(db).update(number, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{number}")
def delete_room(
    number: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """删除房间，相关预订保留但不再指向该房间"""
    try:
        RoomService(db).delete(number)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "删除成功"}
