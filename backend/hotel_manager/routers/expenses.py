"""
支出管理路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_manager.database import get_db
from hotel_manager.models.schema import User
from hotel_manager.models.schemas import ExpenseCreate, ExpenseResponse
from hotel_manager.services.expense_service import ExpenseService
from hotel_manager.security.auth import get_current_user, require_admin

router = APIRouter(prefix="/expenses", tags=["支出管理"])


@router.get("", response_model=List[ExpenseResponse])
def list_expenses(
    hotel_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取支出列表，按日期倒序"""
    return ExpenseService(db).get_expenses(hotel_id=hotel_id)


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    expense = ExpenseService(db).get(expense_id)
    if not expense:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="支出不存在")
    return expense


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_expense(
    data: ExpenseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """登记支出，未给日期时取当前时间"""
    return ExpenseService(db).create(data)


@router.delete("/{expense_id}")
def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    try:
        ExpenseService(db).delete(expense_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "删除成功"}
