"""
客户管理路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_manager.database import get_db
from hotel_manager.models.schema import User
from hotel_manager.models.schemas import (
    CustomerCreate, CustomerUpdate, CustomerResponse, ReservationResponse
)
from hotel_manager.services.customer_service import CustomerService
from hotel_manager.security.auth import get_current_user, require_admin

router = APIRouter(prefix="/customers", tags=["客户管理"])


def _customer_or_404(service: CustomerService, cpf: str):
    customer = service.get(cpf)
    if not customer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="客户不存在")
    return customer


@router.get("", response_model=List[CustomerResponse])
def list_customers(
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取客户列表"""
    return CustomerService(db).get_customers(search=search)


@router.get("/{cpf}", response_model=CustomerResponse)
def get_customer(
    cpf: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取客户详情"""
    return _customer_or_404(CustomerService(db), cpf)


@router.get("/{cpf}/reservations", response_model=List[ReservationResponse])
def get_customer_reservations(
    cpf: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取客户的全部预订"""
    return _customer_or_404(CustomerService(db), cpf).reservations


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    data: CustomerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """创建客户，CPF 重复返回 409"""
    return CustomerService(db).create(data)


@router.put("/{cpf}", response_model=CustomerResponse)
def update_customer(
    cpf: str,
    data: CustomerUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """更新客户"""
    try:
        return CustomerService(db).update(cpf, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{cpf}")
def delete_customer(
    cpf: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """删除客户，预订关联随之删除"""
    try:
        CustomerService(db).delete(cpf)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "删除成功"}
