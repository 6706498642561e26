"""
员工管理路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_manager.database import get_db
from hotel_manager.models.schema import User
from hotel_manager.models.schemas import EmployeeCreate, EmployeeUpdate, EmployeeResponse
from hotel_manager.services.employee_service import EmployeeService
from hotel_manager.security.auth import get_current_user, require_admin

router = APIRouter(prefix="/employees", tags=["员工管理"])


@router.get("", response_model=List[EmployeeResponse])
def list_employees(
    hotel_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取员工列表"""
    return EmployeeService(db).get_employees(hotel_id=hotel_id)


@router.get("/{cpf}", response_model=EmployeeResponse)
def get_employee(
    cpf: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """获取员工详情"""
    employee = EmployeeService(db).get(cpf)
    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="员工不存在")
    return employee


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    data: EmployeeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """创建员工，user_id 或 hotel_id 不存在返回 409"""
    return EmployeeService(db).create(data)


@router.put("/{cpf}", response_model=EmployeeResponse)
def update_employee(
    cpf: str,
    data: EmployeeUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """更新员工"""
    try:
        return EmployeeService(db).update(cpf, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{cpf}")
def delete_employee(
    cpf: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """删除员工，其任务保留"""
    try:
        EmployeeService(db).delete(cpf)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "删除成功"}
