"""
Pydantic 模式定义
用于 API 请求/响应验证
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


# ============== 认证 Schemas ==============

class LoginRequest(BaseModel):
    email: str = Field(..., max_length=100)
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: "UserResponse"


# ============== 酒店 Schemas ==============

class HotelBase(BaseModel):
    name: str = Field(..., max_length=100)
    address: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=50)


class HotelCreate(HotelBase):
    pass


class HotelUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=50)


class HotelResponse(HotelBase):
    id: int
    deleted: bool
    model_config = ConfigDict(from_attributes=True)


# ============== 用户 Schemas ==============

class UserCreate(BaseModel):
    email: str = Field(..., max_length=100)
    password: str = Field(..., min_length=6)
    role: List[str] = Field(default_factory=list)


class UserUpdate(BaseModel):
    password: Optional[str] = Field(None, min_length=6)
    role: Optional[List[str]] = None


class UserResponse(BaseModel):
    id: int
    email: str
    role: List[str]
    model_config = ConfigDict(from_attributes=True)


# ============== 房间 Schemas ==============

class RoomBase(BaseModel):
    hotel_id: int
    floor: int
    beds: int = Field(..., ge=0)
    daily_rate: float = Field(..., ge=0)
    description: str = Field(default="", max_length=100)
    available: bool = True


class RoomCreate(RoomBase):
    number: int


class RoomUpdate(BaseModel):
    floor: Optional[int] = None
    beds: Optional[int] = Field(None, ge=0)
    daily_rate: Optional[float] = Field(None, ge=0)
    description: Optional[str] = Field(None, max_length=100)
    available: Optional[bool] = None


class RoomResponse(RoomBase):
    number: int
    model_config = ConfigDict(from_attributes=True)


# ============== 员工 Schemas ==============

class EmployeeBase(BaseModel):
    name: str = Field(..., max_length=100)
    phone: str = Field(..., max_length=50)
    address: Optional[str] = Field(None, max_length=100)


class EmployeeCreate(EmployeeBase):
    cpf: str = Field(..., max_length=15)
    user_id: int
    hotel_id: int


class EmployeeUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=100)
    hotel_id: Optional[int] = None


class EmployeeResponse(EmployeeBase):
    cpf: str
    user_id: int
    hotel_id: int
    model_config = ConfigDict(from_attributes=True)


# ============== 任务 Schemas ==============

class TaskBase(BaseModel):
    description: str = Field(..., max_length=100)
    employee_id: Optional[int] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class TaskCreate(TaskBase):
    pass


class TaskUpdate(BaseModel):
    description: Optional[str] = Field(None, max_length=100)
    employee_id: Optional[int] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class TaskResponse(TaskBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


# ============== 客户 Schemas ==============

class CustomerBase(BaseModel):
    name: str = Field(..., max_length=100)
    email: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=100)


class CustomerCreate(CustomerBase):
    cpf: str = Field(..., max_length=15)


class CustomerUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=100)


class CustomerResponse(CustomerBase):
    cpf: str
    model_config = ConfigDict(from_attributes=True)


# ============== 预订 Schemas ==============

class ReservationBase(BaseModel):
    room_number: Optional[int] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    total_price: float = Field(default=0, ge=0)
    status_paid: bool = False
    vehicles: List[str] = Field(default_factory=list)


class ReservationCreate(ReservationBase):
    customer_cpfs: List[str] = Field(default_factory=list)


class ReservationUpdate(BaseModel):
    room_number: Optional[int] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    total_price: Optional[float] = Field(None, ge=0)
    status_paid: Optional[bool] = None
    vehicles: Optional[List[str]] = None


class ReservationResponse(ReservationBase):
    number: int
    customer_cpfs: List[str] = []
    model_config = ConfigDict(from_attributes=True)


# ============== 客房服务 Schemas ==============

class RoomServiceCreate(BaseModel):
    task_id: int
    reservation_number: int
    price: float = Field(..., ge=0)


class RoomServiceResponse(RoomServiceCreate):
    model_config = ConfigDict(from_attributes=True)


class RoomServiceTotal(BaseModel):
    reservation_number: int
    total: float


# ============== 支出 Schemas ==============

class ExpenseCreate(BaseModel):
    hotel_id: int
    description: str = Field(..., max_length=100)
    value: float
    date: Optional[datetime] = None


class ExpenseResponse(BaseModel):
    id: int
    hotel_id: int
    description: str
    value: float
    date: datetime
    model_config = ConfigDict(from_attributes=True)


class ExpenseTotal(BaseModel):
    hotel_id: int
    total: float
    count: int


LoginResponse.model_rebuild()
