# Business Services
from hotel_manager.services.hotel_service import HotelService
from hotel_manager.services.user_service import UserService
from hotel_manager.services.room_service import RoomService
from hotel_manager.services.employee_service import EmployeeService
from hotel_manager.services.task_service import TaskService
from hotel_manager.services.customer_service import CustomerService
from hotel_manager.services.reservation_service import ReservationService
from hotel_manager.services.room_service_orders import RoomServiceOrderService
from hotel_manager.services.expense_service import ExpenseService

__all__ = [
    'HotelService', 'UserService', 'RoomService', 'EmployeeService',
    'TaskService', 'CustomerService', 'ReservationService',
    'RoomServiceOrderService', 'ExpenseService'
]
