# Schema Definition
from hotel_manager.models.schema import (
    Post, Hotel, User, Room, Employee, Task, Customer,
    Reservation, CustomerReservation, RoomService, Expense
)

__all__ = [
    'Post', 'Hotel', 'User', 'Room', 'Employee', 'Task', 'Customer',
    'Reservation', 'CustomerReservation', 'RoomService', 'Expense'
]
