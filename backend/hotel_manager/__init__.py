"""
hotel-manager 后端
酒店、房间、员工、客户、预订的关系模型与访问层
"""
__version__ = "0.1.0"
