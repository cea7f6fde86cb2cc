from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from app.quantum.schemas.common import ListPaginationMeta

OrderStatus = Literal["en_attente", "shipped", "delivered"]


class OrderLine(BaseModel):
    id: int
    product_id: int
    product_name: str | None
    quantity: int
    unit_price: float


class OrderItem(BaseModel):
    id: int
    user_id: int
    customer_name: str | None
    created_at: datetime
    status: OrderStatus
    total: float
    items: list[OrderLine] | None = None


class OrderStatusUpdateRequest(BaseModel):
    status: OrderStatus


class OrderResponse(BaseModel):
    order: OrderItem
    trace_id: str


class OrderListResponse(BaseModel):
    orders: list[OrderItem]
    pagination: ListPaginationMeta
    trace_id: str
