from fastapi import APIRouter, Depends, Query, Request

from app.quantum.core.config import settings
from app.quantum.core.deps import require_staff
from app.quantum.core.error_catalog import AppError, ErrorCatalog
from app.quantum.db.models import Order
from app.quantum.db.session import get_db
from app.quantum.repos.orders import OrderRepository
from app.quantum.schemas.common import DeleteResponse, ListPaginationMeta
from app.quantum.schemas.orders import (
    OrderItem,
    OrderLine,
    OrderListResponse,
    OrderResponse,
    OrderStatus,
    OrderStatusUpdateRequest,
)

router = APIRouter()


def _customer_name(order: Order) -> str | None:
    if order.user is None:
        return None
    return f"{order.user.first_name} {order.user.last_name}".strip()


def order_item(order: Order, *, with_lines: bool = False) -> OrderItem:
    lines = None
    if with_lines:
        lines = [
            OrderLine(
                id=line.id,
                product_id=line.product_id,
                product_name=line.product.name if line.product is not None else None,
                quantity=line.quantity,
                unit_price=float(line.unit_price),
            )
            for line in order.items
        ]
    return OrderItem(
        id=order.id,
        user_id=order.user_id,
        customer_name=_customer_name(order),
        created_at=order.created_at,
        status=order.status,
        total=float(order.total),
        items=lines,
    )


def _get_or_404(repo: OrderRepository, order_id: int) -> Order:
    order = repo.get_by_id(order_id)
    if order is None:
        raise AppError(ErrorCatalog.RESOURCE_NOT_FOUND, details={"resource": "order", "id": order_id})
    return order


@router.get("/orders", response_model=OrderListResponse)
async def list_orders(
    request: Request,
    status: OrderStatus | None = Query(default=None),
    user_id: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    effective_limit = min(limit, settings.LIST_MAX_PAGE_SIZE) if limit else None
    rows, total = OrderRepository(db).list(status=status, user_id=user_id, limit=effective_limit, offset=offset)
    return OrderListResponse(
        orders=[order_item(order) for order in rows],
        pagination=ListPaginationMeta(total=total, count=len(rows), limit=effective_limit, offset=offset),
        trace_id=getattr(request.state, "trace_id", ""),
    )


@router.get("/orders/{order_id}", response_model=OrderResponse)
async def get_order(request: Request, order_id: int, _staff=Depends(require_staff), db=Depends(get_db)):
    order = _get_or_404(OrderRepository(db), order_id)
    return OrderResponse(order=order_item(order, with_lines=True), trace_id=getattr(request.state, "trace_id", ""))


@router.patch("/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    request: Request,
    order_id: int,
    payload: OrderStatusUpdateRequest,
    _staff=Depends(require_staff),
    db=Depends(get_db),
):
    repo = OrderRepository(db)
    order = _get_or_404(repo, order_id)
    order.status = payload.status
    repo.update(order)
    order = repo.get_by_id(order_id)
    return OrderResponse(order=order_item(order, with_lines=True), trace_id=getattr(request.state, "trace_id", ""))


@router.delete("/orders/{order_id}", response_model=DeleteResponse)
async def delete_order(request: Request, order_id: int, _staff=Depends(require_staff), db=Depends(get_db)):
    repo = OrderRepository(db)
    repo.delete(_get_or_404(repo, order_id))
    return DeleteResponse(deleted=1, trace_id=getattr(request.state, "trace_id", ""))
