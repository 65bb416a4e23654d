"""Orders API Router - create, read, replace, patch and delete orders.

All endpoints require an authenticated user. Domain errors raised by the
service are translated to HTTP responses by the handlers in ``api.errors``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from auth.dependencies import get_current_user
from database import get_db
from models.user import User
from .schemas import OrderRequest, OrderResponse
from .service import OrderService


router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new order",
    description="""
    Creates an order in CREATED status.

    **Validation order:** user existence and credit limit first, then payment
    conditions. The first failure is returned.

    **Errors:** 400 invalid input / card number missing, 403 blocked user,
    404 user not found, 422 credit limit exceeded.
    """
)
def create_order(
    request: OrderRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> OrderResponse:
    order = OrderService.from_session(db).create_order(request)
    db.commit()
    db.refresh(order)
    return OrderResponse.model_validate(order)


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get order by ID",
)
def get_order(
    order_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> OrderResponse:
    order = OrderService.from_session(db).get_order(order_id)
    return OrderResponse.model_validate(order)


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Replace an order",
    description="""
    Overwrites product name, amount and dates. Status and payment are kept.

    **Errors:** 404 order or user not found, 409 order already shipped,
    422 credit limit exceeded, 400 card number missing.
    """
)
def update_order(
    order_id: int,
    request: OrderRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> OrderResponse:
    order = OrderService.from_session(db).update_order(order_id, request)
    db.commit()
    db.refresh(order)
    return OrderResponse.model_validate(order)


@router.patch(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Partially update an order",
    description="""
    Accepts a JSON object; only `status` and `amount` are applied.

    **Errors:** 404 order not found, 422 cancelling a shipped order,
    400 unparseable status or amount.
    """
)
def patch_order(
    order_id: int,
    updates: Dict[str, Any] = Body(..., examples=[{"status": "SHIPPED"}]),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> OrderResponse:
    order = OrderService.from_session(db).patch_order(order_id, updates)
    db.commit()
    db.refresh(order)
    return OrderResponse.model_validate(order)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an order",
    description="**Errors:** 404 order not found, 409 order already shipped.",
)
def delete_order(
    order_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Response:
    OrderService.from_session(db).delete_order(order_id)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
