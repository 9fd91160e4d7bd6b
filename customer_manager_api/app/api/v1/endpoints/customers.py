"""
Customer endpoints for API v1.

Thin CRUD routes over ``CustomerService``.  The service ``Result`` is
projected directly onto the HTTP response, so status codes and error
messages come from the service layer.  All routes require a bearer
token.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from customer_manager_api.app.api.deps import get_current_user, get_customer_service
from customer_manager_api.app.api.responses import to_response
from customer_manager_api.app.schemas.customer import Customer
from customer_manager_api.app.services import CustomerService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/", response_model=List[Customer])
async def list_customers(service: CustomerService = Depends(get_customer_service)) -> Response:
    """Return all customers, or 204 when there are none."""
    return to_response(await service.get_all())


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)) -> Response:
    return to_response(await service.get(customer_id))


@router.post("/", response_model=Customer, status_code=status.HTTP_201_CREATED)
async def create_customer(customer: Customer, service: CustomerService = Depends(get_customer_service)) -> Response:
    return to_response(await service.create(customer))


@router.put("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_customer(
    customer_id: str,
    customer: Customer,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Replace the stored customer.  The body's ``id`` is ignored."""
    return to_response(await service.update(customer_id, customer))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)) -> Response:
    return to_response(await service.delete(customer_id))
