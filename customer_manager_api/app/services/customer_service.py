"""Business logic for customers (referred to as clients in messages)."""

from ..schemas.customer import Customer
from .base import EntityService


class CustomerService(EntityService[Customer]):
    entity_name = "client"
    entity_plural = "clients"
