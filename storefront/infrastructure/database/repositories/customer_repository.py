"""SQLAlchemy implementation of CustomerRepository."""

from typing import List, Optional
import logging

from sqlalchemy import select

from storefront.domain.entities import Customer
from storefront.domain.exceptions import CustomerNotFoundError
from storefront.domain.repositories import CustomerRepository

from ..mappers import CustomerMapper
from ..models import CustomerModel
from .base import SQLAlchemyRepository


logger = logging.getLogger(__name__)


class SQLAlchemyCustomerRepository(SQLAlchemyRepository, CustomerRepository):
    """
    SQLAlchemy implementation of CustomerRepository.

    When a dispatcher is given, events recorded on the customer are
    delivered after a successful write.
    """

    async def create(self, entity: Customer) -> None:
        logger.info(f"Creating customer: {entity.id}")

        async with self._writing() as session:
            session.add(CustomerMapper.to_persistence(entity))

        logger.info(f"✅ Created customer: {entity.id}")
        self._publish_events(entity)

    async def update(self, entity: Customer) -> None:
        logger.info(f"Updating customer: {entity.id}")

        async with self._writing() as session:
            model = await session.get(CustomerModel, entity.id)
            if model is None:
                raise CustomerNotFoundError(entity.id)
            CustomerMapper.update_persistence(entity, model)

        logger.info(f"✅ Updated customer: {entity.id}")
        self._publish_events(entity)

    async def find(self, entity_id: str) -> Optional[Customer]:
        async with self._reading() as session:
            model = await session.get(CustomerModel, entity_id)

            if model is None:
                logger.info(f"Customer not found: {entity_id}")
                return None

            return CustomerMapper.to_domain(model)

    async def find_all(self) -> List[Customer]:
        async with self._reading() as session:
            result = await session.execute(select(CustomerModel))
            return [CustomerMapper.to_domain(model) for model in result.scalars().all()]
