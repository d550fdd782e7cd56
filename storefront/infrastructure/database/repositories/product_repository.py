"""SQLAlchemy implementation of ProductRepository."""

from typing import List, Optional
import logging

from sqlalchemy import select

from storefront.domain.entities import Product
from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.repositories import ProductRepository

from ..mappers import ProductMapper
from ..models import ProductModel
from .base import SQLAlchemyRepository


logger = logging.getLogger(__name__)


class SQLAlchemyProductRepository(SQLAlchemyRepository, ProductRepository):
    """SQLAlchemy implementation of ProductRepository."""

    async def create(self, entity: Product) -> None:
        logger.info(f"Creating product: {entity.id}")

        async with self._writing() as session:
            session.add(ProductMapper.to_persistence(entity))

        logger.info(f"✅ Created product: {entity.id}")
        self._publish_events(entity)

    async def update(self, entity: Product) -> None:
        logger.info(f"Updating product: {entity.id}")

        async with self._writing() as session:
            model = await session.get(ProductModel, entity.id)
            if model is None:
                raise ProductNotFoundError(entity.id)
            ProductMapper.update_persistence(entity, model)

        logger.info(f"✅ Updated product: {entity.id}")
        self._publish_events(entity)

    async def find(self, entity_id: str) -> Optional[Product]:
        async with self._reading() as session:
            model = await session.get(ProductModel, entity_id)

            if model is None:
                logger.info(f"Product not found: {entity_id}")
                return None

            return ProductMapper.to_domain(model)

    async def find_all(self) -> List[Product]:
        async with self._reading() as session:
            result = await session.execute(select(ProductModel))
            return [ProductMapper.to_domain(model) for model in result.scalars().all()]
