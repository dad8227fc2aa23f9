"""
Products API Endpoints

Author: TM3
Date: 2026-10-19
"""
from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_product_repository
from storefront.repositories.product_repository import ProductRepository

router = APIRouter()


@router.get("")
async def get_products(repo: ProductRepository = Depends(get_product_repository)):
    """
    Get the full catalog

    Returns a plain array of normalized products, the shape the storefront
    pages expect.
    """
    return [product.to_dict() for product in repo.find_all()]
