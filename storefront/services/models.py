"""Database Models - Pydantic models for all persisted rows.

Rows are stored snake_case; `to_presentation()` returns the camelCase shape
the storefront frontend consumes.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import to_decimal as _to_decimal, to_float


class _Row(BaseModel):
    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields from DB


class CategoryRef(_Row):
    """Category embedded in a product select (`category:categories(...)`)."""
    id: str
    name: str
    slug: str


class Product(_Row):
    """Product row."""
    id: str
    name: str
    slug: str
    description: str = ""
    price: Decimal
    sale_price: Optional[Decimal] = None
    sku: str = ""
    category_id: Optional[str] = None
    category: Optional[CategoryRef] = None
    stock: Optional[int] = None
    image: str = ""
    gallery: list[str] = []
    is_active: bool = True
    is_featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("sale_price", mode="before")
    @classmethod
    def convert_sale_price_to_decimal(cls, v):
        return _to_decimal(v) if v is not None else None

    @field_validator("gallery", mode="before")
    @classmethod
    def default_gallery(cls, v):
        return v or []

    def to_presentation(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "price": to_float(self.price),
            "salePrice": to_float(self.sale_price) if self.sale_price is not None else None,
            "sku": self.sku,
            "category": self.category.name if self.category else "",
            "categorySlug": self.category.slug if self.category else "",
            "stock": self.stock,
            "image": self.image,
            "gallery": self.gallery,
            "isActive": self.is_active,
            "isFeatured": self.is_featured,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


class Category(_Row):
    """Category row."""
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    image: Optional[str] = None
    icon: Optional[str] = None
    gallery: list[str] = []
    order: int = 0
    is_active: bool = True

    @field_validator("gallery", mode="before")
    @classmethod
    def default_gallery(cls, v):
        return v or []

    def to_presentation(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "icon": self.icon,
            "description": self.description,
            "image": self.image,
            "gallery": self.gallery,
            "isActive": self.is_active,
            "order": self.order,
        }


class Service(_Row):
    """Service row. The persisted column is `title`."""
    id: str
    title: str
    slug: str
    description: str = ""
    short_description: str = ""
    icon: str = ""
    price: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True
    order: int = 0

    def to_presentation(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.title,
            "slug": self.slug,
            "description": self.description,
            "shortDescription": self.short_description,
            "icon": self.icon,
            "price": self.price,
            "image": self.image,
            "isActive": self.is_active,
            "order": self.order,
        }


class Promotion(_Row):
    """Promotion row."""
    id: str
    title: str
    description: str = ""
    image: str = ""
    discount: Optional[float] = None
    discount_type: Optional[str] = None  # percentage | fixed
    start_date: str
    end_date: str
    is_active: bool = True

    def to_presentation(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "discount": self.discount,
            "discountType": self.discount_type,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "isActive": self.is_active,
        }


class Review(_Row):
    """Customer review / testimonial row."""
    id: str
    customer_name: str
    customer_email: Optional[str] = None
    avatar_url: Optional[str] = None
    rating: int = 5
    comment: str = ""
    product_id: Optional[str] = None
    service_id: Optional[str] = None
    is_featured: bool = False
    is_verified: bool = False
    is_active: bool = True
    source: Optional[str] = None  # google | website
    response: Optional[str] = None
    responded_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def to_presentation(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customerName": self.customer_name,
            "avatarUrl": self.avatar_url,
            "rating": self.rating,
            "comment": self.comment,
            "productId": self.product_id,
            "serviceId": self.service_id,
            "isFeatured": self.is_featured,
            "isVerified": self.is_verified,
            "isActive": self.is_active,
            "source": self.source,
            "response": self.response,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class Catalog(_Row):
    """Downloadable PDF catalog row."""
    id: str
    title: str
    description: Optional[str] = None
    season: Optional[str] = None
    year: Optional[str] = None
    file_url: Optional[str] = None
    cover_image: Optional[str] = None
    page_count: Optional[int] = None
    is_new: bool = False
    is_active: bool = True
    downloads: int = 0

    def to_presentation(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "season": self.season,
            "year": self.year,
            "fileUrl": self.file_url,
            "coverImage": self.cover_image,
            "pageCount": self.page_count,
            "isNew": self.is_new,
            "isActive": self.is_active,
            "downloads": self.downloads,
        }


class SeasonalThemeRow(_Row):
    """Seasonal theme row."""
    id: str
    name: str
    slug: str
    primary_color: str
    secondary_color: str
    accent_color: str
    banner_image: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_active: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_presentation(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "accentColor": self.accent_color,
            "bannerImage": self.banner_image,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "isActive": self.is_active,
        }
