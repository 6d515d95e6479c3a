"""
Admin API Pydantic Models

Request bodies for admin endpoints. The panel sends camelCase; fields are
snake_case so `to_row()` yields column names directly. Update bodies are
partial: only the fields that were sent get written.
"""
from decimal import Decimal
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.themes import SeasonalTheme


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_row(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, mode="json")


# ==================== PRODUCT MODELS ====================

class ProductCreate(_Request):
    name: str = Field(min_length=1)
    slug: Optional[str] = None
    description: str = ""
    price: Decimal = Field(ge=0)
    sale_price: Optional[Decimal] = Field(None, ge=0)
    sku: str = ""
    category_id: Optional[str] = None
    stock: Optional[int] = None
    image: str = ""
    gallery: list[str] = []
    is_active: bool = True
    is_featured: bool = False


class ProductUpdate(_Request):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    sale_price: Optional[Decimal] = Field(None, ge=0)
    sku: Optional[str] = None
    category_id: Optional[str] = None
    stock: Optional[int] = None
    image: Optional[str] = None
    gallery: Optional[list[str]] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None


# ==================== CATEGORY / SERVICE MODELS ====================

class CategoryCreate(_Request):
    name: str = Field(min_length=1)
    slug: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    icon: Optional[str] = None
    gallery: list[str] = []
    is_active: bool = True


class CategoryUpdate(_Request):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    icon: Optional[str] = None
    gallery: Optional[list[str]] = None
    is_active: Optional[bool] = None
    order: Optional[int] = None


class ServiceCreate(_Request):
    # Presented as `name`, stored as `title`
    name: str = Field(min_length=1)
    slug: Optional[str] = None
    description: str = ""
    short_description: str = ""
    icon: str = ""
    price: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True


class ServiceUpdate(_Request):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    icon: Optional[str] = None
    price: Optional[str] = None
    image: Optional[str] = None
    is_active: Optional[bool] = None
    order: Optional[int] = None


# ==================== MARKETING MODELS ====================

class PromotionCreate(_Request):
    title: str = Field(min_length=1)
    description: str = ""
    image: str = ""
    discount: Optional[float] = None
    discount_type: Optional[Literal["percentage", "fixed"]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_active: bool = True


class PromotionUpdate(_Request):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    discount: Optional[float] = None
    discount_type: Optional[Literal["percentage", "fixed"]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_active: Optional[bool] = None


class ReviewCreate(_Request):
    customer_name: str = Field(min_length=1)
    customer_email: Optional[str] = None
    avatar_url: Optional[str] = None
    rating: int = Field(5, ge=1, le=5)
    comment: str = ""
    product_id: Optional[str] = None
    service_id: Optional[str] = None
    is_featured: bool = False
    is_verified: bool = False
    is_active: bool = True
    source: Optional[Literal["google", "website"]] = "website"


class ReviewUpdate(_Request):
    customer_name: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = None
    is_featured: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_active: Optional[bool] = None
    response: Optional[str] = None


class CatalogCreate(_Request):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    season: Optional[str] = None
    year: Optional[str] = None
    file_url: Optional[str] = None
    cover_image: Optional[str] = None
    page_count: Optional[int] = None
    is_new: bool = False
    is_active: bool = True


class CatalogUpdate(_Request):
    title: Optional[str] = None
    description: Optional[str] = None
    season: Optional[str] = None
    year: Optional[str] = None
    file_url: Optional[str] = None
    cover_image: Optional[str] = None
    page_count: Optional[int] = None
    is_new: Optional[bool] = None
    is_active: Optional[bool] = None


# ==================== THEME / SETTINGS MODELS ====================

class ThemeUpdate(_Request):
    name: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    banner_image: Optional[str] = None
    is_active: Optional[bool] = None


class SettingUpsert(BaseModel):
    key: str
    value: Any = None


# ==================== PREVIEW MODELS ====================

class PreviewRequest(_Request):
    draft: dict[str, Any]
    return_url: Optional[str] = None


class ThemeSave(SeasonalTheme):
    """Theme form submission; saved by slug."""
    is_active: bool = False
