"""Repository layer - one repository per Supabase table."""
from .base import BaseRepository
from .product_repo import ProductRepository
from .category_repo import CategoryRepository
from .service_repo import ServiceRepository
from .promotion_repo import PromotionRepository
from .review_repo import ReviewRepository
from .catalog_repo import CatalogRepository
from .settings_repo import SettingsRepository
from .theme_repo import ThemeRepository
from .admin_repo import AdminRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "CategoryRepository",
    "ServiceRepository",
    "PromotionRepository",
    "ReviewRepository",
    "CatalogRepository",
    "SettingsRepository",
    "ThemeRepository",
    "AdminRepository",
]
