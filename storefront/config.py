"""
Runtime configuration read from the environment.

A local `.env` file is loaded first so development setups don't need
exported variables. Values are read once at import.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Supabase
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")

# Cloudinary (either CLOUDINARY_URL or the three discrete values)
CLOUDINARY_URL = os.environ.get("CLOUDINARY_URL", "")
CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME", "")
CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY", "")
CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET", "")
CLOUDINARY_DEFAULT_FOLDER = os.environ.get("CLOUDINARY_DEFAULT_FOLDER", "libreria-central")

# Admin
# Static bearer token for scripts and CI; panel users sign in through Supabase
ADMIN_API_KEY = os.environ.get("ADMIN_API_KEY", "")

# Business contact fallbacks (used when site content has no number)
DEFAULT_WHATSAPP_NUMBER = os.environ.get("DEFAULT_WHATSAPP_NUMBER", "51987654321")
DEFAULT_PHONE = os.environ.get("DEFAULT_PHONE", "+51 987 654 321")
DEFAULT_EMAIL = os.environ.get("DEFAULT_EMAIL", "contacto@libreriacentral.pe")
CURRENCY_PREFIX = os.environ.get("CURRENCY_PREFIX", "S/")

# Sessions
CART_SESSION_TTL_SECONDS = int(os.environ.get("CART_SESSION_TTL_SECONDS", "86400"))
PREVIEW_SESSION_TTL_SECONDS = int(os.environ.get("PREVIEW_SESSION_TTL_SECONDS", "43200"))

# HTTP
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
