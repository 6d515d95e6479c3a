"""
Common Error Constants

Centralized error messages to avoid string duplication.
"""

# Auth errors
ERROR_UNAUTHORIZED = "Unauthorized"
ERROR_ADMIN_REQUIRED = "Admin access required"

# Lookup errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_THEME_NOT_FOUND = "Theme not found"
ERROR_NOT_FOUND = "Not found"

# Request errors
ERROR_INVALID_REQUEST = "Invalid request"
ERROR_ID_REQUIRED = "ID is required"
ERROR_KEY_REQUIRED = "Key is required"
ERROR_NO_FILE = "No file provided"

# Backend errors
ERROR_SUPABASE_NOT_CONFIGURED = "Supabase not configured"
ERROR_INTERNAL = "Internal server error"
ERROR_PUBLISH_FAILED = "Publish failed"
ERROR_NO_ACTIVE_PREVIEW = "No active preview"
ERROR_CLOUDINARY_NOT_CONFIGURED = "Cloudinary not configured"
ERROR_PUBLISH_IN_PROGRESS = "Publish already in progress"
