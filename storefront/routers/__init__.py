"""
API Routers

- public: storefront reads under /api
- cart: session cart under /api/cart
- admin: panel endpoints under /api/admin
"""
