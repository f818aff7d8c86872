from .currencies import router as currencies_router
from .namespaces import router as namespaces_router
