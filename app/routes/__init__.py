#app/routes/__init__.py

from .employee import router as employee_router
from .health import router as health_router
