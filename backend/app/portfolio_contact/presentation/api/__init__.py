# FastAPI routers - health, contact, stats, admin
from app.portfolio_contact.presentation.api import admin, contact, health, stats

__all__ = ["health", "contact", "stats", "admin"]
