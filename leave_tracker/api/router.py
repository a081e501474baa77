from fastapi import APIRouter

from leave_tracker.api.requests import requests_router, user_requests_router
from leave_tracker.api.users import users_router

api_router = APIRouter()
api_router.include_router(users_router)
api_router.include_router(user_requests_router)
api_router.include_router(requests_router)
