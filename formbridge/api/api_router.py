from fastapi import APIRouter
from formbridge.api.endpoints import forms

api_router = APIRouter(prefix="/api")

api_router.include_router(forms.router, tags=["Forms"])
