from fastapi import APIRouter, Request

base_router = APIRouter(tags=["base"])


@base_router.get("/")
async def welcome(request: Request):
    settings = request.app.state.settings
    return {"app_name": settings.APP_NAME, "app_version": settings.APP_VERSION}


@base_router.get("/health")
async def health_check():
    return {"status": "healthy"}
