from .api import router
from .core.config import settings
from .core.setup import create_application

app = create_application(router=router, settings=settings)


# Add a basic root endpoint
@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} is running!", "status": "healthy", "docs": "/docs"}
