from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from file_converter.core.config import settings
from file_converter.core.logging_config import setup_logging
from file_converter.api.v1 import endpoints

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health check
@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.VERSION}

@app.get("/", include_in_schema=False)
async def index():
    return RedirectResponse(url=f"{settings.API_V1_STR}/convert/")

app.include_router(endpoints.router, prefix=settings.API_V1_STR)
