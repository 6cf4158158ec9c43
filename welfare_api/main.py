import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from welfare_api.config import settings
from welfare_api.database import MongoDB
from welfare_api.dependencies import get_mongo_service
from welfare_api.routes import (
    applications_router,
    auth_router,
    emergency_contacts_router,
    grievances_router,
    marketplace_router,
    schemes_router
)
from welfare_api.services.mongo_service import MongoService
from welfare_api.services.seed_service import populate_initial_data

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    mongo = MongoDB(settings.mongodb_url, settings.mongodb_db_name)
    app.state.mongo = mongo
    connected = False
    try:
        await mongo.connect()
        connected = True
        logger.info("MongoDB connected successfully!")
    except Exception as e:
        # Routes stay registered and report 500 until the store is reachable
        logger.error(f"MongoDB connection error: {e}")

    if connected:
        try:
            await mongo.ensure_indexes()
        except Exception as e:
            logger.error(f"Error creating indexes: {e}")
        if settings.seed_initial_data:
            await populate_initial_data(MongoService(mongo.database))
    yield
    # Shutdown
    await mongo.close()
    logger.info("Disconnected from MongoDB")


app = FastAPI(
    title=settings.app_name,
    description="Backend service for the military welfare portal",
    version=settings.app_version,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed or incomplete request data as 400"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())}
    )


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Military Welfare Backend API is running!"


@app.get("/health")
async def health_check(mongo: MongoService = Depends(get_mongo_service)):
    """Health check endpoint"""
    database_ok = await mongo.ping()
    return {
        "status": "healthy" if database_ok else "unhealthy",
        "service": "welfare-api",
        "database": "connected" if database_ok else "unavailable"
    }


app.include_router(auth_router)
app.include_router(schemes_router)
app.include_router(grievances_router)
app.include_router(marketplace_router)
app.include_router(applications_router)
app.include_router(emergency_contacts_router)


def run():
    import uvicorn
    uvicorn.run("welfare_api.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
