from fastapi import FastAPI, APIRouter
from slowapi.errors import RateLimitExceeded

from core.middleware import setup_middleware
from core.correlation_middleware import CorrelationMiddleware
from core.logging import setup_logging, get_logger
from core.settings import settings
from core.rate_limit import limiter, rate_limit_exceeded_handler
from db.base import init_db, close_db
from api.v1.internal import auth
from api.v1.public import weather, players, injuries


async def lifespan(app: FastAPI):
    # Setup structured logging first
    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )
    log = get_logger()
    log.info("application_starting", service=settings.service_name)

    # Initialize database
    init_db()
    log.info("database_initialized")

    yield

    # Close database connection
    close_db()
    log.info("application_stopped")


app = FastAPI(
    title="Gridiron Weather API",
    description="Weather-conditioned NFL player analytics and injury probabilities",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Weather", "description": "Performance conditioned on game weather"},
        {"name": "Players", "description": "Fantasy production, consistency and tiers"},
        {"name": "Injuries", "description": "Injury resilience and follow-up probabilities"},
        {"name": "Authentication", "description": "Account registration and login"},
    ],
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Add middlewares (order matters - first added = outermost)
app.add_middleware(CorrelationMiddleware)
setup_middleware(app)

# API v1 Public routes
api_v1_public = APIRouter(prefix="/v1")
api_v1_public.include_router(weather.router)
api_v1_public.include_router(players.router)
api_v1_public.include_router(injuries.router)

app.include_router(api_v1_public)

# API v1 Internal routes
api_v1_internal = APIRouter(prefix="/v1/internal")
api_v1_internal.include_router(auth.router)

app.include_router(api_v1_internal)


@app.get("/")
async def root():
    return {"message": "Gridiron Weather API"}


# Wake up server
@app.get("/ping")
async def ping():
    return {"message": "Pong!"}
