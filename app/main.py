# app/main.py

from contextlib import asynccontextmanager
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import config
from app.database import ProductStore, init_store
from app.exceptions import ProductValidationError, StorageError
from app.limiter import RateLimiter, rate_limit_middleware
from app.logger import configure_logging, get_logger
from app.models import Product, ProductCreate, ProductCreated, ProductSummary
from app.validator import validate_product

configure_logging()

log = get_logger(__name__)

router = APIRouter()


def get_store(request: Request) -> ProductStore:
  return request.app.state.store


@router.get("/")
def root():
  return {
    "message": "Product Management API",
    "endpoints": {
      "GET /api/products": "Get all products",
      "GET /api/products?q=search": "Search products",
      "POST /api/products": "Create new product",
    },
  }


@router.get("/health")
def healthcheck():
  return {"status": "ok"}


@router.get("/api/products", response_model=List[Product])
def list_products(
  q: Optional[str] = Query(None, description="Substring the product name must contain"),
  store: ProductStore = Depends(get_store),
  ) -> List[Product]:
  """
  Returns every product, or only those whose name contains 'q', newest first.
  """
  log.info(f"/api/products called with q='{q}'")
  return store.list_products(q)


@router.post("/api/products", response_model=ProductCreated, status_code=201)
def create_product(payload: Any = Body(None), store: ProductStore = Depends(get_store)) -> ProductCreated:
  """
  Validates name and price, then stores the product.
  A missing body or one that is not a JSON object counts as empty fields.
  Rejections surface as 400 through validation_error_handler.
  """
  fields = ProductCreate.model_validate(payload) if isinstance(payload, dict) else ProductCreate()
  name, price = validate_product(fields.name, fields.price)
  product = store.insert_product(name, price)
  return ProductCreated(
    message="Product added successfully",
    product=ProductSummary(id=product.id, name=product.name, price=product.price),
  )


async def validation_error_handler(request: Request, exc: ProductValidationError):
  log.info(f"Product rejected: {exc.reason}", extra={"method": request.method, "path": request.url.path})
  return JSONResponse(status_code=400, content={"error": exc.reason})


async def request_error_handler(request: Request, exc: RequestValidationError):
  # Only a body that is not valid JSON gets here, every other shape reaches the validator
  log.info(f"Malformed request on {request.url.path}: {exc.errors()}", extra={"method": request.method, "path": request.url.path})
  return JSONResponse(status_code=400, content={"error": "Malformed JSON body"})


async def storage_error_handler(request: Request, exc: StorageError):
  log.error(f"[API] Database error on {request.method} {request.url.path}: {exc.message}", extra={"method": request.method, "path": request.url.path})
  return JSONResponse(status_code=500, content={"error": "Database error", "message": exc.message})


async def global_exception_handler(request: Request, exc: Exception):
  log.error(f"Unhandled exception: {exc}", exc_info=True, extra={"method": request.method, "path": request.url.path})
  return JSONResponse(
    status_code=500,
    content={"detail": "Internal Server Error"},
  )


def create_app(
  database_url: Optional[str] = None,
  rate_limit_max: Optional[int] = None,
  rate_limit_window: Optional[float] = None,
  ) -> FastAPI:
  """
  Builds the API. The product store is opened in the lifespan, a failure
  there (StartupError) aborts startup.
  """
  database_url = database_url or config.DATABASE_URL

  @asynccontextmanager
  async def lifespan(app: FastAPI):
    # Application startup
    app.state.store = init_store(database_url)
    log.info("Product Management API is ready")
    yield
    app.state.store.close()

  app = FastAPI(title="Product Management API",
                lifespan=lifespan,
                description="Create, list and search products stored in SQLite.",
                version="1.0.0")

  app.state.limiter = RateLimiter(
    rate_limit_max if rate_limit_max is not None else config.RATE_LIMIT_MAX,
    rate_limit_window if rate_limit_window is not None else config.RATE_LIMIT_WINDOW_SECONDS,
  )

  # Last added runs first, CORS wraps the limiter
  app.middleware("http")(rate_limit_middleware)
  app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
  )

  app.add_exception_handler(ProductValidationError, validation_error_handler)
  app.add_exception_handler(RequestValidationError, request_error_handler)
  app.add_exception_handler(StorageError, storage_error_handler)
  app.add_exception_handler(Exception, global_exception_handler)

  app.include_router(router)
  return app


app = create_app()
