from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging
from contextlib import asynccontextmanager

from backend.config import Config
from backend.core.llm import GeminiLLMWrapper
from backend.core.study_agent import StudyAgent
from backend.api import assist


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize components on startup"""
    try:
        # Validate configuration
        Config.validate_config()

        # Initialize components
        llm_wrapper = GeminiLLMWrapper()
        study_agent = StudyAgent(llm_wrapper)

        # Set dependencies for routers
        assist.set_dependencies(study_agent)

        logger.info(f"Application initialized successfully (model: {llm_wrapper.model})")

    except Exception as e:
        logger.error(f"Initialization failed: {e}")
        raise e

    yield

    logger.info("Application shutting down")

# Create FastAPI app
app = FastAPI(
    title="StudyBot API",
    description="Chat, summarization and quiz generation backed by Gemini",
    version=Config.VERSION,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.warning(f"Invalid request body on {request.url.path}: {message}")
    return assist.error_response(f"Invalid request: {message}", 400)


# Include routers
app.include_router(assist.router, prefix="/api", tags=["assist"])

@app.get("/")
async def root():
    return {"message": "StudyBot API is running"}

@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": Config.VERSION}

if __name__ == "__main__":
    uvicorn.run(
        "backend.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=True
    )
