from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
import logging
import time

from api.v1.recall import router as v1_recall_router
from core.settings import configure_logging
from schemas.response_schema import APIResponse

configure_logging()
logger = logging.getLogger(__name__)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        response.headers['X-Process-Time'] = str(process_time)

        logger.info("Request to %s took %.6f seconds", request.url, process_time)

        return response


app = FastAPI(
    title="Recall Alignment API",
)
app.add_middleware(RequestTimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def custom_http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=APIResponse(
            status_code=exc.status_code,
            data=None,
            detail=exc.detail,
        ).model_dump()
    )


@app.get("/health", tags=["Health"])
async def health_check():
    data = {"status": "healthy", "timestamp": int(time.time())}
    return APIResponse(status_code=200, detail="Service is healthy", data=data)


app.include_router(v1_recall_router, prefix='/v1')
