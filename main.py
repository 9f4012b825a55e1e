"""
Entry point for the FastAPI application.

Run with (from project root):

    python main.py

or

    uvicorn main:app --host 0.0.0.0 --port 5001

Exposes the "PDF to OCR" feature via:

    POST /pdf_to_ocr
"""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from features.pdf_ocr.domain.errors import InvalidRequestBody, PdfOcrError
from features.pdf_ocr.presentation.api import router as pdf_to_ocr_router

HOST = "0.0.0.0"
PORT = 5001

# Configure logging
logging.basicConfig(
    level=logging.INFO,  # Set to DEBUG for per-adapter details
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler('pdf_ocr.log', encoding='utf-8')
    ]
)

logger = logging.getLogger(__name__)
logger.info("Starting PDF OCR API")

app = FastAPI(title="PDF OCR API", version="0.1.0")

app.include_router(pdf_to_ocr_router)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = InvalidRequestBody()
    logger.warning(f"invalid_body_handler: {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


@app.exception_handler(PdfOcrError)
async def pdf_ocr_error_handler(request: Request, exc: PdfOcrError) -> JSONResponse:
    logger.error(
        f"pdf_ocr_error_handler: stage={exc.stage} page={exc.page_number} "
        f"status={exc.status_code}: {exc.message}"
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    logger.info(f"Server running at http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)
