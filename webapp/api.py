"""
Historical Ecosystem Classification API
"""

from fastapi import FastAPI, UploadFile, File, Form, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
import os
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, TypeAdapter, ValidationError
from contextlib import asynccontextmanager

from ecoclassifier import (
    LABEL_DISPLAY,
    HistoricalText, EcosystemResult, AnalysisConfig,
    ModelManager, EcosystemAnalyzer, build_strategy, run_analysis,
    compare, parse_text, generate_recommendation, get_confidence_level,
    InvalidInputError, DecodingError, ConfigurationError,
)
from ecoclassifier.comparison import decode_modern_data
from ecoclassifier.loaders import extract_text_from_pdf, record_to_text

# ============================================================================
# CONFIGURATION (from env vars with safe defaults)
# ============================================================================
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
MODEL_DIR = os.environ.get('MODEL_DIR', os.path.join(BASE_DIR, 'ML_Models'))

CORS_ORIGINS = os.environ.get(
    'CORS_ORIGINS', 'http://localhost:8000,http://127.0.0.1:8000'
).split(',')
MAX_UPLOAD_SIZE = int(os.environ.get('MAX_UPLOAD_SIZE', 10 * 1024 * 1024))  # 10MB

# Bayesian model for the trained-model strategy
model_manager = ModelManager()

_results_adapter = TypeAdapter(List[EcosystemResult])


# ============================================================================
# APP SETUP
# ============================================================================
@asynccontextmanager
async def lifespan(app):
    # Startup: prefer a saved model, fall back to the built-in corpus
    if not model_manager.load(MODEL_DIR):
        model_manager.train()
    yield

app = FastAPI(
    title="Historical Ecosystem Classification API",
    description="Classify historical landscape descriptions and track ecosystem change",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# REQUEST MODELS
# ============================================================================
class AnalyzeRequest(BaseModel):
    texts: List[dict]
    config: AnalysisConfig = AnalysisConfig()
    modern_text: Optional[str] = None


class RecommendRequest(BaseModel):
    results: List[EcosystemResult]


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================
def _strategy_or_503(name: str):
    try:
        return build_strategy(name, model_manager)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.detail)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def _read_upload(file: UploadFile) -> bytes:
    content = await file.read()
    if len(content) > MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {MAX_UPLOAD_SIZE // (1024*1024)}MB"
        )
    return content


def _describe(result: EcosystemResult) -> dict:
    label_info = LABEL_DISPLAY.get(result.ecosystem_type, LABEL_DISPLAY['unknown'])
    return {
        **result.model_dump(),
        "display_name": label_info['name'],
        "emoji": label_info['emoji'],
        "color": label_info['color'],
        "confidence_level": get_confidence_level(result.confidence),
    }


# ============================================================================
# API ENDPOINTS
# ============================================================================
@app.get("/", response_class=HTMLResponse)
async def root():
    return HTMLResponse(
        "<h1>Historical Ecosystem Classification API</h1>"
        "<p>Analysis endpoint: POST /api/analyze</p>"
    )

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "model_loaded": model_manager.is_loaded,
        "timestamp": datetime.now().isoformat()
    }

@app.get("/labels")
async def get_labels():
    """Get all ecosystem labels"""
    return {
        "labels": [
            {**info, 'key': key}
            for key, info in LABEL_DISPLAY.items()
        ]
    }

@app.post("/api/analyze")
async def analyze(request: AnalyzeRequest):
    """
    Classify a batch of historical texts.

    - **config.strategy**: 'keyword' (default) or 'trained_model'
    - **config.include_temporal_analysis**: add per-ecosystem trends
    - **config.include_comparative_analysis**: compare against `modern_text`
    """
    modern_data = request.modern_text.encode('utf-8') if request.modern_text is not None else None

    texts, skipped = [], []
    for index, record in enumerate(request.texts):
        try:
            texts.append(record_to_text(record))
        except InvalidInputError as e:
            skipped.append({"index": index, "error": e.detail})

    try:
        report = run_analysis(texts, request.config, modern_data=modern_data,
                              model_manager=model_manager)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.detail)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.detail)

    return {
        **report.model_dump(),
        "results": [_describe(r) for r in report.results],
        "skipped": skipped,
        "timestamp": datetime.now().isoformat()
    }

@app.post("/api/analyze-file")
async def analyze_file(file: UploadFile = File(...), strategy: str = "keyword", timestamp: float = 0.0):
    """Classify a single .txt or .pdf document"""
    filename = file.filename or 'upload.txt'
    content = await _read_upload(file)

    try:
        if filename.lower().endswith('.pdf'):
            text, _ = extract_text_from_pdf(content)
        else:
            text = decode_modern_data(content)
    except (InvalidInputError, DecodingError) as e:
        raise HTTPException(status_code=400, detail=e.detail)

    doc = HistoricalText(
        id=os.path.splitext(filename)[0], content=text, timestamp=timestamp, source=filename
    )
    result = EcosystemAnalyzer(_strategy_or_503(strategy)).analyze([doc])[0]
    return {
        "filename": filename,
        "result": _describe(result),
        "timestamp": datetime.now().isoformat()
    }

@app.post("/api/compare")
async def compare_with_modern(historical: str = Form(...), file: UploadFile = File(...)):
    """
    Compare historical results (JSON list) with an uploaded modern text sample
    """
    try:
        results = _results_adapter.validate_json(historical)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid historical results: {e}")

    content = await _read_upload(file)
    try:
        comparison = compare(results, content)
    except DecodingError as e:
        raise HTTPException(status_code=400, detail=e.detail)

    return comparison.model_dump()

@app.post("/api/recommend")
async def recommend(request: RecommendRequest):
    """Conservation recommendation for classified results"""
    return {"recommendation": generate_recommendation(request.results)}

@app.post("/api/parse")
async def parse(text: HistoricalText):
    """Indicators, keyword ecosystem and temporal context of one text"""
    return parse_text(text).model_dump()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
