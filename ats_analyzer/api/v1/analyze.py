import logging
from datetime import datetime, timezone
from pathlib import PurePath

from fastapi import APIRouter, Depends, File, Form, Header, HTTPException, Request, UploadFile, status

from ats_analyzer.core.config import settings
from ats_analyzer.core.rate_limit import rate_limit
from ats_analyzer.core.security import check_api_key
from ats_analyzer.features.keywords import extract_keywords
from ats_analyzer.schemas.api import (
    AnalyzeRequest,
    AnalyzeResponse,
    KeywordsRequest,
    KeywordsResponse,
    split_custom_keywords,
)
from ats_analyzer.schemas.report import AnalysisResult
from ats_analyzer.services.analyzer import analyze_resume

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth(x_api_key: str | None = Header(default=None, alias="X-API-Key")):
    check_api_key(x_api_key)


def _to_response(result: AnalysisResult) -> AnalyzeResponse:
    return AnalyzeResponse(
        report=result.report,
        suggestions=result.suggestions,
        checklist=result.checklist,
        breakdown=result.breakdown,
        generated_at=datetime.now(timezone.utc),
    )


def _enforce_text_limits(resume_text: str, job_description_text: str) -> None:
    if len(resume_text) > settings.max_resume_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Resume text exceeds {settings.max_resume_chars} characters.",
        )
    if len(job_description_text) > settings.max_jd_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Job description exceeds {settings.max_jd_chars} characters.",
        )


def detect_file_kind(filename: str | None, content_type: str | None) -> str:
    name = (filename or "").lower()
    kind = (content_type or "").lower()
    suffix = PurePath(name).suffix
    if suffix == ".pdf" or kind == "application/pdf":
        return "pdf"
    if suffix == ".docx" or "officedocument.wordprocessingml.document" in kind:
        return "docx"
    if suffix == ".txt" or kind == "text/plain":
        return "txt"
    if suffix == ".doc":
        return "doc"
    return "unknown"


@router.post("/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def analyze(request: Request, payload: AnalyzeRequest, _: None = Depends(_auth)):
    _enforce_text_limits(payload.resume_text, payload.job_description_text)
    result = analyze_resume(payload.resume_text, payload.job_description_text, payload.custom_keywords)
    return _to_response(result)


@router.post("/analyze/upload", response_model=AnalyzeResponse)
@rate_limit()
async def analyze_upload(
    request: Request,
    file: UploadFile = File(...),
    job_description_text: str = Form(default=""),
    custom_keywords: str = Form(default=""),
    _: None = Depends(_auth),
):
    kind = detect_file_kind(file.filename, file.content_type)
    if kind == "doc":
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=".doc format is not supported. Please convert to .docx or PDF.",
        )
    if kind in {"pdf", "docx"}:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Binary documents must be converted to plain text before analysis.",
        )
    if kind != "txt":
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Unsupported file type. Please upload a TXT file.",
        )

    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Please upload a file under {settings.max_upload_bytes // (1024 * 1024)} MB.",
        )

    try:
        resume_text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Resume file is not valid UTF-8 text.",
        ) from exc

    if not resume_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Resume file is empty.")

    _enforce_text_limits(resume_text, job_description_text)
    logger.info("resume_upload_received filename=%s bytes=%d", file.filename, len(raw))
    result = analyze_resume(resume_text, job_description_text, split_custom_keywords(custom_keywords))
    return _to_response(result)


@router.post("/keywords", response_model=KeywordsResponse)
@rate_limit()
async def keywords(request: Request, payload: KeywordsRequest, _: None = Depends(_auth)):
    _enforce_text_limits("", payload.job_description_text)
    return KeywordsResponse(keywords=extract_keywords(payload.job_description_text, payload.custom_keywords))
