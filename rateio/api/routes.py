from fastapi import APIRouter, HTTPException
from loguru import logger

from rateio.config import get_settings
from rateio.errors import UnsupportedLocaleError
from rateio.models.schemas import BillSplitFact, ExtractRequest
from rateio.nlp.engine import extract_bill_split_fact

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/extract", response_model=BillSplitFact)
def extract_fact(request: ExtractRequest):
    settings = get_settings()
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=413,
            detail=f"Text longer than {settings.max_text_length} characters",
        )

    logger.info("Extracting from message: {}", request.text)
    try:
        fact = extract_bill_split_fact(request.text, locale=request.locale)
    except UnsupportedLocaleError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info(
        "Extracted rule={} amounts={} participants={} warnings={}",
        fact.rule.value,
        [a.value_cents for a in fact.amounts],
        [p.value for p in fact.participants.canonical_forms()],
        len(fact.warnings),
    )
    return fact
