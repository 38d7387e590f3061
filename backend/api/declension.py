"""Declension API with Monadic Error Handling

Inflects Ukrainian words and name/title phrases. Request parameters are
parsed into Results so an unknown case alias or an unsupported word comes
back as a structured 400 response.
"""
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from core.config import settings
from core.errors import AppError, Ok, Result, out_of_range, raise_result, sequence_results
from core.logging import api_logger
from languages.types import Gender, GrammaticalCase
from languages.ukrainian import get_declensioner
from languages.ukrainian.maps import parse_case, parse_gender, parse_number

log = api_logger()

router = APIRouter()

ORIGIN = "declension_api"


# === Request/Response Models ===

class DeclineRequest(BaseModel):
    text: str
    case: str
    number: str = "singular"
    gender: str | None = None
    animate: bool | None = None


class BatchRequest(BaseModel):
    items: list[DeclineRequest] = Field(default_factory=list)


class DeclineResponse(BaseModel):
    text: str
    case: str
    number: str
    gender: str | None
    result: str


class ParadigmResponse(BaseModel):
    text: str
    gender: str | None
    forms: dict[str, dict[str, str]]


# === Helpers ===

def check_length(text: str) -> Result[str, AppError]:
    tokens = len(text.split())
    if tokens > settings.MAX_PHRASE_TOKENS:
        return out_of_range("text", tokens, max_value=settings.MAX_PHRASE_TOKENS, origin=ORIGIN)
    return Ok(text)


def decline_request(req: DeclineRequest) -> Result[DeclineResponse, AppError]:
    """Validate one request and decline it."""
    checked = check_length(req.text)
    if checked.is_err():
        return checked
    case = parse_case(req.case, origin=ORIGIN)
    if case.is_err():
        return case
    number = parse_number(req.number, origin=ORIGIN)
    if number.is_err():
        return number
    gender = parse_gender(req.gender, origin=ORIGIN)
    if gender.is_err():
        return gender

    engine = get_declensioner()
    return engine.decline_result(
        req.text, case.unwrap(), number.unwrap(), gender.unwrap(), req.animate
    ).map(lambda form: DeclineResponse(
        text=req.text,
        case=case.unwrap().value,
        number=number.unwrap().value,
        gender=gender.unwrap().value if gender.unwrap() else None,
        result=form,
    ))


# === Endpoints ===

@router.get("/decline", response_model=DeclineResponse)
async def decline(
    text: str = Query(..., description="Word or phrase in the nominative"),
    case: str = Query(..., description="Target case: genitive, gen, родовий, р.в. ..."),
    number: str = Query("singular"),
    gender: str | None = Query(None, description="Omit to infer from the text"),
    animate: bool | None = Query(None, description="Omit to infer from the text"),
):
    """Inflect a word or phrase into the requested case and number."""
    result = decline_request(
        DeclineRequest(text=text, case=case, number=number, gender=gender, animate=animate)
    )
    raise_result(result)
    response = result.unwrap()
    log.debug("declined", text=text, case=response.case, result=response.result)
    return response


@router.get("/paradigm", response_model=ParadigmResponse)
async def paradigm(
    text: str = Query(..., description="Word or phrase in the nominative"),
    gender: str | None = Query(None),
):
    """All seven cases in both numbers."""
    raise_result(check_length(text))
    parsed = parse_gender(gender, origin=ORIGIN)
    raise_result(parsed)

    forms = _paradigm_result(text, parsed.unwrap())
    raise_result(forms)
    return ParadigmResponse(
        text=text,
        gender=parsed.unwrap().value if parsed.unwrap() else None,
        forms=forms.unwrap(),
    )


def _paradigm_result(text: str, gender: Gender | None) -> Result[dict[str, dict[str, str]], AppError]:
    engine = get_declensioner()
    probe = engine.decline_result(text, GrammaticalCase.NOMINATIVE, gender=gender)
    return probe.map(lambda _: engine.paradigm(text, gender))


@router.post("/batch", response_model=list[DeclineResponse])
async def decline_batch(request: BatchRequest):
    """Decline several items; the first failing item fails the whole batch."""
    result = sequence_results([decline_request(item) for item in request.items])
    raise_result(result)
    log.info("batch_declined", count=len(request.items))
    return result.unwrap()
