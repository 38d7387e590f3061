"""Languages API Routes

Provides language configuration, grammar data and declension tables.
"""
from fastapi import APIRouter
from pydantic import BaseModel

from core.errors import AppError, Ok, Result, not_found, raise_result
from core.logging import api_logger
from languages import LanguageModule, get_module, list_languages

log = api_logger()

router = APIRouter()


# === Response Models ===

class CaseResponse(BaseModel):
    id: str
    label: str
    nativeLabel: str
    hint: str


class GenderResponse(BaseModel):
    id: str
    label: str
    short: str


class NumberResponse(BaseModel):
    id: str
    label: str


class GrammarConfigResponse(BaseModel):
    cases: list[CaseResponse]
    genders: list[GenderResponse]
    numbers: list[NumberResponse]
    hasDeclension: bool


class LanguageInfoResponse(BaseModel):
    code: str
    name: str
    nativeName: str


# === Helpers ===

def find_module(lang_code: str) -> Result[LanguageModule, AppError]:
    """Look up a registered language module."""
    try:
        return Ok(get_module(lang_code))
    except ValueError:
        return not_found("Language", lang_code, origin="languages_api")


def require_module(lang_code: str) -> LanguageModule:
    result = find_module(lang_code)
    raise_result(result)
    return result.unwrap()


# === Endpoints ===

@router.get("/", response_model=list[LanguageInfoResponse])
async def get_available_languages():
    """Get list of available languages."""
    return list_languages()


@router.get("/{lang_code}", response_model=LanguageInfoResponse)
async def get_language_info(lang_code: str):
    """Get language info by code."""
    module = require_module(lang_code)
    return LanguageInfoResponse(code=module.code, name=module.name, nativeName=module.native_name)


@router.get("/{lang_code}/grammar", response_model=GrammarConfigResponse)
async def get_grammar_config(lang_code: str):
    """Get grammar configuration (cases, genders, numbers)."""
    module = require_module(lang_code)
    log.debug("grammar_config_fetched", language=lang_code)
    return module.get_grammar_config().to_dict()


@router.get("/{lang_code}/declension-patterns")
async def get_declension_patterns(lang_code: str):
    """Get declension ending tables for the language."""
    module = require_module(lang_code)
    return {"patterns": module.get_declension_patterns()}
