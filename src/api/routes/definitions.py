"""Definition and translation routes.

These mirror the browser extension's two message types:
- POST /definitions: getDefinition — normalized, projected entry for a word or phrase
- POST /translations: translateSentence — sentence translation into the target language

Both always answer 200 with a tagged result; the status field carries
success or the reported error.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_definition_service
from api.models import DefinitionRequest, DefinitionResponse, TranslationRequest, TranslationResponse
from services.definition_service import DefinitionService

router = APIRouter(tags=["definitions"])


@router.post("/definitions", response_model=DefinitionResponse, response_model_exclude_none=True)
async def get_definition(
    request: DefinitionRequest,
    service: DefinitionService = Depends(get_definition_service),
):
    """Look up a word or phrase with the user's source and display settings."""
    outcome = await service.get_definition(request.word)
    return outcome.to_dict()


@router.post("/translations", response_model=TranslationResponse, response_model_exclude_none=True)
async def translate_sentence(
    request: TranslationRequest,
    service: DefinitionService = Depends(get_definition_service),
):
    """Translate a sentence into the configured target language."""
    outcome = await service.translate_sentence(request.text)
    return outcome.to_dict()
