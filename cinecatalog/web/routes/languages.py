"""Route de consultation des langues (lecture seule)."""

from fastapi import APIRouter

from ..deps import LanguageServiceDep
from ..schemas import LanguageOut

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=list[LanguageOut])
def list_languages(service: LanguageServiceDep):
    return service.list_languages()
