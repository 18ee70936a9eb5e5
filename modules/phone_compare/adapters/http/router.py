from fastapi import APIRouter, Depends, HTTPException

from modules.phone_compare.adapters.schemas import (
    ComparisonByIdRequestV1,
    ComparisonResultV1,
    MultiComparisonRequestV1,
    MultiPhoneComparisonV1,
    PairComparisonRequestV1,
    VisualComparisonV1,
)
from modules.phone_compare.application.orchestrator import ComparisonOrchestrator
from modules.phone_compare.application.ports import PhoneCatalog
from modules.phone_compare.application.settings import (
    PhoneCompareSettings,
    get_phone_compare_settings,
)
from modules.phone_compare.domain.errors import (
    CatalogUnavailableError,
    ComparisonError,
    PhoneNotFoundError,
)
from modules.phone_compare.domain.visualization import format_for_visualization
from modules.phone_compare.infrastructure.providers import PhoneCatalogRegistry

router = APIRouter(prefix="/v1/comparison", tags=["phone_compare"])


def get_orchestrator(
    settings: PhoneCompareSettings = Depends(get_phone_compare_settings),  # noqa: B008
) -> ComparisonOrchestrator:
    return ComparisonOrchestrator(max_workers=settings.multi_workers)


def get_phone_catalog(
    settings: PhoneCompareSettings = Depends(get_phone_compare_settings),  # noqa: B008
) -> PhoneCatalog:
    try:
        return PhoneCatalogRegistry.get_catalog(settings)
    except (OSError, ValueError) as exc:
        raise _http_error(CatalogUnavailableError(str(exc))) from exc


def get_catalog_orchestrator(
    settings: PhoneCompareSettings = Depends(get_phone_compare_settings),  # noqa: B008
    catalog: PhoneCatalog = Depends(get_phone_catalog),  # noqa: B008
) -> ComparisonOrchestrator:
    return ComparisonOrchestrator(max_workers=settings.multi_workers, catalog=catalog)


def _http_error(exc: ComparisonError) -> HTTPException:
    if isinstance(exc, PhoneNotFoundError):
        status_code = 404
    elif isinstance(exc, CatalogUnavailableError):
        status_code = 503
    else:
        status_code = 400
    return HTTPException(
        status_code=status_code,
        detail={"code": exc.code, "message": exc.message, **exc.details},
    )


@router.post("", response_model=ComparisonResultV1)
def compare_pair(
    request: PairComparisonRequestV1,
    orchestrator: ComparisonOrchestrator = Depends(get_orchestrator),  # noqa: B008
) -> ComparisonResultV1:
    try:
        return orchestrator.compare_phones(request.phone1, request.phone2)
    except ComparisonError as exc:
        raise _http_error(exc) from exc


@router.post("/multi", response_model=MultiPhoneComparisonV1)
def compare_multi(
    request: MultiComparisonRequestV1,
    orchestrator: ComparisonOrchestrator = Depends(get_orchestrator),  # noqa: B008
    settings: PhoneCompareSettings = Depends(get_phone_compare_settings),  # noqa: B008
) -> MultiPhoneComparisonV1:
    if len(request.phones) > settings.max_phones:
        raise HTTPException(
            status_code=422,
            detail=f"at most {settings.max_phones} phones can be compared",
        )
    try:
        return orchestrator.compare_and_rank(request.phones)
    except ComparisonError as exc:
        raise _http_error(exc) from exc


@router.post("/visual", response_model=VisualComparisonV1)
def compare_visual(
    request: PairComparisonRequestV1,
    orchestrator: ComparisonOrchestrator = Depends(get_orchestrator),  # noqa: B008
) -> VisualComparisonV1:
    try:
        result = orchestrator.compare_phones(request.phone1, request.phone2)
    except ComparisonError as exc:
        raise _http_error(exc) from exc
    return format_for_visualization(result)


@router.post("/by-id", response_model=ComparisonResultV1)
def compare_by_id(
    request: ComparisonByIdRequestV1,
    orchestrator: ComparisonOrchestrator = Depends(get_catalog_orchestrator),  # noqa: B008
) -> ComparisonResultV1:
    try:
        return orchestrator.compare_by_ids(request.phone1_id, request.phone2_id)
    except ComparisonError as exc:
        raise _http_error(exc) from exc
