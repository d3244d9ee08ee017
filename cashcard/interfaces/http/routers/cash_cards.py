"""Cash card endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from cashcard.domain.cash_cards import CashCardNotFoundError, CashCardService
from cashcard.domain.common.paging import parse_sort
from cashcard.interfaces.http.deps import get_cash_card_service
from cashcard.schemas import CashCardCreate, CashCardResponse

router = APIRouter()

# Ids are unsigned but stored in a signed BIGINT column.
MAX_ID = 2**63 - 1


def _to_schema(card) -> CashCardResponse:
    return CashCardResponse.model_validate(card)


@router.get(
    "/{requested_id}",
    response_model=CashCardResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Cash card not found"}},
    summary="Fetch a cash card",
)
async def find_cash_card_by_id(
    requested_id: int = Path(ge=0, le=MAX_ID),
    service: CashCardService = Depends(get_cash_card_service),
):
    try:
        card = await service.find_by_id(requested_id)
    except CashCardNotFoundError:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return _to_schema(card)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    summary="Create a cash card",
)
async def create_cash_card(
    payload: CashCardCreate,
    request: Request,
    service: CashCardService = Depends(get_cash_card_service),
):
    card = await service.create(payload.amount)
    location = request.app.url_path_for("find_cash_card_by_id", requested_id=card.id)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": str(location)})


@router.get("", response_model=list[CashCardResponse], summary="List cash cards")
async def list_cash_cards(
    page: Optional[int] = Query(None, ge=0, description="Zero-based page index"),
    size: Optional[int] = Query(None, ge=1, description="Page size"),
    sort: Optional[list[str]] = Query(None, description="Sort as field,direction; repeatable"),
    service: CashCardService = Depends(get_cash_card_service),
):
    result = await service.list_cash_cards(page=page, size=size, sort=parse_sort(sort))
    return [_to_schema(card) for card in result.content]
