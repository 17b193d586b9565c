"""Owner, association and board member endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..models import Association, BoardMember, Owner, Property
from ..repositories import base as repo
from ..repositories import loaders
from ..schemas import contacts as schemas
from ..services import contacts as contacts_service
from ..services import records

router = APIRouter()

ASSOCIATION_REFERENCES = {"property_id": Property}
BOARD_MEMBER_REFERENCES = {"association_id": Association}


@router.get("/owners", response_model=list[schemas.OwnerRead])
async def list_owners(session: AsyncSession = Depends(get_session)) -> list[schemas.OwnerRead]:
    return await repo.list_all(session, Owner, options=loaders.OWNER)


@router.get("/owners/{owner_id}", response_model=schemas.OwnerRead)
async def get_owner(owner_id: int, session: AsyncSession = Depends(get_session)) -> schemas.OwnerRead:
    return await repo.get_or_404(session, Owner, owner_id, options=loaders.OWNER)


@router.post("/owners", response_model=schemas.OwnerRead, status_code=status.HTTP_201_CREATED)
async def create_owner(
    payload: schemas.OwnerCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.OwnerRead:
    return await records.create_record(session, Owner, payload, options=loaders.OWNER)


@router.put("/owners/{owner_id}", response_model=schemas.OwnerRead)
async def update_owner(
    owner_id: int,
    payload: schemas.OwnerUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.OwnerRead:
    return await records.update_record(session, Owner, owner_id, payload, options=loaders.OWNER)


@router.delete("/owners/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_owner(owner_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    """Delete an owner; their properties are kept without an owner."""

    await contacts_service.delete_owner(owner_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/associations", response_model=list[schemas.AssociationRead])
async def list_associations(session: AsyncSession = Depends(get_session)) -> list[schemas.AssociationRead]:
    return await repo.list_all(session, Association, options=loaders.ASSOCIATION)


@router.get("/associations/{association_id}", response_model=schemas.AssociationRead)
async def get_association(
    association_id: int, session: AsyncSession = Depends(get_session)
) -> schemas.AssociationRead:
    return await repo.get_or_404(session, Association, association_id, options=loaders.ASSOCIATION)


@router.post("/associations", response_model=schemas.AssociationRead, status_code=status.HTTP_201_CREATED)
async def create_association(
    payload: schemas.AssociationCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.AssociationRead:
    return await records.create_record(
        session, Association, payload, references=ASSOCIATION_REFERENCES, options=loaders.ASSOCIATION
    )


@router.put("/associations/{association_id}", response_model=schemas.AssociationRead)
async def update_association(
    association_id: int,
    payload: schemas.AssociationUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.AssociationRead:
    return await records.update_record(
        session,
        Association,
        association_id,
        payload,
        references=ASSOCIATION_REFERENCES,
        options=loaders.ASSOCIATION,
    )


@router.delete("/associations/{association_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_association(association_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await contacts_service.delete_association(association_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/board-members", response_model=list[schemas.BoardMemberRead])
async def list_board_members(session: AsyncSession = Depends(get_session)) -> list[schemas.BoardMemberRead]:
    return await repo.list_all(session, BoardMember, options=loaders.BOARD_MEMBER)


@router.get("/board-members/{member_id}", response_model=schemas.BoardMemberRead)
async def get_board_member(member_id: int, session: AsyncSession = Depends(get_session)) -> schemas.BoardMemberRead:
    return await repo.get_or_404(session, BoardMember, member_id, options=loaders.BOARD_MEMBER)


@router.post("/board-members", response_model=schemas.BoardMemberRead, status_code=status.HTTP_201_CREATED)
async def create_board_member(
    payload: schemas.BoardMemberCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.BoardMemberRead:
    return await records.create_record(
        session, BoardMember, payload, references=BOARD_MEMBER_REFERENCES, options=loaders.BOARD_MEMBER
    )


@router.put("/board-members/{member_id}", response_model=schemas.BoardMemberRead)
async def update_board_member(
    member_id: int,
    payload: schemas.BoardMemberUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.BoardMemberRead:
    return await records.update_record(
        session,
        BoardMember,
        member_id,
        payload,
        references=BOARD_MEMBER_REFERENCES,
        options=loaders.BOARD_MEMBER,
    )


@router.delete("/board-members/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_board_member(member_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await records.delete_record(session, BoardMember, member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
