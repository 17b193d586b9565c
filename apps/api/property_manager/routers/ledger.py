"""Account types, accounts, transaction types, transactions and payments."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..models import Account, AccountType, Payment, Property, Tenant, Transaction, TransactionType
from ..repositories import base as repo
from ..repositories import loaders
from ..schemas import ledger as schemas
from ..services import ledger as ledger_service
from ..services import records

router = APIRouter()

ACCOUNT_REFERENCES = {"account_type_id": AccountType}
TRANSACTION_REFERENCES = {
    "account_id": Account,
    "transaction_type_id": TransactionType,
    "property_id": Property,
}
PAYMENT_REFERENCES = {"tenant_id": Tenant}


@router.get("/account-types", response_model=list[schemas.AccountTypeRead])
async def list_account_types(session: AsyncSession = Depends(get_session)) -> list[schemas.AccountTypeRead]:
    return await repo.list_all(session, AccountType)


@router.get("/account-types/{account_type_id}", response_model=schemas.AccountTypeRead)
async def get_account_type(
    account_type_id: int, session: AsyncSession = Depends(get_session)
) -> schemas.AccountTypeRead:
    return await repo.get_or_404(session, AccountType, account_type_id)


@router.post("/account-types", response_model=schemas.AccountTypeRead, status_code=status.HTTP_201_CREATED)
async def create_account_type(
    payload: schemas.NamedCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.AccountTypeRead:
    return await records.create_record(session, AccountType, payload)


@router.put("/account-types/{account_type_id}", response_model=schemas.AccountTypeRead)
async def update_account_type(
    account_type_id: int,
    payload: schemas.NamedUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.AccountTypeRead:
    return await records.update_record(session, AccountType, account_type_id, payload)


@router.delete("/account-types/{account_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account_type(account_type_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    """Delete an account type that no account uses; 409 otherwise."""

    await ledger_service.delete_account_type(account_type_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/accounts", response_model=list[schemas.AccountRead])
async def list_accounts(session: AsyncSession = Depends(get_session)) -> list[schemas.AccountRead]:
    return await repo.list_all(session, Account, options=loaders.ACCOUNT)


@router.get("/accounts/{account_id}", response_model=schemas.AccountRead)
async def get_account(account_id: int, session: AsyncSession = Depends(get_session)) -> schemas.AccountRead:
    return await repo.get_or_404(session, Account, account_id, options=loaders.ACCOUNT)


@router.post("/accounts", response_model=schemas.AccountRead, status_code=status.HTTP_201_CREATED)
async def create_account(
    payload: schemas.AccountCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.AccountRead:
    return await records.create_record(
        session, Account, payload, references=ACCOUNT_REFERENCES, options=loaders.ACCOUNT
    )


@router.put("/accounts/{account_id}", response_model=schemas.AccountRead)
async def update_account(
    account_id: int,
    payload: schemas.AccountUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.AccountRead:
    return await records.update_record(
        session, Account, account_id, payload, references=ACCOUNT_REFERENCES, options=loaders.ACCOUNT
    )


@router.delete("/accounts/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(account_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await ledger_service.delete_account(account_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/transaction-types", response_model=list[schemas.TransactionTypeRead])
async def list_transaction_types(
    session: AsyncSession = Depends(get_session),
) -> list[schemas.TransactionTypeRead]:
    return await repo.list_all(session, TransactionType)


@router.get("/transaction-types/{transaction_type_id}", response_model=schemas.TransactionTypeRead)
async def get_transaction_type(
    transaction_type_id: int, session: AsyncSession = Depends(get_session)
) -> schemas.TransactionTypeRead:
    return await repo.get_or_404(session, TransactionType, transaction_type_id)


@router.post(
    "/transaction-types",
    response_model=schemas.TransactionTypeRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction_type(
    payload: schemas.NamedCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.TransactionTypeRead:
    return await records.create_record(session, TransactionType, payload)


@router.put("/transaction-types/{transaction_type_id}", response_model=schemas.TransactionTypeRead)
async def update_transaction_type(
    transaction_type_id: int,
    payload: schemas.NamedUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.TransactionTypeRead:
    return await records.update_record(session, TransactionType, transaction_type_id, payload)


@router.delete("/transaction-types/{transaction_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction_type(
    transaction_type_id: int, session: AsyncSession = Depends(get_session)
) -> Response:
    """Delete a transaction type; transactions that used it keep existing untyped."""

    await ledger_service.delete_transaction_type(transaction_type_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/transactions", response_model=list[schemas.TransactionRead])
async def list_transactions(session: AsyncSession = Depends(get_session)) -> list[schemas.TransactionRead]:
    return await repo.list_all(session, Transaction, options=loaders.TRANSACTION)


@router.get("/transactions/{transaction_id}", response_model=schemas.TransactionRead)
async def get_transaction(
    transaction_id: int, session: AsyncSession = Depends(get_session)
) -> schemas.TransactionRead:
    return await repo.get_or_404(session, Transaction, transaction_id, options=loaders.TRANSACTION)


@router.post("/transactions", response_model=schemas.TransactionRead, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: schemas.TransactionCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.TransactionRead:
    return await records.create_record(
        session, Transaction, payload, references=TRANSACTION_REFERENCES, options=loaders.TRANSACTION
    )


@router.put("/transactions/{transaction_id}", response_model=schemas.TransactionRead)
async def update_transaction(
    transaction_id: int,
    payload: schemas.TransactionUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.TransactionRead:
    return await records.update_record(
        session,
        Transaction,
        transaction_id,
        payload,
        references=TRANSACTION_REFERENCES,
        options=loaders.TRANSACTION,
    )


@router.delete("/transactions/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(transaction_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await records.delete_record(session, Transaction, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/payments", response_model=list[schemas.PaymentRead])
async def list_payments(session: AsyncSession = Depends(get_session)) -> list[schemas.PaymentRead]:
    return await repo.list_all(session, Payment, options=loaders.PAYMENT)


@router.get("/payments/{payment_id}", response_model=schemas.PaymentRead)
async def get_payment(payment_id: int, session: AsyncSession = Depends(get_session)) -> schemas.PaymentRead:
    return await repo.get_or_404(session, Payment, payment_id, options=loaders.PAYMENT)


@router.post("/payments", response_model=schemas.PaymentRead, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payload: schemas.PaymentCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PaymentRead:
    return await records.create_record(
        session, Payment, payload, references=PAYMENT_REFERENCES, options=loaders.PAYMENT
    )


@router.put("/payments/{payment_id}", response_model=schemas.PaymentRead)
async def update_payment(
    payment_id: int,
    payload: schemas.PaymentUpdate,
    session: AsyncSession = Depends(get_session),
) -> schemas.PaymentRead:
    return await records.update_record(
        session, Payment, payment_id, payload, references=PAYMENT_REFERENCES, options=loaders.PAYMENT
    )


@router.delete("/payments/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment(payment_id: int, session: AsyncSession = Depends(get_session)) -> Response:
    await records.delete_record(session, Payment, payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
