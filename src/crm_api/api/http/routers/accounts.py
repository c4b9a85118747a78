"""Router factory shared by the customers and users resources."""

from fastapi import APIRouter, Depends, Query, Response, status

from crm_api.api.http.deps import account_use_cases
from crm_api.core.services.accounts import (
    AccountUseCases,
    CreateAccountRequest,
    UpdateAccountRequest,
)
from crm_api.entities.account import Account
from crm_api.entities.kinds import AccountKind


def build_account_router(kind: AccountKind, delete_message: str | None = None) -> APIRouter:
    """Create the CRUD and status routes for one account kind.

    Args:
        kind: Account kind served under ``/{kind.plural}``
        delete_message: When set, ``DELETE`` answers 200 with this message
            instead of an empty 204
    """
    router = APIRouter(prefix=f"/{kind.plural}", tags=[kind.plural])
    entity = kind.repository.entity_type
    get_use_cases = account_use_cases(kind)

    @router.get("", response_model=list[entity])  # type: ignore[valid-type]
    async def list_accounts(
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> list[Account]:
        return await use_cases.list.handle()

    # Registered before "/{account_id}" so the literal path segments win.
    @router.get("/search", response_model=list[entity])  # type: ignore[valid-type]
    async def search_accounts(
        q: str | None = Query(default=None, description="At least 2 characters"),
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> list[Account]:
        return await use_cases.search.handle(q)

    @router.get("/email/{email}", response_model=entity)
    async def get_account_by_email(
        email: str,
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> Account:
        return await use_cases.get_by_email.handle(email)

    @router.get("/{account_id}", response_model=entity)
    async def get_account(
        account_id: str,
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> Account:
        return await use_cases.get.handle(account_id)

    @router.post("", response_model=entity, status_code=status.HTTP_201_CREATED)
    async def create_account(
        body: CreateAccountRequest,
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> Account:
        return await use_cases.create.handle(body)

    @router.patch("/{account_id}", response_model=entity)
    async def update_account(
        account_id: str,
        body: UpdateAccountRequest,
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> Account:
        return await use_cases.update.handle(account_id, body)

    if delete_message is None:

        @router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
        async def delete_account(
            account_id: str,
            use_cases: AccountUseCases = Depends(get_use_cases),
        ) -> Response:
            await use_cases.delete.handle(account_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    else:

        @router.delete("/{account_id}")
        async def delete_account_with_message(
            account_id: str,
            use_cases: AccountUseCases = Depends(get_use_cases),
        ) -> dict[str, str]:
            await use_cases.delete.handle(account_id)
            return {"message": delete_message}

    @router.patch("/{account_id}/confirm-email", response_model=entity)
    async def confirm_email(
        account_id: str,
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> Account:
        return await use_cases.confirm_email.handle(account_id)

    @router.patch("/{account_id}/activate", response_model=entity)
    async def activate_account(
        account_id: str,
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> Account:
        return await use_cases.activate.handle(account_id)

    @router.patch("/{account_id}/deactivate", response_model=entity)
    async def deactivate_account(
        account_id: str,
        use_cases: AccountUseCases = Depends(get_use_cases),
    ) -> Account:
        return await use_cases.deactivate.handle(account_id)

    return router
