"""Customer resource: CRUD plus email confirmation and activation."""

from crm_api.api.http.routers.accounts import build_account_router
from crm_api.entities.kinds import CUSTOMER

router = build_account_router(CUSTOMER)
