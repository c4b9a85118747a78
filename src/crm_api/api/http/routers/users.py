"""User resource: same routes as customers; delete answers with a message."""

from crm_api.api.http.routers.accounts import build_account_router
from crm_api.entities.kinds import USER

router = build_account_router(USER, delete_message="User deleted successfully")
