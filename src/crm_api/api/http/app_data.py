from dataclasses import dataclass

from crm_api.core.services.database.db_session import DbSessionService
from crm_api.core.services.side_effects import SideEffects


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    side_effects: SideEffects
