from app.domains.attorneys.entities import Attorney, FIRM_EMAIL_DOMAINS
from app.domains.attorneys.schemas import (
    AttorneyBase, AttorneyCreate, AttorneyUpdate, AttorneyResponse,
    AttorneyListItem, AttorneyPage, AttorneySlugLink, SlugMigrationItem,
    SlugMigrationReport, SlugStatusReport
)

__all__ = [
    "Attorney", "FIRM_EMAIL_DOMAINS",
    "AttorneyBase", "AttorneyCreate", "AttorneyUpdate", "AttorneyResponse",
    "AttorneyListItem", "AttorneyPage", "AttorneySlugLink", "SlugMigrationItem",
    "SlugMigrationReport", "SlugStatusReport"
]
