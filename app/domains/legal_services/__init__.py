from app.domains.legal_services.entities import Service
from app.domains.legal_services.schemas import (
    ServiceBase, ServiceCreate, ServiceUpdate, ServiceResponse, ServiceTreeNode
)
from app.domains.legal_services.matching import (
    ServiceNode, attorney_handles_service, match_attorneys_for_service,
    build_attorney_service_tree
)

__all__ = [
    "Service",
    "ServiceBase", "ServiceCreate", "ServiceUpdate", "ServiceResponse", "ServiceTreeNode",
    "ServiceNode", "attorney_handles_service", "match_attorneys_for_service",
    "build_attorney_service_tree"
]
