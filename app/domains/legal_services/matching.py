from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from app.domains.attorneys.entities import Attorney
from app.domains.legal_services.entities import Service


@dataclass
class ServiceNode:
    """Servicio dentro del árbol de un abogado"""

    service: Service
    children: List["ServiceNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.service.id


def attorney_handles_service(attorney: Attorney, service: Service) -> bool:
    """Coincidencia por ID asignado o por especialización parecida al nombre"""
    if service.id in attorney.servicios_que_atiende:
        return True

    service_name = service.name.lower()
    for especializacion in attorney.especializaciones:
        especialidad = especializacion.lower()
        if especialidad in service_name or service_name in especialidad:
            return True
    return False


def match_attorneys_for_service(service: Service, attorneys: Iterable[Attorney]) -> List[Attorney]:
    """Abogados que atienden el servicio: socios primero, luego por experiencia"""
    matched = [a for a in attorneys if attorney_handles_service(a, service)]
    return sorted(matched, key=lambda a: (not a.es_socio, -a.experiencia_anios))


def build_attorney_service_tree(attorney: Attorney, services: Iterable[Service]) -> List[ServiceNode]:
    """Árbol padre/hijo con los servicios del abogado y sus padres"""
    services = list(services)
    matched = [s for s in services if attorney_handles_service(attorney, s)]

    relevant_ids: Set[str] = set()
    for service in matched:
        relevant_ids.add(service.id)
        if service.parent_id:
            relevant_ids.add(service.parent_id)

    nodes: Dict[str, ServiceNode] = {}
    for service in services:
        if service.id in relevant_ids:
            nodes[service.id] = ServiceNode(service=service)

    roots: List[ServiceNode] = []
    for node in nodes.values():
        parent = nodes.get(node.service.parent_id) if node.service.parent_id else None
        if parent is not None:
            parent.children.append(node)
        else:
            roots.append(node)

    for node in nodes.values():
        node.children.sort(key=lambda n: n.service.order)
    roots.sort(key=lambda n: n.service.order)
    return roots
