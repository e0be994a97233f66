"""Seed Dataset: written to a local slot the first time it is read.

Invariants:
    - Payloads are in slot form (camelCase keys, JSON-safe values)
    - Seeds apply to the local backend only; the remote backend is never seeded
    - SEEDS is keyed by EntityKind value (collection name)
"""

from copejem.core.domain_types import EntityKind

SEED_COMPANIES: list[dict] = [
    {
        "id": "1",
        "name": "MakeWork",
        "taxId": "",
        "industry": "Tecnologia",
        "createdAt": "2024-01-01T00:00:00Z",
    },
]

SEED_MEMBERS: list[dict] = [
    {
        "id": "1",
        "name": "Gabrielle Elias",
        "companyId": "1",
        "companyName": "MakeWork",
        "role": "President",
        "email": "email@makework.tech",
        "password": "Teste@123",
        "taxId": "000.000.000-00",
        "isAdmin": True,
        "status": "active",
        "admissionYear": 2024,
        "avatarUrl": "https://ui-avatars.com/api/?name=Gabrielle+Elias&background=purple&color=fff",
    },
]

SEED_PROJECTS: list[dict] = [
    {
        "id": "1",
        "year": 2024,
        "name": "Copejem Day",
        "coordinatorId": "101",
        "coordinatorName": "João Silva",
        "eventDate": "2024-05-15",
        "planningStartDate": "2024-02-01",
        "planningEndDate": "2024-05-01",
        "teamMembers": ["Ana", "Carlos", "Beatriz"],
        "description": "Um dia de imersão e networking para jovens empresários.",
        "status": "COMPLETED",
        "type": "EVENT",
        "targetAudience": ["YOUNG_ENTREPRENEURS", "COPEJEM_MEMBERS"],
        "partners": [
            {"name": "ACIM", "type": "ACIM"},
            {"name": "Sicredi", "type": "SPONSOR"},
        ],
        "results": {
            "participantsCount": 150,
            "estimatedReach": 500,
            "satisfactionScore": 4.8,
            "satisfactionFeedback": "Excelente feedback sobre os palestrantes",
        },
        "createdBy": "admin",
        "createdAt": "2024-01-10T09:00:00Z",
        "updatedAt": "2024-05-20T10:00:00Z",
    },
    {
        "id": "2",
        "year": 2024,
        "name": "Feirão do Imposto",
        "coordinatorId": "102",
        "coordinatorName": "Maria Souza",
        "eventDate": "2024-09-20",
        "planningStartDate": "2024-06-01",
        "planningEndDate": "2024-09-10",
        "teamMembers": ["João", "Pedro"],
        "description": "Ação de conscientização tributária.",
        "status": "EXECUTING",
        "type": "INSTITUTIONAL_ACTION",
        "targetAudience": ["EXTERNAL_PUBLIC"],
        "partners": [],
        "createdBy": "admin",
        "createdAt": "2024-05-01T09:00:00Z",
        "updatedAt": "2024-05-01T09:00:00Z",
    },
]

SEEDS: dict[str, list[dict]] = {
    EntityKind.COMPANY.value: SEED_COMPANIES,
    EntityKind.MEMBER.value: SEED_MEMBERS,
    EntityKind.PROJECT.value: SEED_PROJECTS,
}
