import request

from cancel import CancelToken
from classes import Institution

_institutions: list[Institution] | None = None


def reformat_institutions(raw_institutions: list[dict]) -> list[Institution]:
    if raw_institutions is not None and not isinstance(raw_institutions, list):
        raise ValueError(f"Unexpected institutions payload: {raw_institutions!r}")

    return [Institution.from_assist(institution) for institution in raw_institutions or []]


async def get_institutions(token: CancelToken | None = None) -> list[Institution]:
    global _institutions

    if _institutions is None:
        print("Getting list of institutions.")
        raw_institutions: list[dict] = await request.get_json("/api/institutions", token=token)
        _institutions = reformat_institutions(raw_institutions)

    return _institutions


def clear_institutions() -> None:
    global _institutions
    _institutions = None


def institutions_in_system(institutions: list[Institution], system: str) -> list[Institution]:
    return [
        institution for institution in institutions
        if not institution.is_community_college and institution.has_name_containing(system)
    ]


def display_name(institution: Institution, system: str) -> str:
    for n in institution.names:
        if system in n.name:
            return n.name

    return ""


def find_institution(institutions: list[Institution], institution_id: int) -> Institution | None:
    return next((i for i in institutions if i.id == institution_id), None)
