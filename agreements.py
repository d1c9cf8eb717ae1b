import request

from cancel import CancelToken, RequestCancelled
from classes import Institution, PartnerAgreement
from years import latest_year_id


def find_institution_id(institution_name: str, institutions: list[Institution]) -> int | None:
    # First match in catalog order wins, even when several names share the substring.
    for institution in institutions:
        if institution.has_name_containing(institution_name):
            return institution.id

    return None


def to_partner_agreement(agreement: dict, institutions: list[Institution]) -> PartnerAgreement:
    institution_name = agreement.get("institutionName") or ""

    return PartnerAgreement(
        institution_name=institution_name,
        source_institution_id=find_institution_id(institution_name, institutions),
        is_community_college=bool(agreement.get("isCommunityCollege", False)),
        academic_year_id=latest_year_id(agreement.get("sendingYearIds"), agreement.get("receivingYearIds"))
    )


async def get_agreements_json(receiving_id: int, token: CancelToken | None = None) -> list[dict]:
    print(f"Getting agreements for institution ID {receiving_id}.")
    return await request.get_json(f"/api/institutions/{receiving_id}/agreements", token=token) or []


async def resolve_agreements(
        receiving_id: int,
        institutions: list[Institution],
        token: CancelToken | None = None
) -> list[PartnerAgreement]:
    try:
        agreements_json = await get_agreements_json(receiving_id, token)
    except RequestCancelled:
        return []

    if not isinstance(agreements_json, list):
        raise ValueError(f"Unexpected agreements payload for institution ID {receiving_id}: {agreements_json!r}")

    return [to_partner_agreement(agreement, institutions) for agreement in agreements_json]
