import asyncio
import sys

import config
import request

from agreements import resolve_agreements
from cancel import CancelToken, RequestCancelled
from classes import Institution, MajorCatalog, MajorReport, PartnerAgreement
from labels import dedupe_labels, normalize_label


async def get_major_reports(
        receiving_id: int,
        agreement: PartnerAgreement,
        token: CancelToken | None = None
) -> list[MajorReport]:
    params = {
        "receivingInstitutionId": receiving_id,
        "sendingInstitutionId": agreement.source_institution_id,
        "academicYearId": agreement.academic_year_id,
        "categoryCode": config.MAJOR_CATEGORY_CODE,
    }

    majors_json: dict = await request.get_json("/api/agreements", params=params, token=token) or {}

    return [MajorReport.from_assist(report) for report in (majors_json.get("reports") or [])]


async def get_partner_majors(
        receiving_id: int,
        agreement: PartnerAgreement,
        token: CancelToken | None = None
) -> list[str]:
    if not agreement.is_active:
        return []

    reports = await get_major_reports(receiving_id, agreement, token)

    return [normalize_label(report.label) for report in reports]


def merge_majors(per_partner: list[list[str]]) -> list[str]:
    return sorted(dedupe_labels(major for majors in per_partner for major in majors))


def collect_successes(tasks: list[asyncio.Task]) -> list[list[str]]:
    results: list[list[str]] = []

    for task in tasks:
        if task.cancelled():
            continue

        error = task.exception()
        if error is None:
            results.append(task.result())
        elif not isinstance(error, RequestCancelled):
            print(f"Fetch majors failed: {error!r}", file=sys.stderr)

    return results


async def aggregate_majors(
        receiving_id: int,
        agreements: list[PartnerAgreement],
        token: CancelToken | None = None
) -> list[str]:
    tasks = [asyncio.create_task(get_partner_majors(receiving_id, agreement, token)) for agreement in agreements]

    if not tasks:
        return []

    try:
        await asyncio.wait(tasks)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        raise

    # Walk tasks in agreement order so the first-seen casing doesn't depend on which fetch finished first.
    return merge_majors(collect_successes(tasks))


async def load_majors(
        receiving_id: int,
        institutions: list[Institution],
        token: CancelToken | None = None
) -> MajorCatalog:
    agreements = await resolve_agreements(receiving_id, institutions, token)
    majors = await aggregate_majors(receiving_id, agreements, token)

    return MajorCatalog(receiving_institution_id=receiving_id, majors=majors)
