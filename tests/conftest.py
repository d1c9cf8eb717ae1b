from __future__ import annotations

import asyncio

import pytest

import institutions
import request

from cancel import CancelToken
from classes import Institution


class FakeAssist:
    def __init__(self) -> None:
        self.institutions: list[dict] | dict | Exception = []
        self.agreements: dict[int, list[dict] | Exception] = {}
        self.majors: dict[int, list[str | None] | Exception | None] = {}
        self.delays: dict[int, float] = {}
        self.catalog_delay: float = 0
        self.calls: list[tuple[str, dict | None]] = []

    async def _respond(self, path: str, params: dict | None):
        self.calls.append((path, params))

        if path == "/api/institutions":
            await asyncio.sleep(self.catalog_delay)
            if isinstance(self.institutions, Exception):
                raise self.institutions
            return self.institutions

        if path.startswith("/api/institutions/"):
            result = self.agreements.get(int(path.split("/")[3]), [])
            if isinstance(result, Exception):
                raise result
            return result

        sending_id = params["sendingInstitutionId"]
        await asyncio.sleep(self.delays.get(sending_id, 0))

        result = self.majors.get(sending_id, [])
        if isinstance(result, Exception):
            raise result
        if result is None:
            return {}

        return {"reports": [{} if label is None else {"label": label} for label in result]}

    async def get_json(self, path: str, params: dict | None = None, token: CancelToken | None = None):
        if token is None:
            return await self._respond(path, params)
        return await token.guard(self._respond(path, params))

    def major_calls(self) -> list[dict]:
        return [params for path, params in self.calls if path == "/api/agreements"]


def make_agreement(name: str, sending: list[int] | None = None, receiving: list[int] | None = None) -> dict:
    raw = {"institutionName": name, "isCommunityCollege": True}
    if sending is not None:
        raw["sendingYearIds"] = sending
    if receiving is not None:
        raw["receivingYearIds"] = receiving
    return raw


RAW_INSTITUTIONS = [
    {
        "id": 11,
        "code": "CPSLO",
        "isCommunityCollege": False,
        "names": [{"name": "California Polytechnic University, San Luis Obispo", "hasDepartments": True, "hideInList": False}],
    },
    {
        "id": 75,
        "code": "CPP",
        "isCommunityCollege": False,
        "names": [{"name": "California Polytechnic University, Pomona", "hasDepartments": True, "hideInList": False}],
    },
    {
        "id": 79,
        "code": "UCB",
        "isCommunityCollege": False,
        "names": [{"name": "University of California, Berkeley", "hasDepartments": True, "hideInList": False}],
    },
    {
        "id": 113,
        "code": "DEANZA",
        "isCommunityCollege": True,
        "names": [{"name": "De Anza College", "hasDepartments": True, "hideInList": False}],
    },
    {
        "id": 110,
        "code": "DVC",
        "isCommunityCollege": True,
        "names": [{"name": "Diablo Valley College", "hasDepartments": True, "hideInList": False}],
    },
    {
        "id": 137,
        "code": "SMC",
        "isCommunityCollege": True,
        "names": [
            {"name": "Santa Monica Junior College", "hasDepartments": False, "hideInList": True},
            {"name": "Santa Monica College", "hasDepartments": True, "hideInList": False},
        ],
    },
]


@pytest.fixture(autouse=True)
def fresh_catalog():
    institutions.clear_institutions()
    yield
    institutions.clear_institutions()


@pytest.fixture
def catalog() -> list[Institution]:
    return [Institution.from_assist(raw) for raw in RAW_INSTITUTIONS]


@pytest.fixture
def fake_assist(monkeypatch: pytest.MonkeyPatch) -> FakeAssist:
    fake = FakeAssist()
    fake.institutions = RAW_INSTITUTIONS
    monkeypatch.setattr(request, "get_json", fake.get_json)
    return fake


@pytest.fixture
def agreement():
    return make_agreement
