import config
import sys

from cancel import CancelToken, RequestCancelled
from classes import Institution, MajorCatalog
from institutions import get_institutions
from majors import load_majors


def filter_majors(majors: list[str], query: str) -> list[str]:
    if not query.strip():
        return majors

    query = query.lower()
    return [major for major in majors if query in major.lower()]


# Each selection cancels the one before it, and only the newest selection may write majors back.
class MajorBrowser:
    def __init__(self, institutions: list[Institution] | None = None) -> None:
        self.institutions: list[Institution] = institutions or []
        self.receiving_id: int | None = None
        self.majors: list[str] = []
        self.selected_major: str = ""
        self.query: str = ""
        self.closed: bool = False

        self._token: CancelToken | None = None
        self._generation: int = 0

    @property
    def filtered_majors(self) -> list[str]:
        return filter_majors(self.majors, self.query)

    def _next_token(self) -> tuple[CancelToken, int]:
        self.cancel()

        self._generation += 1
        self._token = CancelToken()

        return self._token, self._generation

    def _is_current(self, token: CancelToken, generation: int) -> bool:
        return not (self.closed or token.cancelled or generation != self._generation)

    async def load_institutions(self, token: CancelToken | None = None) -> list[Institution]:
        self.institutions = await get_institutions(token)
        return self.institutions

    async def start(self, receiving_id: int = config.DEFAULT_INSTITUTION_ID) -> bool:
        if self.closed:
            return False

        token, generation = self._next_token()

        try:
            await self.load_institutions(token)
        except RequestCancelled:
            return False
        except Exception as error:
            if self._is_current(token, generation):
                print(f"Fetch institutions failed: {error!r}", file=sys.stderr)
            return False

        if not self._is_current(token, generation):
            return False

        return await self.select_institution(receiving_id)

    def _clear(self) -> None:
        self.majors = []
        self.selected_major = ""
        self.query = ""

    def cancel(self) -> None:
        if self._token is not None:
            self._token.cancel()

    async def select_institution(self, receiving_id: int) -> bool:
        if self.closed:
            return False

        token, generation = self._next_token()

        self.receiving_id = receiving_id
        self._clear()

        try:
            catalog: MajorCatalog = await load_majors(receiving_id, self.institutions, token)
        except RequestCancelled:
            return False
        except Exception as error:
            # Anything short of a cancellation still ends in an empty list, never in a crash.
            if self._is_current(token, generation):
                print(f"Fetch agreements failed: {error!r}", file=sys.stderr)
            return False

        if not self._is_current(token, generation):
            return False

        self.majors = catalog.majors
        self.selected_major = catalog.default_major or ""

        print(f"Found {len(self.majors)} majors for institution ID {receiving_id}.")

        return True

    def pick_major(self, major: str) -> None:
        self.selected_major = major
        self.query = ""

    def close(self) -> None:
        self.closed = True
        self.cancel()
        self._token = None
        self._clear()
