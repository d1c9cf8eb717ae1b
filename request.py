import asyncio
import requests
import threading
import time

import config

from cancel import CancelToken

_slots = threading.BoundedSemaphore(config.MAX_CONCURRENT_REQUESTS)


def get(url: str, params=None, **kwargs) -> requests.Response:
    kwargs.setdefault("timeout", config.REQUEST_TIMEOUT_SECONDS)

    with _slots:
        while True:
            response: requests.Response = requests.get(url=url, params=params, **kwargs)

            if response.text != config.RATE_LIMIT_MESSAGE:
                break

            print(f"Exceeded rate limit. Retrying request in {config.RATE_LIMIT_RETRY_SECONDS:g} seconds.")
            time.sleep(config.RATE_LIMIT_RETRY_SECONDS)

        # ASSIST allows roughly 50 calls per 5 minutes, so keep the slot busy for a while.
        if config.REQUEST_DELAY_SECONDS > 0:
            time.sleep(config.REQUEST_DELAY_SECONDS)

    response.raise_for_status()

    return response


def api_url(path: str) -> str:
    return f"{config.BASE_URL}/{path.lstrip('/')}"


async def get_json(path: str, params: dict | None = None, token: CancelToken | None = None):
    url = api_url(path)
    call = asyncio.to_thread(get, url, params)

    if token is None:
        response = await call
    else:
        response = await token.guard(call)

    return response.json()
