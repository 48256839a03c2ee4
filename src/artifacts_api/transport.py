"""Conversion of request descriptors into ``requests`` objects.

This is the boundary with the transport layer: sending, retries, timeouts and
throttling all happen on the caller's side, e.g.::

    with requests.Session() as session:
        response = session.send(to_requests(get_status()).prepare(), timeout=10)
"""

import requests

from artifacts_api.request import API_BASE_URL, RequestDescriptor


def to_requests(descriptor: RequestDescriptor, base_url: str = API_BASE_URL) -> requests.Request:
    """Build an unsent ``requests.Request`` rooted at ``base_url``."""
    return requests.Request(
        method=descriptor.method.value,
        url=base_url.rstrip("/") + descriptor.path,
        headers=dict(descriptor.headers),
        data=descriptor.body or None,
    )
