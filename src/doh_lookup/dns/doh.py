"""DNS-over-HTTPS client for the JSON wire format."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

import aiohttp
import dns.rdatatype

from doh_lookup.api.models import DoHResponse
from doh_lookup.core.config import Settings, get_settings
from doh_lookup.utils.exceptions import NoAddressFoundError, UpstreamHTTPError

logger = logging.getLogger(__name__)

DNS_JSON = "application/dns-json"

A_RECORD = int(dns.rdatatype.A)


class DoHResolver(Protocol):
    """Protocol for DoH lookups."""

    async def query(self, name: str) -> DoHResponse: ...

    async def resolve_ipv4(self, name: str) -> str: ...


def first_a_record(response: DoHResponse) -> Optional[str]:
    """
    Return the data of the first A record in the answer, in answer order.

    A record matches only when its type is the JSON integer 1. The first
    match decides: if its data is missing or not a non-empty string there is
    no address.
    """
    for answer in response.answer or []:
        rtype = answer.type
        if isinstance(rtype, int) and not isinstance(rtype, bool) and rtype == A_RECORD:
            if isinstance(answer.data, str) and answer.data:
                return answer.data
            return None

    return None


@dataclass
class DoHClient:
    """Queries a DoH resolver using the application/dns-json format."""

    settings: Settings = field(default_factory=get_settings)

    @property
    def timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.settings.resolver_timeout)

    async def query(self, name: str) -> DoHResponse:
        """
        Send one DoH query for ``name``.

        Raises UpstreamHTTPError when the resolver answers with a non-2xx
        status; the body is not read in that case. Transport and decoding
        errors propagate unchanged.
        """
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.get(
                self.settings.resolver_url,
                params={"name": name},
                headers={"accept": DNS_JSON},
            ) as resp:
                if not 200 <= resp.status < 300:
                    raise UpstreamHTTPError(resp.status)

                # Resolvers label the body application/dns-json, skip the check
                payload = await resp.json(content_type=None)

        return DoHResponse.model_validate(payload)

    async def resolve_ipv4(self, name: str) -> str:
        """Resolve ``name`` to its first IPv4 address."""
        response = await self.query(name)
        address = first_a_record(response)

        if address is None:
            logger.debug("No A record for %s", name)
            raise NoAddressFoundError(name)

        return address
