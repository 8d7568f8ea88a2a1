# =============================================================================
# core/sites.py  -  Site Registry
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps a short site identifier ("pmc", "unpaved", "wintercycle") to the
#   event website it stands for.  The registry is a literal constant: it is
#   never mutated, so any number of concurrent tool calls can read it.
#
# IDEMPOTENCY:
#   get_site() is a pure read.  Calling it 100 times returns the same result.
# =============================================================================

from types import MappingProxyType
from typing import Mapping

from core.models import EventSite


EVENT_SITES: Mapping[str, EventSite] = MappingProxyType({
    "pmc": EventSite(
        name="Pan-Mass Challenge",
        base_url="https://www.pmc.org",
    ),
    "unpaved": EventSite(
        name="Unpaved",
        base_url="https://www.unpaved.org",
    ),
    "wintercycle": EventSite(
        name="Winter Cycle",
        base_url="https://www.wintercycle.org",
    ),
})


def get_site(site_id: str, sites: Mapping[str, EventSite] = EVENT_SITES) -> EventSite | None:
    """Look up an event site in ``sites``, or None if the id is unknown."""
    return sites.get(site_id)


def list_site_ids(sites: Mapping[str, EventSite] = EVENT_SITES) -> list[str]:
    """All site ids of ``sites``, in registry order."""
    return list(sites.keys())


def valid_sites_text(sites: Mapping[str, EventSite] = EVENT_SITES) -> str:
    # Used verbatim in error messages: "pmc, unpaved, wintercycle"
    return ", ".join(list_site_ids(sites))
