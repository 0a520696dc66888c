import logging
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

LOCAL_ALIASES = ("localhost", "localhost.localdomain")


def local_host_names(hostname: str) -> frozenset[str]:
    """Names under which this machine shows up in the User@Host header."""
    names = {hostname, hostname.split(".", 1)[0], *LOCAL_ALIASES}
    return frozenset(name for name in names if name)


def domain_suffix(host: str) -> str:
    """Return the part of ``host`` after its first label, dot included."""
    dot = host.find(".")
    return host[dot:] if dot >= 0 else ""


class StripDecision(Enum):
    UNDECIDED = "undecided"
    STRIP = "strip"
    KEEP = "keep"


@dataclass(slots=True)
class DomainStripState:
    """Whether reported host names share a domain that can be dropped.

    KEEP is final. STRIP stays open to revision by any later host that does
    not fit the captured domain.
    """

    domain: str = ""
    decision: StripDecision = StripDecision.UNDECIDED

    @classmethod
    def for_hostname(cls, hostname: str) -> "DomainStripState":
        return cls(domain=domain_suffix(hostname))

    def keep_permanently(self) -> None:
        self._decide(StripDecision.KEEP)

    def observe(self, host: str, local_names: Collection[str]) -> None:
        if self.decision is StripDecision.KEEP:
            return
        if host in local_names:
            self._decide(StripDecision.STRIP)
            return
        suffix = domain_suffix(host)
        if self.domain and suffix == self.domain:
            self.domain = suffix
            self._decide(StripDecision.STRIP)
        else:
            self._decide(StripDecision.KEEP)

    @property
    def should_strip(self) -> bool:
        return self.decision is StripDecision.STRIP and bool(self.domain)

    def strip(self, host: str) -> str:
        # Plain substring removal, not anchored to the end of the name.
        if not self.should_strip:
            return host
        return host.replace(self.domain, "", 1)

    def _decide(self, decision: StripDecision) -> None:
        if decision is not self.decision:
            logger.debug("Domain stripping for %r: %s", self.domain, decision.value)
        self.decision = decision
