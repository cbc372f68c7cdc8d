"""
SQS region descriptors.
"""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Region:
    """Service endpoint and signing region for one SQS region."""

    name: str
    sqs_endpoint: str
    signing_region: str = ""

    def __post_init__(self) -> None:
        # Queue URLs are matched against the endpoint as a plain prefix
        object.__setattr__(self, "sqs_endpoint", self.sqs_endpoint.rstrip("/"))
        if not self.signing_region:
            object.__setattr__(self, "signing_region", self.name)


REGIONS: Dict[str, Region] = {
    name: Region(name, f"https://sqs.{name}.amazonaws.com")
    for name in (
        "us-east-1",
        "us-east-2",
        "us-west-1",
        "us-west-2",
        "ca-central-1",
        "eu-west-1",
        "eu-west-2",
        "eu-central-1",
        "ap-southeast-1",
        "ap-southeast-2",
        "ap-northeast-1",
        "sa-east-1",
    )
}


def get_region(name: str, endpoint: Optional[str] = None) -> Region:
    """
    Look up a region by name.

    Args:
        name: Region name (e.g. 'us-east-1')
        endpoint: Optional endpoint override, e.g. a local SQS emulator

    Returns:
        Region descriptor

    Raises:
        ValueError: If the region is unknown and no endpoint override is given
    """
    if endpoint:
        return Region(name, endpoint)
    try:
        return REGIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown SQS region: {name}, expected one of {sorted(REGIONS)}"
        ) from None
