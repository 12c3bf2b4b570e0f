"""Lookup of the ECS-optimized AMI id for each region."""

from __future__ import annotations

from types import MappingProxyType

# amzn-ami-2016.03.a-amazon-ecs-optimized AMIs
_REGION_TO_ID = MappingProxyType(
    {
        "us-east-1": "ami-67a3a90d",
        "us-west-1": "ami-b7d5a8d7",
        "us-west-2": "ami-c7a451a7",
        "eu-west-1": "ami-9c9819ef",
        "eu-central-1": "ami-9aeb0af5",
        "ap-northeast-1": "ami-7e4a5b10",
        "ap-southeast-1": "ami-be63a9dd",
        "ap-southeast-2": "ami-b8cbe8db",
    }
)


class StaticAmiIds:
    """AMI ids taken from a fixed table of regions."""

    def __init__(self) -> None:
        self._region_to_id = dict(_REGION_TO_ID)

    def get(self, region: str) -> str:
        """Return the AMI id for ``region``; raise LookupError if it is unknown."""
        try:
            return self._region_to_id[region]
        except KeyError:
            raise LookupError(f"Could not find ami id for region '{region}'") from None