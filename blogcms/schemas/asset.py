"""Featured-image payload attached to post writes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NoAsset:
    """The request carried no file for the featured image."""


@dataclass(frozen=True)
class Asset:
    """
    Binary image uploaded with the request.

    Attributes:
        data: Raw file bytes
        content_type: Declared media type, e.g. ``image/png``
    """

    data: bytes
    content_type: str

    @property
    def extension(self) -> str:
        """File extension taken from the last segment of the media type."""
        return self.content_type.split("/")[-1]


type AssetPayload = NoAsset | Asset
