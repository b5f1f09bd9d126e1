from __future__ import annotations

from typing import ClassVar, Dict, List, Optional, Type, Union

from pydantic import Field

from .base import LinkedInModel


class Artifact(LinkedInModel):
    width: int = 0
    height: int = 0
    file_identifying_url_path_segment: Optional[str] = None
    expires_at: Optional[int] = None


class VectorImage(LinkedInModel):
    TYPE_NAME: ClassVar[str] = "com.linkedin.common.VectorImage"

    root_url: Optional[str] = None
    artifacts: List[Artifact] = Field(default_factory=list)


class MediaProcessorImage(LinkedInModel):
    TYPE_NAME: ClassVar[str] = "com.linkedin.voyager.common.MediaProcessorImage"

    id: Optional[str] = None


LinkedImage = Union[VectorImage, MediaProcessorImage]

# Discriminant key used by the API -> variant model
LINKED_IMAGE_VARIANTS: Dict[str, Type[LinkedInModel]] = {
    VectorImage.TYPE_NAME: VectorImage,
    MediaProcessorImage.TYPE_NAME: MediaProcessorImage,
}
