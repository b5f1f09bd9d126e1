from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from models.images import (
    LINKED_IMAGE_VARIANTS,
    LinkedImage,
    MediaProcessorImage,
    VectorImage,
)


def parse_vector_image(raw: Any) -> Optional[VectorImage]:
    if isinstance(raw, VectorImage):
        return raw
    if not isinstance(raw, Mapping):
        return None
    try:
        return VectorImage.model_validate(raw)
    except ValidationError as e:
        logging.debug(f"Ignoring malformed vector image: {e.error_count()} error(s)")
        return None


def parse_linked_image(wrapper: Any) -> Optional[LinkedImage]:
    """Build the image variant named by the wrapper's discriminant key.

    Wrappers look like {"com.linkedin.common.VectorImage": {...}}; the first
    known discriminant present wins.
    """
    if not isinstance(wrapper, Mapping):
        return None
    for type_name, model in LINKED_IMAGE_VARIANTS.items():
        raw = wrapper.get(type_name)
        if not isinstance(raw, Mapping):
            continue
        try:
            return model.model_validate(raw)  # type: ignore[return-value]
        except ValidationError as e:
            logging.debug(f"Ignoring malformed {type_name}: {e.error_count()} error(s)")
            return None
    return None


def resolve_image_url(vector_image: Union[VectorImage, Mapping[str, Any], None]) -> Optional[str]:
    """Return the URL of the widest artifact of a vector image.

    Ties keep the earlier artifact. The path segment already starts with the
    separator, so it is appended to the root URL as-is.
    """
    image = parse_vector_image(vector_image)
    if image is None or not image.root_url:
        return None
    if not image.artifacts:
        return None

    largest = image.artifacts[0]
    for artifact in image.artifacts[1:]:
        if artifact.width > largest.width:
            largest = artifact

    if not largest.file_identifying_url_path_segment:
        return None
    return f"{image.root_url}{largest.file_identifying_url_path_segment}"


def resolve_linked_vector_image_url(wrapper: Any) -> Optional[str]:
    image = parse_linked_image(wrapper)
    if not isinstance(image, VectorImage):
        return None
    return resolve_image_url(image)


def resolve_media_processor_image_id(wrapper: Any) -> Optional[str]:
    image = parse_linked_image(wrapper)
    if not isinstance(image, MediaProcessorImage):
        return None
    return image.id
