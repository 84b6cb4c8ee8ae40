"""Names of the client operations."""

from enum import Enum


class Operation(str, Enum):
    """One member per remote operation exposed by the client."""

    UPLOAD_IMAGE = "uploadImage"
    LIST_IMAGES = "listImages"
    GET_IMAGE = "getImage"
    GET_IMAGE_BASE = "getImageBase"
    UPDATE_IMAGE = "updateImage"
    DELETE_IMAGE = "deleteImage"
    CREATE_VARIANT = "createVariant"
    LIST_VARIANTS = "listVariants"
    GET_VARIANT = "getVariant"
    UPDATE_VARIANT = "updateVariant"
    DELETE_VARIANT = "deleteVariant"
    GET_STATS = "getStats"
