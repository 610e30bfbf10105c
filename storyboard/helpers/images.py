import base64
from io import BytesIO

from PIL import Image

DATA_URL_PREFIX = "data:image/jpeg;base64,"


def to_jpeg_bytes(img: Image.Image) -> bytes:
    """Encode a PIL image as JPEG"""
    if img.mode != "RGB":
        img = img.convert("RGB")

    buffer = BytesIO()
    img.save(buffer, "JPEG", quality=95)
    return buffer.getvalue()


def normalize_jpeg(data: bytes) -> bytes:
    """Re-encode arbitrary image bytes as JPEG"""
    with Image.open(BytesIO(data)) as img:
        img.load()
        return to_jpeg_bytes(img)


def to_data_url(data: bytes) -> str:
    return DATA_URL_PREFIX + base64.b64encode(data).decode("ascii")


def from_data_url(url: str) -> bytes:
    if not url.startswith(DATA_URL_PREFIX):
        raise ValueError("Not an inline JPEG image")
    return base64.b64decode(url[len(DATA_URL_PREFIX):])


def dimensions_for(aspect_ratio: str, long_side: int = 1024) -> tuple[int, int]:
    """Width and height for a "16:9" or "9:16" frame, multiples of 8"""
    short_side = int(long_side * 9 / 16) // 8 * 8
    if aspect_ratio == "9:16":
        return short_side, long_side
    return long_side, short_side
