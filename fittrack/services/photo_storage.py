import logging
import uuid
from typing import Iterable, Tuple

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile, HTTPException

from fittrack.core.config import settings

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/heic": "heic",
}
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB
PHOTO_VIEWS = ("front", "back", "side")


def _get_session():
    import aiobotocore.session
    session = aiobotocore.session.get_session()
    return session.create_client(
        "s3",
        endpoint_url=f"http://{settings.MINIO_ENDPOINT}",
        aws_access_key_id=settings.MINIO_ACCESS_KEY,
        aws_secret_access_key=settings.MINIO_SECRET_KEY,
        region_name="us-east-1",
    )


async def ensure_bucket_exists() -> None:
    async with _get_session() as client:
        try:
            await client.head_bucket(Bucket=settings.MINIO_BUCKET)
        except ClientError:
            await client.create_bucket(Bucket=settings.MINIO_BUCKET)


def validate_photo(file: UploadFile, content: bytes) -> None:
    if file.content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(
            status_code=415,
            detail=f"Photo type '{file.content_type}' is not allowed. Allowed: JPEG, PNG, HEIC.",
        )
    if len(content) > MAX_FILE_SIZE:
        raise HTTPException(
            status_code=413,
            detail="Photo size exceeds 10 MB limit.",
        )


async def upload_photo(file: UploadFile, view: str) -> Tuple[str, str, int]:
    """Upload a progress photo. Returns (s3_key, content_type, size)."""
    if view not in PHOTO_VIEWS:
        raise HTTPException(status_code=400, detail=f"view must be one of: {', '.join(PHOTO_VIEWS)}")

    content = await file.read()
    validate_photo(file, content)

    s3_key = f"{view}/{uuid.uuid4().hex}.{ALLOWED_CONTENT_TYPES[file.content_type]}"

    try:
        async with _get_session() as client:
            await client.put_object(
                Bucket=settings.MINIO_BUCKET,
                Key=s3_key,
                Body=content,
                ContentType=file.content_type,
            )
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Не удалось загрузить фото {s3_key}: {e}")
        raise HTTPException(
            status_code=503,
            detail="Не удалось загрузить фото, попробуйте ещё раз",
        )

    logger.info(f"Фото загружено: {s3_key} ({len(content)} bytes)")
    return s3_key, file.content_type, len(content)


async def generate_presigned_url(s3_key: str, expires: int = 3600) -> str:
    """Generate a pre-signed URL valid for `expires` seconds."""
    async with _get_session() as client:
        url = await client.generate_presigned_url(
            "get_object",
            Params={"Bucket": settings.MINIO_BUCKET, "Key": s3_key},
            ExpiresIn=expires,
        )
    return url


async def delete_photos(s3_keys: Iterable[str]) -> None:
    """Best-effort cleanup: the entry is already gone, a stale object is not fatal."""
    keys = [key for key in s3_keys if key]
    if not keys:
        return
    try:
        async with _get_session() as client:
            for key in keys:
                await client.delete_object(Bucket=settings.MINIO_BUCKET, Key=key)
    except (BotoCoreError, ClientError) as e:
        logger.warning(f"Не удалось удалить фото {keys}: {e}")
