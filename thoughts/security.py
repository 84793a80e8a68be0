from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from thoughts.dependencies import get_settings
from thoughts.settings import Settings

API_KEY_NAME = "X-Content-Key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


def get_api_key(
    api_key_header: str = Security(api_key_header),
    current_settings: Settings = Depends(get_settings),
):
    # No key configured means the article routes are public
    if not current_settings.CONTENT_API_KEY:
        return None
    if api_key_header == current_settings.CONTENT_API_KEY:
        return api_key_header
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail="Could not validate API key",
    )
