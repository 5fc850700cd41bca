"""Front-end file serving.

Any GET path no API route matched is looked up under the static root; if
no such file exists the storefront's index.html is returned instead.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse
from starlette.status import HTTP_404_NOT_FOUND

from storefront_api.dependencies import get_settings
from storefront_shared.config import Settings

router = APIRouter(tags=["static"])

INDEX_FILE = "index.html"


def resolve_static_file(root: Path, path: str) -> Path | None:
    """Return the file under ``root`` for a request path, if there is one.

    Paths escaping the root (``..``, absolute paths) never match.
    """
    root = root.resolve()
    candidate = (root / path).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


@router.get("/{path:path}", include_in_schema=False)
async def serve_frontend(
    path: str,
    settings: Settings = Depends(get_settings),
) -> FileResponse:
    found = resolve_static_file(settings.static_dir, path) if path else None
    if found is None:
        found = resolve_static_file(settings.static_dir, INDEX_FILE)
    if found is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Front-end not found")
    return FileResponse(found)
